"""
run-if-needed - 按需执行命令

只有在提供了参数时才执行命令，否则静默成功退出。
常用于包管理脚本: 待安装列表为空时跳过安装。

Example:
    $ run-if-needed "pacman -S --needed" ripgrep   # 执行 pacman -S --needed ripgrep
    $ run-if-needed "pacman -S --needed"           # 什么都不做，退出码 0

    >>> from run_if_needed import ConditionalRunner
    >>> result = ConditionalRunner().run(["echo", "hello"])
    >>> result.return_code
    0
"""

from run_if_needed.core import (
    ConditionalRunner,
    ExecResult,
    InvalidCommandError,
    MissingArgumentError,
    RunnerConfig,
    RunnerError,
)

__version__ = "0.1.0"
__all__ = [
    "ConditionalRunner",
    "ExecResult",
    "RunnerConfig",
    "RunnerError",
    "MissingArgumentError",
    "InvalidCommandError",
]
