"""
ConditionalRunner - 条件执行

只有提供了参数时才执行命令:

    run-if-needed <command> [parameter]

- 无任何参数 -> MissingArgumentError
- 只有 command -> 什么都不做，返回成功
- command + parameter -> 执行 `command parameter`，透传退出码

执行本身委托给 CommandExecutor。
"""

import shlex
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from run_if_needed.core.config import RunnerConfig
from run_if_needed.core.errors import InvalidCommandError, MissingArgumentError
from run_if_needed.core.executor import CommandExecutor, ExecResult

USAGE = "Usage: run-if-needed <command> [parameter]"


@dataclass
class Invocation:
    """一次调用的位置参数"""

    command: str
    parameter: Optional[str] = None
    extra: list[str] = field(default_factory=list)  # 第二个参数之后的内容，忽略

    @property
    def needed(self) -> bool:
        """是否需要执行命令"""
        return self.parameter is not None


def parse_invocation(argv: list[str]) -> Invocation:
    """
    解析位置参数

    Args:
        argv: 调用参数（不含程序名）

    Raises:
        MissingArgumentError: 缺少 command
    """
    if not argv:
        raise MissingArgumentError(f"缺少 command 参数\n{USAGE}")

    command = argv[0]
    parameter = argv[1] if len(argv) > 1 else None
    return Invocation(command=command, parameter=parameter, extra=list(argv[2:]))


def build_command(invocation: Invocation) -> list[str]:
    """
    构建参数向量

    command 按 POSIX shell 规则切分（允许自带选项，如 "pacman -Sy"），
    parameter 始终作为单个参数追加，不做任何切分或展开。
    command 为空白时 parameter 本身就是要执行的程序；两者都为空时返回空列表。
    """
    try:
        argv = shlex.split(invocation.command)
    except ValueError as e:
        raise InvalidCommandError(f"命令解析错误: {e}") from e

    if invocation.parameter is not None and (argv or invocation.parameter):
        argv.append(invocation.parameter)
    return argv


class ConditionalRunner:
    """
    条件执行器

    Example:
        >>> runner = ConditionalRunner()
        >>> result = runner.run(["echo"])  # 不执行
        >>> result = runner.run(["pacman -Sy", "ripgrep"])  # pacman -Sy ripgrep
    """

    def __init__(
        self,
        config: Optional[RunnerConfig] = None,
        executor: Optional[CommandExecutor] = None,
    ):
        self.config = config or RunnerConfig()
        self.executor = executor or CommandExecutor(self.config)

    def run(self, argv: list[str]) -> ExecResult:
        """
        按需执行

        Args:
            argv: 调用参数（不含程序名）

        Returns:
            ExecResult，未执行时 spawned=False 且 return_code=0

        Raises:
            MissingArgumentError: 缺少 command
            InvalidCommandError: command 无法解析
        """
        invocation = parse_invocation(argv)

        if not invocation.needed:
            logger.debug(f"未提供参数，跳过执行: {invocation.command}")
            return ExecResult()

        if invocation.extra:
            logger.debug(f"忽略多余参数: {invocation.extra}")

        command = build_command(invocation)
        if not command:
            logger.debug("命令为空，跳过执行")
            return ExecResult()

        return self.executor.run(command)
