"""
run_if_needed core - 核心模块
"""

from run_if_needed.core.config import RunnerConfig
from run_if_needed.core.errors import (
    InvalidCommandError,
    MissingArgumentError,
    RunnerError,
)
from run_if_needed.core.executor import CommandExecutor, ExecResult
from run_if_needed.core.runner import (
    ConditionalRunner,
    Invocation,
    build_command,
    parse_invocation,
)

__all__ = [
    # 配置
    "RunnerConfig",
    # 异常
    "RunnerError",
    "MissingArgumentError",
    "InvalidCommandError",
    # 核心
    "ConditionalRunner",
    "Invocation",
    "parse_invocation",
    "build_command",
    "CommandExecutor",
    "ExecResult",
]
