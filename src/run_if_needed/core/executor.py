"""
Executor - 命令执行器

以参数向量方式启动子进程（不经过 shell），子进程直接继承标准输入/输出/错误流，
阻塞等待其结束并按 shell 约定换算退出码:

- 正常退出 -> 原退出码
- 被信号 N 终止 -> 128 + N
- 找不到可执行文件 -> 127
- 没有 #! 行的可执行脚本 -> 交给 /bin/sh 解释
- 无执行权限、工作目录不存在或其他启动失败 -> 126
"""

import errno
import subprocess
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from run_if_needed.core.config import RunnerConfig

EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127
SIGNAL_EXIT_BASE = 128
POSIX_SHELL = "/bin/sh"


@dataclass
class ExecResult:
    """命令执行结果"""

    return_code: int = 0
    argv: list[str] = field(default_factory=list)
    spawned: bool = False
    stderr: str = ""  # 仅包含执行器自身的诊断信息，子进程输出不被捕获

    @property
    def ok(self) -> bool:
        return self.return_code == 0


def normalize_return_code(return_code: int) -> int:
    """将 subprocess 的负退出码（信号终止）换算为 shell 风格的 128 + N"""
    if return_code < 0:
        return SIGNAL_EXIT_BASE - return_code
    return return_code


class CommandExecutor:
    """
    命令执行器

    无超时、无取消：中断由调用方的信号处理决定，KeyboardInterrupt 原样抛出。
    """

    def __init__(self, config: Optional[RunnerConfig] = None):
        self.config = config or RunnerConfig()

    def run(self, argv: list[str]) -> ExecResult:
        """
        执行命令

        Args:
            argv: 参数向量，argv[0] 为程序名或路径

        Returns:
            ExecResult
        """
        logger.debug(f"CommandExecutor.run: argv={argv}, cwd={self.config.cwd}")

        cwd = self.config.cwd
        if cwd is not None and not cwd.is_dir():
            logger.error(f"工作目录不存在: {cwd}")
            return ExecResult(
                argv=argv,
                stderr=f"目录不存在: {cwd}",
                return_code=EXIT_NOT_EXECUTABLE,
            )

        try:
            result = self._spawn(argv)
        except FileNotFoundError:
            logger.error(f"命令不存在: {argv[0]}")
            return ExecResult(
                argv=argv,
                stderr=f"{argv[0]}: 命令不存在",
                return_code=EXIT_NOT_FOUND,
            )
        except PermissionError:
            logger.error(f"没有执行权限: {argv[0]}")
            return ExecResult(
                argv=argv,
                stderr=f"{argv[0]}: 没有执行权限",
                return_code=EXIT_NOT_EXECUTABLE,
            )
        except OSError as e:
            logger.error(f"启动子进程失败: {e}")
            return ExecResult(
                argv=argv,
                stderr=f"{argv[0]}: 启动失败: {e}",
                return_code=EXIT_NOT_EXECUTABLE,
            )

        return_code = normalize_return_code(result.returncode)
        logger.debug(f"执行完成: return_code={return_code}")
        if return_code != 0:
            logger.warning(f"命令返回非零: {argv[0]} -> {return_code}")
        return ExecResult(argv=argv, spawned=True, return_code=return_code)

    def _spawn(self, argv: list[str]) -> subprocess.CompletedProcess:
        """启动并等待子进程，没有 #! 行的可执行脚本交给 /bin/sh 解释"""
        cwd = self.config.cwd
        kwargs = {
            "cwd": str(cwd) if cwd else None,
            "env": self.config.child_env(),
        }
        try:
            return subprocess.run(argv, **kwargs)
        except OSError as e:
            if e.errno != errno.ENOEXEC:
                raise
            logger.debug(f"不是可执行格式，使用 {POSIX_SHELL} 解释: {argv[0]}")
            return subprocess.run([POSIX_SHELL, *argv], **kwargs)
