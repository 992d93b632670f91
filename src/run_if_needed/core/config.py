"""
RunnerConfig - 运行选项

纯数据模型，只描述子进程的运行环境，不包含任何业务逻辑。
仅供以库方式调用 ConditionalRunner 时使用；命令行入口没有任何选项，
不读取配置文件或环境变量，始终使用 RunnerConfig() 的默认值。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class RunnerConfig:
    """
    运行选项（库调用方使用，CLI 只用默认值）

    Attributes:
        cwd: 子进程工作目录，None 表示继承当前目录
        env: 覆盖到 os.environ 之上的环境变量
        log_level: CLI 日志级别
    """

    cwd: Optional[Path] = None
    env: dict[str, str] = field(default_factory=dict)
    log_level: str = "ERROR"

    def __post_init__(self):
        if self.cwd is not None:
            self.cwd = Path(self.cwd).resolve()

    def child_env(self) -> Optional[dict[str, str]]:
        """子进程环境变量，无覆盖时返回 None（直接继承）"""
        if not self.env:
            return None
        return {**os.environ, **self.env}

    def __repr__(self) -> str:
        return (
            f"RunnerConfig(cwd={self.cwd}, env={sorted(self.env)}, "
            f"log_level={self.log_level})"
        )
