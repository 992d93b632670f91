"""
测试公共 fixture
"""

import shlex
import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """cli.main() 会替换 loguru sink，测试结束后恢复默认"""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def py():
    """构建 `python -c <code>` 命令字符串，用于可移植地控制退出码和输出"""

    def _build(code: str) -> str:
        return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"

    return _build
