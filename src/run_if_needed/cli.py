"""
命令行入口

    run-if-needed <command> [parameter]

没有任何选项，不读取环境变量或配置文件。所有失败都转换为进程退出码。
"""

import sys
from typing import Optional

from loguru import logger

from run_if_needed.core import ConditionalRunner, RunnerConfig, RunnerError

EXIT_INTERRUPTED = 130

LOG_FORMAT = "run-if-needed: <level>{level}</level>: {message}"


def setup_logging(level: str) -> None:
    """只保留一个 stderr sink，避免日志混入被执行命令的输出"""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=False)


def main(argv: Optional[list[str]] = None, config: Optional[RunnerConfig] = None) -> int:
    """
    执行一次调用并返回退出码

    Args:
        argv: 位置参数，默认取 sys.argv[1:]
        config: 运行选项，默认使用 RunnerConfig()

    Returns:
        0: 未执行或命令成功
        1: 缺少 command
        2: command 无法解析
        126/127: 命令无法执行/不存在
        128+N: 命令被信号 N 终止
        130: 被中断
        其他: 被执行命令的退出码
    """
    if argv is None:
        argv = sys.argv[1:]
    config = config or RunnerConfig()
    setup_logging(config.log_level)

    runner = ConditionalRunner(config)
    try:
        result = runner.run(argv)
    except RunnerError as e:
        logger.error(str(e))
        return e.exit_code
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    return result.return_code


def run() -> None:
    """console script 入口"""
    sys.exit(main())
