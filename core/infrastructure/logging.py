"""
日志配置模块。
根据项目设置中的LOGGING配置loguru。
"""
import sys
from typing import Any, Dict, Optional

from loguru import logger


DEFAULT_FORMAT = '{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}'


def setup_logging(config: Optional[Dict[str, Any]] = None) -> int:
    """
    配置loguru日志输出。
    移除默认输出后添加一个标准错误输出。

    Args:
        config: 日志配置，支持level和format两个键

    Returns:
        新添加的日志输出ID
    """
    config = config or {}
    logger.remove()
    return logger.add(
        sys.stderr,
        level=config.get('level', 'INFO'),
        format=config.get('format', DEFAULT_FORMAT),
    )
