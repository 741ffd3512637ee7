"""
Logger Configuration - 日志配置

库模块只使用 logging.getLogger(__name__)，由入口（CLI）调用 setup_logger 配置输出。
"""

import logging
import sys
from typing import Optional

from ..config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "vepfs_ext"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# 传输层日志，DEBUG 时放开，便于排查签名和请求头
TRANSPORT_LOGGERS = ("urllib3", "requests", "httpx", "httpcore")

_logger_initialized = False


def resolve_level(level: Optional[str]) -> int:
    """
    日志级别名称转为数值，未知名称按 INFO 处理

    Args:
        level: 日志级别名称，大小写不敏感
    """
    name = (level or "").upper()
    if name not in LOG_LEVELS:
        return logging.INFO
    return getattr(logging, name)


def setup_logger(level: Optional[str] = None, force: bool = False) -> None:
    """
    设置全局日志配置

    Args:
        level: 日志级别，如果不传则从配置读取 LOG_LEVEL
        force: 已配置过时是否重新配置
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    log_level = resolve_level(level or get_settings().log_level)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=force,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)

    transport_level = log_level if log_level <= logging.DEBUG else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    _logger_initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    获取 Logger 实例（入口脚本使用）

    Args:
        name: Logger 名称，通常使用 __name__
    """
    setup_logger()
    return logging.getLogger(name)
