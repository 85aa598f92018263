"""
日志初始化 - 按运行期配置设置根日志器
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(
    level_name: str,
    log_file: Path | None = None,
    *,
    fmt: str = LOG_FORMAT,
    datefmt: str = "%H:%M:%S",
) -> None:
    """
    配置根日志器

    Args:
        level_name: 日志级别（debug/info/warning/error/critical，不区分大小写）
        log_file: 可选，同时写入的日志文件
        fmt: 日志格式
        datefmt: 时间格式

    Raises:
        ValueError: 日志级别无效
    """
    level = LOG_LEVELS.get(level_name.lower())
    if level is None:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"无效的日志级别 '{level_name}'，可选: {valid}")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=fmt, datefmt=datefmt, handlers=handlers, force=True)
