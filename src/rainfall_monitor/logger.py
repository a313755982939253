"""Logging configuration using Loguru."""

import sys

from loguru import logger

from rainfall_monitor.config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def setup_logging(level: str = None) -> None:
    global _configured
    logger.remove()
    logger.configure(extra={"name": settings.APP_NAME})
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level or settings.LOG_LEVEL,
        colorize=True,
    )
    _configured = True


def get_logger(name: str):
    if not _configured:
        setup_logging()
    return logger.bind(name=name)
