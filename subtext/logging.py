"""
Logging configuration for applications using the Subtext SDK.
Initializes loguru and intercepts standard library logging from httpx.
"""

import logging
import sys
from loguru import logger

from subtext.config import settings


class InterceptHandler(logging.Handler):
    """
    Default handler from documents for intercepting standard library logging messages.
    See: https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record):
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level=None, sink=sys.stdout):
    """
    Configures loguru to send SDK and transport logs to a single sink.

    SDK logging is disabled on import; calling this turns it on.

    Args:
        level: Minimum level to emit. Defaults to SUBTEXT_LOG_LEVEL.
        sink: Loguru sink, stdout unless overridden.
    """
    level = level or settings.SUBTEXT_LOG_LEVEL

    logger.enable("subtext")
    logger.remove()
    logger.add(
        sink,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=sink is sys.stdout,
    )

    # Route the HTTP stack's stdlib loggers through loguru
    for name in ["httpx", "httpcore"]:
        _logger = logging.getLogger(name)
        _logger.handlers = [InterceptHandler()]
        _logger.propagate = False

    logger.info("Logging initialized with Loguru.")
