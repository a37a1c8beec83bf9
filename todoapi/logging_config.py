"""
logging_config.py — Centralized Logging Configuration for the Todo API

Sets up Loguru as the single logging backend. Intercepts Python's stdlib
logging module so uvicorn and any other getLogger() callers route
through Loguru with the same format and request context.

Business Rules:
- All logs go through Loguru (no direct print() or stdlib logging)
- Level and format come from Settings (LOG_LEVEL, LOG_JSON, or .env)
- JSON lines when log_json is set, for machine parsing
- Human-readable format otherwise
- Request ID from middleware is included when available

Called by: todoapi/main.py (lifespan startup)
Depends on: todoapi/config.py
"""

import logging
import sys

from loguru import logger

from .config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Loguru and intercept stdlib logging.

    Safe to call more than once; each call replaces the previous handlers.
    """
    settings = settings or get_settings()
    logger.remove()

    log_level = settings.log_level.upper()
    as_json = settings.log_json

    if as_json:
        logger.add(
            sys.stdout,
            level=log_level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "{message}"
            ),
            colorize=True,
        )

    # Intercept stdlib logging → route through Loguru
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    # Request middleware logs every request already
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger.info("Logging configured", level=log_level, json=as_json)


class _InterceptHandler(logging.Handler):
    """Route stdlib logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames from stdlib logging internals
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )
