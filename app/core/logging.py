"""Structured logging configuration."""

import logging
import sys

from pydantic import ValidationError


class StructuredFormatter(logging.Formatter):
    """Render log records as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        parts = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(parts)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(_resolve_level())
        logger.propagate = False

    return logger


def _resolve_level() -> int:
    # Imported lazily so the pure scoring modules stay importable without a .env.
    try:
        from app.core.config import settings
    except ValidationError:
        return logging.INFO
    if settings.DEBUG:
        return logging.DEBUG
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
