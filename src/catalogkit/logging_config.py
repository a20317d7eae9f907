"""Logging setup for catalogkit."""

from __future__ import annotations
import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any
from catalogkit.config import LOG_LEVELS, get_settings


PACKAGE_LOGGER = "catalogkit"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "catalogkit-stderr"

# Attributes present on every LogRecord; anything else came from ``extra=``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        """Serialize ``record`` including any ``extra`` fields."""
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", log_format: str = "text") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this repeatedly replaces the previously installed handler instead
    of stacking duplicates.

    Raises:
        ValueError: If ``level`` is not a known level name or ``log_format``
            is neither ``"text"`` nor ``"json"``.
    """
    level_name = level.strip().upper()
    if level_name not in LOG_LEVELS:
        msg = f"Log level must be one of {sorted(LOG_LEVELS)}, got {level!r}."
        raise ValueError(msg)
    if log_format not in {"text", "json"}:
        msg = f"Log format must be either 'text' or 'json', got {log_format!r}."
        raise ValueError(msg)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level_name))

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def configure_from_settings(level_override: str | None = None) -> logging.Logger:
    """Configure logging using the cached application settings."""
    settings = get_settings()
    level = level_override or settings.log_level
    return configure_logging(level=level, log_format=settings.log_format)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger, defaulting to the package logger."""
    return logging.getLogger(name or PACKAGE_LOGGER)


__all__ = [
    "JsonFormatter",
    "PACKAGE_LOGGER",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
]
