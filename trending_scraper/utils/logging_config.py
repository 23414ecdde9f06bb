"""Logging setup for the CLI.

Diagnostics go to stderr; stdout carries only the repository listing.
TRENDING_LOG_FORMAT picks plain text lines or one JSON object per line.
"""

import json
import logging
import sys
from typing import Any

from trending_scraper.utils.config import get_settings


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "app_name": get_settings().APP_NAME,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


class StandardFormatter(logging.Formatter):
    """``[2024-01-01 12:00:00] INFO - module - message``"""

    FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self) -> None:
        super().__init__(fmt=self.FORMAT, datefmt=self.DATE_FORMAT)


FORMATTERS: dict[str, type[logging.Formatter]] = {
    "text": StandardFormatter,
    "json": JsonFormatter,
}

# The handler installed by setup_logging, None until configured
_handler: logging.Handler | None = None


def setup_logging(log_format: str | None = None, force_reconfigure: bool = False) -> None:
    """
    Attach a single stderr handler to the root logger.

    Level comes from TRENDING_LOG_LEVEL. Calling again is a no-op unless
    force_reconfigure is set, in which case the previous handler is replaced.
    Handlers installed by others (e.g. pytest's caplog) are left alone.

    Args:
        log_format: "text" or "json"; defaults to TRENDING_LOG_FORMAT
        force_reconfigure: Replace an existing configuration

    Raises:
        ValidationError: If a TRENDING_* variable holds an invalid value
        ValueError: If log_format is not a known format
    """
    global _handler

    if _handler is not None and not force_reconfigure:
        return

    settings = get_settings()
    log_format = log_format or settings.LOG_FORMAT
    if log_format not in FORMATTERS:
        raise ValueError(f"Unknown log format '{log_format}', expected one of {list(FORMATTERS)}")

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)

    level = getattr(logging, settings.LOG_LEVEL)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(FORMATTERS[log_format]())

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _handler = handler

    logging.getLogger(__name__).debug(
        f"Logging configured: level={settings.LOG_LEVEL}, format={log_format}"
    )


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, configuring logging on first use."""
    if _handler is None:
        setup_logging()
    return logging.getLogger(name)


def reset_logging() -> None:
    """Remove our handler and restore the root level. Used by tests."""
    global _handler

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler = None
    root_logger.setLevel(logging.WARNING)
