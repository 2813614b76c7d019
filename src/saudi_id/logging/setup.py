"""Logging configuration for saudi-id.

Provides structured JSON logging with run_id correlation.
"""

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any, Optional

from pythonjsonlogger import jsonlogger

from saudi_id.utils.masking import sanitize_for_logging


# Context variable for run_id correlation
run_id_var: ContextVar[str] = ContextVar("run_id", default="")

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class RunContextFilter(logging.Filter):
    """Filter that adds run_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add run_id from context to log record."""
        record.run_id = run_id_var.get() or "-"
        return True


class RedactionFilter(logging.Filter):
    """Filter that replaces national IDs in messages and string extras."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = sanitize_for_logging(record.getMessage())
        record.args = ()
        for key, value in list(vars(record).items()):
            if key not in _RECORD_ATTRS and isinstance(value, str):
                setattr(record, key, sanitize_for_logging(value))
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with service and run_id fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = "saudi-id"

        if hasattr(record, "run_id"):
            log_record["run_id"] = record.run_id


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               SAUDI_ID_LOG_LEVEL or WARNING.
        json_format: Whether to use JSON format. Defaults to env var
                     SAUDI_ID_LOG_FORMAT == 'json' or True.
    """
    if level is None:
        level = os.getenv("SAUDI_ID_LOG_LEVEL", "WARNING")
    level = level.upper()
    if json_format is None:
        log_format = os.getenv("SAUDI_ID_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries command output, logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RunContextFilter())
    handler.addFilter(RedactionFilter())

    if json_format:
        formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - [%(run_id)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Presidio logs every recognizer load at INFO
    logging.getLogger("presidio-analyzer").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def set_run_id(run_id: str) -> None:
    """Set the run ID for the current context."""
    run_id_var.set(run_id)
