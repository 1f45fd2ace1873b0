"""
Logging configuration for formstate.

Provides text or JSON logs with a form_id field so records from several
forms in one process can be told apart.

Environment Variables:
    FORMSTATE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    FORMSTATE_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from formstate.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, form_id="person-form")
    logger.info("Form reset")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


class FormIdFilter(logging.Filter):
    """
    Logging filter that adds form_id to all log records.

    Ensures all logs have a form_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "form_id"):
            record.form_id = "N/A"  # type: ignore
        return True


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure root logger.

    Arguments override the FORMSTATE_LOG_LEVEL / FORMSTATE_LOG_FORMAT
    environment variables.
    """
    log_level = (level or os.getenv("FORMSTATE_LOG_LEVEL", "INFO")).upper()
    fmt = (log_format or os.getenv("FORMSTATE_LOG_FORMAT", "text")).lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    resolved = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(FormIdFilter())

    if fmt == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(form_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [form_id=%(form_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, form_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger carrying form_id in every record.

    Args:
        name: Logger name (typically __name__)
        form_id: Identifier of the form instance

    Returns:
        LoggerAdapter with form_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"form_id": form_id or "N/A"})
