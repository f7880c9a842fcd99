"""
Structured logging configuration.

Provides JSON-formatted logs with a source field (usually the document path)
for correlating the records of one command run. Records go to stderr so they
never mix with command output.

Usage:
    from automaton.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, source="automaton.json")
    logger.info("Parsed automaton", extra={"states": 3})
"""

import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from .config import Settings


class SourceFilter(logging.Filter):
    """
    Logging filter that adds source to all log records.

    Ensures every record has a source field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "source"):
            record.source = "N/A"  # type: ignore
        return True


def setup_logging(settings: Optional[Settings] = None, stream: Optional[TextIO] = None) -> None:
    """
    Configure root logger with structured logging.

    Args:
        settings: Log level and format (read from the environment if None)
        stream: Output stream (default: sys.stderr)
    """
    settings = settings or Settings.from_env()
    level = getattr(logging, settings.log_level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.addFilter(SourceFilter())

    if settings.log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(source)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [source=%(source)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


class SourceAdapter(logging.LoggerAdapter):
    """LoggerAdapter that keeps per-call extra fields next to source."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str, source: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with an optional source for correlation.

    Args:
        name: Logger name (typically __name__)
        source: Source identifier, e.g. the automaton document path

    Returns:
        SourceAdapter with source in extra fields
    """
    logger = logging.getLogger(name)
    return SourceAdapter(logger, {"source": source or "N/A"})
