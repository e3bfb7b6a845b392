"""
Module: logger.py
Description: Structured logging configuration for the ironqueue client.

Configures structlog for JSON output so queue operations can be traced
with consistent key/value context (queue name, path, status code).

Key Components:
- JSON output with timestamp and log level processors
- configure_logging() to set the filtering level
- get_logger() helper function

Dependencies: structlog, logging, datetime
"""

import logging
from datetime import datetime, timezone

import structlog

_configured_level = None


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    """
    Configure structlog for JSON output.

    Runs once at import with INFO; calling again with the same level
    is a no-op.

    Args:
        level: Standard logging level name (DEBUG, INFO, ...)
    """
    global _configured_level

    level = level.upper()
    if level == _configured_level:
        return

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _configured_level = level


# JSON output at INFO until configure_logging() is called with another level
configure_logging()


def get_logger(name: str):
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog logger bound to the given name

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Messages pushed", queue="jobs", count=3)
        {"event": "Messages pushed", "queue": "jobs", "count": 3, "timestamp": "...", "level": "INFO"}
    """
    return structlog.get_logger(name)
