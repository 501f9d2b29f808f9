"""
Module: logger.py
Description: Structured logging configuration for the Coralogix CI plugin.

Configures structlog for JSON output on the host's stdout. Provides
consistent logging across all modules with proper context and
structured data, and masks secret-bearing fields before rendering.

Key Components:
- JSON output for log collectors
- Timestamp, log level and secret redaction processors
- configure_logging() to apply the configured level
- get_logger() helper function

Dependencies: structlog, datetime, logging
Author: Coralogix CI Team
"""

import logging

import structlog
from datetime import datetime, timezone

# Event fields that must never reach the rendered output
SECRET_FIELDS = frozenset({
    "private_key",
    "api_key",
    "secret_key",
    "key",
    "authorization",
})

REDACTED = "**********"


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


def _redact_secrets(logger, method_name, event_dict):
    """Mask secret-bearing fields."""
    for field in SECRET_FIELDS.intersection(event_dict):
        event_dict[field] = REDACTED
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    """
    Configure structlog for JSON output.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            _redact_secrets,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        # Loggers are resolved per call so level changes apply everywhere
        cache_logger_on_first_use=False,
    )


configure_logging()


def get_logger(name: str):
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Cannot send build logs to Coralogix!", application="ci")
        {"event": "Cannot send build logs to Coralogix!", "application": "ci", "timestamp": "...", "level": "WARNING"}
    """
    return structlog.get_logger(name)
