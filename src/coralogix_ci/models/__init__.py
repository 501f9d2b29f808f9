"""
Module: models
Description: Package initialization for Pydantic payload models.

This package contains all payload models used by the plugin:
- LogRecord / LogBatch: Logs API bulk payload
- TagEvent: Tags API payload
- DeliveryResult: Outcome of a delivery attempt

All models are exported here for convenient importing.
"""

from .log import LogBatch, LogRecord, Severity
from .result import DeliveryResult
from .tag import TagEvent

__all__ = [
    "LogBatch",
    "LogRecord",
    "Severity",
    "TagEvent",
    "DeliveryResult",
]
