"""
Module: log.py
Description: Log payload models for the Coralogix logs API.

Defines the single log record and the bulk envelope posted to the logs
ingestion endpoint. Field names follow Python conventions and are
aliased to the camelCase names the API expects.

Key Components:
- Severity: Coralogix severity levels (1=debug ... 6=critical)
- LogRecord: One log entry, stamped with its creation time
- LogBatch: Bulk envelope carrying the private key and host name

Dependencies: pydantic, time, enum
Author: Coralogix CI Team
"""

import time
from enum import IntEnum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_serializer


def current_millis() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


class Severity(IntEnum):
    """Coralogix log severity levels."""

    DEBUG = 1
    VERBOSE = 2
    INFO = 3
    WARNING = 4
    ERROR = 5
    CRITICAL = 6


class LogRecord(BaseModel):
    """
    Single log entry sent to Coralogix.

    Attributes:
        timestamp: Creation time in milliseconds since the epoch
        severity: Severity level
        text: Log message, may span multiple lines
        category: Free-form tag such as 'job', 'audit' or 'metrics'
        class_name: Optional source class name
        method_name: Optional source method name
        thread_id: Free-form thread label, used for the build display name
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: int = Field(
        default_factory=current_millis,
        ge=0,
        description="Creation time, ms since epoch"
    )
    severity: Severity = Field(
        default=Severity.INFO,
        description="Severity level"
    )
    text: str = Field(
        ...,
        description="Log message"
    )
    category: str = Field(
        default="",
        description="Record category"
    )
    class_name: str = Field(default="", alias="className")
    method_name: str = Field(default="", alias="methodName")
    thread_id: str = Field(default="", alias="threadId")


class LogBatch(BaseModel):
    """
    Bulk of log records for one application/subsystem pair.

    The private key travels inside the JSON body as the API requires,
    but stays masked in repr and in python-mode dumps.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    private_key: SecretStr = Field(..., alias="privateKey")
    application_name: str = Field(default="", alias="applicationName")
    subsystem_name: str = Field(default="", alias="subsystemName")
    computer_name: str = Field(..., alias="computerName")
    log_entries: Tuple[LogRecord, ...] = Field(default=(), alias="logEntries")

    @field_serializer('private_key', when_used='json')
    def _reveal_private_key(self, v: SecretStr) -> str:
        return v.get_secret_value()

    def to_json(self) -> str:
        """Serialize to the wire format expected by the logs API."""
        return self.model_dump_json(by_alias=True)
