"""
Module: system.py
Description: Standard library logging handler forwarding host system logs.

Attach SystemLogHandler to the host's root logger to forward its
records to Coralogix under the 'system' subsystem. Each record is sent
as its own bulk.
"""

import logging

from coralogix_ci.config.settings import Settings
from coralogix_ci.delivery.client import CoralogixClient
from coralogix_ci.models.log import LogRecord, Severity

from .audit import HostEventHandler

# Loggers of the HTTP stack used for delivery; forwarding them would loop
_IGNORED_LOGGERS = ("httpx", "httpcore")


def severity_for(levelno: int) -> Severity:
    """Map a stdlib logging level to a Coralogix severity."""
    if levelno >= logging.CRITICAL:
        return Severity.CRITICAL
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno >= logging.INFO:
        return Severity.INFO
    if levelno > logging.DEBUG:
        return Severity.VERBOSE
    return Severity.DEBUG


class SystemLogHandler(logging.Handler):
    """
    Logging handler that sends records to Coralogix.

    Example:
        ```python
        handler = SystemLogHandler(client, settings)
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(self, client: CoralogixClient, settings: Settings, level: int = logging.NOTSET):
        super().__init__(level)
        self._sender = _SystemEvents(client, settings)

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.split(".")[0] in _IGNORED_LOGGERS:
            return False
        return super().filter(record)

    def to_log_record(self, record: logging.LogRecord) -> LogRecord:
        text = self.format(record)
        return LogRecord(
            timestamp=int(record.created * 1000),
            severity=severity_for(record.levelno),
            text=text,
            category=_SystemEvents.category,
            class_name=record.module or "",
            method_name=record.funcName or "",
            thread_id=record.threadName or ""
        )

    def emit(self, record: logging.LogRecord) -> None:
        if not self._sender.enabled:
            return
        try:
            self._sender.send_record(self.to_log_record(record))
        except Exception:
            self.handleError(record)


class _SystemEvents(HostEventHandler):
    subsystem = "system"
    category = "system"
    toggle = "system_logs_enabled"

    def send_record(self, log_record: LogRecord):
        private_key = self.settings.private_key
        return self.client.deliver_logs(
            private_key.get_secret_value() if private_key else "",
            self.settings.ci_name,
            self.subsystem,
            [log_record]
        )
