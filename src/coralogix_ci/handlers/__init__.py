"""
Module: handlers
Description: Package initialization for CI hook adapters.

This package contains the adapters the CI host calls from its
lifecycle callbacks:
- build: Build log forwarding on job completion
- pipeline: Pipeline run metrics
- tag: Tag push build step
- audit / security: Host-level item and login events
- metrics: Periodic metrics collector
- system: Logging handler for host system logs

Every adapter returns a DeliveryResult and never raises into the host.
"""

from .audit import AuditEventHandler
from .build import send_build_logs
from .metrics import MetricsCollector
from .pipeline import send_pipeline_metrics
from .security import SecurityEventHandler
from .system import SystemLogHandler
from .tag import push_build_tag

__all__ = [
    "AuditEventHandler",
    "MetricsCollector",
    "SecurityEventHandler",
    "SystemLogHandler",
    "push_build_tag",
    "send_build_logs",
    "send_pipeline_metrics",
]
