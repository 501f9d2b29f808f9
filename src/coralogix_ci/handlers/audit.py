"""
Module: audit.py
Description: Item audit events (create, update, copy, delete, move).

Host-level events are sent with the global private key to the CI
instance's application name, under the 'audit' subsystem.
"""

from coralogix_ci.config.settings import Settings
from coralogix_ci.delivery.client import CoralogixClient
from coralogix_ci.models.log import LogRecord, Severity
from coralogix_ci.models.result import DeliveryResult

from .common import run_guarded


class HostEventHandler:
    """
    Base for hooks reporting host-level events.

    Subclasses set the subsystem/category and the settings toggle that
    enables them.
    """

    subsystem = ""
    category = ""
    toggle = ""

    def __init__(self, client: CoralogixClient, settings: Settings):
        self.client = client
        self.settings = settings

    @property
    def enabled(self) -> bool:
        return bool(getattr(self.settings, self.toggle))

    def send(self, message: str, severity: Severity = Severity.INFO) -> DeliveryResult:
        """
        Send one event message if this handler is enabled.

        Returns:
            DeliveryResult; a skipped result when the toggle is off
        """
        if not self.enabled:
            return DeliveryResult.skipped(f"{self.toggle} is off")

        def action():
            private_key = self.settings.private_key
            return self.client.send_logs(
                private_key.get_secret_value() if private_key else "",
                self.settings.ci_name,
                self.subsystem,
                [LogRecord(severity=severity, text=message, category=self.category)]
            )

        return run_guarded(action, f"Cannot send {self.category} logs to Coralogix!", subsystem=self.subsystem)


def _kind(item_kind: str) -> str:
    return item_kind.lower()


class AuditEventHandler(HostEventHandler):
    """Reports item lifecycle changes."""

    subsystem = "audit"
    category = "audit"
    toggle = "audit_logs_enabled"

    def on_created(self, item_name: str, item_kind: str) -> DeliveryResult:
        return self.send(f"{item_name} {_kind(item_kind)} was created", Severity.INFO)

    def on_updated(self, item_name: str, item_kind: str) -> DeliveryResult:
        return self.send(f"{item_name} {_kind(item_kind)} was updated", Severity.WARNING)

    def on_copied(self, source_name: str, item_name: str, item_kind: str) -> DeliveryResult:
        return self.send(f"{source_name} {_kind(item_kind)} was copied to {item_name}", Severity.INFO)

    def on_deleted(self, item_name: str, item_kind: str) -> DeliveryResult:
        return self.send(f"{item_name} {_kind(item_kind)} was deleted", Severity.CRITICAL)

    def on_location_changed(self, item_kind: str, old_name: str, new_name: str) -> DeliveryResult:
        return self.send(f"{old_name} {_kind(item_kind)} was moved/renamed to {new_name}", Severity.WARNING)
