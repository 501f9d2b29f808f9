"""
Module: security.py
Description: Login and logout security events.
"""

from coralogix_ci.models.log import Severity
from coralogix_ci.models.result import DeliveryResult

from .audit import HostEventHandler


class SecurityEventHandler(HostEventHandler):
    """Reports authentication events under the 'security' subsystem."""

    subsystem = "security"
    category = "security"
    toggle = "security_logs_enabled"

    def authenticated(self, username: str) -> DeliveryResult:
        return self.send(f"{username} logged in", Severity.INFO)

    def failed_to_authenticate(self, username: str) -> DeliveryResult:
        return self.send(f"{username} failed to login", Severity.INFO)

    def logged_out(self, username: str) -> DeliveryResult:
        return self.send(f"{username} logged out", Severity.INFO)
