"""
Package: coralogix_ci
Description: Forward CI build logs, audit events and metrics to Coralogix.

Exposes the delivery client, the payload models and the credential
resolution helpers. CI hook adapters live in the handlers package.
"""

from .config.settings import Settings, load_settings
from .credentials.provider import (
    Credential,
    CredentialKind,
    InMemoryCredentialProvider,
    resolve_credential,
)
from .delivery.client import CoralogixClient
from .exceptions import (
    ConfigurationError,
    CoralogixPluginError,
    CredentialNotConfigured,
    CredentialUnavailable,
    DeliveryError,
)
from .models import DeliveryResult, LogBatch, LogRecord, Severity, TagEvent

__version__ = "0.3.0"

__all__ = [
    "CoralogixClient",
    "Settings",
    "load_settings",
    "Credential",
    "CredentialKind",
    "InMemoryCredentialProvider",
    "resolve_credential",
    "CoralogixPluginError",
    "ConfigurationError",
    "CredentialNotConfigured",
    "CredentialUnavailable",
    "DeliveryError",
    "DeliveryResult",
    "LogBatch",
    "LogRecord",
    "Severity",
    "TagEvent",
]
