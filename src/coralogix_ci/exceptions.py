"""
Module: exceptions.py
Description: Error taxonomy for the Coralogix CI plugin.

Setup problems (missing keys, bad endpoints, unknown credentials) are
raised eagerly so misconfiguration surfaces where the secret is needed.
Delivery problems are wrapped in DeliveryError so hook adapters can
reduce them to a single warning.

Key Components:
- CoralogixPluginError: Base class for every plugin error
- ConfigurationError: Blank key, malformed endpoint, invalid settings
- CredentialNotConfigured: Blank credential id
- CredentialUnavailable: Credential id not resolvable in scope
- DeliveryError: Network or serialization failure during a send
"""


class CoralogixPluginError(Exception):
    """Base class for all Coralogix plugin errors."""


class ConfigurationError(CoralogixPluginError, ValueError):
    """Raised when the plugin is configured incorrectly."""


class CredentialNotConfigured(ConfigurationError):
    """Raised when no credential id was configured."""

    def __init__(self, message: str = "The credential id was not configured - please specify the credentials to use."):
        super().__init__(message)


class CredentialUnavailable(CoralogixPluginError):
    """Raised when a credential id does not resolve to a credential."""

    def __init__(self, credential_id: str):
        self.credential_id = credential_id
        super().__init__(f"Credential '{credential_id}' is not available")


class DeliveryError(CoralogixPluginError):
    """Raised when a payload could not be built or sent."""
