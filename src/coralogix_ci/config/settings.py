"""
Module: settings.py
Description: Plugin configuration using pydantic-settings.

Loads the global plugin configuration (region, feature toggles, private
key) from environment variables prefixed with CORALOGIX_, with optional
.env support. The resulting Settings object is handed explicitly to the
delivery client and the hook adapters.
"""

import re
from typing import Literal, Optional

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coralogix_ci.exceptions import ConfigurationError
from coralogix_ci.utils.logger import configure_logging

# Coralogix account regions and their base domains
REGIONS = {
    "Europe": "coralogix.com",
    "Europe2": "eu2.coralogix.com",
    "US": "coralogix.us",
    "US2": "cx498.coralogix.com",
    "India": "app.coralogix.in",
    "Singapore": "coralogixsg.com",
}

DEFAULT_REGION = REGIONS["Europe"]
LEGACY_TAG_URL = "https://api.coralogix.com/api/v1/addTag"
MIN_METRICS_INTERVAL = 5


def validate_endpoint(url: str) -> str:
    """
    Validate a custom Coralogix endpoint URL.

    Args:
        url: Endpoint URL, e.g. "https://api.coralogix.com/"

    Returns:
        The endpoint unchanged

    Raises:
        ConfigurationError: If the URL is not http(s) or lacks a trailing slash
    """
    if not url or not isinstance(url, str):
        raise ConfigurationError("endpoint must be a non-empty string")
    if not url.startswith(('http://', 'https://')):
        raise ConfigurationError("endpoint must be a valid HTTP/HTTPS URL")
    if not url.endswith('/'):
        raise ConfigurationError("endpoint must end with '/'")
    return url


class Settings(BaseSettings):
    """Plugin settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CORALOGIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Account settings
    private_key: Optional[SecretStr] = Field(
        default=None,
        description="Coralogix private key used by host-level hooks"
    )
    region: str = Field(
        default=DEFAULT_REGION,
        description="Coralogix region domain (see REGIONS)"
    )
    custom_endpoint: Optional[str] = Field(
        default=None,
        description="Custom API base URL overriding the region, must end with '/'"
    )
    ci_name: str = Field(
        default="jenkins",
        description="Application name used for host-level events"
    )

    # Feature toggles
    system_logs_enabled: bool = Field(default=False, description="Forward host system logs")
    audit_logs_enabled: bool = Field(default=False, description="Forward item audit events")
    security_logs_enabled: bool = Field(default=False, description="Forward login/logout events")
    metrics_enabled: bool = Field(default=False, description="Forward periodic metrics")

    # Metrics collection
    metrics_interval: int = Field(
        default=60,
        ge=MIN_METRICS_INTERVAL,
        description="Seconds between metrics snapshots"
    )
    metrics_initial_delay: int = Field(
        default=30,
        ge=0,
        description="Seconds before the first metrics snapshot"
    )

    # Delivery settings
    delivery_timeout: float = Field(
        default=10,
        ge=1,
        le=30,
        description="HTTP timeout in seconds for delivery attempts"
    )
    tag_wire_format: Literal["json", "legacy_query"] = Field(
        default="json",
        description="Tag request format; legacy_query is deprecated"
    )
    legacy_tag_url: str = Field(
        default=LEGACY_TAG_URL,
        description="Endpoint used by the legacy GET tag format"
    )

    @field_validator('region')
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Validate region is a bare domain name."""
        v = REGIONS.get(v, v)
        if not re.match(r'^[a-zA-Z0-9.-]+$', v):
            raise ValueError("region must be a domain name without scheme or path")
        return v.lower()

    @field_validator('custom_endpoint')
    @classmethod
    def validate_custom_endpoint(cls, v: Optional[str]) -> Optional[str]:
        """Validate custom endpoint format."""
        if v is None or v == "":
            return None
        return validate_endpoint(v)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @property
    def logs_url(self) -> str:
        """Logs ingestion endpoint."""
        if self.custom_endpoint:
            return f"{self.custom_endpoint}api/v1/logs"
        return f"https://api.{self.region}/api/v1/logs"

    @property
    def tags_url(self) -> str:
        """Tags ingestion endpoint."""
        if self.custom_endpoint:
            return f"{self.custom_endpoint}api/v1/external/tags"
        return f"https://webapi.{self.region}/api/v1/external/tags"


def load_settings(**overrides) -> Settings:
    """
    Build Settings from the environment plus explicit overrides.

    Logging is reconfigured to the resulting log_level.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid Coralogix configuration: {e}") from e
    configure_logging(settings.log_level)
    return settings
