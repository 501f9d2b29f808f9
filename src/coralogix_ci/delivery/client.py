"""
Module: client.py
Description: Coralogix delivery client.

Builds log bulks and tag payloads and sends each with exactly one HTTP
request. There is no retry, no queue and no inspection of the response:
telemetry delivery is best effort and must never hold up a CI job.

Two surfaces are offered:
- send_logs() / push_tag() raise ConfigurationError or DeliveryError
- deliver_logs() / deliver_tag() never raise and return a DeliveryResult
"""

import socket
from typing import Iterable, Optional, Sequence

import httpx
from pydantic import ValidationError

from coralogix_ci.config.settings import Settings
from coralogix_ci.exceptions import ConfigurationError, CoralogixPluginError, DeliveryError
from coralogix_ci.models.log import LogBatch, LogRecord
from coralogix_ci.models.result import DeliveryResult
from coralogix_ci.models.tag import TagEvent
from coralogix_ci.utils.logger import get_logger

logger = get_logger(__name__)

# Reported as computerName when the host name cannot be resolved
FALLBACK_HOST_NAME = "master"


def resolve_host_name() -> str:
    """Local host name, or FALLBACK_HOST_NAME if it cannot be resolved."""
    try:
        host_name = socket.gethostname()
    except OSError as e:
        logger.debug("Host name resolution failed", error=str(e))
        return FALLBACK_HOST_NAME
    return host_name or FALLBACK_HOST_NAME


def _require_key(secret_key: Optional[str]) -> str:
    if not secret_key or not isinstance(secret_key, str) or not secret_key.strip():
        raise ConfigurationError("Coralogix key must be a non-empty string")
    return secret_key


class CoralogixClient:
    """
    HTTP client for the Coralogix logs and tags APIs.

    Holds no mutable state; each call opens and closes its own
    connection, so one instance can be shared between builds.
    """

    def __init__(self, settings: Settings):
        """
        Initialize delivery client.

        Args:
            settings: Plugin settings providing region/endpoint and timeout
        """
        if not isinstance(settings, Settings):
            raise ConfigurationError("settings must be a Settings instance")

        self.settings = settings
        self.timeout = httpx.Timeout(settings.delivery_timeout, connect=settings.delivery_timeout)

        logger.debug(
            "Coralogix client initialized",
            logs_url=self.logs_url,
            tags_url=self.tags_url,
            tag_wire_format=settings.tag_wire_format,
            timeout_seconds=settings.delivery_timeout
        )

    @property
    def logs_url(self) -> str:
        return self.settings.logs_url

    @property
    def tags_url(self) -> str:
        return self.settings.tags_url

    def send_logs(
        self,
        secret_key: str,
        application_name: str,
        subsystem_name: str,
        records: Iterable[LogRecord]
    ) -> int:
        """
        Send a bulk of log records in a single POST.

        An empty bulk is still sent. The response status is returned
        but never checked.

        Args:
            secret_key: Coralogix private key
            application_name: Application name, forwarded as-is
            subsystem_name: Subsystem name, forwarded as-is
            records: Log records, sent in iteration order

        Returns:
            HTTP status code of the response

        Raises:
            ConfigurationError: If secret_key is blank (nothing is sent)
            DeliveryError: If the bulk cannot be built or the request fails
        """
        secret_key = _require_key(secret_key)

        try:
            bulk = LogBatch(
                private_key=secret_key,
                application_name=application_name,
                subsystem_name=subsystem_name,
                computer_name=resolve_host_name(),
                log_entries=tuple(records)
            )
            body = bulk.to_json()
        except ValidationError as e:
            raise DeliveryError(f"Cannot build logs bulk: {e}") from e

        logger.debug(
            "Sending logs bulk",
            application=application_name,
            subsystem=subsystem_name,
            records=len(bulk.log_entries),
            url=self.logs_url
        )

        return self._execute(
            'POST',
            self.logs_url,
            content=body,
            headers={'Content-Type': 'application/json'}
        )

    def push_tag(
        self,
        secret_key: str,
        applications: Sequence[str],
        subsystems: Sequence[str],
        tag_name: str,
        icon_url: Optional[str] = None
    ) -> int:
        """
        Push a tag for the given applications and subsystems.

        Args:
            secret_key: Coralogix API key
            applications: Application names, order preserved
            subsystems: Subsystem names, order preserved
            tag_name: Tag name (validated by the caller)
            icon_url: Optional icon URL

        Returns:
            HTTP status code of the response

        Raises:
            ConfigurationError: If secret_key is blank (nothing is sent)
            DeliveryError: If the tag cannot be built or the request fails
        """
        secret_key = _require_key(secret_key)

        try:
            tag = TagEvent(
                name=tag_name,
                applications=tuple(applications),
                subsystems=tuple(subsystems),
                icon_url=icon_url
            )
        except ValidationError as e:
            raise DeliveryError(f"Cannot build tag: {e}") from e

        if self.settings.tag_wire_format == "legacy_query":
            logger.warning(
                "Legacy tag format is deprecated, the key is sent in the URL",
                url=self.settings.legacy_tag_url,
                tag=tag_name
            )
            return self._execute(
                'GET',
                self.settings.legacy_tag_url,
                params=tag.to_query_params(secret_key)
            )

        logger.debug(
            "Pushing tag",
            tag=tag_name,
            applications=list(tag.applications),
            subsystems=list(tag.subsystems),
            url=self.tags_url
        )

        return self._execute(
            'POST',
            self.tags_url,
            content=tag.to_json(),
            headers={
                'Content-Type': 'application/json',
                'Authorization': f'Bearer {secret_key}'
            }
        )

    def deliver_logs(
        self,
        secret_key: str,
        application_name: str,
        subsystem_name: str,
        records: Iterable[LogRecord]
    ) -> DeliveryResult:
        """
        send_logs() that reports failure as a DeliveryResult.

        Returns:
            DeliveryResult; failures are logged as a single warning
        """
        try:
            status_code = self.send_logs(secret_key, application_name, subsystem_name, records)
        except CoralogixPluginError as e:
            logger.warning(
                "Cannot send logs to Coralogix!",
                application=application_name,
                subsystem=subsystem_name,
                error=str(e),
                error_type=type(e).__name__
            )
            return DeliveryResult.failed(e)
        return DeliveryResult.ok(status_code)

    def deliver_tag(
        self,
        secret_key: str,
        applications: Sequence[str],
        subsystems: Sequence[str],
        tag_name: str,
        icon_url: Optional[str] = None
    ) -> DeliveryResult:
        """push_tag() that reports failure as a DeliveryResult."""
        try:
            status_code = self.push_tag(secret_key, applications, subsystems, tag_name, icon_url)
        except CoralogixPluginError as e:
            logger.warning(
                "Cannot push tag to Coralogix!",
                tag=tag_name,
                error=str(e),
                error_type=type(e).__name__
            )
            return DeliveryResult.failed(e)
        return DeliveryResult.ok(status_code)

    def _execute(self, method: str, url: str, **kwargs) -> int:
        """
        Issue one request; the response is received but not inspected.

        Raises:
            DeliveryError: On timeout, network or protocol failure
        """
        with httpx.Client(timeout=self.timeout) as client:
            try:
                response = client.request(method, url, **kwargs)
            except httpx.TimeoutException as e:
                raise DeliveryError(f"Request to {url} timed out") from e
            except httpx.HTTPError as e:
                raise DeliveryError(f"Request to {url} failed: {e}") from e
            except (UnicodeError, httpx.InvalidURL) as e:
                # Message left out, it may quote header values
                raise DeliveryError(f"Request to {url} could not be built: {type(e).__name__}") from e

        logger.debug(
            "Coralogix response received",
            method=method,
            url=url,
            status_code=response.status_code
        )
        return response.status_code
