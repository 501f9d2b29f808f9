"""
Module: tag.py
Description: Tag push build step.

Pushes a release tag for the configured applications and subsystems
using the job's API key credential.
"""

from typing import Optional, Sequence

from coralogix_ci.credentials.provider import CredentialKind, CredentialProvider, resolve_credential
from coralogix_ci.delivery.client import CoralogixClient
from coralogix_ci.models.result import DeliveryResult
from coralogix_ci.utils.logger import get_logger

from .common import run_guarded

logger = get_logger(__name__)


def push_build_tag(
    client: CoralogixClient,
    provider: CredentialProvider,
    owner: str,
    api_key_credential_id: Optional[str],
    tag_name: str,
    applications: Sequence[str],
    subsystems: Sequence[str],
    icon_url: Optional[str] = None
) -> DeliveryResult:
    """
    Push a tag from a build step.

    Args:
        client: Delivery client
        provider: Credential store
        owner: Full name of the job (credential lookup scope)
        api_key_credential_id: API key credential id configured on the step
        tag_name: Tag name, must not be blank
        applications: Application names
        subsystems: Subsystem names
        icon_url: Optional tag icon URL

    Returns:
        DeliveryResult; never raises
    """
    if not tag_name or not tag_name.strip():
        logger.warning("Tag name is missed!", job=owner)
        return DeliveryResult.skipped("Tag name is missed!")

    def action():
        secret_key = resolve_credential(provider, owner, api_key_credential_id, CredentialKind.API_KEY)
        return client.push_tag(secret_key, list(applications), list(subsystems), tag_name, icon_url)

    return run_guarded(action, "Cannot push tag to Coralogix!", job=owner, tag=tag_name)
