"""
Module: build.py
Description: Build log forwarding on job completion.

Turns the console log of a finished build into log records and sends
them with the job's private key credential.
"""

from typing import List, Optional, Sequence

from coralogix_ci.credentials.provider import CredentialKind, CredentialProvider, resolve_credential
from coralogix_ci.delivery.client import CoralogixClient
from coralogix_ci.models.log import LogRecord, Severity
from coralogix_ci.models.result import DeliveryResult
from coralogix_ci.utils.logger import get_logger

from .common import run_guarded

logger = get_logger(__name__)

JOB_CATEGORY = "job"


def build_log_entries(log_lines: Sequence[str], build_name: str, split_logs: bool = False) -> List[LogRecord]:
    """
    Convert console lines into log records.

    Args:
        log_lines: Console output lines in order
        build_name: Build display name, stored as the record thread id
        split_logs: One record per line instead of one joined record

    Returns:
        Log records in console order
    """
    if split_logs:
        return [
            LogRecord(
                severity=Severity.DEBUG,
                text=line,
                category=JOB_CATEGORY,
                thread_id=build_name
            )
            for line in log_lines
        ]

    return [
        LogRecord(
            severity=Severity.DEBUG,
            text="\n".join(log_lines),
            category=JOB_CATEGORY,
            thread_id=build_name
        )
    ]


def send_build_logs(
    client: CoralogixClient,
    provider: CredentialProvider,
    owner: str,
    credential_id: Optional[str],
    application: str,
    subsystem: str,
    build_name: str,
    log_lines: Sequence[str],
    split_logs: bool = False
) -> DeliveryResult:
    """
    Forward a finished build's console log.

    Args:
        client: Delivery client
        provider: Credential store
        owner: Full name of the job (credential lookup scope)
        credential_id: Private key credential id configured on the job
        application: Application name
        subsystem: Subsystem name, usually the job full name
        build_name: Build display name, e.g. '#42'
        log_lines: Console output lines
        split_logs: Send one record per line

    Returns:
        DeliveryResult; never raises
    """
    def action():
        secret_key = resolve_credential(provider, owner, credential_id, CredentialKind.PRIVATE_KEY)
        return client.send_logs(
            secret_key,
            application,
            subsystem,
            build_log_entries(log_lines, build_name, split_logs)
        )

    result = run_guarded(
        action,
        "Cannot send build logs to Coralogix!",
        job=owner,
        build=build_name
    )
    if result:
        logger.info("Build logs sent", job=owner, build=build_name, lines=len(log_lines))
    return result
