"""
Module: pipeline.py
Description: Pipeline run metrics forwarding.

Sends the stage-level description of a pipeline run (durations,
statuses) either as one record or as one record per stage.
"""

import copy
import json
from typing import Any, Dict, List, Optional

from coralogix_ci.credentials.provider import CredentialKind, CredentialProvider, resolve_credential
from coralogix_ci.delivery.client import CoralogixClient
from coralogix_ci.models.log import LogRecord, Severity
from coralogix_ci.models.result import DeliveryResult

from .build import JOB_CATEGORY
from .common import run_guarded


def _compact(data: Dict[str, Any]) -> str:
    return json.dumps(data, separators=(',', ':'))


def strip_run_description(run_data: Dict[str, Any], job_name: str) -> Dict[str, Any]:
    """
    Drop navigation links from a run description and tag it with the job.

    The input is not modified.
    """
    run = copy.deepcopy(run_data)
    run.pop('_links', None)
    run['job'] = job_name

    stages = run.get('stages') or []
    for stage in stages:
        stage.pop('_links', None)
        stage.pop('stageFlowNodes', None)
    run['stages'] = stages
    return run


def build_metrics_entries(
    run_data: Dict[str, Any],
    job_name: str,
    build_name: str,
    split_stages: bool = False
) -> List[LogRecord]:
    """
    Convert a pipeline run description into log records.

    Args:
        run_data: Run description with a 'stages' list
        job_name: Full name of the pipeline job
        build_name: Build display name, stored as the record thread id
        split_stages: One record per stage

    Returns:
        Log records whose text is compact JSON
    """
    run = strip_run_description(run_data, job_name)

    if not split_stages:
        return [
            LogRecord(
                severity=Severity.DEBUG,
                text=_compact(run),
                category=JOB_CATEGORY,
                thread_id=build_name
            )
        ]

    records = []
    for stage in run['stages']:
        record = {key: value for key, value in run.items() if key != 'stages'}
        record['stage'] = stage
        records.append(
            LogRecord(
                severity=Severity.DEBUG,
                text=_compact(record),
                category=JOB_CATEGORY,
                thread_id=build_name
            )
        )
    return records


def send_pipeline_metrics(
    client: CoralogixClient,
    provider: CredentialProvider,
    owner: str,
    credential_id: Optional[str],
    application: str,
    subsystem: str,
    job_name: str,
    build_name: str,
    run_data: Dict[str, Any],
    split_stages: bool = False
) -> DeliveryResult:
    """Forward a pipeline run description. Never raises."""
    def action():
        secret_key = resolve_credential(provider, owner, credential_id, CredentialKind.PRIVATE_KEY)
        return client.send_logs(
            secret_key,
            application,
            subsystem,
            build_metrics_entries(run_data, job_name, build_name, split_stages)
        )

    return run_guarded(
        action,
        "Cannot send pipeline metrics to Coralogix!",
        job=job_name,
        build=build_name
    )
