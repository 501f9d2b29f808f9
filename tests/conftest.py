"""
Module: conftest.py
Description: Shared pytest fixtures for Coralogix CI plugin tests.

Provides reusable fixtures for settings, the delivery client, the
credential store and sample log data. HTTP traffic is intercepted with
pytest-httpx's httpx_mock fixture.
"""

import os

import pytest
from pydantic import SecretStr

from coralogix_ci.config.settings import Settings
from coralogix_ci.credentials.provider import Credential, CredentialKind, InMemoryCredentialProvider
from coralogix_ci.delivery.client import CoralogixClient
from coralogix_ci.models.log import LogRecord, Severity

LOGS_URL = "https://api.coralogix.com/api/v1/logs"
TAGS_URL = "https://webapi.coralogix.com/api/v1/external/tags"
PRIVATE_KEY = "11111111-2222-3333-4444-555555555555"
API_KEY = "cxtp_ApiKeyForTags"


def make_settings(**overrides) -> Settings:
    """Settings that ignore the environment and .env files."""
    values = {
        "private_key": SecretStr(PRIVATE_KEY),
        "region": "coralogix.com",
        "ci_name": "jenkins",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CORALOGIX_* variables from the developer shell out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("CORALOGIX_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings():
    """Settings with every feature toggle off."""
    return make_settings()


@pytest.fixture
def enabled_settings():
    """Settings with every feature toggle on."""
    return make_settings(
        system_logs_enabled=True,
        audit_logs_enabled=True,
        security_logs_enabled=True,
        metrics_enabled=True,
        metrics_interval=5,
        metrics_initial_delay=0
    )


@pytest.fixture
def client(test_settings):
    return CoralogixClient(test_settings)


@pytest.fixture
def enabled_client(enabled_settings):
    return CoralogixClient(enabled_settings)


@pytest.fixture
def credential_provider():
    """
    Credential store with one global private key, one folder-scoped
    private key and one global API key.
    """
    return InMemoryCredentialProvider([
        Credential(id="cx-private", kind=CredentialKind.PRIVATE_KEY, secret=SecretStr(PRIVATE_KEY)),
        Credential(
            id="cx-team",
            kind=CredentialKind.PRIVATE_KEY,
            secret=SecretStr("team-private-key"),
            scope="team"
        ),
        Credential(id="cx-api", kind=CredentialKind.API_KEY, secret=SecretStr(API_KEY)),
    ])


@pytest.fixture
def sample_records():
    """Three records in a known order."""
    return [
        LogRecord(timestamp=1700000000000, severity=Severity.DEBUG, text="Started by user admin", category="job", thread_id="#1"),
        LogRecord(timestamp=1700000000001, severity=Severity.INFO, text="Building in workspace\n/var/ws", category="job", thread_id="#1"),
        LogRecord(timestamp=1700000000002, severity=Severity.ERROR, text="Finished: FAILURE", category="job", thread_id="#1"),
    ]
