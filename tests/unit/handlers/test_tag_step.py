"""
Module: test_tag_step.py
Description: Unit tests for the tag push build step.
"""

import json

import httpx

from coralogix_ci.handlers.tag import push_build_tag
from tests.conftest import API_KEY, TAGS_URL


def test_pushes_tag_with_api_key(client, credential_provider, httpx_mock):
    httpx_mock.add_response(method="POST", url=TAGS_URL)

    result = push_build_tag(
        client, credential_provider, "team/web", "cx-api",
        "release-1", ["app1"], ["sub1", "sub2"], ""
    )

    assert result.delivered
    request = httpx_mock.get_request()
    assert request.headers["Authorization"] == f"Bearer {API_KEY}"
    body = json.loads(request.content)
    assert body["name"] == "release-1"
    assert body["application"] == ["app1"]
    assert body["subsystem"] == ["sub1", "sub2"]


def test_blank_tag_name_skipped(client, credential_provider, httpx_mock):
    result = push_build_tag(client, credential_provider, "web", "cx-api", "  ", ["a"], ["s"])

    assert not result.delivered
    assert result.error_type == "Skipped"
    assert httpx_mock.get_requests() == []


def test_private_key_credential_rejected(client, credential_provider, httpx_mock):
    """Tags require an API key credential."""
    result = push_build_tag(client, credential_provider, "web", "cx-private", "v1", ["a"], ["s"])

    assert result.error_type == "CredentialUnavailable"
    assert httpx_mock.get_requests() == []


def test_network_failure_does_not_raise(client, credential_provider, httpx_mock):
    httpx_mock.add_exception(httpx.ConnectTimeout("timed out"))

    result = push_build_tag(client, credential_provider, "web", "cx-api", "v1", ["a"], ["s"])

    assert result.error_type == "DeliveryError"
