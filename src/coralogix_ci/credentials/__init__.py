"""
Module: credentials
Description: Package initialization for credential lookup.

This package contains the credential provider protocol and the strict
resolution helper used wherever a Coralogix secret is needed.
"""

from .provider import (
    Credential,
    CredentialKind,
    CredentialProvider,
    InMemoryCredentialProvider,
    resolve_credential,
)

__all__ = [
    "Credential",
    "CredentialKind",
    "CredentialProvider",
    "InMemoryCredentialProvider",
    "resolve_credential",
]
