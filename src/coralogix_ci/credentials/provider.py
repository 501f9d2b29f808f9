"""
Module: provider.py
Description: Credential lookup and resolution.

The host CI system owns the credential store; the plugin only needs a
way to ask it for a secret by id within the scope of the item that
runs. That capability is the CredentialProvider protocol. An in-memory
provider with folder-scoped lookup is included for embedding hosts and
tests.

Key Components:
- CredentialKind: Private key (logs) or API key (tags)
- Credential: Secret bound to an id and an owner scope
- CredentialProvider: lookup(scope, credential_id) protocol
- InMemoryCredentialProvider: Folder-scoped dictionary store
- resolve_credential(): Strict resolution raising on misconfiguration

Dependencies: pydantic, typing
Author: Coralogix CI Team
"""

from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from coralogix_ci.exceptions import CredentialNotConfigured, CredentialUnavailable
from coralogix_ci.utils.logger import get_logger

logger = get_logger(__name__)

GLOBAL_SCOPE = ""


class CredentialKind(str, Enum):
    """Kinds of Coralogix secrets."""

    PRIVATE_KEY = "private_key"
    API_KEY = "api_key"


class Credential(BaseModel):
    """
    Secret bound to an identifier.

    Attributes:
        id: Credential identifier referenced by jobs
        kind: Which Coralogix secret this is
        secret: The secret value, masked in repr and dumps
        scope: Owner path the credential is visible from ("" is global)
        description: Optional human-readable description
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    kind: CredentialKind = Field(default=CredentialKind.PRIVATE_KEY)
    secret: SecretStr
    scope: str = Field(default=GLOBAL_SCOPE)
    description: str = Field(default="")


class CredentialProvider(Protocol):
    """Capability to look up a credential by id within an owner scope."""

    def lookup(self, scope: str, credential_id: str) -> Optional[Credential]:
        ...


def scope_chain(scope: str) -> Iterator[str]:
    """
    Yield the scope and each enclosing folder, ending with global.

    >>> list(scope_chain("team/app/build"))
    ['team/app/build', 'team/app', 'team', '']
    """
    parts = [part for part in (scope or "").split("/") if part]
    for i in range(len(parts), 0, -1):
        yield "/".join(parts[:i])
    yield GLOBAL_SCOPE


class InMemoryCredentialProvider:
    """
    Dictionary-backed credential store.

    Credentials are stored per (scope, id). A lookup from an item sees
    its own scope first, then each parent folder, then global.
    """

    def __init__(self, credentials: Iterable[Credential] = ()):
        self._credentials: Dict[Tuple[str, str], Credential] = {}
        for credential in credentials:
            self.add(credential)

    def add(self, credential: Credential) -> None:
        scope = "/".join(part for part in credential.scope.split("/") if part)
        self._credentials[(scope, credential.id)] = credential

    def lookup(self, scope: str, credential_id: str) -> Optional[Credential]:
        for candidate in scope_chain(scope):
            credential = self._credentials.get((candidate, credential_id))
            if credential is not None:
                return credential
        return None

    def __len__(self) -> int:
        return len(self._credentials)


def resolve_credential(
    provider: CredentialProvider,
    owner_context: str,
    credential_id: Optional[str],
    kind: CredentialKind = CredentialKind.PRIVATE_KEY
) -> str:
    """
    Resolve a secret by credential id.

    Args:
        provider: Credential store to query
        owner_context: Full name of the item the secret is needed for
        credential_id: Configured credential id
        kind: Expected credential kind

    Returns:
        The secret value

    Raises:
        CredentialNotConfigured: If credential_id is blank
        CredentialUnavailable: If no credential of that kind matches the id
    """
    if not credential_id or not credential_id.strip():
        raise CredentialNotConfigured()

    credential = provider.lookup(owner_context, credential_id)
    if credential is None or credential.kind != kind:
        logger.warning(
            "Credential not available",
            credential_id=credential_id,
            owner=owner_context,
            kind=kind.value
        )
        raise CredentialUnavailable(credential_id)

    return credential.secret.get_secret_value()
