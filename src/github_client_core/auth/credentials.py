"""Credential variants and their attachment to outgoing requests.

A client holds exactly one of:

- ``None``: unauthenticated, nothing is attached
- ``TokenCredentials``: personal access or OAuth token, sent as
  ``Authorization: token <token>``
- ``ClientCredentials``: OAuth application id/secret, sent as HTTP basic auth

Credentials are immutable and safe to share between concurrent calls.

Example:
    ```python
    from github_client_core.auth import TokenCredentials, attach_credentials

    spec = attach_credentials(TokenCredentials("ghp_123"), spec)
    ```
"""

import base64
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from github_client_core.errors import ConfigError

if TYPE_CHECKING:
    from github_client_core.request import RequestSpec


@dataclass(frozen=True)
class TokenCredentials:
    """Static access token."""

    token: str

    def __post_init__(self) -> None:
        _require_header_safe("token", self.token)

    def __repr__(self) -> str:
        return "TokenCredentials(token='***')"


@dataclass(frozen=True)
class ClientCredentials:
    """OAuth application client id and secret."""

    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        return f"ClientCredentials(client_id={self.client_id!r}, client_secret='***')"


Credentials = Union[TokenCredentials, ClientCredentials, None]


def _require_header_safe(name: str, value: str) -> None:
    # sent verbatim in a header, unlike the base64 Basic pair
    if not isinstance(value, str) or not value.isascii():
        raise ConfigError(f"Credential {name} must be an ASCII string")


def authorization_header(credentials: Credentials) -> str | None:
    """Return the ``Authorization`` header value for ``credentials``, if any."""
    if credentials is None:
        return None
    if isinstance(credentials, TokenCredentials):
        return f"token {credentials.token}"
    if isinstance(credentials, ClientCredentials):
        pair = f"{credentials.client_id}:{credentials.client_secret}".encode()
        return f"Basic {base64.b64encode(pair).decode('ascii')}"
    raise TypeError(f"Unsupported credentials type: {type(credentials).__name__}")


def attach_credentials(credentials: Credentials, spec: "RequestSpec") -> "RequestSpec":
    """Return a copy of ``spec`` authenticated with ``credentials``.

    The ``Authorization`` header is replaced, never appended, so attaching
    more than once leaves a single header.
    """
    value = authorization_header(credentials)
    if value is None:
        return spec
    return spec.with_header("Authorization", value)
