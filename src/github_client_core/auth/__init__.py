"""Authentication components for GitHub clients.

This module provides:
- Credential variants (token, OAuth client id/secret) and request attachment
- Multi-source resolution (value -> env -> .env -> default)

Example:
    ```python
    from github_client_core.auth import CredentialResolver

    credentials = CredentialResolver().resolve_credentials(required=True)
    ```
"""

from github_client_core.auth.credentials import (
    ClientCredentials,
    Credentials,
    TokenCredentials,
    attach_credentials,
    authorization_header,
)
from github_client_core.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from github_client_core.auth.resolver import CredentialResolver

__all__ = [
    "ClientCredentials",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "TokenCredentials",
    "attach_credentials",
    "authorization_header",
]
