"""GitHub Client Core - request execution and pagination for GitHub REST clients.

This library provides the runtime that resource-specific clients sit on:
- Credential attachment (token, OAuth client id/secret) and resolution
- One-request-per-call execution with a small error taxonomy
  (transport, codec, rate limit, API fault, configuration)
- Lazy pagination that follows ``Link: rel="next"`` headers
- Testing utilities and fixtures

Example:
    ```python
    from github_client_core import GitHubClient, TokenCredentials

    async with GitHubClient("my-app/1.0", TokenCredentials(token)) as github:
        labels = await github.paginate("/repos/acme/widgets/labels").collect()
    ```
"""

from github_client_core.auth import ClientCredentials, CredentialResolver, TokenCredentials
from github_client_core.client import GitHubClient
from github_client_core.errors import (
    ClientError,
    CodecError,
    ConfigError,
    FaultError,
    GitHubError,
    RateLimitError,
    TransportError,
)
from github_client_core.options import Options
from github_client_core.pagination import PageState, Paginator

__version__ = "0.1.0"

__all__ = [
    "ClientCredentials",
    "ClientError",
    "CodecError",
    "ConfigError",
    "CredentialResolver",
    "FaultError",
    "GitHubClient",
    "GitHubError",
    "Options",
    "PageState",
    "Paginator",
    "RateLimitError",
    "TokenCredentials",
    "TransportError",
    "__version__",
]
