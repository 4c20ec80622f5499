"""Error taxonomy and response classification for GitHub clients."""

from github_client_core.errors.exceptions import (
    BadRequestError,
    CodecError,
    ConfigError,
    ConflictError,
    FaultError,
    ForbiddenError,
    GitHubError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from github_client_core.errors.handler import is_rate_limited, parse_rate_limit_reset, raise_for_status
from github_client_core.errors.models import ClientError, FieldError

__all__ = [
    "BadRequestError",
    "ClientError",
    "CodecError",
    "ConfigError",
    "ConflictError",
    "FaultError",
    "FieldError",
    "ForbiddenError",
    "GitHubError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "is_rate_limited",
    "parse_rate_limit_reset",
    "raise_for_status",
]
