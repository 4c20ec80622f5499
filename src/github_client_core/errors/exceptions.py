"""Structured exceptions for GitHub API errors."""

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from github_client_core.errors.models import ClientError, FieldError


class GitHubError(Exception):
    """Base exception for every failure raised by the client core."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ConfigError(GitHubError):
    """Client misconfiguration (malformed base URL, missing credentials)."""

    pass


class TransportError(GitHubError):
    """Connection, timeout or other IO failure below the HTTP layer."""

    pass


class CodecError(GitHubError):
    """A body could not be encoded to JSON or decoded into the expected shape."""

    pass


class RateLimitError(GitHubError):
    """403/429 rate limit responses."""

    def __init__(self, message: str, reset_at: datetime | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.reset_at = reset_at


class FaultError(GitHubError):
    """Non-2xx response carrying the API's structured error body."""

    def __init__(self, message: str, client_error: "ClientError", **kwargs):
        super().__init__(message, **kwargs)
        self.client_error = client_error


class BadRequestError(FaultError):
    """400 Bad Request."""

    pass


class UnauthorizedError(FaultError):
    """401 Unauthorized."""

    pass


class ForbiddenError(FaultError):
    """403 Forbidden."""

    pass


class NotFoundError(FaultError):
    """404 Not Found."""

    pass


class ConflictError(FaultError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(FaultError):
    """422 Unprocessable Entity (validation failed)."""

    @property
    def field_errors(self) -> list["FieldError"]:
        return self.client_error.errors or []


class ServerError(FaultError):
    """5xx server errors."""

    pass
