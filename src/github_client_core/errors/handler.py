"""Error classification for HTTP responses."""

import logging
from datetime import UTC, datetime, timedelta
from email.utils import parsedate_to_datetime

import httpx

from github_client_core.errors.exceptions import (
    BadRequestError,
    ConflictError,
    FaultError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from github_client_core.errors.models import ClientError

logger = logging.getLogger(__name__)

DEFAULT_RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"
DEFAULT_RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"

FAULT_MAP: dict[int, type[FaultError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
}


def is_rate_limited(
    response: httpx.Response,
    remaining_header: str = DEFAULT_RATE_LIMIT_REMAINING_HEADER,
) -> bool:
    """Whether the response signals an exhausted rate limit.

    429 always does. GitHub also answers 403 with a zero remaining count when
    the primary limit is spent.
    """
    if response.status_code == 429:
        return True
    if response.status_code == 403:
        return response.headers.get(remaining_header, "").strip() == "0"
    return False


def parse_rate_limit_reset(
    response: httpx.Response,
    reset_header: str = DEFAULT_RATE_LIMIT_RESET_HEADER,
) -> datetime | None:
    """Read the time at which the rate limit resets.

    Checks ``reset_header`` (epoch seconds) first, then ``Retry-After`` in
    either of its formats:
    - Delay-seconds: "120"
    - HTTP-date: "Wed, 21 Oct 2015 07:28:00 GMT"

    Returns:
        Timezone-aware reset time, or None if no header parses
    """
    reset = response.headers.get(reset_header)
    if reset:
        try:
            return datetime.fromtimestamp(int(reset), tz=UTC)
        except (ValueError, OverflowError, OSError):
            logger.warning(f"Non-numeric {reset_header} header: {reset!r}")

    retry_after = response.headers.get("Retry-After")
    if not retry_after:
        return None

    try:
        delay = int(retry_after)
        if delay < 0:
            return None
        return datetime.now(UTC) + timedelta(seconds=delay)
    except ValueError:
        pass

    try:
        retry_date = parsedate_to_datetime(retry_after)
    except (ValueError, TypeError):
        return None
    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=UTC)
    return retry_date


def raise_for_status(
    response: httpx.Response,
    *,
    reset_header: str = DEFAULT_RATE_LIMIT_RESET_HEADER,
    remaining_header: str = DEFAULT_RATE_LIMIT_REMAINING_HEADER,
) -> None:
    """Raise the appropriate exception for a non-2xx response.

    Rate limit responses raise RateLimitError. Every other failure raises a
    FaultError subclass; when the body is not the structured error shape a
    ClientError is synthesized from the status line so the status is never lost.

    Args:
        response: HTTP response object
        reset_header: Header carrying the rate limit reset time
        remaining_header: Header carrying the remaining request count

    Raises:
        RateLimitError: On 429, or 403 with no remaining requests
        FaultError: Subclass chosen by status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    client_error = ClientError.from_response(response)

    if is_rate_limited(response, remaining_header):
        reset_at = parse_rate_limit_reset(response, reset_header)
        message = client_error.message if client_error else f"HTTP {status_code}: rate limit exceeded"
        logger.warning(f"Rate limited on {_describe(response)}, resets at {reset_at}")
        raise RateLimitError(message, reset_at=reset_at, status_code=status_code, response=response)

    if client_error is None:
        client_error = ClientError.synthesize(response)

    if status_code in FAULT_MAP:
        exc_class = FAULT_MAP[status_code]
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = FaultError

    logger.warning(f"{_describe(response)} failed with {status_code}: {client_error.message}")
    raise exc_class(
        message=client_error.to_exception_message(),
        client_error=client_error,
        status_code=status_code,
        response=response,
    )


def _describe(response: httpx.Response) -> str:
    try:
        request = response.request
    except RuntimeError:
        return "request"
    return f"{request.method} {request.url}"
