"""Tests for response classification."""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import Response

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
from github_client_core.errors.handler import is_rate_limited, parse_rate_limit_reset, raise_for_status


@pytest.mark.unit
def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for successful responses."""
    raise_for_status(Response(status_code=200))
    raise_for_status(Response(status_code=204))


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (422, UnprocessableEntityError),
        (500, ServerError),
        (502, ServerError),
    ],
)
def test_raise_for_status_maps_status_codes(status_code, exc_class):
    """Each status raises its FaultError subclass carrying the parsed body."""
    response = Response(status_code=status_code, json={"message": "Nope"})

    with pytest.raises(exc_class) as exc_info:
        raise_for_status(response)

    assert isinstance(exc_info.value, FaultError)
    assert exc_info.value.status_code == status_code
    assert exc_info.value.response is response
    assert exc_info.value.client_error.message == "Nope"


@pytest.mark.unit
def test_raise_for_status_unmapped_4xx_is_plain_fault():
    response = Response(status_code=418, json={"message": "I'm a teapot"})

    with pytest.raises(FaultError) as exc_info:
        raise_for_status(response)

    assert type(exc_info.value) is FaultError
    assert exc_info.value.status_code == 418


@pytest.mark.unit
def test_raise_for_status_422_validation_failed():
    """A well-formed error body is parsed field by field."""
    response = Response(
        status_code=422,
        json={
            "message": "Validation Failed",
            "errors": [{"resource": "Label", "field": "name", "code": "already_exists"}],
            "documentation_url": "https://docs.github.com/rest/issues/labels",
        },
    )

    with pytest.raises(UnprocessableEntityError) as exc_info:
        raise_for_status(response)

    error = exc_info.value
    assert error.client_error.message == "Validation Failed"
    assert error.field_errors[0].field == "name"
    assert error.field_errors[0].code == "already_exists"
    assert "Label.name: already_exists" in str(error)


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": "<html>Bad Gateway</html>"},
        {"text": ""},
        {"json": {"error": "no message field"}},
        {"json": ["not", "an", "object"]},
        {"json": {"message": 42}},
    ],
)
def test_raise_for_status_unparseable_body_still_faults(kwargs):
    """Malformed or empty error bodies degrade to a synthesized error, never a codec error."""
    response = Response(status_code=502, **kwargs)

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 502
    assert exc_info.value.client_error.message == "HTTP 502 Bad Gateway"


@pytest.mark.unit
def test_raise_for_status_429_rate_limit():
    reset = int((datetime.now(UTC) + timedelta(minutes=5)).timestamp())
    response = Response(
        status_code=429,
        headers={"X-RateLimit-Reset": str(reset)},
        json={"message": "API rate limit exceeded"},
    )

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 429
    assert exc_info.value.reset_at == datetime.fromtimestamp(reset, tz=UTC)
    assert str(exc_info.value) == "API rate limit exceeded"


@pytest.mark.unit
def test_raise_for_status_429_without_reset_header():
    response = Response(status_code=429, text="Too many requests")

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.reset_at is None
    assert "429" in str(exc_info.value)


@pytest.mark.unit
def test_raise_for_status_403_with_exhausted_quota_is_rate_limit():
    response = Response(
        status_code=403,
        headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000"},
        json={"message": "API rate limit exceeded for user ID 1."},
    )

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.reset_at == datetime.fromtimestamp(1700000000, tz=UTC)


@pytest.mark.unit
def test_raise_for_status_403_with_quota_left_is_forbidden():
    response = Response(
        status_code=403,
        headers={"X-RateLimit-Remaining": "4999"},
        json={"message": "Resource not accessible by integration"},
    )

    with pytest.raises(ForbiddenError):
        raise_for_status(response)


@pytest.mark.unit
def test_raise_for_status_custom_rate_limit_headers():
    response = Response(
        status_code=403,
        headers={"RateLimit-Remaining": "0", "RateLimit-Reset": "1700000000"},
    )

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response, reset_header="RateLimit-Reset", remaining_header="RateLimit-Remaining")

    assert exc_info.value.reset_at == datetime.fromtimestamp(1700000000, tz=UTC)


class TestIsRateLimited:
    """Test rate limit detection."""

    def test_429(self):
        assert is_rate_limited(Response(429))

    def test_403_without_header(self):
        assert not is_rate_limited(Response(403))

    def test_200_with_zero_remaining(self):
        assert not is_rate_limited(Response(200, headers={"X-RateLimit-Remaining": "0"}))


class TestParseRateLimitReset:
    """Test reading the reset time from headers."""

    def test_epoch_header(self):
        response = Response(429, headers={"X-RateLimit-Reset": "1700000000"})

        assert parse_rate_limit_reset(response) == datetime.fromtimestamp(1700000000, tz=UTC)

    def test_retry_after_seconds(self):
        before = datetime.now(UTC)
        response = Response(429, headers={"Retry-After": "60"})

        reset_at = parse_rate_limit_reset(response)

        assert before + timedelta(seconds=59) <= reset_at <= datetime.now(UTC) + timedelta(seconds=61)

    def test_retry_after_http_date(self):
        response = Response(429, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"})

        assert parse_rate_limit_reset(response) == datetime(2015, 10, 21, 7, 28, tzinfo=UTC)

    def test_non_numeric_reset_falls_back_to_retry_after(self):
        response = Response(429, headers={"X-RateLimit-Reset": "soon", "Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"})

        assert parse_rate_limit_reset(response) == datetime(2015, 10, 21, 7, 28, tzinfo=UTC)

    def test_negative_retry_after(self):
        assert parse_rate_limit_reset(Response(429, headers={"Retry-After": "-5"})) is None

    def test_garbage(self):
        assert parse_rate_limit_reset(Response(429, headers={"Retry-After": "whenever"})) is None

    def test_missing(self):
        assert parse_rate_limit_reset(Response(429)) is None

    def test_custom_header_name(self):
        response = Response(429, headers={"X-Reset-At": "1700000000", "X-RateLimit-Reset": "1"})

        assert parse_rate_limit_reset(response, "X-Reset-At") == datetime.fromtimestamp(1700000000, tz=UTC)
