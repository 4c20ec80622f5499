"""Tests for the rate limit resource."""

from datetime import UTC, datetime

import pytest

from github_client_core.errors import CodecError
from github_client_core.resources.rate_limit import RateLimit, get_rate_limit
from github_client_core.testing import create_mock_response, mock_client


@pytest.mark.unit
async def test_get_rate_limit():
    body = {
        "resources": {"core": {"limit": 5000, "remaining": 4999, "reset": 1700000000, "used": 1}},
        "rate": {"limit": 5000, "remaining": 4999, "reset": 1700000000, "used": 1},
    }

    async with mock_client(lambda request: create_mock_response(200, body)) as github:
        rate_limit = await get_rate_limit(github)

    assert rate_limit == RateLimit(limit=5000, remaining=4999, reset_at=datetime.fromtimestamp(1700000000, tz=UTC))


@pytest.mark.unit
def test_legacy_rate_shape():
    rate_limit = RateLimit.from_json({"rate": {"limit": 60, "remaining": 0, "reset": 1700000000}})

    assert rate_limit.remaining == 0


@pytest.mark.unit
async def test_unexpected_shape_is_codec_error():
    async with mock_client(lambda request: create_mock_response(200, {"unexpected": True})) as github:
        with pytest.raises(CodecError):
            await get_rate_limit(github)
