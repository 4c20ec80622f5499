"""Current rate limit status (``GET /rate_limit``)."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from github_client_core.client import GitHubClient


@dataclass(frozen=True)
class RateLimit:
    limit: int
    remaining: int
    reset_at: datetime

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "RateLimit":
        # "rate" is the legacy top-level mirror of resources.core
        core = data["resources"]["core"] if "resources" in data else data["rate"]
        return cls(
            limit=int(core["limit"]),
            remaining=int(core["remaining"]),
            reset_at=datetime.fromtimestamp(int(core["reset"]), tz=UTC),
        )


async def get_rate_limit(client: GitHubClient) -> RateLimit:
    """Fetch the core rate limit; this call does not count against it."""
    return await client.get("/rate_limit", model=RateLimit)
