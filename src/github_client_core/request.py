"""Request descriptors built fresh for every API call."""

import json as jsonlib
from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from github_client_core.errors import CodecError

DEFAULT_MEDIA_TYPE = "application/vnd.github.v3+json"


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to issue one HTTP request.

    ``url`` is either a path relative to the API host or an absolute cursor URL
    taken from a ``Link`` header. ``content`` holds the already-serialized JSON
    body, so encoding failures surface before anything touches the network.
    """

    method: str
    url: str
    params: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None

    def with_header(self, name: str, value: str) -> "RequestSpec":
        """Return a copy with ``name`` set, replacing any case variant of it."""
        headers = {k: v for k, v in self.headers.items() if k.lower() != name.lower()}
        headers[name] = value
        return replace(self, headers=headers)

    def header(self, name: str) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None

    def to_httpx(self, client: httpx.AsyncClient) -> httpx.Request:
        return client.build_request(
            self.method,
            self.url,
            params=self.params,
            headers=self.headers,
            content=self.content,
        )


def encode_body(body: Any) -> bytes:
    """Serialize a request payload to JSON bytes.

    Raises:
        CodecError: If the payload is not JSON serializable
    """
    try:
        return jsonlib.dumps(body, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise CodecError(f"Request body is not JSON serializable: {e}") from e


def build_request_spec(
    method: str,
    url: str,
    *,
    user_agent: str,
    params: dict[str, Any] | None = None,
    json: Any = None,
    media_type: str = DEFAULT_MEDIA_TYPE,
) -> RequestSpec:
    """Build the descriptor for one call, serializing ``json`` if given."""
    headers = {"User-Agent": user_agent, "Accept": media_type}
    content = None
    if json is not None:
        content = encode_body(json)
        headers["Content-Type"] = "application/json"

    return RequestSpec(
        method=method.upper(),
        url=url,
        params=dict(params) if params else None,
        headers=headers,
        content=content,
    )
