"""Logging transport for observing every physical HTTP exchange.

The transport wraps another httpx transport and logs each request at DEBUG
and each non-2xx response or transport failure at WARNING. It never alters
requests or responses and never retries: one request in, one request out.

```python
from github_client_core.transport import LoggingTransport
import httpx

transport = LoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("https://api.github.com/rate_limit")
```
"""

import logging
import time

import httpx

logger = logging.getLogger(__name__)

REDACTED_HEADERS: frozenset[str] = frozenset(["authorization", "proxy-authorization"])


class LoggingTransport(httpx.AsyncBaseTransport):
    """Transport that logs requests, responses and failures of a wrapped transport.

    Args:
        wrapped_transport: The underlying transport to wrap
        log_headers: Also log request headers at DEBUG (credentials redacted)
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        log_headers: bool = False,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.log_headers = log_headers

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request through the wrapped transport, logging the outcome."""
        if self.log_headers:
            logger.debug(f"{request.method} {request.url} headers={redact_headers(request.headers)}")
        else:
            logger.debug(f"{request.method} {request.url}")

        started = time.monotonic()
        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except httpx.TransportError as e:
            elapsed = time.monotonic() - started
            logger.warning(f"{request.method} {request.url} failed after {elapsed:.3f}s: {e!r}")
            raise

        elapsed = time.monotonic() - started
        if 200 <= response.status_code < 300:
            logger.debug(f"{request.method} {request.url} -> {response.status_code} in {elapsed:.3f}s")
        else:
            logger.warning(f"{request.method} {request.url} -> {response.status_code} in {elapsed:.3f}s")
        return response


def redact_headers(headers: httpx.Headers) -> dict[str, str]:
    """Copy headers for logging with credential values masked."""
    return {key: "***" if key.lower() in REDACTED_HEADERS else value for key, value in headers.items()}
