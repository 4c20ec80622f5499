"""Lazy, cursor-following pagination over ``Link`` headers.

GitHub list endpoints return one page per request and point at the next one
with a response header such as::

    Link: <https://api.github.com/repositories/1/labels?page=2>; rel="next",
          <https://api.github.com/repositories/1/labels?page=5>; rel="last"

``Paginator`` turns that into a single async sequence. Pages are fetched one
at a time, only when the consumer has drained the previous page, and the
``rel="next"`` URL is the only signal that more data exists.

Example:
    ```python
    async for label in client.paginate("/repos/acme/widgets/labels", model=Label):
        print(label.name)
    ```
"""

import asyncio
import logging
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx

from github_client_core.codec import Model, decode_page

if TYPE_CHECKING:
    from github_client_core.client import GitHubClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

_END = object()


class PageState(Enum):
    """Lifecycle of a paginator."""

    START = "start"
    FETCHING = "fetching"
    BUFFERED = "buffered"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


def next_page_url(response: httpx.Response) -> str | None:
    """Return the ``rel="next"`` URL of the response's ``Link`` header, if any.

    A missing header, a missing ``next`` relation or an unparseable URL all
    mean there are no more pages.
    """
    link = response.links.get("next")
    if not link:
        return None

    url = link.get("url", "").strip()
    if not url:
        return None
    try:
        httpx.URL(url)
    except httpx.InvalidURL:
        logger.warning(f"Ignoring malformed next-page link: {url!r}")
        return None
    return url


class Paginator(Generic[T]):
    """Forward-only async sequence over every item of a paginated resource.

    Not safe for concurrent consumption of the same instance.

    Args:
        client: Client used to fetch each page
        path: First-page resource path
        params: Query parameters, sent with the first request only; later
            cursor URLs already carry them
        model: Shape each item is decoded into
    """

    def __init__(
        self,
        client: "GitHubClient",
        path: str,
        *,
        params: dict[str, Any] | None = None,
        model: Model = None,
    ) -> None:
        self._client = client
        self._cursor: str | None = path
        self._params = params
        self._model = model
        self._buffer: deque[T] = deque()
        self._state = PageState.START
        self.pages_fetched = 0

    @property
    def state(self) -> PageState:
        return self._state

    @property
    def cursor(self) -> str | None:
        """URL of the next page to fetch, or None once the last page has been seen."""
        return self._cursor

    def __aiter__(self) -> "Paginator[T]":
        return self

    async def __anext__(self) -> T:
        item = await self._pull()
        if item is _END:
            raise StopAsyncIteration
        return item

    async def next(self) -> T | None:
        """Return the next item, or None at the end of the sequence.

        Raises:
            GitHubError: Once, for the page fetch that failed; afterwards the
                paginator reports end-of-sequence.
        """
        item = await self._pull()
        return None if item is _END else item

    async def collect(self) -> list[T]:
        """Drain the remaining items into a list."""
        return [item async for item in self]

    async def _pull(self) -> Any:
        while not self._buffer:
            if self._state in (PageState.EXHAUSTED, PageState.FAILED):
                return _END
            if self._cursor is None:
                self._state = PageState.EXHAUSTED
                return _END
            await self._fetch_page()

        item = self._buffer.popleft()
        if not self._buffer and self._cursor is None:
            self._state = PageState.EXHAUSTED
        return item

    async def _fetch_page(self) -> None:
        url = self._cursor
        params = self._params if self.pages_fetched == 0 else None
        previous_state = self._state
        self._state = PageState.FETCHING
        logger.debug(f"Fetching page {self.pages_fetched + 1} from {url}")

        try:
            response = await self._client.send("GET", url, params=params)
            items = decode_page(response, self._model)
        except asyncio.CancelledError:
            self._state = previous_state
            raise
        except Exception:
            self._cursor = None
            self._buffer.clear()
            self._state = PageState.FAILED
            raise

        self.pages_fetched += 1
        self._cursor = next_page_url(response)
        self._buffer.extend(items)
        self._state = PageState.BUFFERED
        logger.debug(
            f"Page {self.pages_fetched} returned {len(items)} items"
            + ("" if self._cursor else ", no further pages")
        )
