"""Request execution for GitHub REST clients."""

import logging
from typing import Any, TypeVar

import httpx

from github_client_core.auth import CredentialResolver, Credentials, attach_credentials
from github_client_core.codec import Model, decode_json, decode_model
from github_client_core.errors import CodecError, ConfigError, TransportError, raise_for_status
from github_client_core.errors.handler import DEFAULT_RATE_LIMIT_REMAINING_HEADER, DEFAULT_RATE_LIMIT_RESET_HEADER
from github_client_core.pagination import Paginator
from github_client_core.request import DEFAULT_MEDIA_TYPE, build_request_spec
from github_client_core.transport import LoggingTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "https://api.github.com"
BASE_URL_ENV_VAR = "GITHUB_API_URL"


class GitHubClient:
    """Executes single calls and paginated listings against a GitHub-style REST API.

    Every call is exactly one HTTP request. Failures are raised as
    ``GitHubError`` subclasses: ``TransportError``, ``CodecError``,
    ``RateLimitError``, ``FaultError`` or ``ConfigError``.

    Args:
        user_agent: Value of the User-Agent header (GitHub rejects requests without one)
        credentials: TokenCredentials, ClientCredentials, or None
        base_url: API root; relative paths are resolved against it
        timeout: Per-request timeout in seconds
        media_type: Value of the Accept header
        rate_limit_reset_header: Header holding the rate limit reset epoch
        rate_limit_remaining_header: Header holding the remaining request count
        http_client: Caller-owned httpx client; not closed by this client
        transport: Transport for the internally created httpx client

    Example:
        ```python
        async with GitHubClient("my-app/1.0", TokenCredentials(token)) as github:
            repo = await github.call("/repos/acme/widgets")
            async for label in github.paginate("/repos/acme/widgets/labels"):
                print(label["name"])
        ```
    """

    def __init__(
        self,
        user_agent: str,
        credentials: Credentials = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        media_type: str = DEFAULT_MEDIA_TYPE,
        rate_limit_reset_header: str = DEFAULT_RATE_LIMIT_RESET_HEADER,
        rate_limit_remaining_header: str = DEFAULT_RATE_LIMIT_REMAINING_HEADER,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not user_agent:
            raise ConfigError("A User-Agent is required")
        if not user_agent.isascii():
            raise ConfigError(f"User-Agent must be ASCII: {user_agent!r}")

        self.user_agent = user_agent
        self.credentials = credentials
        self.base_url = _validate_base_url(base_url)
        self.media_type = media_type
        self.rate_limit_reset_header = rate_limit_reset_header
        self.rate_limit_remaining_header = rate_limit_remaining_header

        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            self._http = httpx.AsyncClient(
                timeout=timeout,
                transport=LoggingTransport(wrapped_transport=transport or httpx.AsyncHTTPTransport()),
            )
            self._owns_http = True

    @classmethod
    def from_env(
        cls,
        user_agent: str,
        *,
        resolver: CredentialResolver | None = None,
        require_credentials: bool = False,
        **kwargs: Any,
    ) -> "GitHubClient":
        """Build a client from GITHUB_TOKEN / GITHUB_CLIENT_ID / GITHUB_API_URL settings.

        Raises:
            CredentialNotFoundError: If require_credentials and none are configured
        """
        resolver = resolver or CredentialResolver()
        credentials = resolver.resolve_credentials(required=require_credentials)
        if "base_url" not in kwargs:
            kwargs["base_url"] = resolver.resolve(
                env_var_name=BASE_URL_ENV_VAR, default=DEFAULT_BASE_URL, mask_in_logs=False
            )
        return cls(user_agent, credentials, **kwargs)

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def url_for(self, path: str) -> str:
        """Resolve a resource path against the base URL; absolute URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def is_api_origin(self, url: str) -> bool:
        """Whether ``url`` points at the same scheme, host and port as ``base_url``."""
        try:
            target = httpx.URL(url)
        except httpx.InvalidURL:
            return False
        base = httpx.URL(self.base_url)
        return (target.scheme, target.host, target.port) == (base.scheme, base.host, base.port)

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Issue one request and return the response if it succeeded.

        Raises:
            CodecError: If ``json`` cannot be serialized (nothing is sent) or the
                body cannot be content-decoded
            ConfigError: If the URL or a header value cannot be encoded
            TransportError: On connection, DNS or timeout failures
            RateLimitError: On rate limited responses
            FaultError: On any other non-2xx response
        """
        spec = build_request_spec(
            method,
            self.url_for(path),
            user_agent=self.user_agent,
            params=params,
            json=json,
            media_type=self.media_type,
        )
        if self.is_api_origin(spec.url):
            spec = attach_credentials(self.credentials, spec)
        elif self.credentials is not None:
            logger.debug(f"Not sending credentials to foreign origin {spec.url}")

        try:
            request = spec.to_httpx(self._http)
        except httpx.InvalidURL as e:
            raise ConfigError(f"Invalid request URL {spec.url!r}: {e}") from e
        except UnicodeEncodeError as e:
            raise ConfigError(f"Request headers must be ASCII: {e}") from e

        logger.debug(f"Dispatching {spec.method} {request.url}")
        try:
            response = await self._http.send(request)
        except httpx.DecodingError as e:
            raise CodecError(f"{spec.method} {request.url} returned an undecodable body: {e!r}") from e
        except httpx.RequestError as e:
            raise TransportError(f"{spec.method} {request.url} failed: {e!r}") from e

        raise_for_status(
            response,
            reset_header=self.rate_limit_reset_header,
            remaining_header=self.rate_limit_remaining_header,
        )
        return response

    async def execute(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        model: Model = None,
    ) -> Any:
        """Issue one request and decode its body into ``model``.

        Raises:
            CodecError: Also when a success response has an empty or mismatched body
        """
        response = await self.send(method, path, params=params, json=json)
        return decode_model(model, decode_json(response))

    async def execute_unit(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> None:
        """Issue one side-effecting request whose body, if any, is ignored."""
        await self.send(method, path, params=params, json=json)

    async def call(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        model: Model = None,
        method: str = "GET",
    ) -> Any:
        return await self.execute(method, path, params=params, json=json, model=model)

    def paginate(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        model: Model = None,
    ) -> Paginator:
        """Lazily iterate every item of a paginated list resource."""
        return Paginator(self, path, params=params, model=model)

    async def get(self, path: str, *, params: dict[str, Any] | None = None, model: Model = None) -> Any:
        return await self.execute("GET", path, params=params, model=model)

    async def post(self, path: str, *, json: Any = None, model: Model = None) -> Any:
        return await self.execute("POST", path, json=json, model=model)

    async def patch(self, path: str, *, json: Any = None, model: Model = None) -> Any:
        return await self.execute("PATCH", path, json=json, model=model)

    async def put(self, path: str, *, json: Any = None, model: Model = None) -> Any:
        return await self.execute("PUT", path, json=json, model=model)

    async def delete(self, path: str, *, json: Any = None) -> None:
        await self.execute_unit("DELETE", path, json=json)


def _validate_base_url(base_url: str) -> str:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigError(f"Malformed base URL {base_url!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"Malformed base URL {base_url!r}: expected an absolute http(s) URL")
    return str(url).rstrip("/")
