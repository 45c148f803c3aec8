"""HTTP transport for PokeAPI."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from pokeapi_client.api.exceptions import (
    DecodeError,
    ResourceNotFoundError,
    TransportError,
    UnknownError,
)
from pokeapi_client.config import Settings, get_settings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiClient:
    """Asynchronous GET-only client bound to the versioned API root.

    Paths are resolved against ``<base_url>/<api_version>/``; absolute URLs
    (such as pagination links returned by the server) are requested as-is.
    The API root and the client headers are applied to every request, so an
    injected ``httpx.AsyncClient`` needs no configuration of its own.

    Usage:
        async with ApiClient() as client:
            berry = await client.fetch_typed("berry/1", Berry)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            settings: Settings to use, defaults to the global settings
            http_client: Pre-configured httpx client to share; its lifetime
                stays with the caller
        """
        self.settings = settings or get_settings()
        self._client = http_client
        self._owns_client = False
        # Set on clones: the client whose pool they borrow
        self._source: ApiClient | None = None

    @property
    def base_url(self) -> str:
        """Get the versioned API root."""
        return self.settings.api_url

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Accept": "application/json",
            "User-Agent": self.settings.user_agent,
        }

    async def __aenter__(self) -> "ApiClient":
        """Enter context manager, creating the HTTP client if none was given."""
        if self._client is None and self._source is None:
            self._client = httpx.AsyncClient(
                headers=self.headers,
                limits=httpx.Limits(max_connections=self.settings.max_connections),
                timeout=httpx.Timeout(self.settings.timeout),
            )
            self._owns_client = True
        return self

    async def __aexit__(self, *args) -> None:
        """Exit context manager, closing the HTTP client if we created it."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool if this client owns it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure client is initialized.

        Raises:
            UnknownError: Used before ``async with`` or after it has exited
        """
        if self._source is not None:
            return self._source._ensure_client()
        if self._client is None:
            raise UnknownError(
                "Client not initialized. Use 'async with ApiClient() as client:'"
            )
        return self._client

    def clone(self) -> "ApiClient":
        """Return a copy that shares this client's connection pool.

        The pool is looked up through the original on every request, so a
        clone made before the original is entered works once it is. The copy
        never closes the pool; only the original owner does.
        """
        other = ApiClient(self.settings)
        other._source = self._source or self
        return other

    def _url(self, path_or_url: str) -> httpx.URL:
        """Resolve a relative path against the API root; absolute URLs pass through."""
        return httpx.URL(self.base_url).join(path_or_url)

    async def _send(self, path_or_url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Issue the GET, retrying connection failures only when ``retries`` > 0."""
        client = self._ensure_client()
        retrying = AsyncRetrying(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
            stop=stop_after_attempt(self.settings.retries + 1),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )
        return await retrying(
            client.get, self._url(path_or_url), params=params, headers=self.headers
        )

    async def fetch_raw(
        self, path_or_url: str, params: dict[str, Any] | None = None
    ) -> httpx.Response:
        """GET a path relative to the API root, or an absolute URL.

        Args:
            path_or_url: Relative path (e.g. ``berry/1``) or absolute URL
            params: Optional query parameters

        Returns:
            The raw response, whatever its status code

        Raises:
            TransportError: The request could not be completed
            UnknownError: The HTTP layer failed in some other way
        """
        logger.debug(f"GET {path_or_url} params={params}")
        try:
            return await self._send(path_or_url, params)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out: {path_or_url}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {path_or_url} ({e})") from e
        except (httpx.InvalidURL, RuntimeError) as e:
            raise UnknownError(f"Unexpected error requesting {path_or_url}: {e}") from e

    def _decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Decode a response body into ``model``, raising on error statuses."""
        url = str(response.request.url)
        if response.status_code == 404:
            raise ResourceNotFoundError(url)

        if response.status_code >= 400:
            logger.error(f"API error: {response.status_code} - {response.text}")
            raise DecodeError(
                f"API request failed ({response.status_code})",
                response.status_code,
            )

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.debug(f"Failed to decode {url} as {model.__name__}: {e}")
            raise DecodeError(
                f"Response from {url} does not match {model.__name__}",
                response.status_code,
            ) from e

    async def fetch_typed(self, path_or_url: str, model: type[ModelT]) -> ModelT:
        """GET ``path_or_url`` and decode the body as ``model``.

        Raises:
            TransportError: The request could not be completed
            DecodeError: The body does not match ``model``
        """
        response = await self.fetch_raw(path_or_url)
        return self._decode(response, model)

    async def fetch_typed_paginated(
        self, path: str, offset: int, limit: int, model: type[ModelT]
    ) -> ModelT:
        """Like :meth:`fetch_typed`, with ``offset``/``limit`` query parameters.

        The values are passed through verbatim; range checking is left to the server.
        """
        response = await self.fetch_raw(path, params={"offset": offset, "limit": limit})
        return self._decode(response, model)
