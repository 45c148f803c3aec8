"""Lazy resource handles and the pagination engine.

A handle wraps one resource reference (a URL, optionally with a name) and
dereferences it on demand. A resource list wraps one page envelope and walks
to neighbouring pages by following the server-supplied ``next``/``previous``
links, so no offset arithmetic happens on the client side.

Named and unnamed variants share their implementation; they differ only in
the reference/envelope models they are built from.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from pokeapi_client.api.client import ApiClient
from pokeapi_client.api.models import (
    NamedResource,
    NamedResourceList,
    Resource,
    ResourceList,
    ResourceListBase,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
RefT = TypeVar("RefT", Resource, NamedResource)


class ApiResource(Generic[ModelT]):
    """Handle to a single remote object of type ``ModelT``."""

    def __init__(self, client: ApiClient, resource: Resource | NamedResource, model: type[ModelT]):
        self._client = client
        self._resource = resource
        self._model = model

    def url(self) -> str:
        """Locator of the referenced object; no network access."""
        return self._resource.url

    async def get(self) -> ModelT:
        """Fetch the referenced object. Not cached: every call hits the API.

        Raises:
            TransportError: The request could not be completed
            DecodeError: The body does not match the model
            UnknownError: The client that created this handle is closed
        """
        return await self._client.fetch_typed(self.url(), self._model)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiResource):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._resource == other._resource
            and self._model is other._model
        )

    def __hash__(self) -> int:
        return hash((type(self), self._resource, self._model))

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self._model.__name__}](url={self.url()!r})"


class ApiNamedResource(ApiResource[ModelT]):
    """Handle that also knows the object's name without fetching it."""

    _resource: NamedResource

    def __init__(self, client: ApiClient, resource: NamedResource, model: type[ModelT]):
        super().__init__(client, resource, model)

    def name(self) -> str:
        """Name of the referenced object; no network access."""
        return self._resource.name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}[{self._model.__name__}]"
            f"(name={self.name()!r}, url={self.url()!r})"
        )


HandleT = TypeVar("HandleT", bound=ApiResource)
ListT = TypeVar("ListT", bound="ResourceListHandle")


class ResourceListHandle(Generic[ModelT, RefT, HandleT]):
    """One page of a listing plus lazy access to the pages around it.

    Subclasses pick the envelope model used to decode adjacent pages and the
    handle type their entries are materialized as.
    """

    envelope_type: ClassVar[type[ResourceListBase]]
    handle_type: ClassVar[type[ApiResource]]

    def __init__(
        self,
        client: ApiClient,
        resource_list: ResourceListBase[RefT],
        model: type[ModelT],
    ):
        self._client = client
        self._resource_list = resource_list
        self._model = model

    def count(self) -> int:
        """Total number of items in the collection, across all pages."""
        return self._resource_list.count

    @property
    def has_next(self) -> bool:
        """Whether a following page exists."""
        return self._resource_list.next is not None

    @property
    def has_previous(self) -> bool:
        """Whether a preceding page exists."""
        return self._resource_list.previous is not None

    def resources(self) -> list[HandleT]:
        """Handles for the entries on this page, in page order."""
        return [
            self.handle_type(self._client, ref, self._model)
            for ref in self._resource_list.results
        ]

    async def _follow(self: ListT, url: str | None) -> ListT | None:
        if url is None:
            return None
        logger.debug(f"Following page link {url}")
        page = await self._client.fetch_typed(url, self.envelope_type)
        return type(self)(self._client, page, self._model)

    async def next_list(self: ListT) -> ListT | None:
        """Fetch the following page, or None if this is the last one."""
        return await self._follow(self._resource_list.next)

    async def previous_list(self: ListT) -> ListT | None:
        """Fetch the preceding page, or None if this is the first one."""
        return await self._follow(self._resource_list.previous)

    async def pages(self: ListT) -> AsyncIterator[ListT]:
        """Yield this page, then each following page as it is fetched."""
        page: ListT | None = self
        while page is not None:
            yield page
            page = await page.next_list()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}[{self._model.__name__}]"
            f"(count={self.count()}, page_size={len(self._resource_list.results)})"
        )


class ApiResourceList(ResourceListHandle[ModelT, Resource, ApiResource[ModelT]]):
    """Page of unnamed resources."""

    envelope_type = ResourceList
    handle_type = ApiResource


class ApiNamedResourceList(ResourceListHandle[ModelT, NamedResource, ApiNamedResource[ModelT]]):
    """Page of named resources."""

    envelope_type = NamedResourceList
    handle_type = ApiNamedResource
