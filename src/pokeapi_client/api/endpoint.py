"""Base endpoint for API resource families."""

import logging
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from pokeapi_client.api.client import ApiClient
from pokeapi_client.api.models import NamedResourceList
from pokeapi_client.api.resource import ApiNamedResourceList

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiEndpoint(Generic[ModelT]):
    """Base class for resource family endpoints.

    A family is declared by subclassing and setting two class attributes:
    - name: The URL path segment (e.g. "berry")
    - model: The model objects of this family decode into

    All families are reachable through the same URL patterns:
    - listing: <api>/<name>?offset=<o>&limit=<l>
    - by id:   <api>/<name>/<id>
    - by name: <api>/<name>/<name>
    """

    name: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, client: ApiClient):
        """Initialize the endpoint.

        Args:
            client: Transport shared by every handle this endpoint creates
        """
        self._client = client

    @property
    def client(self) -> ApiClient:
        return self._client

    def _wrap(self, resource_list: NamedResourceList) -> ApiNamedResourceList[ModelT]:
        return ApiNamedResourceList(self._client, resource_list, self.model)

    async def all(self) -> ApiNamedResourceList[ModelT]:
        """Get the first page of the listing, with the server's default page size (20)."""
        resource_list = await self._client.fetch_typed(self.name, NamedResourceList)
        logger.debug(f"{self.name}: {resource_list.count} resources in total")
        return self._wrap(resource_list)

    async def all_paginated(self, offset: int, limit: int) -> ApiNamedResourceList[ModelT]:
        """Get one page of the listing.

        Args:
            offset: Index of the first resource on the page
            limit: Page size

        Out-of-range values are not checked here; the server decides what they return.
        """
        resource_list = await self._client.fetch_typed_paginated(
            self.name, offset, limit, NamedResourceList
        )
        return self._wrap(resource_list)

    async def get_by_id(self, id: int) -> ModelT:
        """Get a resource by its numeric id."""
        return await self._client.fetch_typed(f"{self.name}/{id}", self.model)

    async def get_by_name(self, name: str) -> ModelT:
        """Get a resource by its name."""
        return await self._client.fetch_typed(f"{self.name}/{name}", self.model)
