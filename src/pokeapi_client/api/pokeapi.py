"""Entry point bundling every resource family behind one client."""

import logging

import httpx

from pokeapi_client.api.client import ApiClient
from pokeapi_client.api.resources import (
    BerryEndpoint,
    BerryFirmnessEndpoint,
    BerryFlavorEndpoint,
)
from pokeapi_client.config import Settings

logger = logging.getLogger(__name__)


class PokeApi:
    """Async PokeAPI client.

    Usage:
        async with PokeApi() as api:
            cheri = await api.berry.get_by_id(1)

            page = await api.berry.all()
            while page is not None:
                for resource in page.resources():
                    print(resource.name())
                page = await page.next_list()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.client = ApiClient(settings, http_client)
        self.berry = BerryEndpoint(self.client)
        self.berry_firmness = BerryFirmnessEndpoint(self.client)
        self.berry_flavor = BerryFlavorEndpoint(self.client)

    async def __aenter__(self) -> "PokeApi":
        await self.client.__aenter__()
        logger.debug(f"PokeAPI client ready at {self.client.base_url}")
        return self

    async def __aexit__(self, *args) -> None:
        await self.client.aclose()
