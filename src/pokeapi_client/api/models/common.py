"""Models shared by several resource families."""

from pokeapi_client.api.models.base import PokeApiModel
from pokeapi_client.api.models.resource import NamedResource


class Name(PokeApiModel):
    """Localized name of a resource."""

    name: str
    language: NamedResource
