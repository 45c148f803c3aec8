"""Re-export all models."""

from pokeapi_client.api.models.base import PokeApiModel
from pokeapi_client.api.models.berries import (
    Berry,
    BerryFirmness,
    BerryFlavor,
    BerryFlavorMap,
    FlavorBerryMap,
)
from pokeapi_client.api.models.common import Name
from pokeapi_client.api.models.resource import (
    NamedResource,
    NamedResourceList,
    Resource,
    ResourceList,
    ResourceListBase,
)

__all__ = [
    # Base
    "PokeApiModel",
    # Resources
    "NamedResource",
    "NamedResourceList",
    "Resource",
    "ResourceList",
    "ResourceListBase",
    # Common
    "Name",
    # Berries
    "Berry",
    "BerryFirmness",
    "BerryFlavor",
    "BerryFlavorMap",
    "FlavorBerryMap",
]
