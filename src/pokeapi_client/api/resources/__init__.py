"""API resource families."""

from pokeapi_client.api.resources.berries import (
    BerryEndpoint,
    BerryFirmnessEndpoint,
    BerryFlavorEndpoint,
)

__all__ = [
    "BerryEndpoint",
    "BerryFirmnessEndpoint",
    "BerryFlavorEndpoint",
]
