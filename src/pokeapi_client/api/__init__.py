"""API module for the PokeAPI client."""

from pokeapi_client.api.client import ApiClient
from pokeapi_client.api.endpoint import ApiEndpoint
from pokeapi_client.api.exceptions import (
    DecodeError,
    PokeApiError,
    ResourceNotFoundError,
    TransportError,
    UnknownError,
)
from pokeapi_client.api.models import (
    Berry,
    BerryFirmness,
    BerryFlavor,
    BerryFlavorMap,
    FlavorBerryMap,
    Name,
    NamedResource,
    NamedResourceList,
    PokeApiModel,
    Resource,
    ResourceList,
)
from pokeapi_client.api.pokeapi import PokeApi
from pokeapi_client.api.resource import (
    ApiNamedResource,
    ApiNamedResourceList,
    ApiResource,
    ApiResourceList,
)
from pokeapi_client.api.resources import (
    BerryEndpoint,
    BerryFirmnessEndpoint,
    BerryFlavorEndpoint,
)

__all__ = [
    # Client
    "ApiClient",
    "PokeApi",
    # Exceptions
    "PokeApiError",
    "TransportError",
    "DecodeError",
    "ResourceNotFoundError",
    "UnknownError",
    # Base model
    "PokeApiModel",
    # Models
    "Resource",
    "NamedResource",
    "ResourceList",
    "NamedResourceList",
    "Name",
    "Berry",
    "BerryFirmness",
    "BerryFlavor",
    "BerryFlavorMap",
    "FlavorBerryMap",
    # Handles
    "ApiResource",
    "ApiNamedResource",
    "ApiResourceList",
    "ApiNamedResourceList",
    # Endpoints
    "ApiEndpoint",
    "BerryEndpoint",
    "BerryFirmnessEndpoint",
    "BerryFlavorEndpoint",
]
