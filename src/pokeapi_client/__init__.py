"""Typed async client for PokeAPI."""

__version__ = "0.1.0"

from pokeapi_client.api import (  # noqa: E402
    ApiClient,
    DecodeError,
    PokeApi,
    PokeApiError,
    ResourceNotFoundError,
    TransportError,
    UnknownError,
)

__all__ = [
    "__version__",
    "ApiClient",
    "PokeApi",
    "PokeApiError",
    "TransportError",
    "DecodeError",
    "ResourceNotFoundError",
    "UnknownError",
]
