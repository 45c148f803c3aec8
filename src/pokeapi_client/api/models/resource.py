"""Resource references and paginated list envelopes."""

from typing import Generic, TypeVar

from pokeapi_client.api.models.base import PokeApiModel


class Resource(PokeApiModel):
    """Reference to a remote object, identified only by its URL."""

    url: str


class NamedResource(PokeApiModel):
    """Reference to a remote object that also carries its name."""

    name: str
    url: str


RefT = TypeVar("RefT", Resource, NamedResource)


class ResourceListBase(PokeApiModel, Generic[RefT]):
    """One page of a collection listing.

    ``count`` is the total number of items across all pages, not the length
    of ``results``. ``next``/``previous`` are absolute URLs, or None on the
    last/first page.
    """

    count: int
    next: str | None = None
    previous: str | None = None
    results: list[RefT]


class ResourceList(ResourceListBase[Resource]):
    """Page envelope whose entries are unnamed resources."""


class NamedResourceList(ResourceListBase[NamedResource]):
    """Page envelope whose entries are named resources."""
