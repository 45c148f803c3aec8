"""Berry models.

See https://pokeapi.co/docs/v2#berries-section
"""

from pydantic import Field

from pokeapi_client.api.models.base import PokeApiModel
from pokeapi_client.api.models.common import Name
from pokeapi_client.api.models.resource import NamedResource


class BerryFlavorMap(PokeApiModel):
    """Potency of one flavor for a berry."""

    potency: int
    flavor: NamedResource


class Berry(PokeApiModel):
    """Berries are small fruits that can provide HP and status condition restoration,
    stat enhancement, and even damage negation when eaten by Pokemon.
    """

    id: int
    name: str
    # Hours per growth stage; trees go through four stages
    growth_time: int
    max_harvest: int
    natural_gift_power: int
    size: int = Field(description="Size in millimeters")
    smoothness: int
    soil_dryness: int
    firmness: NamedResource
    flavors: list[BerryFlavorMap]
    item: NamedResource
    natural_gift_type: NamedResource

    def potency(self, flavor: str) -> int:
        """Potency of the named flavor for this berry, 0 if absent."""
        for entry in self.flavors:
            if entry.flavor.name == flavor:
                return entry.potency
        return 0


class BerryFirmness(PokeApiModel):
    """Berries can be soft or hard."""

    id: int
    name: str
    berries: list[NamedResource]
    names: list[Name]


class FlavorBerryMap(PokeApiModel):
    """Potency of a flavor for one berry."""

    potency: int
    berry: NamedResource


class BerryFlavor(PokeApiModel):
    """Flavors determine whether a Pokemon will benefit or suffer from eating a berry
    based on its nature.
    """

    id: int
    name: str
    berries: list[FlavorBerryMap]
    contest_type: NamedResource
    names: list[Name]
