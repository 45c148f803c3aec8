"""Berry resource families.

See https://pokeapi.co/docs/v2#berries-section
"""

from pokeapi_client.api.endpoint import ApiEndpoint
from pokeapi_client.api.models import Berry, BerryFirmness, BerryFlavor


class BerryEndpoint(ApiEndpoint[Berry]):
    """Endpoint for https://pokeapi.co/api/v2/berry"""

    name = "berry"
    model = Berry


class BerryFirmnessEndpoint(ApiEndpoint[BerryFirmness]):
    """Endpoint for https://pokeapi.co/api/v2/berry-firmness"""

    name = "berry-firmness"
    model = BerryFirmness


class BerryFlavorEndpoint(ApiEndpoint[BerryFlavor]):
    """Endpoint for https://pokeapi.co/api/v2/berry-flavor"""

    name = "berry-flavor"
    model = BerryFlavor
