"""Base model configuration for all PokeAPI models."""

from pydantic import BaseModel, ConfigDict


class PokeApiModel(BaseModel):
    """Base model with common configuration.

    All PokeAPI models should inherit from this class to get:
    - frozen=True: Values received from the network are never mutated
    - extra="ignore": Ignore unknown fields from API responses
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )
