"""Configuration management using Pydantic Settings."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from pokeapi_client import __version__

# Config file location
CONFIG_PATH = Path.home() / ".config" / "pokeapi-client" / "config.yaml"

DEFAULT_BASE_URL = "https://pokeapi.co/api"
DEFAULT_API_VERSION = "v2"
DEFAULT_USER_AGENT = f"pokeapi-client/{__version__}"


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML config file."""

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get field value from YAML config."""
        config = load_config()
        if field_name in config:
            return config[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all config values."""
        return load_config()


class Settings(BaseSettings):
    """Client settings loaded from environment variables and the YAML config."""

    model_config = SettingsConfigDict(
        env_prefix="POKEAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API root, without the version segment",
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        pattern=r"^v[0-9]+$",
        description="API version segment (e.g., v2)",
    )
    timeout: float = Field(default=30.0, gt=0, le=300, description="HTTP timeout in seconds")
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="Client identifier sent with every request",
    )
    retries: int = Field(
        default=0,
        ge=0,
        le=10,
        description="Extra attempts on connection/timeout failures (0 disables retrying)",
    )
    max_connections: int = Field(default=100, ge=1, description="Connection pool size")

    @field_validator("base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so the version segment joins cleanly."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {v}")
        return v.rstrip("/")

    @property
    def api_url(self) -> str:
        """Versioned API root, e.g. https://pokeapi.co/api/v2/"""
        return f"{self.base_url}/{self.api_version}/"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources - priority: init > env > yaml > defaults."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None


def load_config() -> dict[str, Any]:
    """Load config from YAML file.

    Returns:
        Dictionary of config values, empty dict if file doesn't exist or is invalid.
    """
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH) as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError:
        return {}
