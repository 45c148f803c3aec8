"""Tests for configuration."""

import pytest
import yaml
from pydantic import ValidationError

from pokeapi_client import config
from pokeapi_client.config import Settings, get_settings, load_config


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Defaults point at the public PokeAPI."""
        settings = Settings()

        assert settings.base_url == "https://pokeapi.co/api"
        assert settings.api_version == "v2"
        assert settings.api_url == "https://pokeapi.co/api/v2/"
        assert settings.user_agent == "pokeapi-client/0.1.0"
        assert settings.retries == 0

    def test_env_override(self, monkeypatch):
        """POKEAPI_* environment variables override defaults."""
        monkeypatch.setenv("POKEAPI_TIMEOUT", "5")
        monkeypatch.setenv("POKEAPI_BASE_URL", "http://localhost:8000/api/")

        settings = Settings()

        assert settings.timeout == 5.0
        assert settings.api_url == "http://localhost:8000/api/v2/"

    def test_yaml_config(self):
        """Values from the YAML config file are used."""
        config.CONFIG_PATH.write_text(yaml.dump({"api_version": "v1", "retries": 2}))

        settings = Settings()

        assert settings.api_version == "v1"
        assert settings.retries == 2

    def test_env_beats_yaml(self, monkeypatch):
        """Environment has priority over the YAML file."""
        config.CONFIG_PATH.write_text(yaml.dump({"retries": 2}))
        monkeypatch.setenv("POKEAPI_RETRIES", "3")

        assert Settings().retries == 3

    def test_invalid_yaml_ignored(self):
        """A broken config file falls back to defaults."""
        config.CONFIG_PATH.write_text("retries: [unclosed")

        assert load_config() == {}
        assert Settings().retries == 0

    def test_invalid_base_url(self):
        """Base URL must be http(s)."""
        with pytest.raises(ValidationError):
            Settings(base_url="pokeapi.co/api")

    def test_invalid_api_version(self):
        """Version segment must look like v<N>."""
        with pytest.raises(ValidationError):
            Settings(api_version="latest")

    def test_get_settings_is_cached(self):
        """get_settings returns one shared instance until reset."""
        first = get_settings()

        assert get_settings() is first

        config.reset_settings()
        assert get_settings() is not first
