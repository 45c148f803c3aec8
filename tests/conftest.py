"""Shared fixtures for the test suite."""

import json
from pathlib import Path

import pytest

from pokeapi_client import config

FIXTURES_DIR = Path(__file__).parent / "fixtures"

API = "https://pokeapi.co/api/v2"


def load_fixture(name: str) -> dict:
    """Load a JSON fixture by file stem."""
    with open(FIXTURES_DIR / f"{name}.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the user's config file and environment out of the tests."""
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.yaml")
    for var in ("BASE_URL", "API_VERSION", "TIMEOUT", "USER_AGENT", "RETRIES", "MAX_CONNECTIONS"):
        monkeypatch.delenv(f"POKEAPI_{var}", raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def berry_response():
    return load_fixture("berry_1")


@pytest.fixture
def berry_list_response():
    return load_fixture("berry_list")


@pytest.fixture
def berry_list_page2_response():
    return load_fixture("berry_list_offset_5")


@pytest.fixture
def berry_list_last_response():
    return load_fixture("berry_list_last")
