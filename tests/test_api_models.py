"""Tests for API models."""

import pytest
from pydantic import ValidationError

from conftest import load_fixture
from pokeapi_client.api.models import (
    Berry,
    BerryFirmness,
    BerryFlavor,
    NamedResource,
    NamedResourceList,
    Resource,
    ResourceList,
)


class TestResourceModels:
    """Tests for resource references and list envelopes."""

    def test_named_resource_list_from_fixture(self):
        """Parse a page envelope, keeping entry order."""
        page = NamedResourceList.model_validate(load_fixture("berry_list"))

        assert page.count == 64
        assert page.next == "https://pokeapi.co/api/v2/berry?offset=5&limit=5"
        assert page.previous is None
        assert [r.name for r in page.results] == ["cheri", "chesto", "pecha", "rawst", "aspear"]

    def test_count_is_independent_of_page_size(self):
        """count is the collection total, not the page length."""
        page = NamedResourceList.model_validate(load_fixture("berry_list_last"))

        assert page.count == 64
        assert len(page.results) == 4

    def test_missing_links_default_to_none(self):
        """next/previous may be omitted entirely."""
        page = ResourceList.model_validate({"count": 0, "results": []})

        assert page.next is None
        assert page.previous is None

    def test_unnamed_list(self):
        """Unnamed entries only carry a URL."""
        page = ResourceList.model_validate(load_fixture("resource_list"))

        assert all(isinstance(r, Resource) for r in page.results)
        assert page.results[0].url == "https://pokeapi.co/api/v2/berry/1/"

    def test_named_entry_requires_name(self):
        """Named envelopes reject entries without a name."""
        with pytest.raises(ValidationError):
            NamedResourceList.model_validate(load_fixture("resource_list"))

    def test_missing_results_rejected(self):
        """results is required."""
        with pytest.raises(ValidationError):
            NamedResourceList.model_validate({"count": 1})

    def test_frozen(self):
        """Models are immutable."""
        resource = NamedResource(name="cheri", url="https://pokeapi.co/api/v2/berry/1/")

        with pytest.raises(ValidationError):
            resource.name = "chesto"

    def test_equal_references_hash_equal(self):
        """Equal references are interchangeable, including as dict keys."""
        a = Resource(url="https://pokeapi.co/api/v2/berry/1/")
        b = Resource(url="https://pokeapi.co/api/v2/berry/1/")

        assert a == b
        assert hash(a) == hash(b)


class TestBerry:
    """Tests for Berry models."""

    def test_parse_from_fixture(self):
        """Parse Berry from fixture data."""
        berry = Berry.model_validate(load_fixture("berry_1"))

        assert berry.id == 1
        assert berry.name == "cheri"
        assert berry.growth_time == 3
        assert berry.firmness.name == "soft"
        assert berry.natural_gift_type.name == "fire"
        assert len(berry.flavors) == 5

    def test_flavor_potency(self):
        """Potency lookup by flavor name."""
        berry = Berry.model_validate(load_fixture("berry_1"))

        assert berry.potency("spicy") == 10
        assert berry.potency("sweet") == 0
        assert berry.potency("umami") == 0

    def test_flavors_required(self):
        """The flat schema without flavors is rejected."""
        data = load_fixture("berry_1")
        del data["flavors"]

        with pytest.raises(ValidationError):
            Berry.model_validate(data)

    def test_unknown_fields_ignored(self):
        """Fields added server-side do not break decoding."""
        data = load_fixture("berry_1")
        data["added_in_future"] = True

        berry = Berry.model_validate(data)
        assert not hasattr(berry, "added_in_future")

    def test_firmness(self):
        """Parse BerryFirmness with localized names."""
        firmness = BerryFirmness.model_validate(load_fixture("berry_firmness_5"))

        assert firmness.id == 5
        assert firmness.name == "super-hard"
        assert firmness.berries[0].name == "sitrus"
        english = [n.name for n in firmness.names if n.language.name == "en"]
        assert english == ["Super Hard"]

    def test_flavor(self):
        """Parse BerryFlavor."""
        flavor = BerryFlavor.model_validate(load_fixture("berry_flavor_1"))

        assert flavor.name == "spicy"
        assert flavor.contest_type.name == "cool"
        assert flavor.berries[1].berry.name == "cheri"
        assert flavor.berries[1].potency == 10
