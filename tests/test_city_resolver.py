"""Tests for city, country and airport reference lookups."""

import pytest

from itinerary_gaps.normalize.city_resolver import country_for_city, resolve_city, resolve_country
from itinerary_gaps.normalize.iata import iata_to_city, iata_to_country, is_airport_code


class TestResolveCity:

    @pytest.mark.parametrize("raw,expected", [
        ("NYC", "New York"),
        ("  new   york city ", "New York"),
        ("Paris, France", "Paris"),
        ("Paris, FR", "Paris"),
        ("Austin, TX 78701", "Austin"),
        ("münchen", "Munich"),
        ("TOKYO", "Tokyo"),
        ("CDG", "Paris"),
        ("Smallville", "Smallville"),
        ("", ""),
    ])
    def test_canonical_names(self, raw, expected):
        assert resolve_city(raw) == expected

    def test_lowercase_three_letters_is_not_an_airport(self):
        assert resolve_city("cdg") == "cdg"


class TestResolveCountry:

    @pytest.mark.parametrize("raw,expected", [
        ("US", "United States"),
        ("usa", "United States"),
        ("JP", "Japan"),
        ("japan", "Japan"),
        ("España", "Spain"),
        ("Atlantis", "Atlantis"),
    ])
    def test_aliases_and_codes(self, raw, expected):
        assert resolve_country(raw) == expected

    def test_country_for_city(self):
        assert country_for_city("Lyon") == "France"
        assert country_for_city("Kyoto, Japan") == "Japan"
        assert country_for_city("Smallville") is None


class TestIata:

    def test_lookup(self):
        assert iata_to_city("nrt") == "Tokyo"
        assert iata_to_country("NRT") == "Japan"
        assert iata_to_city("JFK") == iata_to_city("LGA") == "New York"

    def test_unknown_code(self):
        assert iata_to_city("ZZZ") is None
        assert iata_to_country("") is None

    @pytest.mark.parametrize("code,expected", [
        ("JFK", True),
        ("jfk", True),
        ("JF", False),
        ("JFK1", False),
        ("J1K", False),
        ("", False),
    ])
    def test_shape(self, code, expected):
        assert is_airport_code(code) == expected
