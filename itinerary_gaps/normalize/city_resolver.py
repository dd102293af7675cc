"""Normalize city and country names to canonical forms."""

import re
from typing import Optional

from itinerary_gaps.normalize.iata import iata_to_city, is_airport_code

# Maps raw variations → canonical city name
_CITY_ALIASES = {
    # New York variants
    "new york city": "New York",
    "new york, ny": "New York",
    "nyc": "New York",
    "manhattan": "New York",
    "brooklyn": "New York",
    "queens": "New York",
    # Los Angeles
    "los angeles, ca": "Los Angeles",
    "la": "Los Angeles",
    "los ángeles": "Los Angeles",
    # San Francisco
    "san francisco, ca": "San Francisco",
    "sf": "San Francisco",
    # Washington
    "washington, dc": "Washington DC",
    "washington d.c.": "Washington DC",
    "washington dc": "Washington DC",
    # Europe
    "barcelona, spain": "Barcelona",
    "london, uk": "London",
    "london, england": "London",
    "paris, france": "Paris",
    "roma": "Rome",
    "milano": "Milan",
    "münchen": "Munich",
    "muenchen": "Munich",
    "wien": "Vienna",
    "lisboa": "Lisbon",
    "warszawa": "Warsaw",
    "varsovia": "Warsaw",
    "firenze": "Florence",
    "venezia": "Venice",
    # Asia
    "tokyo, japan": "Tokyo",
    "tōkyō": "Tokyo",
    "bombay": "Mumbai",
    "delhi": "New Delhi",
    "saigon": "Ho Chi Minh City",
    # Americas
    "são paulo": "Sao Paulo",
    "rio": "Rio de Janeiro",
    "ciudad de méxico": "Mexico City",
    "cdmx": "Mexico City",
    "montréal": "Montreal",
}

# Maps raw variations (ISO codes, local names) → canonical country name
_COUNTRY_ALIASES = {
    "us": "United States",
    "usa": "United States",
    "u.s.": "United States",
    "u.s.a.": "United States",
    "united states of america": "United States",
    "uk": "United Kingdom",
    "gb": "United Kingdom",
    "great britain": "United Kingdom",
    "england": "United Kingdom",
    "scotland": "United Kingdom",
    "fr": "France",
    "es": "Spain",
    "españa": "Spain",
    "de": "Germany",
    "deutschland": "Germany",
    "it": "Italy",
    "italia": "Italy",
    "pt": "Portugal",
    "nl": "Netherlands",
    "the netherlands": "Netherlands",
    "ch": "Switzerland",
    "at": "Austria",
    "ie": "Ireland",
    "jp": "Japan",
    "kr": "South Korea",
    "korea": "South Korea",
    "cn": "China",
    "in": "India",
    "sg": "Singapore",
    "th": "Thailand",
    "ae": "United Arab Emirates",
    "uae": "United Arab Emirates",
    "il": "Israel",
    "au": "Australia",
    "nz": "New Zealand",
    "ca": "Canada",
    "mx": "Mexico",
    "méxico": "Mexico",
    "br": "Brazil",
    "brasil": "Brazil",
    "ar": "Argentina",
    "pe": "Peru",
    "za": "South Africa",
    "eg": "Egypt",
    "ma": "Morocco",
    "tr": "Turkey",
    "türkiye": "Turkey",
    "gr": "Greece",
    "is": "Iceland",
    "dk": "Denmark",
    "se": "Sweden",
    "pr": "Puerto Rico",
    "hk": "Hong Kong",
    "mf": "Saint Martin",
    "sx": "Sint Maarten",
}

CITY_TO_COUNTRY = {
    "New York": "United States",
    "Los Angeles": "United States",
    "San Francisco": "United States",
    "Oakland": "United States",
    "San Jose": "United States",
    "San Diego": "United States",
    "Seattle": "United States",
    "Chicago": "United States",
    "Boston": "United States",
    "Washington DC": "United States",
    "Miami": "United States",
    "Atlanta": "United States",
    "Austin": "United States",
    "Dallas": "United States",
    "Denver": "United States",
    "Las Vegas": "United States",
    "Philadelphia": "United States",
    "Minneapolis": "United States",
    "Honolulu": "United States",
    "Toronto": "Canada",
    "Montreal": "Canada",
    "Vancouver": "Canada",
    "Mexico City": "Mexico",
    "Cancun": "Mexico",
    "London": "United Kingdom",
    "Edinburgh": "United Kingdom",
    "Dublin": "Ireland",
    "Paris": "France",
    "Lyon": "France",
    "Nice": "France",
    "Barcelona": "Spain",
    "Madrid": "Spain",
    "Lisbon": "Portugal",
    "Rome": "Italy",
    "Milan": "Italy",
    "Florence": "Italy",
    "Venice": "Italy",
    "Berlin": "Germany",
    "Munich": "Germany",
    "Frankfurt": "Germany",
    "Amsterdam": "Netherlands",
    "Zurich": "Switzerland",
    "Geneva": "Switzerland",
    "Vienna": "Austria",
    "Copenhagen": "Denmark",
    "Stockholm": "Sweden",
    "Reykjavik": "Iceland",
    "Warsaw": "Poland",
    "Istanbul": "Turkey",
    "Athens": "Greece",
    "Tokyo": "Japan",
    "Osaka": "Japan",
    "Kyoto": "Japan",
    "Seoul": "South Korea",
    "Beijing": "China",
    "Shanghai": "China",
    "Hong Kong": "Hong Kong",
    "Singapore": "Singapore",
    "Bangkok": "Thailand",
    "Ho Chi Minh City": "Vietnam",
    "New Delhi": "India",
    "Mumbai": "India",
    "Dubai": "United Arab Emirates",
    "Tel Aviv": "Israel",
    "Sydney": "Australia",
    "Melbourne": "Australia",
    "Auckland": "New Zealand",
    "Sao Paulo": "Brazil",
    "Rio de Janeiro": "Brazil",
    "Buenos Aires": "Argentina",
    "Lima": "Peru",
    "Johannesburg": "South Africa",
    "Cape Town": "South Africa",
    "Cairo": "Egypt",
    "Marrakech": "Morocco",
    "San Juan": "Puerto Rico",
}

_WHITESPACE = re.compile(r"\s+")


def _clean(raw: str) -> str:
    return _WHITESPACE.sub(" ", raw or "").strip()


def resolve_city(raw: str) -> str:
    """Normalize a raw city string to a canonical city name.

    Tries in order:
    1. Exact alias match (case-insensitive)
    2. IATA code match (if input is exactly three upper-case letters)
    3. Strip ", STATE" / ", COUNTRY" suffixes and try again
    4. Return cleaned-up original
    """
    cleaned = _clean(raw)
    if not cleaned:
        return ""

    lowered = cleaned.lower()

    # 1. Direct alias
    if lowered in _CITY_ALIASES:
        return _CITY_ALIASES[lowered]

    # 2. IATA code
    if cleaned.isupper() and is_airport_code(cleaned):
        city = iata_to_city(cleaned)
        if city:
            return city

    # 3. "Paris, FR" / "Austin, TX 78701" / "Kyoto, Japan"
    base = re.sub(r",\s*[A-Za-z .]+(\s+\d{4,6})?$", "", cleaned).strip()
    if base and base != cleaned:
        base_lower = base.lower()
        if base_lower in _CITY_ALIASES:
            return _CITY_ALIASES[base_lower]
        cleaned = base

    # 4. Known canonical spelling in another case
    for city in CITY_TO_COUNTRY:
        if city.lower() == cleaned.lower():
            return city
    return cleaned


def resolve_country(raw: str) -> str:
    """Normalize a country string (ISO code or name) to a canonical name."""
    cleaned = _clean(raw)
    if not cleaned:
        return ""
    lowered = cleaned.lower()
    if lowered in _COUNTRY_ALIASES:
        return _COUNTRY_ALIASES[lowered]
    for country in set(CITY_TO_COUNTRY.values()):
        if country.lower() == lowered:
            return country
    return cleaned


def country_for_city(city: str) -> Optional[str]:
    """Country of a canonical city name, if the city is known."""
    return CITY_TO_COUNTRY.get(resolve_city(city))
