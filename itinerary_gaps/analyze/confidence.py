"""Score how certain we are that a location change needs a transfer.

Only called for pairs the LocationMatcher judged to be different places.
"""

from typing import Optional, Tuple

from itinerary_gaps.models import (
    GapType,
    LocaleRelationship,
    Location,
    Segment,
    SegmentType,
)
from itinerary_gaps.normalize.city_resolver import (
    country_for_city,
    resolve_city,
    resolve_country,
)
from itinerary_gaps.normalize.iata import iata_to_city, iata_to_country, is_airport_code

DEFAULT_SCORE = 50

_CROSS_CITY = frozenset({
    LocaleRelationship.CROSS_CITY_SAME_COUNTRY,
    LocaleRelationship.CROSS_COUNTRY,
})
_ANY = None  # row applies to every known relationship

# (prior kind, next kind) -> list of (relationships or _ANY, score)
_PAIR_SCORES = {
    (SegmentType.FLIGHT, SegmentType.FLIGHT): [(_CROSS_CITY, 95)],
    (SegmentType.FLIGHT, SegmentType.HOTEL): [(_ANY, 95)],
    (SegmentType.HOTEL, SegmentType.FLIGHT): [(_ANY, 95)],
    (SegmentType.HOTEL, SegmentType.HOTEL): [(_CROSS_CITY, 90)],
    (SegmentType.HOTEL, SegmentType.ACTIVITY): [(_ANY, 85)],
    (SegmentType.ACTIVITY, SegmentType.HOTEL): [(_ANY, 85)],
    (SegmentType.ACTIVITY, SegmentType.ACTIVITY): [
        (frozenset({LocaleRelationship.SAME_CITY}), 80),
        (_CROSS_CITY, 60),
    ],
}

_GAP_TYPES = {
    LocaleRelationship.CROSS_COUNTRY: GapType.INTERNATIONAL_GAP,
    LocaleRelationship.CROSS_CITY_SAME_COUNTRY: GapType.DOMESTIC_GAP,
    LocaleRelationship.SAME_CITY: GapType.LOCAL_TRANSFER,
    LocaleRelationship.UNKNOWN: GapType.UNKNOWN,
}


def resolve_place(location: Optional[Location]) -> Tuple[str, str]:
    """Best-effort (city, country) for a location, both canonical, "" if unknown."""
    if location is None:
        return "", ""

    addr = location.address
    city = location.city or (addr.city if addr else "")
    country = location.country or (addr.country if addr else "")

    if location.airport_code:
        city = city or iata_to_city(location.airport_code) or ""
        country = country or iata_to_country(location.airport_code) or ""

    city = resolve_city(city)
    if not country and city:
        country = country_for_city(city) or ""
    return city, resolve_country(country)


def locale_relationship(a: Optional[Location], b: Optional[Location]) -> LocaleRelationship:
    city_a, country_a = resolve_place(a)
    city_b, country_b = resolve_place(b)

    if country_a and country_b and country_a.lower() != country_b.lower():
        return LocaleRelationship.CROSS_COUNTRY
    if city_a and city_b:
        if city_a.lower() == city_b.lower():
            return LocaleRelationship.SAME_CITY
        if country_a and country_b:
            return LocaleRelationship.CROSS_CITY_SAME_COUNTRY
    return LocaleRelationship.UNKNOWN


def _via_airports(prior: Segment, nxt: Segment) -> bool:
    """Both sides of a flight connection are identified by an airport code."""
    arrived = prior.arrival_location
    departing = nxt.departure_location
    return bool(
        arrived and departing
        and is_airport_code(arrived.airport_code)
        and is_airport_code(departing.airport_code)
    )


def score(prior: Segment, nxt: Segment, relationship: LocaleRelationship) -> int:
    """Look up the 0-100 confidence for a (prior kind, next kind, locale) triple.

    An UNKNOWN locale always gets DEFAULT_SCORE, and a flight connection only
    scores high when both ends are airports.
    """
    if relationship == LocaleRelationship.UNKNOWN:
        return DEFAULT_SCORE
    if (prior.segment_type == SegmentType.FLIGHT and nxt.segment_type == SegmentType.FLIGHT
            and not _via_airports(prior, nxt)):
        return DEFAULT_SCORE
    for relationships, value in _PAIR_SCORES.get((prior.segment_type, nxt.segment_type), []):
        if relationships is _ANY or relationship in relationships:
            return value
    return DEFAULT_SCORE


def gap_type_for(relationship: LocaleRelationship) -> GapType:
    return _GAP_TYPES[relationship]
