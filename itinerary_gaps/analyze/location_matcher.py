"""Decide whether two locations are the same place.

Signals are evaluated as a priority chain; the first one that yields a
verdict wins and the rest are not consulted:

    1. airport code   (equal -> same @100, different -> different, stop)
    2. coordinates    (<= 100 m -> same @95, otherwise fall through)
    3. street address (street + postal code equal -> same @90)
    4. name tokens    (overlap > 0.70 -> same @70..100)
    5. city only      (no name tokens, same city -> same @60)
    6. nothing usable -> not same, UNKNOWN @0 ("insufficient data")
"""

import math
import re
from typing import Dict, Optional

from itinerary_gaps.config import (
    COORDINATE_MATCH_METERS,
    EARTH_RADIUS_KM,
    FUZZY_MAX_EDIT_DISTANCE,
    FUZZY_MIN_TOKEN_LENGTH,
    NAME_OVERLAP_THRESHOLD,
)
from itinerary_gaps.models import (
    Location,
    LocationMatch,
    MatchMethod,
    NormalizedLocationKey,
)
from itinerary_gaps.normalize.city_resolver import resolve_city
from itinerary_gaps.normalize.iata import is_airport_code
from itinerary_gaps.normalize.location_normalizer import (
    display_text,
    normalize,
    overlap_ratio,
    tokenize,
)

AIRPORT_MATCH_CONFIDENCE = 100
COORDINATE_MATCH_CONFIDENCE = 95
ADDRESS_MATCH_CONFIDENCE = 90
NAME_MATCH_MIN_CONFIDENCE = 70
CITY_MATCH_CONFIDENCE = 60

_NO_MATCH = LocationMatch(is_same=False, method=MatchMethod.UNKNOWN, confidence=0)
_WHITESPACE = re.compile(r"\s+")


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points, in meters."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c * 1000.0


def _collapse(value: str) -> str:
    return _WHITESPACE.sub(" ", (value or "").lower()).strip()


def _address_key(location: Location) -> Optional[tuple]:
    addr = location.address
    if addr is None:
        return None
    street = _collapse(addr.street)
    postal = _collapse(addr.postal_code)
    if not street and not postal:
        return None
    return street, postal


def _city_of(location: Location) -> str:
    city = location.city or (location.address.city if location.address else "")
    return resolve_city(city).lower()


def name_confidence(ratio: float, threshold: float = NAME_OVERLAP_THRESHOLD) -> int:
    """Scale an overlap ratio linearly: threshold -> 70, 1.0 -> 100."""
    if threshold >= 1.0:
        return 100
    span = 100 - NAME_MATCH_MIN_CONFIDENCE
    scaled = NAME_MATCH_MIN_CONFIDENCE + span * (ratio - threshold) / (1.0 - threshold)
    return int(round(max(NAME_MATCH_MIN_CONFIDENCE, min(100.0, scaled))))


class LocationMatcher:
    """Same-place matcher with a normalization memo scoped to one instance.

    Create one per detection run; the memo is keyed by object identity and
    must not outlive the locations it was built from.
    """

    def __init__(
        self,
        coordinate_meters: float = COORDINATE_MATCH_METERS,
        overlap_threshold: float = NAME_OVERLAP_THRESHOLD,
        max_edit_distance: int = FUZZY_MAX_EDIT_DISTANCE,
        min_fuzzy_length: int = FUZZY_MIN_TOKEN_LENGTH,
    ):
        self.coordinate_meters = coordinate_meters
        self.overlap_threshold = overlap_threshold
        self.max_edit_distance = max_edit_distance
        self.min_fuzzy_length = min_fuzzy_length
        self._keys: Dict[int, NormalizedLocationKey] = {}

    def key_for(self, location: Location) -> NormalizedLocationKey:
        key = self._keys.get(id(location))
        if key is None:
            coords = None
            if location.coordinates is not None:
                coords = (
                    round(location.coordinates.latitude, 4),
                    round(location.coordinates.longitude, 4),
                )
            code = (location.airport_code or "").strip().upper()
            key = NormalizedLocationKey(
                tokens=tuple(normalize(display_text(location))),
                name_tokens=tuple(tokenize(location.name)),
                airport_code=code if is_airport_code(code) else "",
                coordinates=coords,
            )
            self._keys[id(location)] = key
        return key

    def same_location(self, a: Optional[Location], b: Optional[Location]) -> LocationMatch:
        if a is None or b is None:
            return _NO_MATCH

        key_a = self.key_for(a)
        key_b = self.key_for(b)

        # 1. Airport codes are unambiguous either way
        if key_a.airport_code and key_b.airport_code:
            return LocationMatch(
                is_same=key_a.airport_code == key_b.airport_code,
                method=MatchMethod.AIRPORT_CODE,
                confidence=AIRPORT_MATCH_CONFIDENCE,
            )

        # 2. Coordinates: close means same; far may just be an imprecise centroid
        if a.coordinates is not None and b.coordinates is not None:
            meters = haversine_meters(
                a.coordinates.latitude, a.coordinates.longitude,
                b.coordinates.latitude, b.coordinates.longitude,
            )
            if meters <= self.coordinate_meters:
                return LocationMatch(True, MatchMethod.COORDINATES, COORDINATE_MATCH_CONFIDENCE)

        # 3. Structured address
        addr_a = _address_key(a)
        addr_b = _address_key(b)
        if addr_a is not None and addr_b is not None and addr_a == addr_b:
            return LocationMatch(True, MatchMethod.ADDRESS, ADDRESS_MATCH_CONFIDENCE)

        # 4. Fuzzy name overlap
        if key_a.name_tokens and key_b.name_tokens:
            ratio = overlap_ratio(
                key_a.tokens, key_b.tokens,
                max_distance=self.max_edit_distance,
                min_length=self.min_fuzzy_length,
            )
            if ratio > self.overlap_threshold:
                return LocationMatch(
                    True,
                    MatchMethod.NAME_SIMILARITY,
                    name_confidence(ratio, self.overlap_threshold),
                )
            return LocationMatch(False, MatchMethod.NAME_SIMILARITY, 0)

        # 5. Last resort: a city has many venues, so this is weak
        city_a = _city_of(a)
        city_b = _city_of(b)
        if city_a and city_a == city_b:
            return LocationMatch(True, MatchMethod.CITY, CITY_MATCH_CONFIDENCE)

        return _NO_MATCH


def same_location(a: Optional[Location], b: Optional[Location]) -> LocationMatch:
    """One-off comparison with a throwaway matcher."""
    return LocationMatcher().same_location(a, b)
