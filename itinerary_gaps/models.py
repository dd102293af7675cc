"""Data models for itinerary gap detection."""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class SegmentType(str, Enum):
    FLIGHT = "FLIGHT"
    HOTEL = "HOTEL"
    ACTIVITY = "ACTIVITY"
    MEETING = "MEETING"
    TRANSFER = "TRANSFER"
    CUSTOM = "CUSTOM"


# Segments whose whole purpose is moving the traveler
MOVEMENT_TYPES = frozenset({SegmentType.FLIGHT, SegmentType.TRANSFER})


class MatchMethod(str, Enum):
    AIRPORT_CODE = "airport_code"
    COORDINATES = "coordinates"
    ADDRESS = "address"
    NAME_SIMILARITY = "name_similarity"
    CITY = "city"
    UNKNOWN = "unknown"


class LocaleRelationship(str, Enum):
    SAME_CITY = "same_city"
    CROSS_CITY_SAME_COUNTRY = "cross_city_same_country"
    CROSS_COUNTRY = "cross_country"
    UNKNOWN = "unknown"


class GapType(str, Enum):
    LOCAL_TRANSFER = "LOCAL_TRANSFER"
    DOMESTIC_GAP = "DOMESTIC_GAP"
    INTERNATIONAL_GAP = "INTERNATIONAL_GAP"
    OVERNIGHT_GAP = "OVERNIGHT_GAP"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Address:
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""


@dataclass(frozen=True)
class Location:
    name: str = ""  # free text: venue, airport or property name
    airport_code: str = ""  # IATA code if applicable
    city: str = ""
    country: str = ""
    coordinates: Optional[Coordinates] = None
    address: Optional[Address] = None

    def label(self) -> str:
        """Short human-readable label for descriptions."""
        if self.name and self.airport_code:
            return f"{self.name} ({self.airport_code.upper()})"
        if self.name:
            return self.name
        if self.airport_code:
            return self.airport_code.upper()
        city = self.city or (self.address.city if self.address else "")
        return city or "unknown location"


@dataclass(frozen=True)
class Segment:
    id: str
    segment_type: SegmentType
    start_datetime: datetime
    end_datetime: datetime
    start_location: Optional[Location] = None
    end_location: Optional[Location] = None
    title: str = ""  # activity/meeting/custom name
    flight_number: str = ""
    carrier: str = ""
    property_name: str = ""  # hotel name
    transfer_type: str = ""  # taxi, shuttle, train...

    @property
    def departure_location(self) -> Optional[Location]:
        """Where the traveler is when the segment starts."""
        return self.start_location or self.end_location

    @property
    def arrival_location(self) -> Optional[Location]:
        """Where the traveler is when the segment ends."""
        return self.end_location or self.start_location


@dataclass(frozen=True)
class NormalizedLocationKey:
    """Comparison key derived from a Location for a single detection run."""
    tokens: tuple[str, ...] = ()
    name_tokens: tuple[str, ...] = ()
    airport_code: str = ""
    coordinates: Optional[tuple[float, float]] = None  # rounded (lat, lon)


@dataclass(frozen=True)
class LocationMatch:
    is_same: bool
    method: MatchMethod
    confidence: int = 0


@dataclass
class Gap:
    from_segment_id: str
    to_segment_id: str
    gap_type: GapType
    confidence_score: int
    suggested_transfer_type: str = ""
    description: str = ""
    from_location: Optional[Location] = None
    to_location: Optional[Location] = None
    notes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "fromSegmentId": self.from_segment_id,
            "toSegmentId": self.to_segment_id,
            "gapType": self.gap_type.value,
            "confidenceScore": self.confidence_score,
            "suggestedTransferType": self.suggested_transfer_type,
            "description": self.description,
            "fromLocation": _location_dict(self.from_location),
            "toLocation": _location_dict(self.to_location),
            "notes": list(self.notes),
        }


def _location_dict(loc: Optional[Location]) -> Optional[dict]:
    if loc is None:
        return None
    out: dict = {}
    if loc.name:
        out["name"] = loc.name
    if loc.airport_code:
        out["airportCode"] = loc.airport_code
    if loc.city:
        out["city"] = loc.city
    if loc.country:
        out["country"] = loc.country
    if loc.coordinates:
        out["coordinates"] = {
            "latitude": loc.coordinates.latitude,
            "longitude": loc.coordinates.longitude,
        }
    if loc.address:
        out["address"] = {
            "street": loc.address.street,
            "city": loc.address.city,
            "state": loc.address.state,
            "postalCode": loc.address.postal_code,
            "country": loc.address.country,
        }
    return out
