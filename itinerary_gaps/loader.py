"""Load itinerary segments from the segment provider's JSON shape."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from itinerary_gaps.exceptions import ItineraryLoadError
from itinerary_gaps.models import Address, Coordinates, Location, Segment, SegmentType
from itinerary_gaps.normalize.date_parser import parse_datetime

# Where each segment kind keeps its start/end place
_LOCATION_KEYS = {
    SegmentType.FLIGHT: ("origin", "destination"),
    SegmentType.TRANSFER: ("pickupLocation", "dropoffLocation"),
    SegmentType.HOTEL: ("location", "location"),
    SegmentType.ACTIVITY: ("location", "location"),
    SegmentType.MEETING: ("location", "location"),
    SegmentType.CUSTOM: ("location", "location"),
}


def _str(raw: Dict, *keys: str) -> str:
    for key in keys:
        value = raw.get(key)
        if value:
            return str(value).strip()
    return ""


def location_from_dict(raw: Optional[Dict[str, Any]]) -> Optional[Location]:
    """Convert a raw location dict; returns None for missing or empty input."""
    if not raw:
        return None
    if isinstance(raw, str):
        return Location(name=raw.strip())

    coordinates = None
    coords_raw = raw.get("coordinates")
    if coords_raw:
        try:
            coordinates = Coordinates(
                latitude=float(coords_raw["latitude"]),
                longitude=float(coords_raw["longitude"]),
            )
        except (KeyError, TypeError, ValueError):
            coordinates = None  # unusable coordinates are just missing data

    address = None
    addr_raw = raw.get("address")
    if isinstance(addr_raw, dict):
        address = Address(
            street=_str(addr_raw, "street"),
            city=_str(addr_raw, "city"),
            state=_str(addr_raw, "state"),
            postal_code=_str(addr_raw, "postalCode", "postal_code"),
            country=_str(addr_raw, "country"),
        )

    return Location(
        name=_str(raw, "name"),
        airport_code=_str(raw, "airportCode", "airport_code", "code"),
        city=_str(raw, "city"),
        country=_str(raw, "country"),
        coordinates=coordinates,
        address=address,
    )


def segment_from_dict(raw: Dict[str, Any]) -> Segment:
    """Convert one raw segment record into a Segment.

    Raises:
        ItineraryLoadError: unknown type, missing id or unparseable datetimes.
    """
    if not isinstance(raw, dict):
        raise ItineraryLoadError(f"Segment record must be an object, got {type(raw).__name__}")

    type_str = _str(raw, "type", "segmentType")
    try:
        segment_type = SegmentType(type_str.upper())
    except ValueError:
        raise ItineraryLoadError(f"Unknown segment type {type_str!r}", {"id": raw.get("id")})

    seg_id = _str(raw, "id")
    if not seg_id:
        raise ItineraryLoadError("Segment record has no id", {"type": type_str})

    start = parse_datetime(raw.get("startDatetime") or raw.get("start_datetime"))
    end = parse_datetime(raw.get("endDatetime") or raw.get("end_datetime"))
    if start is None or end is None:
        raise ItineraryLoadError(f"Segment {seg_id!r} has missing or unparseable datetimes", {"id": seg_id})

    start_key, end_key = _LOCATION_KEYS[segment_type]
    start_location = location_from_dict(raw.get("startLocation") or raw.get(start_key))
    end_location = location_from_dict(raw.get("endLocation") or raw.get(end_key))

    prop = raw.get("property") if isinstance(raw.get("property"), dict) else {}
    airline = raw.get("airline")
    carrier = _str(airline, "name") if isinstance(airline, dict) else _str(raw, "airline", "carrier")

    return Segment(
        id=seg_id,
        segment_type=segment_type,
        start_datetime=start,
        end_datetime=end,
        start_location=start_location,
        end_location=end_location,
        title=_str(raw, "name", "title"),
        flight_number=_str(raw, "flightNumber"),
        carrier=carrier,
        property_name=_str(prop, "name") or _str(raw, "propertyName"),
        transfer_type=_str(raw, "transferType"),
    )


def segments_from_list(records: List[Dict[str, Any]]) -> List[Segment]:
    segments = []
    for i, raw in enumerate(records):
        try:
            segments.append(segment_from_dict(raw))
        except ItineraryLoadError as e:
            raise ItineraryLoadError(f"Record {i}: {e.message}", {"index": i, **e.context}) from e
    return segments


def load_itinerary(path: Union[str, Path]) -> List[Segment]:
    """Read a JSON file holding a segment list or an object with a "segments" list."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ItineraryLoadError(f"Cannot read itinerary {path}: {e}", {"path": str(path)}) from e

    if isinstance(data, dict):
        data = data.get("segments")
    if not isinstance(data, list):
        raise ItineraryLoadError(f"Itinerary {path} has no segment list", {"path": str(path)})
    return segments_from_list(data)
