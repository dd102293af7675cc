"""Datetime parsing for itinerary records."""

import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateutil_parser

_NULLISH = ("null", "none", "not specified", "unknown", "")


def parse_datetime(raw) -> Optional[datetime]:
    """Parse a timestamp in many formats, returning a datetime or None.

    Handles:
      - datetime / date objects (dates become midnight)
      - ISO 8601 with or without offset ("2025-01-01T14:00:00Z")
      - "YYYY-MM-DD HH:MM"
      - DDMONYYYY HHMM airline style (e.g. 20JAN2025 1430)
      - anything dateutil understands ("Jan 1 2025 2:00 PM")
    The wall-clock value is kept as written; offsets are preserved, never
    converted.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, date):
        return datetime(raw.year, raw.month, raw.day)
    if not isinstance(raw, str) or raw.strip().lower() in _NULLISH:
        return None

    raw = raw.strip()

    # 1. ISO 8601 (Python 3.11 accepts the trailing Z, older versions don't)
    iso = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    # 2. DDMONYYYY HHMM
    m = re.match(r'^(\d{2})([A-Z]{3})(\d{2,4})\s+(\d{2}):?(\d{2})$', raw, re.I)
    if m:
        day, mon, year, hh, mm = m.groups()
        year = year if len(year) == 4 else f"20{year}"
        try:
            return datetime.strptime(f"{day}{mon.upper()}{year} {hh}{mm}", "%d%b%Y %H%M")
        except ValueError:
            pass

    # 3. dateutil as general fallback
    try:
        return dateutil_parser.parse(raw)
    except (ValueError, OverflowError):
        pass

    return None
