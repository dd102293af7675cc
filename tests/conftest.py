import os
import sys
from datetime import datetime
from itertools import count

import pytest

# Ensure the project root is importable when running without an install
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from itinerary_gaps.models import Location, Segment, SegmentType


_ids = count(1)


def make_segment(
    segment_type,
    start,
    end,
    location=None,
    start_location=None,
    end_location=None,
    seg_id=None,
    **kwargs,
):
    """Build a Segment; ``location`` sets both ends of a single-place segment."""
    if location is not None:
        start_location = start_location or location
        end_location = end_location or location
    return Segment(
        id=seg_id or f"seg-{next(_ids)}",
        segment_type=segment_type,
        start_datetime=start,
        end_datetime=end,
        start_location=start_location,
        end_location=end_location,
        **kwargs,
    )


# ============================================================================
# Shared places
# ============================================================================

@pytest.fixture
def jfk():
    return Location(name="John F. Kennedy International Airport", airport_code="JFK",
                    city="New York", country="US")


@pytest.fixture
def cdg():
    return Location(name="Charles de Gaulle Airport", airport_code="CDG",
                    city="Paris", country="France")


@pytest.fixture
def hotel_paris():
    return Location(name="Hotel Le Meurice", city="Paris", country="France")


@pytest.fixture
def louvre():
    return Location(name="Louvre Museum", city="Paris", country="France")


@pytest.fixture
def eiffel():
    return Location(name="Eiffel Tower", city="Paris", country="France")


@pytest.fixture
def paris_trip(jfk, cdg, hotel_paris):
    """Flight JFK→CDG, transfer CDG→hotel, hotel stay."""
    flight = make_segment(
        SegmentType.FLIGHT,
        datetime(2025, 3, 1, 18, 0),
        datetime(2025, 3, 2, 7, 30),
        start_location=jfk,
        end_location=cdg,
        seg_id="flight-1",
        flight_number="AF23",
    )
    transfer = make_segment(
        SegmentType.TRANSFER,
        datetime(2025, 3, 2, 8, 30),
        datetime(2025, 3, 2, 9, 30),
        start_location=Location(name="Charles de Gaulle Airport", airport_code="CDG"),
        end_location=hotel_paris,
        seg_id="transfer-1",
        transfer_type="taxi",
    )
    hotel = make_segment(
        SegmentType.HOTEL,
        datetime(2025, 3, 2, 10, 0),
        datetime(2025, 3, 5, 11, 0),
        location=hotel_paris,
        seg_id="hotel-1",
        property_name="Le Meurice",
    )
    return flight, transfer, hotel
