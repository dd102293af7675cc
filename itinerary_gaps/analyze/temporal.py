"""Decide whether the time between two segments is a night's rest."""

from datetime import timedelta

from itinerary_gaps.config import (
    EVENING_START_HOUR,
    MORNING_CUTOFF_HOUR,
    OVERNIGHT_MIN_HOURS,
)
from itinerary_gaps.models import MOVEMENT_TYPES, Segment


def is_overnight_gap(
    prior: Segment,
    nxt: Segment,
    min_hours: float = OVERNIGHT_MIN_HOURS,
    evening_hour: int = EVENING_START_HOUR,
    morning_cutoff_hour: int = MORNING_CUTOFF_HOUR,
) -> bool:
    """True if the pause between ``prior`` ending and ``nxt`` starting is overnight.

    Either rule suffices:
      - more than ``min_hours`` elapsed and the calendar date changed;
      - ``prior`` ended in the evening (>= 18:00) and ``nxt`` starts the
        next calendar day before 15:00.
    A flight or transfer is never followed by an overnight pause: the
    traveler has to get somewhere from wherever it dropped them.

    Only wall-clock values are compared; no timezone conversion happens.
    """
    if prior.segment_type in MOVEMENT_TYPES:
        return False

    end = prior.end_datetime
    start = nxt.start_datetime
    elapsed = start - end
    if elapsed <= timedelta(0):
        return False

    day_changed = start.date() != end.date()
    if day_changed and elapsed > timedelta(hours=min_hours):
        return True

    next_morning = start.date() == end.date() + timedelta(days=1)
    if next_morning and end.hour >= evening_hour and start.hour < morning_cutoff_hour:
        return True

    return False
