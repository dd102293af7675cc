"""Exception classes for itinerary gap detection.

Only programmer-error conditions raise. Sparse or ambiguous location data is
never an error; it resolves to a lower-confidence result instead.
"""

from typing import Optional


class ItineraryGapsError(Exception):
    """Base exception for all itinerary_gaps errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InvalidSegmentError(ItineraryGapsError, ValueError):
    """A segment handed to the engine has an invalid shape.

    Examples:
        - missing id or timestamps
        - segment_type not a SegmentType
        - end before start
    """
    pass


class ItineraryLoadError(ItineraryGapsError):
    """An itinerary file or one of its records could not be parsed."""
    pass
