"""Detect geographic continuity gaps between consecutive itinerary segments."""

from datetime import datetime
from typing import List, Optional, Sequence

from itinerary_gaps.analyze.confidence import gap_type_for, locale_relationship, score
from itinerary_gaps.analyze.location_matcher import LocationMatcher
from itinerary_gaps.analyze.temporal import is_overnight_gap
from itinerary_gaps.config import CONFIDENCE_THRESHOLD
from itinerary_gaps.exceptions import InvalidSegmentError
from itinerary_gaps.log import get_logger
from itinerary_gaps.models import (
    Gap,
    GapType,
    Location,
    LocationMatch,
    MatchMethod,
    Segment,
    SegmentType,
)

logger = get_logger(__name__)

_GAP_LABELS = {
    GapType.LOCAL_TRANSFER: "local transfer",
    GapType.DOMESTIC_GAP: "domestic gap",
    GapType.INTERNATIONAL_GAP: "international gap",
    GapType.UNKNOWN: "location gap",
}


def validate_segment(segment: Segment, index: int) -> None:
    """Fail fast on shapes only a caller bug can produce."""
    context = {"index": index, "segment_id": getattr(segment, "id", None)}
    if not getattr(segment, "id", None):
        raise InvalidSegmentError(f"Segment at position {index} has no id", context)
    if not isinstance(getattr(segment, "segment_type", None), SegmentType):
        raise InvalidSegmentError(
            f"Segment {segment.id!r} has invalid type {getattr(segment, 'segment_type', None)!r}",
            context,
        )
    start = getattr(segment, "start_datetime", None)
    end = getattr(segment, "end_datetime", None)
    if not isinstance(start, datetime) or not isinstance(end, datetime):
        raise InvalidSegmentError(f"Segment {segment.id!r} is missing start or end datetime", context)
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise InvalidSegmentError(f"Segment {segment.id!r} mixes naive and aware datetimes", context)
    if end < start:
        raise InvalidSegmentError(f"Segment {segment.id!r} ends before it starts", context)


def _validate_all(segments: Sequence[Segment]) -> None:
    for i, seg in enumerate(segments):
        validate_segment(seg, i)
    aware = {seg.start_datetime.tzinfo is not None for seg in segments}
    if len(aware) > 1:
        raise InvalidSegmentError("Itinerary mixes naive and timezone-aware datetimes")


def _covering_transfer(
    segments: Sequence[Segment],
    prior: Segment,
    nxt: Segment,
    prior_end: Optional[Location],
    next_start: Optional[Location],
    matcher: LocationMatcher,
) -> Optional[Segment]:
    """An existing TRANSFER that runs from prior's end place to next's start place in between."""
    for seg in segments:
        if seg.segment_type != SegmentType.TRANSFER:
            continue
        if seg.start_datetime < prior.end_datetime or seg.end_datetime > nxt.start_datetime:
            continue
        if not matcher.same_location(seg.departure_location, prior_end).is_same:
            continue
        if not matcher.same_location(seg.arrival_location, next_start).is_same:
            continue
        return seg
    return None


def suggested_transfer_type(prior: Segment, nxt: Segment) -> str:
    if prior.segment_type == SegmentType.FLIGHT and nxt.segment_type == SegmentType.FLIGHT:
        return "flight"
    return "ground transfer"


def describe_gap(
    gap_type: GapType,
    from_location: Optional[Location],
    to_location: Optional[Location],
) -> str:
    src = from_location.label() if from_location else "unknown location"
    dst = to_location.label() if to_location else "unknown location"
    return f"No transfer from {src} to {dst} ({_GAP_LABELS[gap_type]})"


def detect_gaps(
    segments: Sequence[Segment],
    threshold: int = CONFIDENCE_THRESHOLD,
) -> List[Gap]:
    """Return the gaps between consecutive segments, in chronological order.

    A pair yields a gap only if it is not an overnight pause, no existing
    transfer covers it, the two places are known to differ, and the pair
    scores at least ``threshold``. Pairs whose locations are too sparse to
    compare are skipped. Lower-scoring pairs are dropped; there is no warning tier.

    Raises:
        InvalidSegmentError: if a segment has an invalid shape.
    """
    if not segments:
        return []

    _validate_all(segments)

    # sorted() is stable, so ties keep their input order
    ordered = sorted(segments, key=lambda s: s.start_datetime)
    matcher = LocationMatcher()  # normalization memo lives for this call only

    gaps: List[Gap] = []
    for prior, nxt in zip(ordered, ordered[1:]):
        log = logger.bind(from_segment=prior.id, to_segment=nxt.id)
        prior_end = prior.arrival_location
        next_start = nxt.departure_location

        if is_overnight_gap(prior, nxt):
            log.debug("pair_skipped", reason=GapType.OVERNIGHT_GAP.value)
            continue

        transfer = _covering_transfer(segments, prior, nxt, prior_end, next_start, matcher)
        if transfer is not None:
            log.debug("pair_skipped", reason="covered_by_transfer", transfer=transfer.id)
            continue

        match: LocationMatch = matcher.same_location(prior_end, next_start)
        if match.is_same:
            log.debug("pair_skipped", reason="same_location", method=match.method.value,
                      match_confidence=match.confidence)
            continue
        if match.method == MatchMethod.UNKNOWN:
            log.debug("pair_skipped", reason="insufficient_data")
            continue

        relationship = locale_relationship(prior_end, next_start)
        confidence = score(prior, nxt, relationship)
        if confidence < threshold:
            log.debug("pair_skipped", reason="below_threshold", confidence=confidence,
                      locale=relationship.value)
            continue

        gap_type = gap_type_for(relationship)
        gap = Gap(
            from_segment_id=prior.id,
            to_segment_id=nxt.id,
            gap_type=gap_type,
            confidence_score=confidence,
            suggested_transfer_type=suggested_transfer_type(prior, nxt),
            description=describe_gap(gap_type, prior_end, next_start),
            from_location=prior_end,
            to_location=next_start,
            notes=[f"Location check: {match.method.value}", f"Locale: {relationship.value}"],
        )
        log.debug("gap_detected", gap_type=gap_type.value, confidence=confidence)
        gaps.append(gap)

    return gaps
