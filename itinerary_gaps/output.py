"""Output formatters: CSV, JSON and a human-readable gap report."""

import csv
import json
from pathlib import Path
from typing import List, Optional

from itinerary_gaps.models import Gap, Location, Segment


def _location_str(loc: Optional[Location]) -> str:
    return loc.label() if loc else "?"


# ---------------------------------------------------------------------------
# Human-readable report
# ---------------------------------------------------------------------------

def format_gaps(gaps: List[Gap], segments: Optional[List[Segment]] = None) -> str:
    """Produce a line-by-line report of detected gaps."""
    lines = []
    lines.append("=" * 72)
    lines.append("  ITINERARY CONTINUITY — Detected Gaps")
    lines.append("=" * 72)

    by_id = {s.id: s for s in segments or []}

    if not gaps:
        lines.append("")
        lines.append("  No gaps found: every location change is accounted for.")
        lines.append("")
        return "\n".join(lines)

    for gap in gaps:
        prior = by_id.get(gap.from_segment_id)
        when = ""
        if prior is not None:
            when = f"  after {prior.end_datetime.strftime('%Y-%m-%d %H:%M')}"

        lines.append("")
        lines.append(f"  {gap.from_segment_id}  →  {gap.to_segment_id}  |  {gap.gap_type.value}  [{gap.confidence_score}]{when}")
        lines.append(f"    {_location_str(gap.from_location)}  →  {_location_str(gap.to_location)}")
        lines.append(f"    Suggested: {gap.suggested_transfer_type}")
        lines.append(f"    {gap.description}")
        for note in gap.notes:
            lines.append(f"    · {note}")

    lines.append("")
    lines.append("=" * 72)
    lines.append(f"  {len(gaps)} gap(s)")
    lines.append("=" * 72)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

_CSV_FIELDS = [
    "from_segment_id",
    "to_segment_id",
    "gap_type",
    "confidence_score",
    "suggested_transfer_type",
    "from_location",
    "to_location",
    "description",
    "notes",
]


def gaps_to_csv(gaps: List[Gap], path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=_CSV_FIELDS)
        writer.writeheader()
        for g in gaps:
            writer.writerow({
                "from_segment_id": g.from_segment_id,
                "to_segment_id": g.to_segment_id,
                "gap_type": g.gap_type.value,
                "confidence_score": g.confidence_score,
                "suggested_transfer_type": g.suggested_transfer_type,
                "from_location": _location_str(g.from_location),
                "to_location": _location_str(g.to_location),
                "description": g.description,
                "notes": "; ".join(g.notes),
            })


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def gaps_to_json(gaps: List[Gap]) -> str:
    return json.dumps(
        {"gaps": [g.to_dict() for g in gaps], "count": len(gaps)},
        indent=2,
        ensure_ascii=False,
    )


def to_json(gaps: List[Gap], path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(gaps_to_json(gaps), encoding="utf-8")
