"""Tests for the text, CSV and JSON gap reports."""

import csv
import json

from itinerary_gaps.analyze.gap_detector import detect_gaps
from itinerary_gaps.models import Gap, GapType, Location
from itinerary_gaps.output import format_gaps, gaps_to_csv, gaps_to_json, to_json


def _gap():
    return Gap(
        from_segment_id="flight-1",
        to_segment_id="hotel-1",
        gap_type=GapType.LOCAL_TRANSFER,
        confidence_score=95,
        suggested_transfer_type="ground transfer",
        description="No transfer from Charles de Gaulle (CDG) to Hotel Le Meurice (local transfer)",
        from_location=Location(name="Charles de Gaulle", airport_code="CDG"),
        to_location=Location(name="Hotel Le Meurice", city="Paris", country="France"),
        notes=["Location check: name_similarity", "Locale: same_city"],
    )


class TestFormatGaps:

    def test_empty(self):
        report = format_gaps([])
        assert "No gaps found" in report

    def test_gap_lines(self, paris_trip):
        flight, _, hotel = paris_trip
        report = format_gaps([_gap()], [flight, hotel])
        assert "flight-1  →  hotel-1" in report
        assert "LOCAL_TRANSFER  [95]" in report
        assert "after 2025-03-02 07:30" in report
        assert "Charles de Gaulle (CDG)  →  Hotel Le Meurice" in report
        assert "· Locale: same_city" in report
        assert report.rstrip().endswith("=" * 72)
        assert "1 gap(s)" in report

    def test_without_segments_omits_time(self):
        assert "after " not in format_gaps([_gap()])


class TestCsv:

    def test_rows(self, tmp_path):
        path = tmp_path / "out" / "gaps.csv"
        gaps_to_csv([_gap()], path)
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 1
        assert rows[0]["gap_type"] == "LOCAL_TRANSFER"
        assert rows[0]["confidence_score"] == "95"
        assert rows[0]["from_location"] == "Charles de Gaulle (CDG)"
        assert rows[0]["to_location"] == "Hotel Le Meurice"
        assert rows[0]["notes"] == "Location check: name_similarity; Locale: same_city"

    def test_header_only_when_empty(self, tmp_path):
        path = tmp_path / "gaps.csv"
        gaps_to_csv([], path)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("from_segment_id,to_segment_id")


class TestJson:

    def test_camel_case_payload(self):
        payload = json.loads(gaps_to_json([_gap()]))
        assert payload["count"] == 1
        gap = payload["gaps"][0]
        assert gap["fromSegmentId"] == "flight-1"
        assert gap["gapType"] == "LOCAL_TRANSFER"
        assert gap["confidenceScore"] == 95
        assert gap["suggestedTransferType"] == "ground transfer"
        assert gap["fromLocation"] == {"name": "Charles de Gaulle", "airportCode": "CDG"}
        assert gap["toLocation"]["country"] == "France"
        assert gap["notes"] == ["Location check: name_similarity", "Locale: same_city"]

    def test_detected_gaps_serialize(self, paris_trip, tmp_path):
        flight, _, hotel = paris_trip
        path = tmp_path / "gaps.json"
        to_json(detect_gaps([flight, hotel]), path)
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload["count"] == 1
        assert payload["gaps"][0]["toSegmentId"] == "hotel-1"
