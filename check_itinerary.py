#!/usr/bin/env python3
"""CLI entry point for the itinerary gap checker.

Usage:
    python check_itinerary.py path/to/itinerary.json [--threshold 80] [--format text]

Options:
    ITINERARY         JSON file: a segment list or {"segments": [...]}
    --threshold N     Minimum confidence for a reported gap (default: 80)
    --format FMT      Output format: text, csv, json, all (default: text)
    --output-dir DIR  Directory for csv/json files (default: output/)
    --dry-run         Show counts only, don't write files
    --log-level LVL   DEBUG shows why each segment pair was skipped
"""

import argparse
import sys
from pathlib import Path

from itinerary_gaps.analyze.gap_detector import detect_gaps
from itinerary_gaps.config import CONFIDENCE_THRESHOLD, LOG_LEVEL, OUTPUT_DIR
from itinerary_gaps.exceptions import InvalidSegmentError, ItineraryLoadError
from itinerary_gaps.loader import load_itinerary
from itinerary_gaps.log import configure_logging
from itinerary_gaps.output import format_gaps, gaps_to_csv, to_json


def log(msg):
    print(msg, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find unaccounted-for location changes between itinerary segments.",
    )
    parser.add_argument(
        "itinerary",
        help="Path to the itinerary JSON file",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=CONFIDENCE_THRESHOLD,
        help=f"Minimum confidence score to report a gap (default: {CONFIDENCE_THRESHOLD})",
    )
    parser.add_argument(
        "--format",
        choices=["text", "csv", "json", "all"],
        default="text",
        help="Output format (text, csv, json, all)",
    )
    parser.add_argument(
        "--output-dir",
        default=str(OUTPUT_DIR),
        help="Output directory for csv/json",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show counts only, don't write files",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Logging level (default: {LOG_LEVEL})",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not 0 <= args.threshold <= 100:
        parser.error(f"--threshold must be between 0 and 100, got {args.threshold}")
    configure_logging(args.log_level)

    output_dir = Path(args.output_dir)

    log(f"Loading itinerary: {args.itinerary}")
    try:
        segments = load_itinerary(args.itinerary)
        gaps = detect_gaps(segments, threshold=args.threshold)
    except (ItineraryLoadError, InvalidSegmentError) as e:
        log(f"  ERROR: {e.message}")
        return 2
    log(f"  {len(segments)} segments, {len(gaps)} gaps (confidence >= {args.threshold})")

    if args.dry_run:
        print(f"\nDry run complete. {len(segments)} segments, {len(gaps)} gaps.")
        return 0

    if args.format in ("text", "all"):
        print(format_gaps(gaps, segments))

    if args.format in ("csv", "all"):
        csv_path = output_dir / "gaps.csv"
        gaps_to_csv(gaps, csv_path)
        print(f"CSV written to: {csv_path}")

    if args.format in ("json", "all"):
        json_path = output_dir / "gaps.json"
        to_json(gaps, json_path)
        print(f"JSON written to: {json_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
