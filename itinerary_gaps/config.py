"""Configuration: .env loading, paths, tunable thresholds."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of itinerary_gaps/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Surfacing ---
CONFIDENCE_THRESHOLD = int(os.getenv("GAP_CONFIDENCE_THRESHOLD", "80"))  # minimum score for an emitted gap

# --- Location matching ---
NAME_OVERLAP_THRESHOLD = float(os.getenv("NAME_OVERLAP_THRESHOLD", "0.70"))  # ratio must be strictly above
FUZZY_MAX_EDIT_DISTANCE = int(os.getenv("FUZZY_MAX_EDIT_DISTANCE", "1"))
FUZZY_MIN_TOKEN_LENGTH = int(os.getenv("FUZZY_MIN_TOKEN_LENGTH", "4"))
COORDINATE_MATCH_METERS = float(os.getenv("COORDINATE_MATCH_METERS", "100"))
EARTH_RADIUS_KM = 6371.0

# --- Overnight heuristic ---
OVERNIGHT_MIN_HOURS = float(os.getenv("OVERNIGHT_MIN_HOURS", "8"))
EVENING_START_HOUR = int(os.getenv("EVENING_START_HOUR", "18"))
MORNING_CUTOFF_HOUR = int(os.getenv("MORNING_CUTOFF_HOUR", "15"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# --- Paths ---
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(PROJECT_ROOT / "output")))
