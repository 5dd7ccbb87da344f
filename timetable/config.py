"""
Project-wide constants.

Everything that the profiles, the reader, the renderer and the CLI agree on
lives here, so a department code or a time window is changed in one place.
"""

from __future__ import annotations

from pathlib import Path


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# PACKAGE_DIR always points to the folder where this file is located
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_DIR = PACKAGE_DIR / "data" / "resources"
DEFAULT_OUTPUT = Path("schedule.html")


# ---------------------------------------------------------------------------
# Admission rules
# ---------------------------------------------------------------------------

DEPARTMENT_PREFIX = "CENG"
COURSE_CODE_LENGTH = 7  # CENG + 3 digits
GRADUATE_PREFIX = "CENG6"

GRADUATE_MIN_HOUR = 9
GRADUATE_MAX_HOUR = 17

DAILY_COURSE_LIMIT = 3


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

PAGE_TITLE = "Weekly Course Schedules"

TIME_SLOTS = (
    ("08:45", "09:30"),
    ("09:45", "10:30"),
    ("10:45", "11:30"),
    ("11:45", "12:30"),
    ("13:30", "14:15"),
    ("14:30", "15:15"),
    ("15:30", "16:15"),
    ("16:30", "17:15"),
)
