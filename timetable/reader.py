"""
Reading course files (text -> course records).

- One file per professor: data/resources/<professor>.txt
- Each non-blank line is one record: CODE;DAY;HH:mm
- The professor name is the file name without extension

Malformed lines are skipped here already, but the schedule core validates
every record again on its own.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional

from timetable.config import DEFAULT_DATA_DIR
from timetable.errors import InvalidCourseError
from timetable.model import make_course

logger = logging.getLogger("timetable.reader")


class CourseRecord(NamedTuple):
    """Raw (name, day, time, professor) fields of one course line."""

    name: str
    day: str
    time: str
    professor: str


# ---------------------------------------------------------------------------
# Line parsing
# ---------------------------------------------------------------------------


def parse_course_line(line: str, professor: str) -> Optional[CourseRecord]:
    """
    Parses exactly one 'CODE;DAY;HH:mm' line into one record.
    Returns None for blank or malformed lines.
    """
    raw = line.strip()
    if not raw:
        return None

    parts = [p.strip() for p in raw.split(";")]

    # We expect exactly 3 parts (code, day, time)
    if len(parts) != 3:
        logger.warning("Skipping malformed line for %s: %r", professor, raw)
        return None

    record = CourseRecord(parts[0], parts[1], parts[2], professor)

    try:
        make_course(*record)
    except InvalidCourseError as exc:
        logger.warning("Skipping invalid course for %s: %s", professor, exc)
        return None

    return record


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def read_course_file(path: str | Path) -> List[CourseRecord]:
    """
    Read all valid records from one professor file.

    Never crashes on a missing or unreadable file: logs and returns [].
    """
    file_path = Path(path)
    professor = file_path.stem

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading file %s: %s", file_path, exc)
        return []

    records: List[CourseRecord] = []
    for line in text.splitlines():
        record = parse_course_line(line, professor)
        if record:
            records.append(record)

    logger.debug("Read %d records from %s", len(records), file_path)
    return records


def read_course_directory(
    directory: str | Path = DEFAULT_DATA_DIR,
    professors: Optional[Iterable[str]] = None,
) -> List[CourseRecord]:
    """
    Read '<professor>.txt' for each given professor, or every *.txt file
    in the directory (sorted by name) when no professors are given.
    """
    base = Path(directory)

    if professors is None:
        files = sorted(base.glob("*.txt"))
    else:
        files = [base / f"{p}.txt" for p in professors]

    records: List[CourseRecord] = []
    for path in files:
        records.extend(read_course_file(path))
    return records
