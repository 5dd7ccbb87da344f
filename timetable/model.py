"""
Central data model definitions used across the project.

This module defines the canonical Course value so that:
- the reader, the schedule chain and the renderer share the same fields
- validation of raw text fields happens in exactly one place
- a Course, once built, can never change
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time as Time
from enum import Enum

from timetable.errors import InvalidCourseError


_TIME_RE = re.compile(r"^([0-9]{2}):([0-9]{2})$")


class Weekday(Enum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def parse(cls, text: str) -> "Weekday":
        """
        Parse a weekday name in any letter case ("monday", "Monday", "MONDAY").
        """
        raw = (text or "").strip()
        if not raw:
            raise InvalidCourseError("day", "cannot be empty")
        try:
            return cls[raw.upper()]
        except KeyError:
            raise InvalidCourseError("day", f"unrecognized weekday {text!r}") from None

    def __str__(self) -> str:
        return self.name


WORKING_DAYS = (Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY)


def parse_time(text: str) -> Time:
    """
    Convert 'HH:mm' to a time of day.

    Both parts must have exactly two digits; seconds are not accepted.
    """
    raw = (text or "").strip()
    if not raw:
        raise InvalidCourseError("time", "cannot be empty")
    match = _TIME_RE.match(raw)
    if not match:
        raise InvalidCourseError("time", f"expected HH:mm, got {text!r}")
    h = int(match.group(1))
    m = int(match.group(2))
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise InvalidCourseError("time", f"hour or minute out of range in {text!r}")
    return Time(hour=h, minute=m)


def format_time(value: Time) -> str:
    return value.strftime("%H:%M")


@dataclass(frozen=True)
class Course:
    """
    Represents one weekly course meeting.

    Equality is structural over all four fields, which is also what
    Schedule.remove() matches on.
    """

    name: str
    day: Weekday
    time: Time
    professor: str

    def __str__(self) -> str:
        return f"{self.name}; {self.day}; {format_time(self.time)}"


def make_course(name: str, day: str, time: str, professor: str) -> Course:
    """
    Build a Course from raw text fields.

    Raises InvalidCourseError if the name is blank, the day is not a weekday
    name or the time is not HH:mm. The course code grammar is NOT checked
    here; that is a policy of specific schedule decorators.
    """
    if name is None or not name.strip():
        raise InvalidCourseError("name", "cannot be empty")

    return Course(
        name=name.strip(),
        day=Weekday.parse(day),
        time=parse_time(time),
        professor=(professor or "").strip(),
    )
