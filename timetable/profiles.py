"""
Profile factories.

Each factory is the single composition root for one profile: it creates a
fresh BaseSchedule, picks the constraint and wraps both in a fixed decorator
order. A new profile means a new factory here, never a change to a decorator.

    undergraduate:  Validation(NoClash) -> Logging -> BaseSchedule
    graduate:       CourseCode -> Validation(TimeWindow 9-17) -> Logging -> BaseSchedule
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from timetable.config import GRADUATE_MAX_HOUR, GRADUATE_MIN_HOUR
from timetable.constraints import NoClashConstraint, TimeWindowConstraint
from timetable.decorators import (
    CourseCodeValidationDecorator,
    LoggingScheduleDecorator,
    Sink,
    ValidationScheduleDecorator,
)
from timetable.errors import UnknownProfileError
from timetable.schedule import BaseSchedule, Schedule

ScheduleFactory = Callable[..., Schedule]

UNDERGRADUATE = "undergraduate"
GRADUATE = "graduate"


def create_undergraduate_schedule(sink: Optional[Sink] = None) -> Schedule:
    schedule: Schedule = BaseSchedule()
    schedule = LoggingScheduleDecorator(schedule, sink=sink)
    schedule = ValidationScheduleDecorator(schedule, NoClashConstraint())
    return schedule


def create_graduate_schedule(sink: Optional[Sink] = None) -> Schedule:
    # Graduate courses only during business hours
    constraint = TimeWindowConstraint(GRADUATE_MIN_HOUR, GRADUATE_MAX_HOUR)

    schedule: Schedule = BaseSchedule()
    schedule = LoggingScheduleDecorator(schedule, sink=sink)
    schedule = ValidationScheduleDecorator(schedule, constraint)
    schedule = CourseCodeValidationDecorator(schedule, sink=sink)
    return schedule


PROFILES: Dict[str, ScheduleFactory] = {
    UNDERGRADUATE: create_undergraduate_schedule,
    GRADUATE: create_graduate_schedule,
}


def create_schedule(profile: str, sink: Optional[Sink] = None) -> Schedule:
    """
    Build the decorator chain registered under `profile` (case-insensitive).
    """
    key = (profile or "").strip().lower()
    if key not in PROFILES:
        raise UnknownProfileError(profile)
    return PROFILES[key](sink=sink)
