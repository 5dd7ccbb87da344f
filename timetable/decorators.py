"""
Schedule decorators.

Each decorator wraps exactly one inner Schedule and exposes the same
add/list/remove/clear methods. By default every call is forwarded unchanged;
a decorator overrides only the calls it wants to intercept.

Call flow for add():
    outermost decorator -> ... -> BaseSchedule

Each stage may
    (a) drop the call silently (course code filter),
    (b) reject it with ConstraintViolationError (constraint validation),
    (c) pass it inward (always, for logging).
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional

from timetable.config import COURSE_CODE_LENGTH, DEPARTMENT_PREFIX
from timetable.constraints import Constraint
from timetable.errors import ConstraintViolationError
from timetable.model import Course
from timetable.schedule import Schedule

logger = logging.getLogger("timetable.schedule")

Sink = Callable[[str], None]


def _default_sink(message: str) -> None:
    logger.info(message)


def course_code_matches(code: str, prefix: str = DEPARTMENT_PREFIX, length: int = COURSE_CODE_LENGTH) -> bool:
    """
    True for codes like "CENG301": the exact prefix followed by ASCII digits,
    `length` characters in total.
    """
    digits = length - len(prefix)
    if not code or digits < 0:
        return False
    return re.fullmatch(re.escape(prefix) + "[0-9]{%d}" % digits, code) is not None


class ScheduleDecorator:
    """Forwards every Schedule call to the wrapped inner schedule."""

    def __init__(self, inner: Schedule) -> None:
        self._inner = inner

    @property
    def inner(self) -> Schedule:
        return self._inner

    def add(self, course: Course) -> None:
        self._inner.add(course)

    def list(self) -> List[Course]:
        return self._inner.list()

    def remove(self, course: Course) -> bool:
        return self._inner.remove(course)

    def clear(self) -> None:
        self._inner.clear()


class CourseCodeValidationDecorator(ScheduleDecorator):
    """
    Keeps only department courses, e.g. "CENG301".

    Non-matching courses are dropped on add (logged, never raised) and hidden
    on list, so the read side mirrors the write side.
    """

    def __init__(
        self,
        inner: Schedule,
        prefix: str = DEPARTMENT_PREFIX,
        length: int = COURSE_CODE_LENGTH,
        sink: Optional[Sink] = None,
    ) -> None:
        super().__init__(inner)
        self.prefix = prefix
        self.length = length
        self._sink = sink or _default_sink

    def matches(self, code: str) -> bool:
        return course_code_matches(code, self.prefix, self.length)

    def add(self, course: Course) -> None:
        if not self.matches(course.name):
            self._sink(f"Skipping non-{self.prefix} course: {course.name}")
            return
        super().add(course)

    def list(self) -> List[Course]:
        return [c for c in super().list() if self.matches(c.name)]


class ValidationScheduleDecorator(ScheduleDecorator):
    """
    Admits a course only if `constraint` holds for the inner schedule as it
    is right now. Fails fast, and the inner schedule is left untouched.
    """

    def __init__(self, inner: Schedule, constraint: Constraint) -> None:
        super().__init__(inner)
        self.constraint = constraint

    def add(self, course: Course) -> None:
        if not self.constraint.is_satisfied(self._inner, course):
            raise ConstraintViolationError(course, self.constraint.describe())
        super().add(course)


class LoggingScheduleDecorator(ScheduleDecorator):
    """Reports every add/remove to the sink, then forwards it."""

    def __init__(self, inner: Schedule, sink: Optional[Sink] = None) -> None:
        super().__init__(inner)
        self._sink = sink or _default_sink

    def add(self, course: Course) -> None:
        self._sink(f"Adding course: {course}")
        super().add(course)

    def remove(self, course: Course) -> bool:
        self._sink(f"Removing course: {course}")
        return super().remove(course)


def describe_chain(schedule: Schedule) -> List[str]:
    """
    Return the class names of a decorator chain, outer -> inner.
    """
    names: List[str] = []
    current: Optional[Schedule] = schedule
    while current is not None:
        names.append(type(current).__name__)
        current = current.inner if isinstance(current, ScheduleDecorator) else None
    return names
