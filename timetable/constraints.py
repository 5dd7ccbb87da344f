"""
Admission constraints.

A constraint decides whether a candidate course may join a schedule, given
what the schedule currently lists. Constraints never mutate the schedule.

New rules are added here as new classes; the validating decorator that
consumes them does not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

from timetable.config import DAILY_COURSE_LIMIT
from timetable.model import Course
from timetable.schedule import Schedule


class Constraint(Protocol):
    def is_satisfied(self, schedule: Schedule, candidate: Course) -> bool: ...

    def describe(self) -> str: ...


@dataclass(frozen=True)
class NoClashConstraint:
    """
    No two courses on the same day at the same start time.

    Only exact (day, time) equality clashes: 10:00 and 10:30 on the same
    day are allowed side by side.
    """

    def is_satisfied(self, schedule: Schedule, candidate: Course) -> bool:
        return not any(
            existing.day == candidate.day and existing.time == candidate.time for existing in schedule.list()
        )

    def describe(self) -> str:
        return "no time clash"


@dataclass(frozen=True)
class TimeWindowConstraint:
    """
    The course must start within [min_hour, max_hour], both ends inclusive.
    Minutes are ignored, so with max_hour=17 a 17:45 course still fits.
    """

    min_hour: int
    max_hour: int

    def __post_init__(self) -> None:
        if not (0 <= self.min_hour <= 23 and 0 <= self.max_hour <= 23):
            raise ValueError(f"Hours must be within 0..23, got {self.min_hour}..{self.max_hour}")
        if self.min_hour > self.max_hour:
            raise ValueError(f"min_hour {self.min_hour} is after max_hour {self.max_hour}")

    def is_satisfied(self, schedule: Schedule, candidate: Course) -> bool:
        return self.min_hour <= candidate.time.hour <= self.max_hour

    def describe(self) -> str:
        return f"start hour within {self.min_hour:02d}-{self.max_hour:02d}"


@dataclass(frozen=True)
class DailyBalanceConstraint:
    """
    At most `limit` courses per day: satisfied while fewer than `limit`
    listed courses share the candidate's day.
    """

    limit: int = DAILY_COURSE_LIMIT

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"Daily limit must be at least 1, got {self.limit}")

    def is_satisfied(self, schedule: Schedule, candidate: Course) -> bool:
        same_day = sum(1 for existing in schedule.list() if existing.day == candidate.day)
        return same_day < self.limit

    def describe(self) -> str:
        return f"at most {self.limit} courses per day"


class AllOf:
    """Satisfied only if every wrapped constraint is satisfied."""

    def __init__(self, *constraints: Constraint) -> None:
        if not constraints:
            raise ValueError("AllOf needs at least one constraint")
        self.constraints: Tuple[Constraint, ...] = constraints

    def is_satisfied(self, schedule: Schedule, candidate: Course) -> bool:
        return all(c.is_satisfied(schedule, candidate) for c in self.constraints)

    def describe(self) -> str:
        return " and ".join(c.describe() for c in self.constraints)

    def __repr__(self) -> str:
        return f"AllOf{self.constraints!r}"
