"""
Controller: thin facade between raw text fields and one schedule chain.

The controller builds a Course from (name, day, time, professor) strings and
forwards the call to the decorator chain its factory assembled.

Two styles of admission are offered:
- add_course() raises InvalidCourseError / ConstraintViolationError
- try_add_course() returns an AdmissionResult and never raises for those two

ingest() processes a batch record by record; a rejected record never stops
the remaining ones.

A controller is not thread-safe. Use one controller per thread, or
serialize access yourself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from timetable.decorators import Sink
from timetable.errors import ConstraintViolationError, InvalidCourseError
from timetable.model import Course, make_course
from timetable.profiles import ScheduleFactory, create_schedule
from timetable.schedule import Schedule


class AdmissionStatus(Enum):
    OK = "ok"
    FILTERED = "filtered"
    INVALID_INPUT = "invalid_input"
    CONSTRAINT_VIOLATION = "constraint_violation"


@dataclass(frozen=True)
class AdmissionResult:
    """
    Outcome of one admission attempt.

    FILTERED marks a course that a filtering decorator dropped silently:
    not an error, but not admitted either.
    """

    status: AdmissionStatus
    fields: Sequence[str]
    course: Optional[Course] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (AdmissionStatus.OK, AdmissionStatus.FILTERED)

    @property
    def admitted(self) -> bool:
        return self.status is AdmissionStatus.OK


@dataclass
class IngestReport:
    results: List[AdmissionResult] = field(default_factory=list)

    @property
    def admitted(self) -> int:
        return sum(1 for r in self.results if r.admitted)

    @property
    def filtered(self) -> int:
        return sum(1 for r in self.results if r.status is AdmissionStatus.FILTERED)

    @property
    def invalid(self) -> int:
        return sum(1 for r in self.results if r.status is AdmissionStatus.INVALID_INPUT)

    @property
    def violations(self) -> int:
        return sum(1 for r in self.results if r.status is AdmissionStatus.CONSTRAINT_VIOLATION)

    @property
    def rejected(self) -> int:
        return self.invalid + self.violations


class ScheduleController:
    def __init__(self, factory: ScheduleFactory, sink: Optional[Sink] = None) -> None:
        self._schedule: Schedule = factory(sink=sink)

    @classmethod
    def for_profile(cls, profile: str, sink: Optional[Sink] = None) -> "ScheduleController":
        return cls(lambda sink=None: create_schedule(profile, sink=sink), sink=sink)

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    def add_course(self, name: str, day: str, time: str, professor: str) -> None:
        """
        Build a course and push it through the chain.

        Both failure kinds are re-raised as the same class with context;
        a failed add leaves the schedule unchanged.
        """
        try:
            course = make_course(name, day, time, professor)
            self._schedule.add(course)
        except (InvalidCourseError, ConstraintViolationError) as exc:
            raise exc.with_context("Failed to add course") from exc

    def try_add_course(self, name: str, day: str, time: str, professor: str) -> AdmissionResult:
        fields = (name, day, time, professor)
        try:
            course = make_course(name, day, time, professor)
        except InvalidCourseError as exc:
            return AdmissionResult(AdmissionStatus.INVALID_INPUT, fields, detail=str(exc))

        before = self._schedule.list().count(course)
        try:
            self._schedule.add(course)
        except ConstraintViolationError as exc:
            return AdmissionResult(AdmissionStatus.CONSTRAINT_VIOLATION, fields, course=course, detail=str(exc))

        # a filtering decorator returns normally without storing the course
        if self._schedule.list().count(course) == before:
            return AdmissionResult(AdmissionStatus.FILTERED, fields, course=course, detail="dropped by course filter")
        return AdmissionResult(AdmissionStatus.OK, fields, course=course)

    def ingest(self, records: Iterable[Sequence[str]]) -> IngestReport:
        """
        Add many (name, day, time, professor) records, each independently.
        """
        report = IngestReport()
        for name, day, time, professor in records:
            report.results.append(self.try_add_course(name, day, time, professor))
        return report

    def get_courses(self) -> List[Course]:
        return self._schedule.list()

    def remove_course(self, name: str, day: str, time: str, professor: str) -> bool:
        """
        Remove the course matching all four fields exactly.
        Raises InvalidCourseError for malformed fields, like add_course().
        """
        try:
            course = make_course(name, day, time, professor)
        except InvalidCourseError as exc:
            raise exc.with_context("Failed to remove course") from exc
        return self._schedule.remove(course)

    def clear_schedule(self) -> None:
        self._schedule.clear()
