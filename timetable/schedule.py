"""
The Schedule capability and the only component that actually stores courses.

Every decorator in timetable.decorators implements the same four methods,
so a chain of them can be used wherever a BaseSchedule can.

Not thread-safe: one schedule chain belongs to one controller.
"""

from __future__ import annotations

from typing import List, Protocol

from timetable.model import Course


class Schedule(Protocol):
    def add(self, course: Course) -> None: ...

    def list(self) -> List[Course]: ...

    def remove(self, course: Course) -> bool: ...

    def clear(self) -> None: ...


class BaseSchedule:
    """
    Ordered, insertion-order-preserving storage of courses.

    No validation and no uniqueness: that is imposed by decorators.
    """

    def __init__(self) -> None:
        self._courses: List[Course] = []

    def add(self, course: Course) -> None:
        self._courses.append(course)

    def list(self) -> List[Course]:
        # snapshot: later mutations must not show up in an old result
        return self._courses.copy()

    def remove(self, course: Course) -> bool:
        try:
            self._courses.remove(course)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._courses.clear()

    def __len__(self) -> int:
        return len(self._courses)
