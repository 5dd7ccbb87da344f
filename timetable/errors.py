"""
Error taxonomy for the timetable core.

- InvalidCourseError: the raw fields do not describe a course at all
- ConstraintViolationError: a well-formed course is refused by an admission policy
- UnknownProfileError: a profile name that no factory is registered for

Silent filtering (course codes outside the department) is NOT an error and
therefore has no class here.
"""

from __future__ import annotations

from typing import Any, Optional


class ScheduleError(Exception):
    """Base class for every error raised by the timetable package."""

    def __init__(self, message: str, context: Optional[str] = None) -> None:
        self.message = message
        self.context = context
        super().__init__(f"{context}: {message}" if context else message)

    def _init_args(self) -> tuple[Any, ...]:
        return (self.message,)

    def with_context(self, context: str) -> "ScheduleError":
        """
        Return a copy of this error (same class, same fields) whose message
        is prefixed with `context`.
        """
        return type(self)(*self._init_args(), context=context)


class InvalidCourseError(ScheduleError):
    """Raised when a course cannot be constructed from its raw fields."""

    def __init__(self, field: str, reason: str, context: Optional[str] = None) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"invalid {field}: {reason}", context=context)

    def _init_args(self) -> tuple[Any, ...]:
        return (self.field, self.reason)


class ConstraintViolationError(ScheduleError):
    """Raised when a course violates the constraint of a validating decorator."""

    def __init__(self, course: Any, constraint: str, context: Optional[str] = None) -> None:
        self.course = course
        self.constraint = constraint
        super().__init__(f"course violates scheduling constraints ({constraint}): {course}", context=context)

    def _init_args(self) -> tuple[Any, ...]:
        return (self.course, self.constraint)


class UnknownProfileError(ScheduleError):
    """Raised when no factory is registered under the requested profile name."""

    def __init__(self, name: str, context: Optional[str] = None) -> None:
        self.name = name
        super().__init__(f"unknown profile: {name!r}", context=context)

    def _init_args(self) -> tuple[Any, ...]:
        return (self.name,)
