"""
Unit tests for the error taxonomy and the logging setup.
"""

import logging
import unittest

from rich.logging import RichHandler

from timetable.errors import ConstraintViolationError, InvalidCourseError, ScheduleError, UnknownProfileError
from timetable.logs import configure_logging


class TestErrors(unittest.TestCase):
    def test_with_context_keeps_class_and_fields(self) -> None:
        err = InvalidCourseError("day", "unrecognized weekday 'X'")
        wrapped = err.with_context("Failed to add course")
        self.assertIsInstance(wrapped, InvalidCourseError)
        self.assertEqual(wrapped.field, "day")
        self.assertEqual(str(wrapped), "Failed to add course: invalid day: unrecognized weekday 'X'")

    def test_constraint_violation_message(self) -> None:
        err = ConstraintViolationError("CENG301; MONDAY; 10:00", "no time clash").with_context("ctx")
        self.assertIsInstance(err, ConstraintViolationError)
        self.assertEqual(err.constraint, "no time clash")
        self.assertIn("CENG301", str(err))

    def test_hierarchy(self) -> None:
        for err in (InvalidCourseError("a", "b"), ConstraintViolationError("c", "d"), UnknownProfileError("e")):
            self.assertIsInstance(err, ScheduleError)


class TestConfigureLogging(unittest.TestCase):
    def test_single_handler_and_level(self) -> None:
        logger = configure_logging(verbose=False)
        configure_logging(verbose=True)
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        self.assertEqual(len(handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
        configure_logging(verbose=False)
        self.assertEqual(logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
