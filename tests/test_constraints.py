"""
Unit tests for admission constraints.

Definitions used here:
- NoClash: same day AND same start time clashes, nothing else
- TimeWindow: start hour inclusive on both ends, minutes ignored
- DailyBalance: fewer than `limit` courses already on that day
"""

import unittest

from timetable.constraints import AllOf, DailyBalanceConstraint, NoClashConstraint, TimeWindowConstraint
from timetable.model import make_course
from timetable.schedule import BaseSchedule


def _schedule(*courses):
    s = BaseSchedule()
    for c in courses:
        s.add(c)
    return s


class TestNoClash(unittest.TestCase):
    def test_same_day_same_time_clashes(self) -> None:
        s = _schedule(make_course("CENG301", "MONDAY", "10:00", "Smith"))
        cand = make_course("CENG302", "MONDAY", "10:00", "Jones")
        self.assertFalse(NoClashConstraint().is_satisfied(s, cand))

    def test_different_minute_does_not_clash(self) -> None:
        s = _schedule(make_course("CENG301", "MONDAY", "10:00", "Smith"))
        cand = make_course("CENG302", "MONDAY", "10:30", "Jones")
        self.assertTrue(NoClashConstraint().is_satisfied(s, cand))

    def test_different_day_does_not_clash(self) -> None:
        s = _schedule(make_course("CENG301", "MONDAY", "10:00", "Smith"))
        cand = make_course("CENG302", "TUESDAY", "10:00", "Jones")
        self.assertTrue(NoClashConstraint().is_satisfied(s, cand))

    def test_empty_schedule(self) -> None:
        cand = make_course("CENG302", "TUESDAY", "10:00", "Jones")
        self.assertTrue(NoClashConstraint().is_satisfied(BaseSchedule(), cand))


class TestTimeWindow(unittest.TestCase):
    def test_bounds_are_inclusive(self) -> None:
        c = TimeWindowConstraint(9, 17)
        s = BaseSchedule()
        expected = {"08:59": False, "09:00": True, "12:30": True, "17:00": True, "17:45": True, "18:00": False}
        for t, ok in expected.items():
            self.assertEqual(c.is_satisfied(s, make_course("CENG601", "MONDAY", t, "P")), ok, t)

    def test_invalid_window(self) -> None:
        with self.assertRaises(ValueError):
            TimeWindowConstraint(18, 9)
        with self.assertRaises(ValueError):
            TimeWindowConstraint(0, 24)


class TestDailyBalance(unittest.TestCase):
    def test_fourth_course_on_a_day_is_rejected(self) -> None:
        s = _schedule(
            make_course("CENG301", "MONDAY", "09:00", "P"),
            make_course("CENG302", "MONDAY", "10:00", "P"),
            make_course("CENG303", "TUESDAY", "10:00", "P"),
        )
        c = DailyBalanceConstraint()
        self.assertTrue(c.is_satisfied(s, make_course("CENG304", "MONDAY", "11:00", "P")))
        s.add(make_course("CENG304", "MONDAY", "11:00", "P"))
        self.assertFalse(c.is_satisfied(s, make_course("CENG305", "MONDAY", "12:00", "P")))
        self.assertTrue(c.is_satisfied(s, make_course("CENG305", "TUESDAY", "12:00", "P")))

    def test_custom_limit(self) -> None:
        s = _schedule(make_course("CENG301", "MONDAY", "09:00", "P"))
        self.assertFalse(DailyBalanceConstraint(limit=1).is_satisfied(s, make_course("CENG302", "MONDAY", "10:00", "P")))
        with self.assertRaises(ValueError):
            DailyBalanceConstraint(limit=0)


class TestAllOf(unittest.TestCase):
    def test_all_members_must_hold(self) -> None:
        c = AllOf(NoClashConstraint(), TimeWindowConstraint(9, 17))
        s = _schedule(make_course("CENG601", "MONDAY", "10:00", "P"))
        self.assertFalse(c.is_satisfied(s, make_course("CENG602", "MONDAY", "10:00", "P")))
        self.assertFalse(c.is_satisfied(s, make_course("CENG602", "MONDAY", "08:00", "P")))
        self.assertTrue(c.is_satisfied(s, make_course("CENG602", "MONDAY", "11:00", "P")))
        self.assertIn("no time clash", c.describe())

    def test_requires_members(self) -> None:
        with self.assertRaises(ValueError):
            AllOf()


if __name__ == "__main__":
    unittest.main()
