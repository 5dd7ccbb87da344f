"""
Tests for partitioning records and building both profile timetables.
"""

import unittest
from unittest import mock

from timetable.planner import build_timetable, partition_records
from timetable.reader import CourseRecord


RECORDS = [
    CourseRecord("CENG301", "MONDAY", "08:45", "OGokalp"),
    CourseRecord("CENG302", "MONDAY", "08:45", "AYilmaz"),
    CourseRecord("CENG601", "TUESDAY", "09:45", "OGokalp"),
    CourseRecord("CENG631", "MONDAY", "18:00", "SSahin"),
    CourseRecord("MATH101", "FRIDAY", "13:30", "OGokalp"),
    CourseRecord("ENG101", "TUESDAY", "14:30", "MTekin"),
]


class TestPartition(unittest.TestCase):
    def test_buckets(self) -> None:
        parts = partition_records(RECORDS)
        self.assertEqual([r.name for r in parts.undergraduate], ["CENG301", "CENG302"])
        self.assertEqual([r.name for r in parts.graduate], ["CENG601", "CENG631"])
        self.assertEqual([r.name for r in parts.filtered_out], ["MATH101", "ENG101"])


class TestBuildTimetable(unittest.TestCase):
    def test_codes_outside_the_grammar_land_in_filtered_out(self) -> None:
        records = [
            CourseRecord("ceng601", "MONDAY", "10:00", "P"),
            CourseRecord("CENG6011", "MONDAY", "10:00", "P"),
        ]
        tt = build_timetable(records, sink=mock.Mock())

        self.assertEqual(tt.graduate, [])
        self.assertEqual(tt.undergraduate, [])
        self.assertEqual([c.name for c in tt.filtered_out], ["ceng601", "CENG6011"])
        self.assertEqual(tt.reports["graduate"].admitted, 0)
        self.assertEqual(tt.reports["undergraduate"].admitted, 0)

    def test_partition_is_case_sensitive(self) -> None:
        parts = partition_records([CourseRecord("ceng301", "MONDAY", "10:00", "P")])
        self.assertEqual(parts.undergraduate, [])
        self.assertEqual(len(parts.filtered_out), 1)

    def test_profiles_are_built_independently(self) -> None:
        with self.assertLogs("timetable.planner", level="WARNING") as logs:
            tt = build_timetable(RECORDS, sink=mock.Mock())

        self.assertEqual(tt.total_records, 6)
        self.assertEqual([c.name for c in tt.undergraduate], ["CENG301"])
        self.assertEqual([c.name for c in tt.graduate], ["CENG601"])
        self.assertEqual([c.name for c in tt.filtered_out], ["MATH101", "ENG101"])

        self.assertEqual(tt.reports["undergraduate"].violations, 1)
        self.assertEqual(tt.reports["graduate"].violations, 1)
        self.assertEqual(len(logs.output), 2)

    def test_empty_input(self) -> None:
        tt = build_timetable([], sink=mock.Mock())
        self.assertEqual(tt.undergraduate, [])
        self.assertEqual(tt.graduate, [])
        self.assertEqual(tt.filtered_out, [])
        self.assertEqual(tt.total_records, 0)


if __name__ == "__main__":
    unittest.main()
