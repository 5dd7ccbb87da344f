"""
Building the per-profile timetables from a flat list of records.

The caller side of the core: records are split into undergraduate, graduate
and "filtered out" buckets, and each profile bucket is fed into its own
controller. The filtered-out bucket never touches a schedule chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from timetable.config import DEPARTMENT_PREFIX, GRADUATE_PREFIX
from timetable.controller import AdmissionStatus, IngestReport, ScheduleController
from timetable.decorators import Sink, course_code_matches
from timetable.errors import InvalidCourseError
from timetable.model import Course, make_course
from timetable.profiles import GRADUATE, UNDERGRADUATE
from timetable.reader import CourseRecord

logger = logging.getLogger("timetable.planner")


@dataclass
class Partition:
    undergraduate: List[CourseRecord] = field(default_factory=list)
    graduate: List[CourseRecord] = field(default_factory=list)
    filtered_out: List[CourseRecord] = field(default_factory=list)


@dataclass
class Timetable:
    courses: Dict[str, List[Course]]
    filtered_out: List[Course]
    reports: Dict[str, IngestReport]
    total_records: int = 0

    @property
    def undergraduate(self) -> List[Course]:
        return self.courses.get(UNDERGRADUATE, [])

    @property
    def graduate(self) -> List[Course]:
        return self.courses.get(GRADUATE, [])


def partition_records(records: Iterable[CourseRecord]) -> Partition:
    """
    CENG6xx -> graduate, other CENG -> undergraduate, everything else
    -> filtered out. Prefixes are case-sensitive; a CENG6 name that does not
    fit the course code grammar is filtered out, since the graduate chain
    would drop it anyway.
    """
    out = Partition()
    for rec in records:
        name = rec.name.strip()
        if name.startswith(GRADUATE_PREFIX):
            if course_code_matches(name):
                out.graduate.append(rec)
            else:
                out.filtered_out.append(rec)
        elif name.startswith(DEPARTMENT_PREFIX):
            out.undergraduate.append(rec)
        else:
            out.filtered_out.append(rec)
    return out


def _log_rejections(profile: str, report: IngestReport) -> None:
    for result in report.results:
        if not result.ok:
            logger.warning("Could not add %s course %s - %s", profile, result.fields[0], result.detail)


def build_timetable(records: Iterable[CourseRecord], sink: Optional[Sink] = None) -> Timetable:
    """
    Partition the records and admit each profile bucket through a fresh
    controller for that profile.
    """
    records = list(records)
    parts = partition_records(records)

    buckets = {UNDERGRADUATE: parts.undergraduate, GRADUATE: parts.graduate}
    courses: Dict[str, List[Course]] = {}
    reports: Dict[str, IngestReport] = {}
    dropped: List[Course] = []

    for profile, bucket in buckets.items():
        controller = ScheduleController.for_profile(profile, sink=sink)
        report = controller.ingest(bucket)
        _log_rejections(profile, report)
        dropped.extend(r.course for r in report.results if r.status is AdmissionStatus.FILTERED)
        courses[profile] = controller.get_courses()
        reports[profile] = report

    filtered_out: List[Course] = []
    for rec in parts.filtered_out:
        try:
            filtered_out.append(make_course(*rec))
        except InvalidCourseError as exc:
            logger.warning("Dropping unparsable filtered-out record %r: %s", rec, exc)
    filtered_out.extend(dropped)

    return Timetable(courses=courses, filtered_out=filtered_out, reports=reports, total_records=len(records))
