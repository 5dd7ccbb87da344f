"""
CLI (Command Line Interface).

    timetable build [--data-dir DIR] [--out schedule.html] [--professor NAME ...]
    timetable show <profile> [--data-dir DIR]
    timetable check <profile> <code> <day> <HH:mm> <professor>
    timetable profiles

Note:
- Nothing is persisted between runs; every command rebuilds the schedules
  from the course files.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from rich import box
from rich.console import Console
from rich.table import Table

from timetable.config import DEFAULT_DATA_DIR, DEFAULT_OUTPUT
from timetable.controller import AdmissionStatus, ScheduleController
from timetable.decorators import describe_chain
from timetable.errors import ScheduleError
from timetable.logs import configure_logging
from timetable.model import Course, format_time
from timetable.planner import Timetable, build_timetable
from timetable.profiles import PROFILES, create_schedule
from timetable.reader import read_course_directory
from timetable.render import write_timetable_html

logger = logging.getLogger("timetable.cli")


def _load_timetable(data_dir: Path, professors: List[str] | None = None) -> Timetable:
    records = read_course_directory(data_dir, professors)
    if not records:
        logger.warning("No course records found in %s", data_dir)
    return build_timetable(records)


def _course_table(title: str, courses: List[Course]) -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Course")
    table.add_column("Day")
    table.add_column("Time")
    table.add_column("Professor")
    for i, c in enumerate(courses, start=1):
        table.add_row(str(i), c.name, c.day.name, format_time(c.time), c.professor)
    return table


def _cmd_build(args: argparse.Namespace) -> int:
    """
    Read all course files, admit them per profile and write the HTML page.
    """
    tt = _load_timetable(args.data_dir, args.professor)
    out = write_timetable_html(tt, args.out)

    print(f"Schedule has been generated and saved to {out}")
    print(f"Total courses loaded: {tt.total_records}")
    for profile, courses in tt.courses.items():
        report = tt.reports[profile]
        print(f"{profile.capitalize()} courses in schedule: {len(courses)} (rejected: {report.rejected})")
    print(f"Non-CENG courses filtered out: {len(tt.filtered_out)}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    profile = args.profile.strip().lower()
    if profile not in PROFILES:
        print(f"Unknown profile: {args.profile} (choose from: {', '.join(PROFILES)})")
        return 1

    tt = _load_timetable(args.data_dir)
    courses = tt.courses.get(profile, [])
    if not courses:
        print("No courses in schedule.")
        return 0

    Console().print(_course_table(f"{profile.capitalize()} schedule", courses))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """
    Try one record against a fresh schedule of the given profile.
    """
    controller = ScheduleController.for_profile(args.profile)
    result = controller.try_add_course(args.code, args.day, args.time, args.professor)

    if result.status is AdmissionStatus.OK:
        print(f"Admitted: {result.course}")
        return 0
    if result.status is AdmissionStatus.FILTERED:
        print(f"Filtered out (not a department course): {args.code}")
        return 1

    print(f"Rejected: {result.detail}")
    return 1


def _cmd_profiles(args: argparse.Namespace) -> int:
    for name in PROFILES:
        chain = describe_chain(create_schedule(name))
        print(f"{name}: {' -> '.join(chain)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="timetable", description="Weekly course timetable builder")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_build = sub.add_parser("build", help="Build both timetables and write the HTML page")
    p_build.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR, help="Folder with <professor>.txt files")
    p_build.add_argument("--out", type=Path, default=DEFAULT_OUTPUT, help="Output HTML file")
    p_build.add_argument(
        "--professor",
        action="append",
        default=None,
        help="Only read this professor's file (repeatable)",
    )

    p_show = sub.add_parser("show", help="Print one profile's timetable")
    p_show.add_argument("profile", type=str, help=f"Profile ({', '.join(PROFILES)})")
    p_show.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR, help="Folder with <professor>.txt files")

    p_check = sub.add_parser("check", help="Check whether one course would be admitted")
    p_check.add_argument("profile", type=str, help=f"Profile ({', '.join(PROFILES)})")
    p_check.add_argument("code", type=str, help="Course code (e.g. CENG301)")
    p_check.add_argument("day", type=str, help="Weekday (e.g. MONDAY)")
    p_check.add_argument("time", type=str, help="Start time HH:mm (e.g. 10:00)")
    p_check.add_argument("professor", type=str, help="Professor name")

    sub.add_parser("profiles", help="List profiles and their decorator chains")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    handlers = {
        "build": _cmd_build,
        "show": _cmd_show,
        "check": _cmd_check,
        "profiles": _cmd_profiles,
    }

    try:
        raise SystemExit(handlers[args.command](args))
    except ScheduleError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)
