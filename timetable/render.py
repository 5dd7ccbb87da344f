"""
HTML export of the weekly timetables.

One page with three tabs (Undergraduate, Graduate, Non-CENG). Each tab is a
grid of the fixed teaching slots against Monday-Friday. Courses that start
on no slot (or on a weekend) are listed under the grid instead of being lost.

The document is built as a BeautifulSoup tree so that escaping of course
codes and professor names is handled by the library.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from timetable.config import PAGE_TITLE, TIME_SLOTS
from timetable.model import WORKING_DAYS, Course, format_time, parse_time
from timetable.planner import Timetable


_CSS = """
body { font-family: Arial, sans-serif; background-color: #f7f7f7; margin: 0; padding: 0; }
h2 { background-color: #0A1D37; color: white; text-align: center; padding: 20px 0; margin: 0; }
.tab { display: flex; justify-content: center; background-color: #eee; }
.tab button { background-color: transparent; border: none; padding: 14px 20px; cursor: pointer; font-size: 16px; color: #0A1D37; border-bottom: 3px solid transparent; }
.tab button:hover { border-bottom: 3px solid #8B0000; }
.tab button.active { border-bottom: 3px solid #0A1D37; font-weight: bold; }
.tabcontent { display: none; padding: 20px; }
table { border-collapse: collapse; width: 100%; background-color: white; }
th { background-color: #0A1D37; color: white; padding: 10px; }
td { border: 1px solid #ddd; padding: 10px; text-align: center; }
td:first-child { background-color: #f2f2f2; font-weight: bold; }
"""

# No '<' or '&' in here: the string is serialized like any other text node
_JS = """
function openTab(evt, tabName) {
    Array.prototype.forEach.call(document.getElementsByClassName('tabcontent'), function (el) {
        el.style.display = 'none';
    });
    Array.prototype.forEach.call(document.getElementsByClassName('tablink'), function (el) {
        el.className = el.className.replace(' active', '');
    });
    document.getElementById(tabName).style.display = 'block';
    evt.currentTarget.className += ' active';
}
window.onload = function () { document.getElementById('defaultOpen').click(); };
"""

TABS: Tuple[Tuple[str, str], ...] = (
    ("Undergrad", "Undergraduate"),
    ("Grad", "Graduate"),
    ("NonCENG", "Non-CENG"),
)


def _slot_label(start: str, end: str) -> str:
    return f"{start}–{end}"


def _new(soup: BeautifulSoup, name: str, text: str | None = None, **attrs: str) -> Tag:
    tag = soup.new_tag(name, attrs=attrs)
    if text is not None:
        tag.string = text
    return tag


def _course_block(soup: BeautifulSoup, course: Course) -> Tag:
    block = _new(soup, "div", **{"class": "course"})
    block.append(_new(soup, "strong", course.name))
    block.append(soup.new_tag("br"))
    block.append(course.professor)
    return block


def _schedule_table(soup: BeautifulSoup, courses: Sequence[Course]) -> List[Tag]:
    """
    Build the slot grid plus an optional list of courses that fit no slot.
    """
    table = soup.new_tag("table")

    header = soup.new_tag("tr")
    header.append(_new(soup, "th", "Hours"))
    for day in WORKING_DAYS:
        header.append(_new(soup, "th", day.name))
    table.append(header)

    placed: set[int] = set()
    for start, end in TIME_SLOTS:
        slot_start = parse_time(start)
        row = soup.new_tag("tr")
        row.append(_new(soup, "td", _slot_label(start, end)))

        for day in WORKING_DAYS:
            cell = soup.new_tag("td")
            for i, course in enumerate(courses):
                if course.day == day and course.time == slot_start:
                    cell.append(_course_block(soup, course))
                    placed.add(i)
            row.append(cell)

        table.append(row)

    out = [table]

    unplaced = [c for i, c in enumerate(courses) if i not in placed]
    if unplaced:
        out.append(_new(soup, "h3", "Other times"))
        items = soup.new_tag("ul", attrs={"class": "unslotted"})
        for course in unplaced:
            items.append(_new(soup, "li", f"{course.name} | {course.day} {format_time(course.time)} | {course.professor}"))
        out.append(items)

    return out


def render_timetable_html(timetable: Timetable, title: str = PAGE_TITLE) -> str:
    """
    Render both profile timetables and the filtered-out courses as one page.
    """
    soup = BeautifulSoup("<!DOCTYPE html><html><head></head><body></body></html>", "html.parser")

    head = soup.head
    head.append(soup.new_tag("meta", attrs={"charset": "UTF-8"}))
    head.append(_new(soup, "title", title))
    head.append(_new(soup, "style", _CSS))
    head.append(_new(soup, "script", _JS))

    body = soup.body
    body.append(_new(soup, "h2", title))

    tabs = _new(soup, "div", **{"class": "tab"})
    for i, (tab_id, label) in enumerate(TABS):
        attrs = {"class": "tablink", "onclick": f"openTab(event, '{tab_id}')"}
        if i == 0:
            attrs["id"] = "defaultOpen"
        tabs.append(_new(soup, "button", label, **attrs))
    body.append(tabs)

    contents: Iterable[Sequence[Course]] = (timetable.undergraduate, timetable.graduate, timetable.filtered_out)
    for (tab_id, _), courses in zip(TABS, contents):
        section = _new(soup, "div", id=tab_id, **{"class": "tabcontent"})
        for tag in _schedule_table(soup, courses):
            section.append(tag)
        body.append(section)

    return str(soup)


def write_timetable_html(timetable: Timetable, out_path: str | Path, title: str = PAGE_TITLE) -> Path:
    """
    Write the rendered page (UTF-8) and return the output path.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_timetable_html(timetable, title=title), encoding="utf-8")
    return out
