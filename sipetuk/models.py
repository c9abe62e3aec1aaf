"""Task records, deadline arithmetic and the line format of the task files."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Protocol

NAME_LENGTH = 49
COURSE_LENGTH = 49
DEADLINE_LENGTH = 10
NOTE_LENGTH = 99

_DEADLINE_PATTERN = re.compile(r"\s*([+-]?\d+)_\s*([+-]?\d+)_\s*([+-]?\d+)")
_LINE_PATTERN = re.compile(
    r"\s*([+-]?\d+)"
    rf",([^,]{{1,{NAME_LENGTH}}})"
    rf",([^,]{{1,{COURSE_LENGTH}}})"
    rf",([^,]{{1,{DEADLINE_LENGTH}}})"
    rf",([^\n]{{1,{NOTE_LENGTH}}})"
)


class DateLike(Protocol):
    """Anything carrying a calendar day, month and year."""

    day: int
    month: int
    year: int


@dataclass(frozen=True)
class Task:
    """One coursework task."""

    task_id: int
    name: str
    course: str
    deadline: str
    note: str
    days_left: int = 0

    def with_days_left(self, days_left: int) -> Task:
        """Return a copy of this task with another number of days left."""
        return replace(self, days_left=days_left)


def _day_number(day: int, month: int, year: int) -> int:
    return year * 365 + month * 30 + day


def calculate_days_left(current: DateLike, deadline: str) -> int:
    """Days from ``current`` to a ``DD_MM_YYYY`` deadline, using 30-day months."""
    match = _DEADLINE_PATTERN.match(deadline)
    if match is None:
        raise ValueError(f"deadline {deadline!r} is not in DD_MM_YYYY form")
    day, month, year = (int(part) for part in match.groups())
    return _day_number(day, month, year) - _day_number(
        current.day, current.month, current.year
    )


def parse_task_line(line: str) -> Task:
    """Read a task from one ``id,name,course,deadline,note`` line.

    The note may contain commas and is cut to its maximum length; the other
    fields must fit their limits.
    """
    match = _LINE_PATTERN.match(line)
    if match is None:
        raise ValueError(f"malformed task line: {line!r}")
    task_id, name, course, deadline, note = match.groups()
    return Task(int(task_id), name, course, deadline, note)


def format_task_line(task: Task) -> str:
    """Write a task as one line of a task file, without the newline."""
    return f"{task.task_id},{task.name},{task.course},{task.deadline},{task.note}"