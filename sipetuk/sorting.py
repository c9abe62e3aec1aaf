"""Sorting and searching tasks by course, and the text tables that show them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Task

TASK_BORDER = "+-----+--------------------+--------------------+----------------------------------+"
TASK_HEADER = "| ID  | Mata Kuliah        | Nama Tugas         | Catatan                          |"
SUBJECT_BORDER = "+-----+--------------------+----------------------------------+"
SUBJECT_HEADER = "| ID  | Nama Tugas         | Catatan                          |"
PRIORITY_BORDER = (
    "+-------------+--------------------+--------------------+----------------------------------+"
)
PRIORITY_HEADER = (
    "| Sisa Hari   | Mata Kuliah        | Nama Tugas        | Catatan                          |"
)


def _merge(left: list[Task], right: list[Task]) -> list[Task]:
    merged: list[Task] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i].course <= right[j].course:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(tasks: Iterable[Task]) -> list[Task]:
    """Return the tasks stably sorted by course name."""
    items = list(tasks)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def binary_search(tasks: Sequence[Task], course: str) -> int | None:
    """Index of a task with this course in course-sorted ``tasks``, or None."""
    low, high = 0, len(tasks) - 1
    while low <= high:
        middle = low + (high - low) // 2
        found = tasks[middle].course
        if found == course:
            return middle
        if found < course:
            low = middle + 1
        else:
            high = middle - 1
    return None


def _table(border: str, header: str, rows: Iterable[str]) -> str:
    return "\n".join([border, header, border, *rows, border])


def format_task_table(tasks: Iterable[Task]) -> str:
    """Table of id, course, name and note, in the given order."""
    rows = (
        f"| {task.task_id:<3} | {task.course:<18} | {task.name:<18} | {task.note:<32} |"
        for task in tasks
    )
    return _table(TASK_BORDER, TASK_HEADER, rows)


def format_subject_table(tasks: Iterable[Task]) -> str:
    """Table of id, name and note for tasks of one course."""
    rows = (f"| {task.task_id:<3} | {task.name:<18} | {task.note:<32} |" for task in tasks)
    return _table(SUBJECT_BORDER, SUBJECT_HEADER, rows)


def format_priority_table(tasks: Iterable[Task]) -> str:
    """Table of days left, course, name and note, in the given order."""
    rows = (
        f"| {task.days_left:<11} | {task.course:<18} | {task.name:<18} | {task.note:<32} |"
        for task in tasks
    )
    return _table(PRIORITY_BORDER, PRIORITY_HEADER, rows)