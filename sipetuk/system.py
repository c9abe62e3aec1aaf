"""Task manager tying together the task tables, priority heap, undo stack and files."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from .hash_table import TaskTable
from .min_heap import MinHeap
from .models import DateLike, Task, calculate_days_left, format_task_line, parse_task_line
from .sorting import merge_sort
from .undo_stack import UndoStack

INCOMPLETE_FILE = "incomplete_tasks.txt"
COMPLETED_FILE = "completed_tasks.txt"


class TaskManagerError(Exception):
    """Base class of the task manager's errors."""


class TaskNotFoundError(TaskManagerError, LookupError):
    """Raised when no incomplete task has the requested id."""


class NoTasksError(TaskManagerError):
    """Raised when an operation needs incomplete tasks and there are none."""


class NothingToUndoError(TaskManagerError):
    """Raised when there is no removed task to bring back."""


class TaskManager:
    """Incomplete and completed coursework tasks, stored in two text files."""

    def __init__(self, current_date: DateLike | None = None, directory: str | Path = ".") -> None:
        self.current_date: DateLike = current_date if current_date is not None else date.today()
        self.directory = Path(directory)
        self._incomplete = TaskTable()
        self._completed = TaskTable()
        self._heap = MinHeap()
        self._undo = UndoStack()
        self._next_id = 1

    @property
    def next_id(self) -> int:
        """The id the next added task will get."""
        return self._next_id

    def _days_left(self, deadline: str) -> int:
        return calculate_days_left(self.current_date, deadline)

    def _read_file(self, name: str) -> list[Task] | None:
        path = self.directory / name
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            path.write_text("", encoding="utf-8")
            return None
        return [parse_task_line(line) for line in text.splitlines() if line.strip()]

    def load(self) -> list[str]:
        """Read both task files, creating missing ones; return the names created."""
        self._incomplete = TaskTable()
        self._completed = TaskTable()
        self._heap = MinHeap()
        self._undo = UndoStack()
        created: list[str] = []
        highest = 0

        incomplete = self._read_file(INCOMPLETE_FILE)
        if incomplete is None:
            created.append(INCOMPLETE_FILE)
        else:
            for task in incomplete:
                task = task.with_days_left(self._days_left(task.deadline))
                self._incomplete.add(task)
                self._heap.push(task)
                highest = max(highest, task.task_id)

        completed = self._read_file(COMPLETED_FILE)
        if completed is None:
            created.append(COMPLETED_FILE)
        else:
            for task in completed:
                self._completed.add(task.with_days_left(0))
                highest = max(highest, task.task_id)

        self._next_id = highest + 1
        return created

    def save(self) -> None:
        """Write both task files from the current state."""
        for name, table in ((INCOMPLETE_FILE, self._incomplete), (COMPLETED_FILE, self._completed)):
            content = "".join(format_task_line(task) + "\n" for task in table)
            (self.directory / name).write_text(content, encoding="utf-8")

    def add_task(self, name: str, course: str, deadline: str, note: str) -> Task:
        """Create a new incomplete task with the next id and return it."""
        task = Task(self._next_id, name, course, deadline, note, self._days_left(deadline))
        self._incomplete.add(task)
        self._next_id += 1
        self._heap.push(task)
        return task

    def _check_present(self, task_id: int) -> None:
        if len(self._incomplete) == 0:
            raise NoTasksError("there are no incomplete tasks")
        if task_id not in self._incomplete:
            raise TaskNotFoundError(task_id)

    def _take(self, task_id: int) -> Task:
        task = self._incomplete.remove(task_id)
        self._undo.push(task)
        self._heap.rebuild(self._incomplete)
        return task

    def delete_task(self, task_id: int) -> Task:
        """Remove an incomplete task, keeping it for undo, and return it."""
        self._check_present(task_id)
        return self._take(task_id)

    def mark_completed(self, task_id: int) -> Task:
        """Move an incomplete task to the completed tasks and return it.

        The task is also kept for undo, as a deletion would be.
        """
        self._check_present(task_id)
        task = self._incomplete.find(task_id)
        assert task is not None
        self._completed.add(task)
        return self._take(task_id)

    def undo_delete(self) -> Task:
        """Put the most recently removed task back among the incomplete ones."""
        if not self._undo:
            raise NothingToUndoError("no removed task to restore")
        task = self._undo.pop()
        task = task.with_days_left(self._days_left(task.deadline))
        self._incomplete.add(task)
        self._heap.push(task)
        return task

    def incomplete(self) -> list[Task]:
        """Incomplete tasks sorted by course."""
        return merge_sort(self._incomplete)

    def completed(self) -> list[Task]:
        """Completed tasks sorted by course."""
        return merge_sort(self._completed)

    def by_subject(self, course: str) -> list[Task]:
        """Incomplete tasks of one course."""
        return merge_sort(task for task in self._incomplete if task.course == course)

    def by_priority(self, count: int) -> list[Task]:
        """Up to ``count`` incomplete tasks with the fewest days left, most urgent first."""
        return self._heap.smallest(count)