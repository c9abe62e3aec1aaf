"""Stack of deleted tasks kept for undo."""

from __future__ import annotations

from .models import Task


class UndoStack:
    """Last-in, first-out store of removed tasks."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def push(self, task: Task) -> None:
        """Put a task on top."""
        self._tasks.append(task)

    def pop(self) -> Task:
        """Take the most recently pushed task."""
        if not self._tasks:
            raise IndexError("undo stack is empty")
        return self._tasks.pop()

    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)