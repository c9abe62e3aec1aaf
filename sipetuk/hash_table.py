"""Open-addressing table of tasks keyed by task id."""

from __future__ import annotations

from collections.abc import Iterator

from .models import Task

HASH_SIZE = 1000


class TableFullError(Exception):
    """Raised when a task is added to a table with no free slot."""


def hash_function(task_id: int) -> int:
    """Home slot of a task id in a table of the default size."""
    return task_id % HASH_SIZE


class TaskTable:
    """Fixed-size table with linear probing; removal leaves the slot empty."""

    def __init__(self, capacity: int = HASH_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._slots: list[Task | None] = [None] * capacity
        self._size = 0

    def _probe(self, task_id: int) -> Iterator[int]:
        start = index = task_id % self._capacity
        while True:
            yield index
            index = (index + 1) % self._capacity
            if index == start or self._slots[index] is None:
                return

    def _locate(self, task_id: int) -> int | None:
        for index in self._probe(task_id):
            task = self._slots[index]
            if task is not None and task.task_id == task_id:
                return index
        return None

    def add(self, task: Task) -> None:
        """Store a task in the first free slot from its home slot onwards."""
        if self._size == self._capacity:
            raise TableFullError("task table is full")
        index = task.task_id % self._capacity
        while self._slots[index] is not None:
            index = (index + 1) % self._capacity
        self._slots[index] = task
        self._size += 1

    def find(self, task_id: int) -> Task | None:
        """Return the task with this id, or None."""
        index = self._locate(task_id)
        return None if index is None else self._slots[index]

    def remove(self, task_id: int) -> Task:
        """Take the task with this id out of the table and return it."""
        index = self._locate(task_id)
        if index is None:
            raise KeyError(task_id)
        task = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        assert task is not None
        return task

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Task]:
        return (task for task in self._slots if task is not None)

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, int) and self._locate(task_id) is not None