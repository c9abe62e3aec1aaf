"""Binary min-heap of tasks ordered by days left."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Task


class MinHeap:
    """Min-heap keyed on ``days_left``; the most urgent task is on top."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._items: list[Task] = []
        for task in tasks:
            self.push(task)

    def push(self, task: Task) -> None:
        """Insert a task, moving it up past parents with more days left."""
        items = self._items
        items.append(task)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent].days_left <= task.days_left:
                break
            items[index] = items[parent]
            index = parent
        items[index] = task

    def pop(self) -> Task:
        """Remove and return the task with the fewest days left."""
        items = self._items
        if not items:
            raise IndexError("pop from empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down()
        return top

    def _sift_down(self) -> None:
        items = self._items
        size = len(items)
        index = 0
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and items[left].days_left < items[smallest].days_left:
                smallest = left
            if right < size and items[right].days_left < items[smallest].days_left:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def rebuild(self, tasks: Iterable[Task]) -> None:
        """Replace the contents with the given tasks."""
        self._items = []
        for task in tasks:
            self.push(task)

    def smallest(self, count: int) -> list[Task]:
        """The ``count`` most urgent tasks, most urgent first; the heap is unchanged."""
        scratch = MinHeap(self._items)
        return [scratch.pop() for _ in range(min(max(count, 0), len(scratch)))]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._items))