# src/tasktrack/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import TaskIndexError
from .task_models import Task

logger = logging.getLogger(__name__)

INDEX_OUT_OF_RANGE = "Task index out of range."


class TaskList:
    """
    In-memory, insertion-ordered task collection for one session.

    Indices are zero-based and shift down after a deletion.
    The backing list is private; persistence gets `snapshot()`.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(INDEX_OUT_OF_RANGE)

    def size(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added index=%d kind=%s", len(self._tasks) - 1, task.kind)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        self._check_index(index)
        removed = self._tasks.pop(index)
        logger.debug("Task deleted index=%d remaining=%d", index, len(self._tasks))
        return removed

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def mark_not_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_not_done()
        return task

    def find_by_keyword(self, keyword: str) -> list[Task]:
        """Case-insensitive substring match on descriptions, in list order."""
        needle = keyword.casefold()
        return [t for t in self._tasks if needle in t.description.casefold()]

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)
