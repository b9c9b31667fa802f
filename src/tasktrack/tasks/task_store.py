# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Final, assert_never

from ..core.errors import CorruptRecordError, DateFormatError
from . import dates
from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

SEPARATOR: Final = " | "


def encode_task(task: Task) -> str:
    """
    Encode one task as a pipe-separated line (no trailing newline):

      T | <0|1> | <description>
      D | <0|1> | <description> | <by>
      E | <0|1> | <description> | <start> | <end>
    """
    fields = [task.kind.value, "1" if task.done else "0", task.description]
    match task:
        case Todo():
            pass
        case Deadline(by=by):
            fields.append(dates.to_storage(by))
        case Event(start=start, end=end):
            fields.extend((dates.to_storage(start), dates.to_storage(end)))
        case _:
            assert_never(task)
    return SEPARATOR.join(fields)


def _description(text: str) -> str:
    description = text.strip()
    if not description:
        raise CorruptRecordError("Invalid task format: empty description")
    return description


def decode_line(line: str) -> Task:
    """Decode one stored line. Raises CorruptRecordError on any defect."""
    header = line.strip().split(SEPARATOR, 2)
    if len(header) < 3:
        raise CorruptRecordError(f"Invalid task format: {line}")

    tag, status, rest = (p.strip() for p in header)

    # Date columns are taken from the right so the description may hold the separator.
    task: Task
    try:
        if tag == TaskKind.TODO:
            task = Todo(_description(rest))
        elif tag == TaskKind.DEADLINE:
            fields = rest.rsplit(SEPARATOR, 1)
            if len(fields) < 2:
                raise CorruptRecordError("Invalid deadline format: missing deadline date")
            task = Deadline(_description(fields[0]), by=dates.parse_storage(fields[1].strip()))
        elif tag == TaskKind.EVENT:
            fields = rest.rsplit(SEPARATOR, 2)
            if len(fields) < 3:
                raise CorruptRecordError("Invalid event format: missing time range")
            task = Event(
                _description(fields[0]),
                start=dates.parse_storage(fields[1].strip()),
                end=dates.parse_storage(fields[2].strip()),
            )
        else:
            raise CorruptRecordError(f"Unknown task type: {tag}")
    except DateFormatError as e:
        raise CorruptRecordError(f"Invalid date in record: {line}") from e

    task.done = status == "1"
    return task


class TaskStore:
    """
    Flat-file persistence for the task list.

    The file is always rewritten as a whole; there is no append mode.
    """

    def __init__(self, path: str | Path = "data/tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        """
        Read all tasks from disk.

        A missing file is created empty. Corrupt lines are logged and skipped;
        OSError while reading propagates to the caller.
        """
        if not self._path.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()
            logger.info("Created empty task file %s", self._path)
            return []

        tasks: list[Task] = []
        lines = self._path.read_text("utf-8").splitlines()
        for lineno, raw in enumerate(lines, start=1):
            if not raw.strip():
                continue
            try:
                tasks.append(decode_line(raw))
            except CorruptRecordError as e:
                logger.warning("Skipping corrupted line %d: %s (%s)", lineno, raw.strip(), e)

        logger.info("TaskStore loaded path=%s total=%d", self._path, len(tasks))
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        """
        Overwrite the file with `tasks` in order.

        Returns False (after logging) if the file system refuses the write.
        """
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = "".join(encode_task(t) + "\n" for t in tasks)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False
        logger.debug("Saved %d task(s) to %s", len(tasks), self._path)
        return True
