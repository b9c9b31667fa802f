# src/tasktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar, assert_never

from . import dates


class TaskKind(StrEnum):
    """Single-letter tag identifying a task variant in the persisted file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class _TaskBase:
    description: str
    done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    def __str__(self) -> str:
        return display(self)  # type: ignore[arg-type]


@dataclass(slots=True)
class Todo(_TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(_TaskBase):
    by: datetime = field(kw_only=True)

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    @classmethod
    def parse(cls, description: str, by: str) -> Deadline:
        """Build from entry-form text; a bare date means end of day."""
        return cls(description, by=dates.parse_entry(by, dates.DEADLINE_DEFAULT_TIME))


@dataclass(slots=True)
class Event(_TaskBase):
    """
    A task spanning a time range.

    No ordering is enforced between start and end.
    """

    start: datetime = field(kw_only=True)
    end: datetime = field(kw_only=True)

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    @classmethod
    def parse(cls, description: str, start: str, end: str) -> Event:
        """Build from entry-form text; a bare date means midnight."""
        return cls(
            description,
            start=dates.parse_entry(start, dates.EVENT_DEFAULT_TIME),
            end=dates.parse_entry(end, dates.EVENT_DEFAULT_TIME),
        )


Task = Todo | Deadline | Event


def display(task: Task) -> str:
    """Canonical one-line rendering used in every response."""
    head = f"[{task.kind}][{task.status_icon}] {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(by=by):
            return f"{head} (by: {dates.to_display(by)})"
        case Event(start=start, end=end):
            return f"{head} (from: {dates.to_display(start)} to: {dates.to_display(end)})"
        case _:
            assert_never(task)
