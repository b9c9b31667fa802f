# src/tasktrack/core/outcomes.py

"""
Structured command results.

The interpreter returns one of these; each front-end decides how to render it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Task


@dataclass(slots=True, frozen=True)
class Added:
    task: Task
    count: int


@dataclass(slots=True, frozen=True)
class Marked:
    task: Task
    done: bool


@dataclass(slots=True, frozen=True)
class Removed:
    task: Task
    count: int


@dataclass(slots=True, frozen=True)
class Listed:
    tasks: tuple[Task, ...]
    # None for a full listing, the search keyword for `find`.
    keyword: str | None = None


@dataclass(slots=True, frozen=True)
class Failed:
    reason: str


@dataclass(slots=True, frozen=True)
class Exit:
    pass


Outcome = Added | Marked | Removed | Listed | Failed | Exit
