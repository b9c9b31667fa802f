# src/tasktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete console classes.
This keeps front-ends swappable and makes testing easier.
"""

from typing import Protocol

from .outcomes import Outcome


class LineReader(Protocol):
    """Blocking source of operator input. Raises EOFError when exhausted."""

    def read_line(self) -> str: ...


class Presenter(Protocol):
    """Presentation sink for banners, notices and command outcomes."""

    def show_welcome(self, app_name: str) -> None: ...
    def show_tasks_loaded(self, count: int) -> None: ...
    def show_loading_error(self) -> None: ...
    def show_outcome(self, outcome: Outcome) -> None: ...
    def show_error(self, message: str) -> None: ...
    def show_goodbye(self) -> None: ...
