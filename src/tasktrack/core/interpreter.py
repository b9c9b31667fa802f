# src/tasktrack/core/interpreter.py

"""
Command entry points.

Both call conventions go through `execute`, so parsing, validation, mutation
and persistence are identical; they differ only in how the result is conveyed:

- run_command():  renders through a Presenter, returns the continue flag
- get_response(): returns the rendered text, prints nothing
"""

from __future__ import annotations

from .commands import registry
from .outcomes import Exit, Outcome
from .ports import Presenter
from .responses import format_outcome
from .state import AppState


def execute(state: AppState, line: str) -> Outcome:
    return registry.execute(state, line)


def run_command(state: AppState, line: str, presenter: Presenter) -> bool:
    """Apply one line and show its outcome. Returns False only on exit."""
    outcome = execute(state, line)
    if isinstance(outcome, Exit):
        return False
    presenter.show_outcome(outcome)
    return True


def get_response(state: AppState, line: str) -> str:
    """Apply one line and return the reply text (used by non-console shells)."""
    return format_outcome(execute(state, line))
