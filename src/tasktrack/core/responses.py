# src/tasktrack/core/responses.py

from __future__ import annotations

from typing import Final, assert_never

from ..tasks.task_models import display
from .outcomes import Added, Exit, Failed, Listed, Marked, Outcome, Removed

GOODBYE: Final = "Bye. Hope to see you again soon!"
WELCOME: Final = "Hello! I'm {app_name}\nWhat can I do for you?"
LOADED: Final = "Loaded {count} task(s) from previous session."
LOADING_ERROR: Final = "Error loading tasks from file. Starting with an empty task list."


def _numbered(tasks) -> list[str]:
    return [f"{i}. {display(t)}" for i, t in enumerate(tasks, start=1)]


def format_outcome(outcome: Outcome) -> str:
    """Render an outcome as multi-line text (no surrounding dividers)."""
    match outcome:
        case Added(task=task, count=count):
            return f"Got it. I've added this task:\n  {display(task)}\nNow you have {count} task(s) in the list."
        case Removed(task=task, count=count):
            return f"Noted. I've removed this task:\n  {display(task)}\nNow you have {count} task(s) in the list."
        case Marked(task=task, done=True):
            return f"Nice! I've marked this task as done:\n  {display(task)}"
        case Marked(task=task, done=False):
            return f"OK, I've marked this task as not done yet:\n  {display(task)}"
        case Listed(tasks=tasks, keyword=None):
            if not tasks:
                return "You have no tasks in your list."
            return "\n".join(["Here are the tasks in your list:", *_numbered(tasks)])
        case Listed(tasks=tasks):
            if not tasks:
                return "No matching tasks found."
            return "\n".join(["Here are the matching tasks in your list:", *_numbered(tasks)])
        case Failed(reason=reason):
            return reason
        case Exit():
            return GOODBYE
        case _:
            assert_never(outcome)
