# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings live on the state so connectors can read app name, paths, etc.
    settings: object

    tasks: TaskList
    store: TaskStore

    # True when the initial load failed and the session started empty.
    loading_error: bool = False
