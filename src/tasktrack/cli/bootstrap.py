# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the flat-file TaskStore and the in-memory TaskList into AppState,
- falls back to an empty list if the initial load blows up.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    loading_error = False
    try:
        tasks = TaskList(store.load())
    except Exception:
        logger.exception("Failed to load tasks from %s; starting empty.", store.path)
        tasks = TaskList()
        loading_error = True

    return AppState(settings=settings, tasks=tasks, store=store, loading_error=loading_error)
