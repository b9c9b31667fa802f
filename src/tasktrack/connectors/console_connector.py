# src/tasktrack/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..core.interpreter import run_command
from ..core.outcomes import Outcome
from ..core.ports import LineReader, Presenter
from ..core.responses import GOODBYE, LOADED, LOADING_ERROR, WELCOME, format_outcome
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


class ConsoleLineReader:
    """
    Reads operator input from stdin via input().

    Use as a context manager so the session's input source is released on exit.
    """

    def __init__(self, prompt: str = "") -> None:
        self._prompt = prompt
        self._closed = False

    def __enter__(self) -> ConsoleLineReader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def read_line(self) -> str:
        if self._closed:
            raise EOFError("reader closed")
        return input(self._prompt).strip()

    def close(self) -> None:
        self._closed = True


class ConsolePresenter:
    """Prints every message between divider lines."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out or sys.stdout

    def _boxed(self, text: str) -> None:
        print(DIVIDER, file=self._out)
        print(text, file=self._out)
        print(DIVIDER, file=self._out, flush=True)

    def show_welcome(self, app_name: str) -> None:
        self._boxed(WELCOME.format(app_name=app_name))

    def show_tasks_loaded(self, count: int) -> None:
        self._boxed(LOADED.format(count=count))

    def show_loading_error(self) -> None:
        self._boxed(LOADING_ERROR)

    def show_outcome(self, outcome: Outcome) -> None:
        self._boxed(format_outcome(outcome))

    def show_error(self, message: str) -> None:
        self._boxed(f" {message}")

    def show_goodbye(self) -> None:
        self._boxed(GOODBYE)


def run_console_loop(state: AppState, reader: LineReader, presenter: Presenter) -> None:
    logger.info("Console connector started (file=%s).", state.store.path)

    app_name = str(getattr(state.settings, "app_name", "Tasktrack"))
    presenter.show_welcome(app_name)
    if state.loading_error:
        presenter.show_loading_error()
    elif state.tasks.size() > 0:
        presenter.show_tasks_loaded(state.tasks.size())

    while True:
        try:
            line = reader.read_line()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        try:
            keep_running = run_command(state, line, presenter)
        except Exception:
            logger.exception("Command handler crashed.")
            presenter.show_error("Internal error while handling a command.")
            continue

        if not keep_running:
            logger.info("Console exit command received.")
            break

    presenter.show_goodbye()
    logger.info("Console connector finished.")
