# tests/test_interpreter.py

from __future__ import annotations

from tasktrack.core.interpreter import get_response, run_command
from tasktrack.core.outcomes import Added, Failed
from tasktrack.core.responses import GOODBYE

from .fakes import RecordingPresenter


def test_run_command_shows_outcome_and_continues(state) -> None:
    presenter = RecordingPresenter()

    assert run_command(state, "todo read book", presenter) is True
    assert presenter.names() == ["outcome"]
    assert isinstance(presenter.events[0][1], Added)


def test_run_command_reports_errors_and_continues(state) -> None:
    presenter = RecordingPresenter()

    assert run_command(state, "todo", presenter) is True
    assert presenter.events == [("outcome", Failed("The description of a todo cannot be empty."))]


def test_run_command_stops_on_bye(state) -> None:
    presenter = RecordingPresenter()
    assert run_command(state, "bye", presenter) is False
    assert presenter.events == []
    assert state.tasks.size() == 0


def test_get_response_renders_confirmations(state) -> None:
    assert get_response(state, "list") == "You have no tasks in your list."
    assert get_response(state, "todo read book") == (
        "Got it. I've added this task:\n"
        "  [T][ ] read book\n"
        "Now you have 1 task(s) in the list."
    )
    assert get_response(state, "mark 1") == "Nice! I've marked this task as done:\n  [T][X] read book"
    assert get_response(state, "unmark 1") == (
        "OK, I've marked this task as not done yet:\n  [T][ ] read book"
    )
    assert get_response(state, "list") == "Here are the tasks in your list:\n1. [T][ ] read book"
    assert get_response(state, "delete 1") == (
        "Noted. I've removed this task:\n"
        "  [T][ ] read book\n"
        "Now you have 0 task(s) in the list."
    )


def test_get_response_renders_search(state) -> None:
    get_response(state, "todo read book")
    get_response(state, "todo buy milk")
    get_response(state, "todo book flights")

    assert get_response(state, "find BOOK") == (
        "Here are the matching tasks in your list:\n"
        "1. [T][ ] read book\n"
        "2. [T][ ] book flights"
    )
    assert get_response(state, "find tea") == "No matching tasks found."


def test_get_response_errors_and_bye(state) -> None:
    assert get_response(state, "hello") == "Sorry, that is not a valid command!"
    assert get_response(state, "mark abc") == "Invalid task number. Please enter a valid number."
    assert get_response(state, "bye") == GOODBYE
