# src/tasktrack/core/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..tasks.task_models import Deadline, Event, Todo
from .errors import CommandError, TaskError, TaskIndexError, ValidationError
from .outcomes import Added, Exit, Failed, Listed, Marked, Outcome, Removed
from .state import AppState

CommandHandler = Callable[[AppState, str], Outcome]

logger = logging.getLogger(__name__)

INVALID_COMMAND = "Sorry, that is not a valid command!"
INVALID_NUMBER = "Invalid task number. Please enter a valid number."
EMPTY_TODO = "The description of a todo cannot be empty."
EMPTY_KEYWORD = "The search keyword cannot be empty."
MULTILINE_INPUT = "A command must fit on a single line."
DEADLINE_USAGE = "The format of deadline should be: deadline <description> /by <date/time>"
EVENT_USAGE = "The format of event should be: event <description> /from <start> /to <end>"

BY_DELIM = " /by "
FROM_DELIM = " /from "
TO_DELIM = " /to "

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


class CommandRegistry:
    """
    Keyword -> handler table for the task command grammar.

    Keywords are matched case-sensitively against the text before the first
    space. A command registered with `takes_args` only matches "keyword <args>";
    one without only matches the bare keyword.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._takes_args: dict[str, bool] = {}
        self._bare_usage: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        *,
        takes_args: bool = False,
        bare_usage: str | None = None,
    ) -> None:
        self._handlers[name] = handler
        self._takes_args[name] = takes_args
        if bare_usage:
            self._bare_usage[name] = bare_usage

    def execute(self, state: AppState, line: str) -> Outcome:
        """
        Parse, validate and apply one input line.

        Every TaskError is turned into Failed(message); nothing user-facing escapes.
        """
        try:
            return self._dispatch(state, line.strip())
        except TaskError as e:
            logger.debug("Command rejected line=%r reason=%s", line, e)
            return Failed(str(e))

    def _dispatch(self, state: AppState, line: str) -> Outcome:
        # One task per stored line: a line break would split a record.
        if "\n" in line or "\r" in line:
            raise ValidationError(MULTILINE_INPUT)
        name, sep, args = line.partition(" ")
        handler = self._handlers.get(name)
        if handler is None:
            raise CommandError(INVALID_COMMAND)

        if self._takes_args[name]:
            if sep:
                return handler(state, args)
            usage = self._bare_usage.get(name)
            raise ValidationError(usage) if usage else CommandError(INVALID_COMMAND)

        if sep:
            raise CommandError(INVALID_COMMAND)
        return handler(state, "")


registry = CommandRegistry()


def _parse_index(arg: str) -> int:
    """Turn a one-based task number into a zero-based index."""
    text = arg.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise TaskIndexError(INVALID_NUMBER)
    return int(text) - 1


def _persist(state: AppState) -> None:
    # Save failures never fail the command: the in-memory list stays authoritative.
    try:
        saved = state.store.save(state.tasks.snapshot())
    except Exception:
        logger.exception("Unexpected error while saving to %s.", state.store.path)
        saved = False
    if not saved:
        logger.warning("Changes are kept in memory only (save to %s failed).", state.store.path)


def cmd_bye(state: AppState, args: str) -> Outcome:
    return Exit()


def cmd_list(state: AppState, args: str) -> Outcome:
    return Listed(state.tasks.snapshot())


def cmd_find(state: AppState, args: str) -> Outcome:
    keyword = args.strip()
    if not keyword:
        raise ValidationError(EMPTY_KEYWORD)
    return Listed(tuple(state.tasks.find_by_keyword(keyword)), keyword=keyword)


def cmd_mark(state: AppState, args: str) -> Outcome:
    task = state.tasks.mark_done(_parse_index(args))
    _persist(state)
    return Marked(task, done=True)


def cmd_unmark(state: AppState, args: str) -> Outcome:
    task = state.tasks.mark_not_done(_parse_index(args))
    _persist(state)
    return Marked(task, done=False)


def cmd_delete(state: AppState, args: str) -> Outcome:
    removed = state.tasks.delete(_parse_index(args))
    _persist(state)
    return Removed(removed, count=state.tasks.size())


def cmd_todo(state: AppState, args: str) -> Outcome:
    description = args.strip()
    if not description:
        raise ValidationError(EMPTY_TODO)
    task = Todo(description)
    state.tasks.add(task)
    _persist(state)
    return Added(task, count=state.tasks.size())


def cmd_deadline(state: AppState, args: str) -> Outcome:
    by_idx = args.find(BY_DELIM)
    if by_idx == -1:
        raise ValidationError(DEADLINE_USAGE)

    description = args[:by_idx].strip()
    by = args[by_idx + len(BY_DELIM):].strip()
    if not description:
        raise ValidationError("The description of a deadline cannot be empty.")
    if not by:
        raise ValidationError("The deadline date/time cannot be empty.")

    task = Deadline.parse(description, by)
    state.tasks.add(task)
    _persist(state)
    return Added(task, count=state.tasks.size())


def cmd_event(state: AppState, args: str) -> Outcome:
    from_idx = args.find(FROM_DELIM)
    to_idx = args.find(TO_DELIM)
    if from_idx == -1 or to_idx == -1 or to_idx < from_idx:
        raise ValidationError(EVENT_USAGE)

    description = args[:from_idx].strip()
    # "/from /to x" shares the space between delimiters: start is empty.
    start = args[from_idx + len(FROM_DELIM):to_idx].strip()
    end = args[to_idx + len(TO_DELIM):].strip()
    if not description:
        raise ValidationError("The description of an event cannot be empty.")
    if not start:
        raise ValidationError("The event start date/time cannot be empty.")
    if not end:
        raise ValidationError("The event end date/time cannot be empty.")

    task = Event.parse(description, start, end)
    state.tasks.add(task)
    _persist(state)
    return Added(task, count=state.tasks.size())


registry.register("bye", cmd_bye)
registry.register("list", cmd_list)
registry.register("find", cmd_find, takes_args=True, bare_usage=EMPTY_KEYWORD)
registry.register("mark", cmd_mark, takes_args=True)
registry.register("unmark", cmd_unmark, takes_args=True)
registry.register("delete", cmd_delete, takes_args=True)
registry.register("todo", cmd_todo, takes_args=True, bare_usage=EMPTY_TODO)
registry.register("deadline", cmd_deadline, takes_args=True, bare_usage=DEADLINE_USAGE)
registry.register("event", cmd_event, takes_args=True, bare_usage=EVENT_USAGE)
