# src/tasktrack/core/errors.py

"""
Error taxonomy.

Every user-facing error derives from TaskError so the interpreter can convert
any of them into a single descriptive message at its boundary.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for recoverable, user-facing errors."""


class CommandError(TaskError):
    """Unrecognized command keyword."""


class ValidationError(TaskError):
    """Empty required field or malformed command shape."""


class DateFormatError(TaskError, ValueError):
    """Date text matches neither the full entry form nor the date-only form."""


class TaskIndexError(TaskError, IndexError):
    """Task number is not a number or points outside the current list."""


class CorruptRecordError(TaskError):
    """A persisted line could not be decoded into a task."""
