# tests/test_task_store.py

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pytest

from tasktrack.core.errors import CorruptRecordError
from tasktrack.tasks.task_models import Deadline, Event, Todo
from tasktrack.tasks.task_store import TaskStore, decode_line, encode_task


def _sample_tasks():
    done = Todo("read book")
    done.mark_done()
    return [
        done,
        Deadline("return book", by=datetime(2019, 12, 2, 18, 0)),
        Event("project meeting", start=datetime(2019, 8, 6, 14, 0), end=datetime(2019, 8, 6, 16, 0)),
    ]


def test_encoding_layout() -> None:
    lines = [encode_task(t) for t in _sample_tasks()]
    assert lines == [
        "T | 1 | read book",
        "D | 0 | return book | 2019-12-02 1800",
        "E | 0 | project meeting | 2019-08-06 1400 | 2019-08-06 1600",
    ]


def test_missing_file_is_created_empty(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "tasks.txt"
    store = TaskStore(path)
    assert store.load() == []
    assert path.exists()
    assert path.read_text("utf-8") == ""


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.txt")
    original = _sample_tasks()
    assert store.save(tuple(original)) is True

    loaded = store.load()
    assert loaded == original
    assert [t.done for t in loaded] == [True, False, False]


def test_save_overwrites_previous_contents(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.txt")
    store.save(_sample_tasks())
    store.save([Todo("only")])
    assert (tmp_path / "tasks.txt").read_text("utf-8") == "T | 0 | only\n"


def test_corrupt_line_is_skipped_with_warning(tmp_path: Path, caplog) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 | read book\nX | 0 | mystery\n\nD | 0 | no date\n", "utf-8")

    with caplog.at_level(logging.WARNING, logger="tasktrack"):
        loaded = TaskStore(path).load()

    assert [t.description for t in loaded] == ["read book"]
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("line 2" in m for m in messages)
    assert any("line 4" in m for m in messages)


@pytest.mark.parametrize(
    "line",
    [
        "T | 0",
        "Z | 0 | unknown tag",
        "D | 0 | no date",
        "D | 0 | bad date | 2024-01-01",
        "E | 0 | half range | 2024-01-01 1000",
        "E | 1 | bad range | 2024-01-01 1000 | soon",
        "T | 0 |",
        "T | 0 |    ",
        "D | 0 |  | 2024-01-01 2359",
        "E | 0 |   | 2024-01-01 1000 | 2024-01-01 1200",
    ],
)
def test_decode_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(CorruptRecordError):
        decode_line(line)


def test_decode_trims_fields_and_reads_status() -> None:
    task = decode_line("  D |  1  |  submit report  | 2024-03-01 0930 ")
    assert isinstance(task, Deadline)
    assert task.done is True
    assert task.description == "submit report"
    assert task.by == datetime(2024, 3, 1, 9, 30)

    assert decode_line("T | 0 | x").done is False


def test_descriptions_may_contain_the_separator(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.txt")
    original = [
        Todo("a | b"),
        Deadline("x | y", by=datetime(2024, 1, 1, 23, 59)),
        Event("party | cake | games", start=datetime(2024, 5, 1, 18, 0), end=datetime(2024, 5, 1, 22, 0)),
    ]
    store.save(original)

    assert store.load() == original
    assert decode_line("T | 0 |   | extra").description == "| extra"


def test_save_failure_is_logged_not_raised(tmp_path: Path, caplog) -> None:
    target = tmp_path / "tasks.txt"
    target.mkdir()  # a directory where the file should be

    with caplog.at_level(logging.ERROR, logger="tasktrack"):
        ok = TaskStore(target).save([Todo("a")])

    assert ok is False
    assert any("Failed to save tasks" in r.getMessage() for r in caplog.records)
    assert not (tmp_path / "tasks.txt.tmp").exists()
