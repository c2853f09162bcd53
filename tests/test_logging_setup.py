# tests/test_logging_setup.py

from __future__ import annotations

import logging

from task_tracker.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("task_tracker.tasks.task_logic", logging.DEBUG))
    assert f.filter(_record("task_tracker", logging.INFO))


def test_console_filter_limits_everything_else_to_errors() -> None:
    f = _ConsoleNoiseFilter()
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))
    assert not f.filter(_record("task_tracker_other", logging.WARNING))
