"""Tests for the console logging sink."""

import io
import logging

import pytest

from lawkit.logger import configure, log, logger


@pytest.fixture(autouse=True)
def reset_logger():
    level = logger.level
    handlers = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


def test_log_prints_context_on_tab_indented_lines() -> None:
    stream = io.StringIO()
    configure("info", stream=stream)
    log("info", "sum:", {"x": 1})
    assert stream.getvalue() == "info: sum:\n\t{'x': 1}\n"


def test_log_without_context() -> None:
    stream = io.StringIO()
    configure("debug", stream=stream)
    log("warn", "careful")
    assert stream.getvalue() == "warn: careful\n"


def test_log_respects_the_level() -> None:
    stream = io.StringIO()
    configure("error", stream=stream)
    log("info", "hidden", 1)
    log("error", "shown", 2)
    assert stream.getvalue() == "error: shown\n\t2\n"


def test_configure_replaces_its_own_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    configure("info", stream=first)
    configure("info", stream=second)
    log("info", "once")
    assert first.getvalue() == ""
    assert second.getvalue() == "info: once\n"


def test_configure_reads_the_level_from_the_environment(monkeypatch) -> None:
    monkeypatch.setenv("LAWKIT_LOG_LEVEL", "WARN")
    assert configure(stream=io.StringIO()).level == logging.WARNING


def test_unknown_levels_are_rejected() -> None:
    with pytest.raises(ValueError):
        configure("verbose")
    with pytest.raises(ValueError):
        log("trace", "nope")  # type: ignore[arg-type]
