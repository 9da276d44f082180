"""Tests for verbose logging."""

import logging
from pathlib import Path

import pytest

from softassert import RecordingReporter, new
from softassert.verbose import setup_logger


def test_verbose_logger_creates_debug_log(tmp_path: Path):
    """Logger should always create the debug log file."""
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_verbose_logger_writes_to_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    assert len(logger.handlers) == 2
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert "StreamHandler" in handler_types
    assert "FileHandler" in handler_types


def test_non_verbose_mode_only_file_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=False)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.FileHandler)


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)
    assert debug_file.exists()


def test_same_logger_name_raises_error(tmp_path: Path):
    setup_logger(tmp_path / "a.log", logger_name="softassert_shared_test")

    with pytest.raises(RuntimeError) as exc_info:
        setup_logger(tmp_path / "b.log", logger_name="softassert_shared_test")

    assert "softassert_shared_test" in str(exc_info.value)
    assert "already exists" in str(exc_info.value)


def test_package_logger_receives_verb_logging(tmp_path: Path, capsys):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file=debug_file)

    new(RecordingReporter())(None).is_not_nil()

    content = debug_file.read_text()
    assert "softassert.assertions.engine: is_not_nil: 1 value(s), 1 violation(s)" in content
