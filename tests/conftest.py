"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from softassert import RecordingReporter, new

pytest_plugins = ["pytester", "softassert.plugin"]


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from softassert loggers after each test."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("softassert")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def check(reporter, sink):
    """Assertion factory writing into an in-memory sink."""
    return new(reporter, stream=sink)
