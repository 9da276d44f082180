"""pytest integration: the ``soft_assert`` fixture.

Failures recorded through the fixture do not interrupt the test body. Once
the body has run, a test whose reporter was signaled is reported as failed.
Only signals raised before the call phase ends count: a failure signaled
while a fixture tears down is logged but does not change the outcome.

Requires pytest 8.0 or later (new-style ``wrapper=True`` hook wrappers).
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from softassert.assertions.engine import Assertion, new
from softassert.config import AssertSettings, load_settings
from softassert.reporters import PytestReporter
from softassert.verbose import setup_logger

_SETTINGS_KEY = pytest.StashKey[AssertSettings]()
_REPORTER_KEY = pytest.StashKey[PytestReporter]()


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        "softassert_config",
        help="YAML file with softassert settings, relative to the rootdir",
        default="",
    )
    group = parser.getgroup("softassert")
    group.addoption(
        "--softassert-debug-log",
        default=None,
        help="Write softassert debug logging to this file",
    )


def pytest_configure(config: pytest.Config) -> None:
    settings = AssertSettings()
    config_path = config.getini("softassert_config")
    if config_path:
        path = Path(config_path)
        if not path.is_absolute():
            path = config.rootpath / path
        settings = load_settings(path)
    config.stash[_SETTINGS_KEY] = settings

    debug_log = config.getoption("softassert_debug_log")
    if debug_log:
        setup_logger(Path(debug_log))


@pytest.fixture
def soft_assert(request: pytest.FixtureRequest) -> Callable[..., Assertion]:
    """Assertion factory whose failures mark the current test failed."""
    reporter = PytestReporter(request.node.nodeid)
    request.node.stash[_REPORTER_KEY] = reporter
    settings = request.config.stash.get(_SETTINGS_KEY, AssertSettings())
    return new(reporter, settings=settings)


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]):
    report = yield
    reporter = item.stash.get(_REPORTER_KEY, None)
    if call.when == "call" and report.passed and reporter is not None:
        if reporter.failed:
            report.outcome = "failed"
            report.longrepr = reporter.summary()
    return report
