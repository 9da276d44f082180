"""softassert: soft assertions that report failures and let the test run on."""

from softassert.assertions import (
    Assertion,
    ComparisonResult,
    Reporter,
    Violation,
    new,
)
from softassert.config import AssertSettings, load_settings
from softassert.reporters import PytestReporter, RecordingReporter

__version__ = "0.1.0"

__all__ = [
    "Assertion",
    "AssertSettings",
    "ComparisonResult",
    "PytestReporter",
    "RecordingReporter",
    "Reporter",
    "Violation",
    "load_settings",
    "new",
]
