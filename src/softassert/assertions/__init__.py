"""Assertion system: captured values, verbs and their results."""

from softassert.assertions.base import ComparisonResult, Reporter, Violation
from softassert.assertions.engine import Assertion, new

__all__ = ["Assertion", "ComparisonResult", "Reporter", "Violation", "new"]
