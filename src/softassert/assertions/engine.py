"""Soft assertion context and its verbs.

A verb never raises on a failed check. It writes one diagnostic record per
violation to the sink, signals the reporter once, and returns the
:class:`ComparisonResult` so the test keeps running.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TextIO

from softassert.assertions.base import ComparisonResult, Reporter
from softassert.config import AssertSettings
from softassert.diagnostics import (
    caller_location,
    format_record,
    indent_each_line,
    ordinal_label,
    render_value,
)
from softassert.equality import deep_equal
from softassert.nilness import is_nil_like

logger = logging.getLogger(__name__)

EMPTY_ARGUMENTS = "arguments is empty"
LENGTH_MISMATCH = "arguments length not match"


@dataclass(frozen=True)
class Assertion:
    """Values captured for a single verb call, bound to a reporter."""

    reporter: Reporter
    values: tuple[Any, ...]
    settings: AssertSettings = field(
        default_factory=AssertSettings, compare=False, repr=False
    )
    stream: TextIO | None = field(default=None, compare=False, repr=False)

    def _render(self, value: Any) -> str:
        rendered = render_value(
            value, width=self.settings.width, depth=self.settings.depth
        )
        return indent_each_line(rendered, "\t")

    def _report(self, verb: str, result: ComparisonResult) -> ComparisonResult:
        # verbs must call this directly: the location is two frames up
        logger.debug(
            f"{verb}: {len(self.values)} value(s), "
            f"{len(result.violations)} violation(s)"
        )
        if result.passed:
            return result

        location = caller_location(2)
        logger.debug(f"{verb} failed at {location or '<unknown>'}")
        sink = self.stream if self.stream is not None else self.settings.resolve_stream()
        for violation in result.violations:
            sink.write(format_record(violation.message, location))
        self.reporter.fail()
        return result

    def fail(self, reason: str) -> ComparisonResult:
        """Report a custom failure."""
        result = ComparisonResult()
        result.add(0, reason)
        return self._report("fail", result)

    def equals(self, *expected: Any) -> ComparisonResult:
        """Check each captured value deep-equals the expected value at its position."""
        result = ComparisonResult()
        if not self.values:
            result.add(0, EMPTY_ARGUMENTS)
        elif len(expected) != len(self.values):
            result.add(0, LENGTH_MISMATCH)
        else:
            for position, (got, want) in enumerate(zip(self.values, expected), 1):
                if deep_equal(got, want):
                    continue
                if is_nil_like(got) and is_nil_like(want):
                    continue
                result.add(
                    position,
                    f"{ordinal_label(position)} argument does not equal\n"
                    f"\twant:\n{self._render(want)}\n"
                    f"\tgot:\n{self._render(got)}",
                )
        return self._report("equals", result)

    def is_nil(self) -> ComparisonResult:
        result = ComparisonResult()
        if not self.values:
            result.add(0, EMPTY_ARGUMENTS)
        for position, value in enumerate(self.values, 1):
            if not is_nil_like(value):
                result.add(position, f"{ordinal_label(position)} argument is not nil")
        return self._report("is_nil", result)

    def is_not_nil(self) -> ComparisonResult:
        result = ComparisonResult()
        if not self.values:
            result.add(0, EMPTY_ARGUMENTS)
        for position, value in enumerate(self.values, 1):
            if is_nil_like(value):
                result.add(position, f"{ordinal_label(position)} argument is nil")
        return self._report("is_not_nil", result)

    def is_true(self) -> ComparisonResult:
        result = ComparisonResult()
        if not self.values:
            result.add(0, EMPTY_ARGUMENTS)
        for position, value in enumerate(self.values, 1):
            if value is not True:
                result.add(position, f"{ordinal_label(position)} argument is not true")
        return self._report("is_true", result)

    def is_false(self) -> ComparisonResult:
        result = ComparisonResult()
        if not self.values:
            result.add(0, EMPTY_ARGUMENTS)
        for position, value in enumerate(self.values, 1):
            if value is not False:
                result.add(position, f"{ordinal_label(position)} argument is not false")
        return self._report("is_false", result)


def new(
    reporter: Reporter,
    *,
    settings: AssertSettings | None = None,
    stream: TextIO | None = None,
) -> Callable[..., Assertion]:
    """Create an assertion factory bound to ``reporter``.

    Each call of the returned function captures its arguments as-is in a
    fresh :class:`Assertion`::

        check = new(reporter)
        check(total, errors).equals(3, None)
    """
    bound_settings = settings if settings is not None else AssertSettings()

    def factory(*values: Any) -> Assertion:
        return Assertion(
            reporter=reporter, values=values, settings=bound_settings, stream=stream
        )

    return factory
