"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from softassert.diagnostics import ordinal_label


@runtime_checkable
class Reporter(Protocol):
    """Host test object that can be marked as failed.

    ``fail()`` records the failure and returns; it must not stop the caller.
    """

    def fail(self) -> None: ...


@dataclass(frozen=True)
class Violation:
    """A single mismatch found by a verb.

    Attributes:
        position: 1-based index of the offending captured value, or 0 when
            the problem concerns the call as a whole (e.g. no arguments).
        label: Ordinal label for ``position`` ("1st", "2nd", ...; "" for 0).
        message: Human-readable reason written to the diagnostic sink.
    """

    position: int
    label: str
    message: str


@dataclass
class ComparisonResult:
    """Outcome of one verb call: every violation, in position order."""

    violations: list[Violation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    def add(self, position: int, message: str) -> None:
        self.violations.append(
            Violation(position=position, label=ordinal_label(position), message=message)
        )
