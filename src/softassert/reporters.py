"""Reporter implementations for common hosts."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class RecordingReporter:
    """Counts failure signals without touching any test runner."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.failures = 0

    def fail(self) -> None:
        with self._lock:
            self.failures += 1

    @property
    def failed(self) -> bool:
        return self.failures > 0


class PytestReporter(RecordingReporter):
    """Records soft failures for one pytest item.

    pytest has no "mark failed and keep going" call, so failures are only
    counted here; the plugin fails the test once its body has finished.
    """

    def __init__(self, nodeid: str) -> None:
        super().__init__()
        self.nodeid = nodeid

    def fail(self) -> None:
        super().fail()
        logger.debug(f"{self.nodeid}: soft assertion failure #{self.failures}")

    def summary(self) -> str:
        noun = "assertion" if self.failures == 1 else "assertions"
        return f"{self.failures} soft {noun} failed in {self.nodeid}"
