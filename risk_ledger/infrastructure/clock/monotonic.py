"""Wall-clock backed monotonic timestamp source."""

import threading
import time

from risk_ledger.domain.interfaces import Clock


class MonotonicClock(Clock):
    """
    Epoch seconds that never repeat or go backwards.

    Two calls within the same second, or a wall clock stepped backwards,
    yield the previous timestamp plus one.
    """

    def __init__(self):
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            self._last = max(int(time.time()), self._last + 1)
            return self._last
