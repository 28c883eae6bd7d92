"""System Clock - UTC timestamps that never go backwards within a process.

Invariants:
    - now() is timezone-aware UTC
    - Successive now() calls are non-decreasing, even if the wall clock steps back
"""

import threading
from datetime import datetime, timezone


class SystemClock:
    """Clock backed by datetime.now(timezone.utc), clamped to the last reading."""

    def __init__(self):
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        current = datetime.now(timezone.utc)
        with self._lock:
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
        return current
