from __future__ import annotations

import threading
import time
from typing import Callable


class FixedWindowRateLimiter:
    """Process-local request counter per client and time window.

    - A limit of ``0`` disables limiting.
    - Counters for expired windows are dropped lazily on the next hit.
    """

    def __init__(
        self,
        limit: int,
        *,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = limit
        self._window = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._counters: dict[str, tuple[float, int]] = {}

    @property
    def enabled(self) -> bool:
        return self._limit > 0

    def hit(self, key: str) -> float | None:
        """Record one request for ``key``.

        Returns ``None`` when the request is allowed, otherwise the number of
        seconds until the current window resets.
        """
        if not self.enabled:
            return None
        now = self._clock()
        with self._lock:
            started, count = self._counters.get(key, (now, 0))
            if now - started >= self._window:
                started, count = now, 0
            count += 1
            self._counters[key] = (started, count)
            if len(self._counters) > 10_000:
                self._sweep(now)
        if count > self._limit:
            return max(self._window - (now - started), 0.0)
        return None

    def _sweep(self, now: float) -> None:
        expired = [key for key, (started, _) in self._counters.items() if now - started >= self._window]
        for key in expired:
            del self._counters[key]

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
