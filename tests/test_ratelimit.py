from __future__ import annotations

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from formdesk.infrastructure import FixedWindowRateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_window_resets_after_expiry():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(2, window_seconds=60.0, clock=clock)

    assert limiter.hit("a") is None
    assert limiter.hit("a") is None
    clock.now = 15.0
    assert limiter.hit("a") == 45.0
    assert limiter.hit("b") is None

    clock.now = 60.0
    assert limiter.hit("a") is None


def test_zero_limit_disables():
    limiter = FixedWindowRateLimiter(0)

    assert limiter.enabled is False
    assert all(limiter.hit("a") is None for _ in range(1000))
