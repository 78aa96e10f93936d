"""Time sources, in whole seconds.

The pool never reads the wall clock directly; it is handed a Clock so tests
and the demo script can freeze and advance time.
"""

import time
from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int: ...


class SystemClock:
    """Wall clock rounded to the nearest second."""

    def now(self) -> int:
        return round(time.time())


class FrozenClock:
    """Manually driven clock."""

    def __init__(self, now: int = 0) -> None:
        self._now = now

    def now(self) -> int:
        return self._now

    def set(self, now: int) -> None:
        self._now = now

    def advance(self, seconds: int) -> int:
        self._now += seconds
        return self._now


def to_utc_iso(seconds: int) -> str:
    """Format epoch seconds as an ISO8601 UTC string: 0 -> '1970-01-01T00:00:00+00:00'."""
    return datetime.fromtimestamp(seconds, timezone.utc).isoformat()
