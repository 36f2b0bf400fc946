"""Clock core — tick-driven work stopwatch and rest countdown.

Both clocks are immutable value objects.  They never read the system clock:
time only moves when the owner feeds them a tick, which keeps every state
change reproducible and lets the session reducer stay pure.
"""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field, replace

DEFAULT_INTERVAL = 1.0

_ids = itertools.count(1)


def next_clock_id() -> int:
    """Return a process-unique clock id."""
    return next(_ids)


def _check_seconds(name: str, value: float, *, allow_zero: bool) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if math.isnan(value) or value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise ValueError(f"{name} must be {bound}, got {value}")


@dataclass(frozen=True)
class WorkClock:
    """Counts elapsed work time up, one interval per tick."""

    clock_id: int = field(default_factory=next_clock_id)
    interval: float = DEFAULT_INTERVAL
    running: bool = False
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        _check_seconds("interval", self.interval, allow_zero=False)

    def start(self) -> WorkClock:
        return replace(self, running=True)

    def stop(self) -> WorkClock:
        return replace(self, running=False)

    def reset(self) -> WorkClock:
        return replace(self, elapsed=0.0)

    def tick(self) -> WorkClock:
        """Advance by one interval.  A stopped clock ignores ticks."""
        if not self.running:
            return self
        return replace(self, elapsed=self.elapsed + self.interval)


@dataclass(frozen=True)
class RestClock:
    """Counts a fixed rest period down to zero, one interval per tick.

    ``total`` is fixed at construction.  The first tick that brings
    ``remaining`` to zero stops the clock and marks it ``expired``; an
    expired clock never expires again.
    """

    total: float = 0.0
    clock_id: int = field(default_factory=next_clock_id)
    interval: float = DEFAULT_INTERVAL
    running: bool = False
    expired: bool = False
    spent: float = 0.0

    def __post_init__(self) -> None:
        _check_seconds("total", self.total, allow_zero=True)
        _check_seconds("interval", self.interval, allow_zero=False)

    @property
    def remaining(self) -> float:
        return max(self.total - self.spent, 0.0)

    def start(self) -> RestClock:
        if self.expired:
            return self
        return replace(self, running=True)

    def stop(self) -> RestClock:
        return replace(self, running=False)

    def tick(self) -> RestClock:
        """Count down by one interval, expiring at zero."""
        if not self.running:
            return self
        spent = self.spent + self.interval
        if spent >= self.total:
            return replace(self, spent=spent, running=False, expired=True)
        return replace(self, spent=spent)


def format_clock(seconds: float, *, round_up: bool = False) -> str:
    """Format *seconds* as ``M:SS``."""
    total = math.ceil(seconds) if round_up else int(seconds)
    return f"{total // 60}:{total % 60:02d}"
