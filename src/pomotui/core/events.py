"""Events consumed and effects produced by the session reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Start:
    """Begin the first work interval."""


@dataclass(frozen=True)
class FinishWork:
    """End the work interval and begin resting."""


@dataclass(frozen=True)
class FinishRest:
    """Cut the rest short and return to work."""


@dataclass(frozen=True)
class Reset:
    """Abandon the current interval and go back to idle."""


@dataclass(frozen=True)
class Quit:
    """Terminate the session."""


@dataclass(frozen=True)
class Tick:
    """One interval has passed for the clock with ``clock_id``."""

    clock_id: int


@dataclass(frozen=True)
class Expire:
    """The rest clock with ``clock_id`` has counted down to zero."""

    clock_id: int


Event = Union[Start, FinishWork, FinishRest, Reset, Quit, Tick, Expire]


@dataclass(frozen=True)
class StartClock:
    clock_id: int


@dataclass(frozen=True)
class StopClock:
    clock_id: int


@dataclass(frozen=True)
class ResetClock:
    clock_id: int


@dataclass(frozen=True)
class Terminate:
    pass


Effect = Union[StartClock, StopClock, ResetClock, Terminate]
