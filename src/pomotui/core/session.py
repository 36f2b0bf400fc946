"""Session core — the work/rest state machine.

The whole session lives in one immutable :class:`SessionState`.  The pure
:func:`transition` reducer maps ``(state, event)`` to ``(state, effects)``;
:class:`SessionController` owns the current state and threads it through the
reducer one event at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from pomotui.core.clock import DEFAULT_INTERVAL, RestClock, WorkClock
from pomotui.core.events import (
    Effect,
    Event,
    Expire,
    FinishRest,
    FinishWork,
    Quit,
    Reset,
    ResetClock,
    Start,
    StartClock,
    StopClock,
    Terminate,
    Tick,
)

logger = logging.getLogger(__name__)

REST_RATIO = 5 / 20


class Mode(Enum):
    """Which interval, if any, is in progress."""

    IDLE = "idle"
    WORKING = "working"
    RESTING = "resting"


@dataclass(frozen=True)
class CommandAvailability:
    """Which user commands are valid right now."""

    start: bool
    finish_work: bool
    finish_rest: bool
    reset: bool

    @classmethod
    def for_mode(cls, mode: Mode) -> CommandAvailability:
        return cls(
            start=mode is Mode.IDLE,
            finish_work=mode is Mode.WORKING,
            finish_rest=mode is Mode.RESTING,
            reset=mode is not Mode.IDLE,
        )


def rest_duration(work_seconds: float) -> float:
    """Return the rest earned by *work_seconds* of work."""
    return work_seconds * REST_RATIO


@dataclass(frozen=True)
class SessionState:
    interval: float = DEFAULT_INTERVAL
    mode: Mode = Mode.IDLE
    work: WorkClock = field(default_factory=WorkClock)
    rest: RestClock = field(default_factory=RestClock)
    terminated: bool = False

    @classmethod
    def initial(cls, interval: float = DEFAULT_INTERVAL) -> SessionState:
        """Idle state with both clocks fresh and stopped."""
        return cls(
            interval=interval,
            work=WorkClock(interval=interval),
            rest=RestClock(interval=interval),
        )

    @property
    def availability(self) -> CommandAvailability:
        return CommandAvailability.for_mode(self.mode)

    @property
    def display_seconds(self) -> float:
        """Work elapsed while working, rest remaining while resting, else 0."""
        if self.mode is Mode.WORKING:
            return self.work.elapsed
        if self.mode is Mode.RESTING:
            return self.rest.remaining
        return 0.0


Step = tuple[SessionState, list[Effect]]


def transition(state: SessionState, event: Event) -> Step:
    """Apply *event* to *state*.

    Total over every ``(mode, event)`` pair: commands that are not valid in
    the current mode, and ticks or expiries for clocks other than the active
    one, leave the state unchanged and produce no effects.  Once terminated,
    every event is ignored.
    """
    if state.terminated:
        return state, []
    if isinstance(event, Quit):
        return replace(state, terminated=True), [Terminate()]

    mode = state.mode
    if isinstance(event, Start) and mode is Mode.IDLE:
        return _begin_work(state, [])
    if isinstance(event, FinishWork) and mode is Mode.WORKING:
        return _begin_rest(state)
    if isinstance(event, FinishRest) and mode is Mode.RESTING:
        return _end_rest(state)
    if isinstance(event, Expire) and mode is Mode.RESTING:
        if event.clock_id == state.rest.clock_id:
            return _end_rest(state)
        return state, []
    if isinstance(event, Reset):
        return _reset(state)
    if isinstance(event, Tick):
        return _tick(state, event.clock_id)
    return state, []


def _begin_work(state: SessionState, effects: list[Effect]) -> Step:
    work = WorkClock(interval=state.interval).start()
    effects.append(StartClock(work.clock_id))
    return replace(state, mode=Mode.WORKING, work=work), effects


def _begin_rest(state: SessionState) -> Step:
    old = state.work
    total = rest_duration(old.elapsed)
    rest = RestClock(total=total, interval=state.interval).start()
    effects: list[Effect] = [
        StopClock(old.clock_id),
        ResetClock(old.clock_id),
        StartClock(rest.clock_id),
    ]
    return replace(state, mode=Mode.RESTING, work=old.stop().reset(), rest=rest), effects


def _end_rest(state: SessionState) -> Step:
    rest = state.rest.stop()
    return _begin_work(replace(state, rest=rest), [StopClock(rest.clock_id)])


def _reset(state: SessionState) -> Step:
    if state.mode is Mode.WORKING:
        work = state.work
        effects: list[Effect] = [StopClock(work.clock_id), ResetClock(work.clock_id)]
        return replace(state, mode=Mode.IDLE, work=work.stop().reset()), effects
    if state.mode is Mode.RESTING:
        rest = state.rest
        return replace(state, mode=Mode.IDLE, rest=rest.stop()), [StopClock(rest.clock_id)]
    return state, []


def _tick(state: SessionState, clock_id: int) -> Step:
    if state.mode is Mode.WORKING and clock_id == state.work.clock_id:
        return replace(state, work=state.work.tick()), []
    if state.mode is Mode.RESTING and clock_id == state.rest.clock_id:
        rest = state.rest.tick()
        ticked = replace(state, rest=rest)
        if rest.expired:
            return transition(ticked, Expire(rest.clock_id))
        return ticked, []
    return state, []


class SessionController:
    """Owns the session state and feeds it events one at a time."""

    def __init__(self, interval: float = DEFAULT_INTERVAL) -> None:
        self._state = SessionState.initial(interval)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def availability(self) -> CommandAvailability:
        return self._state.availability

    @property
    def display_seconds(self) -> float:
        return self._state.display_seconds

    @property
    def terminated(self) -> bool:
        return self._state.terminated

    def handle(self, event: Event) -> list[Effect]:
        """Process *event* and return the clock effects it produced."""
        before = self._state
        self._state, effects = transition(before, event)
        after = self._state
        if after.mode is not before.mode:
            logger.info("%s: %s -> %s", type(event).__name__, before.mode.value, after.mode.value)
            if after.mode is Mode.RESTING:
                logger.info(
                    "worked %.0fs, resting %.2fs", before.work.elapsed, after.rest.total
                )
        elif after is before and not before.terminated:
            logger.debug("ignored %r in %s", event, before.mode.value)
        if after.terminated and not before.terminated:
            logger.info("session terminated from %s", before.mode.value)
        return effects
