"""Interactive session loop.

Keyboard input and clock ticks are two event sources feeding one serial
queue; the controller consumes that queue one event at a time and the
effects it returns arm and disarm the ticker.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable, Protocol

from rich.console import Console
from rich.live import Live

from pomotui.cli.keymap import event_for_key
from pomotui.cli.view import render
from pomotui.core.events import (
    Effect,
    Event,
    Quit,
    ResetClock,
    StartClock,
    StopClock,
    Terminate,
    Tick,
)
from pomotui.core.session import SessionController

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.05


class KeySource(Protocol):
    def __enter__(self) -> KeySource: ...

    def __exit__(self, *exc_info: object) -> None: ...

    def get_key(self) -> str | None: ...


class Ticker:
    """Produces ticks for at most one armed clock at a fixed interval."""

    def __init__(self, interval: float) -> None:
        self.interval = interval
        self.clock_id: int | None = None
        self._next_due = 0.0

    def arm(self, clock_id: int, now: float) -> None:
        self.clock_id = clock_id
        self._next_due = now + self.interval

    def disarm(self, clock_id: int) -> None:
        if self.clock_id == clock_id:
            self.clock_id = None

    def due(self, now: float) -> Tick | None:
        """Return the next tick if its time has come, else ``None``."""
        if self.clock_id is None or now < self._next_due:
            return None
        self._next_due += self.interval
        return Tick(self.clock_id)


class SessionRuntime:
    """Drives a :class:`SessionController` from a keyboard and a ticker."""

    def __init__(
        self,
        controller: SessionController,
        keyboard: KeySource,
        console: Console | None = None,
        *,
        poll_interval: float = POLL_INTERVAL,
        monotonic: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.controller = controller
        self.keyboard = keyboard
        self.console = console or Console()
        self.poll_interval = poll_interval
        self.ticker = Ticker(controller.state.interval)
        self.queue: deque[Event] = deque()
        self._monotonic = monotonic
        self._sleep = sleep

    @property
    def finished(self) -> bool:
        return self.controller.terminated

    def run(self) -> None:
        """Run until the user quits."""
        with self.keyboard, Live(
            render(self.controller.state),
            console=self.console,
            auto_refresh=False,
            screen=True,
        ) as live:
            while not self.finished:
                try:
                    self.step()
                    live.update(render(self.controller.state), refresh=True)
                    if not self.finished:
                        self._sleep(self.poll_interval)
                except KeyboardInterrupt:
                    self.interrupt()
                    live.update(render(self.controller.state), refresh=True)

    def step(self) -> None:
        """Collect pending ticks and input, then process the queue."""
        try:
            self._collect()
        except KeyboardInterrupt:
            self.queue.append(Quit())
        self.drain()

    def interrupt(self) -> None:
        """Treat SIGINT (ctrl+c with ISIG on) as the quit command."""
        logger.debug("keyboard interrupt")
        self.queue.append(Quit())
        self.drain()

    def drain(self) -> None:
        while self.queue and not self.finished:
            event = self.queue.popleft()
            for effect in self.controller.handle(event):
                self._apply(effect)
        self.queue.clear()

    def _collect(self) -> None:
        # ticks already due belong to the clock running before this key
        now = self._monotonic()
        tick = self.ticker.due(now)
        while tick is not None:
            self.queue.append(tick)
            tick = self.ticker.due(now)

        key = self.keyboard.get_key()
        if key is not None:
            event = event_for_key(key, self.controller.availability)
            if event is not None:
                self.queue.append(event)
            else:
                logger.debug("unbound key %r", key)

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, StartClock):
            self.ticker.arm(effect.clock_id, self._monotonic())
        elif isinstance(effect, StopClock):
            self.ticker.disarm(effect.clock_id)
        elif isinstance(effect, ResetClock):
            logger.debug("clock %d reset", effect.clock_id)
        elif isinstance(effect, Terminate):
            logger.debug("terminate requested")
