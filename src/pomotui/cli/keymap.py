"""Key bindings for the interactive session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pomotui.core.events import Event, FinishRest, FinishWork, Quit, Reset, Start
from pomotui.core.session import CommandAvailability


@dataclass(frozen=True)
class Binding:
    keys: tuple[str, ...]
    help_key: str
    help_desc: str
    event: Callable[[], Event]
    enabled: Callable[[CommandAvailability], bool]


BINDINGS: tuple[Binding, ...] = (
    Binding(("s",), "s", "start", Start, lambda a: a.start),
    Binding(("s",), "s", "finish work", FinishWork, lambda a: a.finish_work),
    Binding(("s",), "s", "finish rest", FinishRest, lambda a: a.finish_rest),
    Binding(("r",), "r", "reset", Reset, lambda a: a.reset),
    Binding(("ctrl+c", "q"), "q", "quit", Quit, lambda a: True),
)


def enabled_bindings(availability: CommandAvailability) -> list[Binding]:
    return [b for b in BINDINGS if b.enabled(availability)]


def event_for_key(key: str, availability: CommandAvailability) -> Event | None:
    """Map *key* to the event of the first enabled binding that claims it.

    Disabled bindings never match, so ``s`` resolves to whichever of start,
    finish work or finish rest the current mode allows.
    """
    for binding in enabled_bindings(availability):
        if key in binding.keys:
            return binding.event()
    return None


def help_line(availability: CommandAvailability) -> str:
    """Return ``key desc`` pairs for the enabled bindings, joined by bullets."""
    return " • ".join(f"{b.help_key} {b.help_desc}" for b in enabled_bindings(availability))
