"""Rendering of the session for the live terminal display."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.text import Text

from pomotui.cli.keymap import help_line
from pomotui.core.clock import format_clock
from pomotui.core.session import Mode, SessionState

IDLE_PROMPT = "You can start your work session any time"


def status_line(state: SessionState) -> str:
    """Return the one-line description of *state*."""
    if state.mode is Mode.WORKING:
        return f"Work session: {format_clock(state.display_seconds)}"
    if state.mode is Mode.RESTING:
        return f"Rest session: {format_clock(state.display_seconds, round_up=True)}"
    return IDLE_PROMPT


def render(state: SessionState) -> RenderableType:
    """Build the display for *state*; empty once the session is terminated."""
    if state.terminated:
        return Text("")

    status = Text(status_line(state))
    if state.mode is Mode.WORKING:
        status.stylize("bold red", 0, len("Work session:"))
    elif state.mode is Mode.RESTING:
        status.stylize("bold green", 0, len("Rest session:"))

    return Group(status, Text(""), Text(help_line(state.availability), style="dim"))
