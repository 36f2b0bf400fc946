"""CLI entry point for pomotui.

Uses Click to expose the ``pomotui`` command, which runs an interactive
work/rest session in the terminal.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

import pomotui
from pomotui.cli.keyboard import KeyboardHandler, TerminalError
from pomotui.cli.runtime import SessionRuntime
from pomotui.core.clock import DEFAULT_INTERVAL
from pomotui.core.session import SessionController
from pomotui.log import configure_logging

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=pomotui.__version__, prog_name="pomotui")
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_INTERVAL,
    show_default=True,
    help="Seconds between clock ticks.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the session log here instead of the user log directory.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every tick and ignored key.")
def cli(interval: float, log_file: Path | None, verbose: bool) -> None:
    """pomotui: work as long as you like, then rest a quarter of it.

    Press s to start, to finish work and to finish rest early, r to reset
    and q to quit.
    """
    try:
        configure_logging(log_file, verbose)
        runtime = SessionRuntime(SessionController(interval), KeyboardHandler())
        runtime.run()
    except (TerminalError, OSError) as exc:
        logger.error("session failed: %s", exc)
        click.echo(f"Oh no, it didn't work: {exc}", err=True)
        sys.exit(1)
