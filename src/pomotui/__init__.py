"""pomotui: a terminal Pomodoro timer whose rest is earned by work."""

__version__ = "0.1.0"
