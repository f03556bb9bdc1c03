"""Pomo CLI - a terminal pomodoro timer with pause-aware time accounting."""

__version__ = "0.1.0"
