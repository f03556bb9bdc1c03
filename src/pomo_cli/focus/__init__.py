"""Focus mode - pomodoro countdown for Pomo CLI.

This package re-exports from pomo_cli.models.focus for clean import paths.
"""

from pomo_cli.models.focus import (
    Countdown,
    EventLogger,
    KeyboardHandler,
    Outcome,
    Pomodoro,
    SerializationError,
    State,
    TimeParseError,
    parse_time,
)

__all__ = [
    "Countdown",
    "EventLogger",
    "KeyboardHandler",
    "Outcome",
    "Pomodoro",
    "SerializationError",
    "State",
    "TimeParseError",
    "parse_time",
]
