"""Focus mode - pomodoro countdown for Pomo CLI."""

from .countdown import Clock, Countdown, MonotonicClock, State
from .events import Event, EventLogger, FormattedLog, Span
from .exceptions import PomoError, SerializationError, TimeParseError
from .keyboard import InputSource, KeyboardHandler
from .parser import parse_time
from .session import Outcome, Pomodoro
from .ui import TimerDisplay

__all__ = [
    "Clock",
    "Countdown",
    "MonotonicClock",
    "State",
    "Event",
    "EventLogger",
    "FormattedLog",
    "Span",
    "PomoError",
    "SerializationError",
    "TimeParseError",
    "InputSource",
    "KeyboardHandler",
    "parse_time",
    "Outcome",
    "Pomodoro",
    "TimerDisplay",
]
