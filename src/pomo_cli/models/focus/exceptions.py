"""Custom exceptions for focus sessions."""


class PomoError(Exception):
    """Base exception for all Pomo errors."""


class TimeParseError(PomoError, ValueError):
    """Raised when a duration string is not of the form [[HH:]MM:]SS."""

    def __init__(self, raw: str):
        super().__init__(f"Unable to parse time {raw!r} (expected [[HH:]MM:]SS)")
        self.raw = raw


class SerializationError(PomoError):
    """Raised when the session log cannot be encoded."""
