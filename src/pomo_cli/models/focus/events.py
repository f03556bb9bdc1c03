"""State-change log for a focus session."""

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import timedelta

from .countdown import Clock, MonotonicClock, State
from .exceptions import SerializationError


def format_duration(duration: timedelta) -> str:
    """Format as whole seconds and truncated tenths, e.g. ``"12.3"``."""
    seconds = duration.days * 86400 + duration.seconds
    tenths = duration.microseconds // 100_000
    return f"{seconds}.{tenths}"


@dataclass(frozen=True)
class Event:
    """A state the countdown entered, and when."""

    state: State
    timestamp: float


@dataclass(frozen=True)
class Span:
    """Time spent in one state, between two consecutive events."""

    state: State
    duration: timedelta

    @classmethod
    def between(cls, start: Event, end: Event) -> "Span":
        return cls(
            state=start.state,
            duration=timedelta(seconds=end.timestamp - start.timestamp),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"state": self.state.value, "duration": format_duration(self.duration)}


@dataclass
class FormattedLog:
    """Summary of a session: its title and the spans it went through."""

    title: str
    events: list[Span] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "events": [span.to_dict() for span in self.events],
        }

    def to_json(self) -> str:
        """Pretty-printed JSON document."""
        try:
            return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Unable to encode session log: {e}") from e


class EventLogger:
    """Records state changes, keeping only the boundaries between states."""

    def __init__(self, title: str = "", clock: Clock | None = None):
        self.clock = clock or MonotonicClock()
        self._title = title
        self._events: list[Event] = []

    @property
    def title(self) -> str:
        return self._title

    @property
    def events(self) -> Sequence[Event]:
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def log(self, state: State) -> bool:
        """
        Record ``state`` if it differs from the last recorded one.

        Returns True when a new event was appended.
        """
        if self._events and self._events[-1].state == state:
            return False
        self._events.append(Event(state=state, timestamp=self.clock.now()))
        return True

    def format(self) -> FormattedLog:
        """
        Derive one span per pair of adjacent events.

        The last event opens no span: time spent in the final state is not
        recorded.
        """
        spans = [
            Span.between(start, end)
            for start, end in zip(self._events, self._events[1:])
        ]
        return FormattedLog(title=self._title, events=spans)

    def to_json(self) -> str:
        return self.format().to_json()
