"""Interaction loop driving a focus session."""

import time
from collections.abc import Callable
from datetime import timedelta
from enum import Enum
from typing import Protocol

from pomo_cli.config import TimerConfig
from pomo_cli.utils.logger import get_logger
from pomo_cli.utils.ui.formatters import format_duration_hms

from .countdown import Clock, Countdown, MonotonicClock, State
from .events import EventLogger
from .keyboard import InputSource
from .ui import TimerDisplay, bell, enter_screen, restore_screen

KEY_QUIT = b"q"
KEY_TOGGLE = b" "


class OutputSink(Protocol):
    def write(self, text: str, /) -> int: ...

    def flush(self) -> None: ...


class Outcome(str, Enum):
    """How a session ended."""

    COMPLETED = "completed"
    QUIT = "quit"


class Pomodoro:
    """
    Runs one countdown to completion against a terminal.

    Each iteration ticks the countdown, logs its state, handles at most one
    key press, redraws and sleeps. Timing comes from the countdown's clock,
    the sleep only paces redraws and input latency.
    """

    def __init__(
        self,
        stdin: InputSource,
        stdout: OutputSink,
        countdown: Countdown,
        logger: EventLogger,
        config: TimerConfig | None = None,
        display: TimerDisplay | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.stdin = stdin
        self.stdout = stdout
        self.countdown = countdown
        self.logger = logger
        self.config = config or TimerConfig()
        self.display = display or TimerDisplay()
        self.sleep = sleep
        self.quit_requested = False
        self.log = get_logger("session")

    @classmethod
    def from_parts(
        cls,
        stdin: InputSource,
        stdout: OutputSink,
        title: str,
        duration: timedelta,
        config: TimerConfig | None = None,
        clock: Clock | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "Pomodoro":
        """Build a session with a fresh countdown and event log sharing one clock."""
        clock = clock or MonotonicClock()
        countdown = Countdown(duration, title, clock=clock)
        logger = EventLogger(title, clock=clock)
        return cls(stdin, stdout, countdown, logger, config=config, sleep=sleep)

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def ring_once(self) -> None:
        self._write(bell())

    def ring(self, times: int, delay: float) -> None:
        for _ in range(times):
            self.ring_once()
            self.sleep(delay)

    def handle_key(self, key: bytes | None) -> None:
        """Apply one key press to the countdown."""
        if key == KEY_QUIT:
            self.log.info("quit requested with %s remaining", self.countdown.remaining())
            self.quit_requested = True
            self.countdown.finish()
        elif key == KEY_TOGGLE:
            self.countdown.toggle()
            self.ring_once()

    def step(self) -> bool:
        """
        Run one loop iteration.

        Returns False once the countdown has finished.
        """
        state = self.countdown.tick()
        if self.logger.log(state):
            self.log.debug("state -> %s", state.value)
        if state is State.FINISHED:
            return False

        key = self.stdin.read_byte()
        self.handle_key(key)
        if key == KEY_QUIT:
            # Finished is picked up by the next tick, no redraw
            return True

        self._write(self.display.render_frame(self.countdown))
        self.sleep(self.config.tick_interval)
        return True

    def run(self) -> Outcome:
        """Run until the countdown finishes, then ring and print the log."""
        self.log.info(
            "session started: title=%r target=%s",
            self.countdown.title,
            self.countdown.target,
        )
        self._write(enter_screen())

        try:
            while self.step():
                pass
            outcome = Outcome.QUIT if self.quit_requested else Outcome.COMPLETED
            if outcome is Outcome.COMPLETED or self.config.ring_on_quit:
                self.ring(self.config.finish_bell_count, self.config.finish_bell_delay)
        except Exception:
            self._abandon_screen()
            raise

        self.cleanup()
        self.log.info(
            "session %s: running=%s paused=%s",
            outcome.value,
            format_duration_hms(self.countdown.running),
            format_duration_hms(self.countdown.paused),
        )
        return outcome

    def _abandon_screen(self) -> None:
        """Best-effort screen restore after the loop failed."""
        try:
            self._write(restore_screen() + "\r\n")
        except OSError:
            self.log.warning("could not restore the screen", exc_info=True)

    def cleanup(self) -> None:
        """Restore the screen and write the session log with CRLF line endings."""
        self._write(restore_screen() + "\r\n")
        payload = self.logger.to_json()
        self._write(payload.replace("\n", "\r\n") + "\r\n")
