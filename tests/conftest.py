"""Shared test fixtures and configuration.

Provides a fake clock, scripted keyboard input and log-file isolation so
sessions can be driven without a real terminal or real waiting.
"""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterable
from unittest.mock import patch

import pytest


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeClock:
    """Deterministic clock; time only moves when advanced."""

    def __init__(self, start: float = 1000.0):
        self.t = start

    def now(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


class FakeSleep:
    """Stands in for time.sleep by advancing a FakeClock."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        self.clock.advance(seconds)


class ScriptedInput:
    """Input source replaying a fixed sequence of bytes (None = no key)."""

    def __init__(self, keys: Iterable[bytes | None] = ()):
        self.keys = list(keys)
        self.reads = 0

    def read_byte(self) -> bytes | None:
        self.reads += 1
        if self.keys:
            return self.keys.pop(0)
        return None


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def fake_sleep(clock: FakeClock) -> FakeSleep:
    return FakeSleep(clock)


# ---------------------------------------------------------------------------
# Logger isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    # pytest attaches its own capture handlers to the logger; leave those alone
    app_logger = logging.getLogger("pomo_cli")
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            app_logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Send the application log file to tmp_path and reset the singleton."""
    import pomo_cli.utils.logger as logger_mod

    logger_mod._logger = None
    _drop_file_handlers()
    log_dir = tmp_path / "logs"
    with patch("pomo_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    _drop_file_handlers()
    logger_mod._logger = None


@pytest.fixture()
def scripted_input():
    """Factory for ScriptedInput sources."""
    return ScriptedInput
