"""Main entry point for Pomo CLI."""

import sys
from datetime import timedelta

import typer

from pomo_cli import __version__
from pomo_cli.commands import config as config_command
from pomo_cli.commands.decorators import AppError, command_wrapper
from pomo_cli.config import TimerConfig, get_config_manager
from pomo_cli.focus import (
    KeyboardHandler,
    Outcome,
    Pomodoro,
    SerializationError,
    TimeParseError,
    parse_time,
)
from pomo_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_IO, ERROR_SERIALIZATION
from pomo_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomo",
    help="Quick and dirty CLI pomodoro timer",
    add_completion=False,
)
app.add_typer(config_command.app, name="config", help="Configuration management")


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"pomo {__version__}")
        raise typer.Exit()


def run_session(title: str, duration: timedelta, config: TimerConfig) -> Outcome:
    """Run one session on the controlling terminal."""
    with KeyboardHandler() as keyboard:
        session = Pomodoro.from_parts(
            keyboard, sys.stdout, title, duration, config=config
        )
        return session.run()


@app.callback(invoke_without_command=True)
@command_wrapper
def pomo(
    ctx: typer.Context,
    goal: str | None = typer.Option(
        None,
        "--goal",
        "-g",
        metavar="NAME",
        help='Name of the current task you are working on (default: "").',
    ),
    raw_time: str | None = typer.Option(
        None,
        "--time",
        "-t",
        metavar="TIME",
        help="Initial time, format [[HH:]MM:]SS (default: 25:00).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Count down a focus session, then print how long was spent running and paused.

    Press SPACE to pause or resume and q to quit.
    """
    if ctx.invoked_subcommand is not None:
        return

    config = get_config_manager().config

    try:
        duration = parse_time(raw_time if raw_time is not None else config.defaults.time)
    except TimeParseError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e

    title = goal if goal is not None else config.defaults.goal

    try:
        run_session(title, duration, config.timer)
    except SerializationError as e:
        raise AppError(str(e), exit_code=ERROR_SERIALIZATION) from e
    except OSError as e:
        raise AppError(f"Terminal I/O failed: {e}", exit_code=ERROR_IO) from e


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
