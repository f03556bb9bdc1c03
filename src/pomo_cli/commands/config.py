"""Configuration management commands."""

import json
from typing import Optional

import typer
from pydantic import ValidationError

from pomo_cli.commands.decorators import AppError, command_wrapper
from pomo_cli.config import get_config_manager
from pomo_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomo_cli.utils.ui.console import get_console
from pomo_cli.utils.ui.formatters import format_success

app = typer.Typer(help="Configuration management commands")


def _require_key(key: str) -> None:
    if get_config_manager().get(key) is None:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS)


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View current configuration."""
    config_dict = get_config_manager().config.model_dump()
    get_console().print_json(json.dumps(config_dict))


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.tick_interval_ms)"),
) -> None:
    """Get a configuration value."""
    _require_key(key)
    get_console().print(repr(get_config_manager().get(key)), markup=False)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., defaults.time)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    _require_key(key)
    manager = get_config_manager()
    try:
        manager.set(key, value)
    except ValidationError as e:
        raise AppError(
            f"Invalid value {value!r} for '{key}': {e.errors()[0]['msg']}",
            exit_code=ERROR_INVALID_ARGS,
        ) from e
    format_success(f"Configuration '{key}' set to {manager.get(key)!r}")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if key:
        _require_key(key)
    if not yes:
        msg = f"'{key}'" if key else "entire configuration"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            raise typer.Exit(0)

    get_config_manager().reset(key)
    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
