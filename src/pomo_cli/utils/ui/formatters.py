"""Output formatters for messages printed outside the timer screen."""

from datetime import timedelta

from .console import get_console


def format_duration_hms(duration: timedelta) -> str:
    """Format a duration as ``H:MM:SS``."""
    total = max(0, int(duration.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console(stderr=True).print(f"[bold red]Error:[/bold red] {message}")



def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")
