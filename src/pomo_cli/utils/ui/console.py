"""Rich consoles for text printed outside the clock face."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(stderr: bool = False) -> Console:
    """
    Shared console for stdout, or for stderr when ``stderr`` is set.

    Highlighting is off so version strings and durations print as plain text.
    """
    return Console(stderr=stderr, highlight=False)
