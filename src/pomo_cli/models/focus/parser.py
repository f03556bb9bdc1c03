"""Duration parsing for the --time option."""

from datetime import timedelta

from .exceptions import TimeParseError

# Positional multipliers, least-significant field last
_MULTIPLIERS = (3600, 60, 1)


def _parse_part(part: str, raw: str) -> int:
    # str.isdigit() accepts unicode digits int() can't always handle
    if not part or not (part.isascii() and part.isdigit()):
        raise TimeParseError(raw)
    return int(part)


def parse_time(raw: str) -> timedelta:
    """
    Parse a duration of the form ``[[HH:]MM:]SS``.

    Fields are not range-checked, so ``"90:00"`` is ninety minutes.

    Raises:
        TimeParseError: on a non-numeric field or a field count outside 1..3.
    """
    parts = raw.split(":")
    if not 1 <= len(parts) <= len(_MULTIPLIERS):
        raise TimeParseError(raw)

    multipliers = _MULTIPLIERS[-len(parts):]
    total = sum(
        _parse_part(part, raw) * multiplier
        for part, multiplier in zip(parts, multipliers)
    )
    try:
        return timedelta(seconds=total)
    except OverflowError as e:
        raise TimeParseError(raw) from e
