"""Full-screen clock face for focus mode."""

from dataclasses import dataclass

from rich.control import Control
from rich.style import Style

from .countdown import Countdown

SECONDS_IN_HOUR = 3600

# Sub-second remainder above which the face still shows the current second
FUDGE_MILLIS = 150

DIGIT_STYLE = Style(color="#268bd2")
TITLE_STYLE = Style(bold=True, underline=True)
KEY_STYLE = Style(bold=True)

GLYPH_HEIGHT = 5

GLYPHS: dict[str, tuple[str, ...]] = {
    "0": ("█████", "█   █", "█   █", "█   █", "█████"),
    "1": ("    █", "    █", "    █", "    █", "    █"),
    "2": ("█████", "   ██", "█████", "█    ", "█████"),
    "3": ("█████", "    █", "█████", "    █", "█████"),
    "4": ("█   █", "█   █", "█████", "    █", "    █"),
    "5": ("█████", "█    ", "█████", "    █", "█████"),
    "6": ("█████", "█    ", "█████", "█   █", "█████"),
    "7": ("█████", "    █", "    █", "    █", "    █"),
    "8": ("█████", "█   █", "█████", "█   █", "█████"),
    "9": ("█████", "█   █", "█████", "    █", "█████"),
    ":": ("   ", " █ ", "   ", " █ ", "   "),
    " ": (" ",) * GLYPH_HEIGHT,
}


@dataclass(frozen=True)
class Position:
    """A 1-based terminal cell."""

    x: int
    y: int


@dataclass(frozen=True)
class CardDims:
    """Placement and inner size of the card border."""

    x: int
    y: int
    height: int
    width: int


def goto(x: int, y: int) -> str:
    """Escape sequence moving the cursor to 1-based column x, row y."""
    return str(Control.move_to(x - 1, y - 1))


def render_card(dims: CardDims) -> str:
    """Heavy box with a light rule under the title and above the help line."""
    w = dims.width
    rows = []
    for offset in range(dims.height):
        if offset == 0:
            row = "┏" + "━" * w + "┓"
        elif offset == dims.height - 1:
            row = "┗" + "━" * w + "┛"
        elif offset in (2, dims.height - 3):
            row = "┃╶" + "─" * (w - 2) + "╴┃"
        else:
            row = "┃" + " " * w + "┃"
        rows.append(goto(dims.x, dims.y + offset) + row)
    return "".join(rows)


def clock_digits(countdown: Countdown) -> str:
    """
    The ``[H:]MM:SS`` shown on the face, or "" once the target is overrun.

    Rounds up when more than 150ms of the current second remain, so a 5
    second timer reads 5 for most of its first second and the face does
    not drop to the next number a tick early.
    """
    left = countdown.remaining()
    if left is None:
        return ""

    secs = left.days * 86400 + left.seconds
    millis = left.microseconds // 1000
    shown = secs + 1 if millis > FUDGE_MILLIS else secs

    hours, rest = divmod(shown, SECONDS_IN_HOUR)
    minutes, seconds = divmod(rest, 60)
    target_secs = int(countdown.target.total_seconds())
    prefix = f"{hours}:" if target_secs >= SECONDS_IN_HOUR else ""
    return f"{prefix}{minutes:02d}:{seconds:02d}"


def render_digits(text: str) -> list[str]:
    """Big-glyph rows for ``text``, one string per row."""
    if not text:
        return [""] * GLYPH_HEIGHT
    spaced = " " + " ".join(text) + " "
    rows = []
    for row in range(GLYPH_HEIGHT):
        line = "".join(GLYPHS.get(ch, ("",) * GLYPH_HEIGHT)[row] for ch in spaced)
        rows.append(DIGIT_STYLE.render(line))
    return rows


def render_timer(countdown: Countdown, pos: Position) -> str:
    """Title, pause marker and clock digits, anchored at ``pos``."""
    title = TITLE_STYLE.render(countdown.title)
    status = "[PAUSED]" if countdown.is_paused else ""
    rows = render_digits(clock_digits(countdown))
    lines = "".join(
        goto(pos.x, pos.y + 4 + idx) + row for idx, row in enumerate(rows)
    )
    return f"{goto(pos.x, pos.y)}{title} {status}{lines}"


def render_help(pos: Position) -> str:
    """Key legend."""
    commands = "   ".join(
        [
            KEY_STYLE.render("<SPACE>") + ": pause/unpause",
            KEY_STYLE.render("(q)") + "uit",
        ]
    )
    return goto(pos.x, pos.y) + commands


def enter_screen() -> str:
    """Switch to the alternate screen, clear it and hide the cursor."""
    return "".join(
        str(control)
        for control in (
            Control.alt_screen(True),
            Control.clear(),
            Control.show_cursor(False),
            Control.home(),
        )
    )


def restore_screen() -> str:
    """Clear, show the cursor and return to the main screen."""
    return "".join(
        str(control)
        for control in (
            Control.home(),
            Control.clear(),
            Control.show_cursor(True),
            Control.alt_screen(False),
        )
    )


def bell() -> str:
    return str(Control.bell())


class TimerDisplay:
    """Lays out a full frame: card, clock face and help legend."""

    def __init__(
        self,
        card: CardDims | None = None,
        timer_pos: Position | None = None,
        help_pos: Position | None = None,
    ):
        self.card = card or CardDims(x=3, y=2, height=15, width=50)
        self.timer_pos = timer_pos or Position(x=5, y=3)
        self.help_pos = help_pos or Position(x=5, y=15)

    def render_frame(self, countdown: Countdown) -> str:
        return "".join(
            [
                str(Control.clear()),
                render_card(self.card),
                render_timer(countdown, self.timer_pos),
                render_help(self.help_pos),
            ]
        )
