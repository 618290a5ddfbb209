"""Escape sequence templates for cursor, screen and mouse control."""

from enum import IntEnum

from termenv.core.color import Color
from termenv.core.constants import BEL, CSI, ESC, OSC, ST


class EraseMode(IntEnum):
    """Modes for erase_display (ED)."""
    TO_END = 0
    TO_BEGINNING = 1
    ENTIRE_DISPLAY = 2
    SAVED_LINES = 3


class EraseLineMode(IntEnum):
    """Modes for erase_line (EL)."""
    TO_END = 0
    TO_BEGINNING = 1
    ENTIRE_LINE = 2


# Fixed sequences
SAVE_CURSOR_POSITION = f"{ESC}7"
RESTORE_CURSOR_POSITION = f"{ESC}8"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
ALT_SCREEN = f"{CSI}?1049h"
EXIT_ALT_SCREEN = f"{CSI}?1049l"
SAVE_SCREEN = f"{CSI}?47h"
RESTORE_SCREEN = f"{CSI}?47l"
RESET_TERMINAL = f"{ESC}c"

# Mouse reporting
ENABLE_MOUSE_PRESS = f"{CSI}?9h"           # X10
DISABLE_MOUSE_PRESS = f"{CSI}?9l"
ENABLE_MOUSE = f"{CSI}?1000h"              # press and release
DISABLE_MOUSE = f"{CSI}?1000l"
ENABLE_MOUSE_HILITE = f"{CSI}?1001h"
DISABLE_MOUSE_HILITE = f"{CSI}?1001l"
ENABLE_MOUSE_CELL_MOTION = f"{CSI}?1002h"
DISABLE_MOUSE_CELL_MOTION = f"{CSI}?1002l"
ENABLE_MOUSE_ALL_MOTION = f"{CSI}?1003h"
DISABLE_MOUSE_ALL_MOTION = f"{CSI}?1003l"
ENABLE_MOUSE_EXTENDED_MODE = f"{CSI}?1006h"  # SGR encoding
DISABLE_MOUSE_EXTENDED_MODE = f"{CSI}?1006l"
ENABLE_MOUSE_PIXELS_MODE = f"{CSI}?1016h"
DISABLE_MOUSE_PIXELS_MODE = f"{CSI}?1016l"

ENABLE_BRACKETED_PASTE = f"{CSI}?2004h"
DISABLE_BRACKETED_PASTE = f"{CSI}?2004l"


def cursor_up(n: int = 1) -> str:
    return f"{CSI}{n}A"


def cursor_down(n: int = 1) -> str:
    return f"{CSI}{n}B"


def cursor_forward(n: int = 1) -> str:
    return f"{CSI}{n}C"


def cursor_back(n: int = 1) -> str:
    return f"{CSI}{n}D"


def cursor_next_line(n: int = 1) -> str:
    return f"{CSI}{n}E"


def cursor_previous_line(n: int = 1) -> str:
    return f"{CSI}{n}F"


def cursor_horizontal_absolute(column: int) -> str:
    return f"{CSI}{column}G"


def cursor_position(row: int, column: int) -> str:
    """Move cursor to position (1-indexed)."""
    return f"{CSI}{row};{column}H"


def erase_display(mode: EraseMode = EraseMode.ENTIRE_DISPLAY) -> str:
    return f"{CSI}{int(mode)}J"


def erase_line(mode: EraseLineMode = EraseLineMode.ENTIRE_LINE) -> str:
    return f"{CSI}{int(mode)}K"


def clear_lines(n: int) -> str:
    """Clear the current line and the ``n - 1`` lines above it."""
    parts = []
    for i in range(n):
        parts.append(erase_line())
        if i < n - 1:
            parts.append(cursor_up(1))
    return "".join(parts)


def change_scrolling_region(top: int, bottom: int) -> str:
    return f"{CSI}{top};{bottom}r"


def insert_lines(n: int) -> str:
    return f"{CSI}{n}L"


def delete_lines(n: int) -> str:
    return f"{CSI}{n}M"


def set_foreground_color(color: Color) -> str:
    """OSC 10: set the terminal's default foreground color."""
    return f"{OSC}10;{color}{BEL}"


def set_background_color(color: Color) -> str:
    """OSC 11: set the terminal's default background color."""
    return f"{OSC}11;{color}{BEL}"


def set_cursor_color(color: Color) -> str:
    """OSC 12: set the cursor color."""
    return f"{OSC}12;{color}{BEL}"


def set_window_title(title: str) -> str:
    """OSC 2: set the window title."""
    return f"{OSC}2;{title}{BEL}"


def hyperlink(link: str, name: str) -> str:
    """
    Wrap ``name`` in an OSC 8 hyperlink to ``link``.

    An empty link returns the name unchanged.
    """
    if not link:
        return name
    return f"{OSC}8;;{link}{ST}{name}{OSC}8;;{ST}"


def notify(title: str, body: str) -> str:
    """OSC 777 desktop notification."""
    return f"{OSC}777;notify;{title};{body}{ST}"
