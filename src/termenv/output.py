"""Output destinations bound to a color profile."""

from __future__ import annotations

import colorsys
import logging
import sys
from typing import TextIO

from termenv import sequences
from termenv.core.color import (
    ANSIColor,
    Color,
    NoColor,
    color_from_string,
    parse_int_prefix,
    to_rgb,
)
from termenv.core.detect import (
    detect_profile,
    env_color_profile,
    env_no_color,
    is_tty,
)
from termenv.core.environ import Environ, ProcessEnviron
from termenv.core.profile import Profile
from termenv.style import Style

logger = logging.getLogger(__name__)


class Output:
    """
    A terminal destination and what it can display.

    The profile is resolved from the environment at construction unless one
    is given. With ``cache=True`` the terminal's foreground and background
    colors are read once, up front, and reused for the object's lifetime;
    create a new Output to pick up environment changes.

    Example:
        >>> out = Output(sys.stderr, cache=True)
        >>> out.write(out.string("done").bold().foreground(out.color("#00ff00")).render())
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        profile: Profile | None = None,
        environ: Environ | None = None,
        assume_tty: bool = False,
        unsafe: bool = False,
        cache: bool = False,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.environ = environ if environ is not None else ProcessEnviron()
        self.assume_tty = assume_tty
        self.unsafe = unsafe
        self.cache = cache
        self._fg_color: Color | None = None
        self._bg_color: Color | None = None

        if profile is None:
            profile = self.env_color_profile()
        self.profile = profile

        if cache:
            self.foreground_color()
            self.background_color()

    def __repr__(self) -> str:
        return f"Output(stream={self.stream!r}, profile={self.profile})"

    # --- capability detection -------------------------------------------

    def is_tty(self) -> bool:
        return is_tty(self.stream, self.environ, self.assume_tty, self.unsafe)

    def color_profile(self) -> Profile:
        """Profile supported by the terminal, ignoring NO_COLOR and friends."""
        return detect_profile(self.environ, self.is_tty())

    def env_color_profile(self) -> Profile:
        """Profile after applying NO_COLOR, CLICOLOR and CLICOLOR_FORCE."""
        return env_color_profile(self.environ, self.is_tty())

    def env_no_color(self) -> bool:
        return env_no_color(self.environ)

    def foreground_color(self) -> Color:
        """The terminal's default foreground color, NoColor if unknown."""
        if not self.cache:
            return self._read_colorfgbg(foreground=True)
        if self._fg_color is None:
            self._fg_color = self._read_colorfgbg(foreground=True)
        return self._fg_color

    def background_color(self) -> Color:
        """The terminal's default background color, NoColor if unknown."""
        if not self.cache:
            return self._read_colorfgbg(foreground=False)
        if self._bg_color is None:
            self._bg_color = self._read_colorfgbg(foreground=False)
        return self._bg_color

    def _read_colorfgbg(self, foreground: bool) -> Color:
        # COLORFGBG is "FG;BG" (rxvt also emits "FG;default;BG")
        if not self.is_tty():
            return NoColor()
        value = self.environ.getenv("COLORFGBG")
        if ";" not in value:
            return NoColor()

        parts = value.split(";")
        token = parts[0] if foreground else parts[-1]
        index = parse_int_prefix(token)
        if index is None:
            logger.debug("ignoring unparseable COLORFGBG %r", value)
            return NoColor()
        return ANSIColor(index)

    def has_dark_background(self) -> bool:
        """
        True if the background looks dark (HSL lightness below 0.5).

        When the background color cannot be determined, a dark background
        is assumed.
        """
        rgb = to_rgb(self.background_color())
        if rgb is None:
            return True
        r, g, b = (c / 255 for c in rgb)
        _, lightness, _ = colorsys.rgb_to_hls(r, g, b)
        return lightness < 0.5

    # --- colors and styles ----------------------------------------------

    def convert(self, color: Color) -> Color:
        return self.profile.convert(color)

    def color(self, value: str) -> Color | None:
        """
        Create a color from a hex string ("#abcdef") or a palette index.

        The result is converted to this output's profile. Returns None for
        empty or unparseable input.
        """
        color = color_from_string(value)
        if color is None:
            return None
        return self.convert(color)

    def string(self, *parts: str) -> Style:
        """Start a Style for the space-joined parts under this profile."""
        return Style(self.profile, " ".join(parts))

    # --- writing --------------------------------------------------------

    def write(self, text: str) -> int:
        """Write text to the destination and flush it."""
        self.stream.write(text)
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()
        return len(text)

    def move_cursor(self, row: int, column: int) -> None:
        """Move cursor to position (1-indexed)."""
        self.write(sequences.cursor_position(row, column))

    def cursor_up(self, n: int = 1) -> None:
        self.write(sequences.cursor_up(n))

    def cursor_down(self, n: int = 1) -> None:
        self.write(sequences.cursor_down(n))

    def cursor_forward(self, n: int = 1) -> None:
        self.write(sequences.cursor_forward(n))

    def cursor_back(self, n: int = 1) -> None:
        self.write(sequences.cursor_back(n))

    def cursor_next_line(self, n: int = 1) -> None:
        self.write(sequences.cursor_next_line(n))

    def cursor_previous_line(self, n: int = 1) -> None:
        self.write(sequences.cursor_previous_line(n))

    def save_cursor_position(self) -> None:
        self.write(sequences.SAVE_CURSOR_POSITION)

    def restore_cursor_position(self) -> None:
        self.write(sequences.RESTORE_CURSOR_POSITION)

    def hide_cursor(self) -> None:
        self.write(sequences.HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(sequences.SHOW_CURSOR)

    def clear_screen(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(sequences.erase_display(sequences.EraseMode.ENTIRE_DISPLAY))
        self.move_cursor(1, 1)

    def clear_line(self) -> None:
        self.write(sequences.erase_line(sequences.EraseLineMode.ENTIRE_LINE))

    def clear_lines(self, n: int) -> None:
        self.write(sequences.clear_lines(n))

    def alt_screen(self) -> None:
        self.write(sequences.ALT_SCREEN)

    def exit_alt_screen(self) -> None:
        self.write(sequences.EXIT_ALT_SCREEN)

    def save_screen(self) -> None:
        self.write(sequences.SAVE_SCREEN)

    def restore_screen(self) -> None:
        self.write(sequences.RESTORE_SCREEN)

    def reset(self) -> None:
        """Fully reset the terminal (RIS)."""
        self.write(sequences.RESET_TERMINAL)

    def set_foreground_color(self, color: Color) -> None:
        self.write(sequences.set_foreground_color(color))

    def set_background_color(self, color: Color) -> None:
        self.write(sequences.set_background_color(color))

    def set_cursor_color(self, color: Color) -> None:
        self.write(sequences.set_cursor_color(color))

    def set_window_title(self, title: str) -> None:
        self.write(sequences.set_window_title(title))

    def enable_mouse_press(self) -> None:
        self.write(sequences.ENABLE_MOUSE_PRESS)

    def disable_mouse_press(self) -> None:
        self.write(sequences.DISABLE_MOUSE_PRESS)

    def enable_mouse(self) -> None:
        self.write(sequences.ENABLE_MOUSE)

    def disable_mouse(self) -> None:
        self.write(sequences.DISABLE_MOUSE)

    def enable_mouse_hilite(self) -> None:
        self.write(sequences.ENABLE_MOUSE_HILITE)

    def disable_mouse_hilite(self) -> None:
        self.write(sequences.DISABLE_MOUSE_HILITE)

    def enable_mouse_cell_motion(self) -> None:
        self.write(sequences.ENABLE_MOUSE_CELL_MOTION)

    def disable_mouse_cell_motion(self) -> None:
        self.write(sequences.DISABLE_MOUSE_CELL_MOTION)

    def enable_mouse_all_motion(self) -> None:
        self.write(sequences.ENABLE_MOUSE_ALL_MOTION)

    def disable_mouse_all_motion(self) -> None:
        self.write(sequences.DISABLE_MOUSE_ALL_MOTION)

    def enable_mouse_extended_mode(self) -> None:
        self.write(sequences.ENABLE_MOUSE_EXTENDED_MODE)

    def disable_mouse_extended_mode(self) -> None:
        self.write(sequences.DISABLE_MOUSE_EXTENDED_MODE)

    def enable_mouse_pixels_mode(self) -> None:
        self.write(sequences.ENABLE_MOUSE_PIXELS_MODE)

    def disable_mouse_pixels_mode(self) -> None:
        self.write(sequences.DISABLE_MOUSE_PIXELS_MODE)

    def enable_bracketed_paste(self) -> None:
        self.write(sequences.ENABLE_BRACKETED_PASTE)

    def disable_bracketed_paste(self) -> None:
        self.write(sequences.DISABLE_BRACKETED_PASTE)

    def change_scrolling_region(self, top: int, bottom: int) -> None:
        self.write(sequences.change_scrolling_region(top, bottom))

    def insert_lines(self, n: int) -> None:
        self.write(sequences.insert_lines(n))

    def delete_lines(self, n: int) -> None:
        self.write(sequences.delete_lines(n))

    def hyperlink(self, link: str, name: str) -> None:
        self.write(sequences.hyperlink(link, name))

    def notify(self, title: str, body: str) -> None:
        self.write(sequences.notify(title, body))


_default_output: Output | None = None


def default_output() -> Output:
    """Process-wide Output for sys.stdout, created on first use."""
    global _default_output
    if _default_output is None:
        _default_output = Output(sys.stdout)
    return _default_output


def set_default_output(output: Output) -> None:
    """Replace the process-wide Output."""
    global _default_output
    _default_output = output


def reset_default_output() -> None:
    """Forget the process-wide Output; the next use re-detects."""
    global _default_output
    _default_output = None
