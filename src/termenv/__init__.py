"""
termenv: terminal color detection and ANSI styling

Find out what a terminal can display and render styled text for it.

Quick Start:
    >>> import termenv
    >>> out = termenv.Output()
    >>> print(out.string("Hello").bold().foreground(out.color("#ff8700")))

Features:
    - Detect the color profile (TrueColor, ANSI256, ANSI, Ascii) from TERM,
      COLORTERM and TTY status
    - Honour NO_COLOR, CLICOLOR and CLICOLOR_FORCE
    - Downsample 24-bit colors to the 256- and 16-color palettes
    - Immutable, reusable text styles
    - Cursor, screen, mouse, hyperlink and notification sequences
"""

__version__ = "0.1.0"

# Core types
from termenv.core.color import (
    ANSI256Color,
    ANSIColor,
    Color,
    NoColor,
    RGBColor,
    parse_color,
)
from termenv.core.environ import Environ, MappingEnviron, ProcessEnviron
from termenv.core.errors import InvalidColorError, InvalidProfileError, TermEnvError
from termenv.core.profile import Profile

# Output and styling
from termenv.output import Output, default_output, reset_default_output, set_default_output
from termenv.sequences import hyperlink, notify
from termenv.style import Style


# Convenience functions bound to the default output
def string(*parts: str) -> Style:
    """Start a Style on the default output."""
    return default_output().string(*parts)


def color(value: str) -> Color | None:
    """Parse a color and convert it to the default output's profile."""
    return default_output().color(value)


def color_profile() -> Profile:
    return default_output().color_profile()


def env_color_profile() -> Profile:
    return default_output().env_color_profile()


def env_no_color() -> bool:
    return default_output().env_no_color()


def has_dark_background() -> bool:
    return default_output().has_dark_background()


def foreground_color() -> Color:
    return default_output().foreground_color()


def background_color() -> Color:
    return default_output().background_color()


__all__ = [
    # Version
    "__version__",
    # Core types
    "ANSI256Color",
    "ANSIColor",
    "Color",
    "NoColor",
    "RGBColor",
    "parse_color",
    "Environ",
    "MappingEnviron",
    "ProcessEnviron",
    "Profile",
    # Errors
    "TermEnvError",
    "InvalidColorError",
    "InvalidProfileError",
    # Output and styling
    "Output",
    "Style",
    "default_output",
    "set_default_output",
    "reset_default_output",
    "hyperlink",
    "notify",
    # Default output shortcuts
    "string",
    "color",
    "color_profile",
    "env_color_profile",
    "env_no_color",
    "has_dark_background",
    "foreground_color",
    "background_color",
]
