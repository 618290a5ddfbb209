"""Color representation at each terminal fidelity."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from termenv.core.constants import ANSI_HEX, BACKGROUND, FOREGROUND
from termenv.core.errors import InvalidColorError


class ColorMode(Enum):
    """Fidelity tag carried by every color variant."""
    NONE = "none"           # No color escape at all
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


_HEX = re.compile(r"[0-9a-fA-F]+")


def parse_hex(value: str) -> tuple[int, int, int] | None:
    """Parse a hex color string to an 8-bit RGB triple.

    Accepts ``#rrggbb`` and the ``#rgb`` shorthand. Malformed lengths are
    read leniently: five digits give ``(rr, gg, b)`` with the last nibble
    taken as-is, seven or more digits are cut to the first six. Anything
    else returns None.
    """
    if not value.startswith("#"):
        return None
    digits = value[1:]

    if len(digits) == 3:
        if not _HEX.fullmatch(digits):
            return None
        r, g, b = (int(d, 16) * 17 for d in digits)
        return (r, g, b)

    if len(digits) == 5:
        parts = (digits[0:2], digits[2:4], digits[4:5])
    elif len(digits) >= 6:
        parts = (digits[0:2], digits[2:4], digits[4:6])
    else:
        return None

    if not all(_HEX.fullmatch(p) for p in parts):
        return None
    r, g, b = (int(p, 16) for p in parts)
    return (r, g, b)


@dataclass(frozen=True, slots=True)
class NoColor:
    """Absence of color; renders to nothing."""
    mode: ClassVar[ColorMode] = ColorMode.NONE

    def sequence(self, background: bool = False) -> str:
        return ""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class ANSIColor:
    """
    One of the 16 standard ANSI colors.

    The value is not range checked; out-of-range values produce
    out-of-range SGR codes, which terminals ignore.
    """
    value: int
    mode: ClassVar[ColorMode] = ColorMode.STANDARD_16

    # Standard 16 colors (index 0-15)
    BLACK: ClassVar["ANSIColor"]
    RED: ClassVar["ANSIColor"]
    GREEN: ClassVar["ANSIColor"]
    YELLOW: ClassVar["ANSIColor"]
    BLUE: ClassVar["ANSIColor"]
    MAGENTA: ClassVar["ANSIColor"]
    CYAN: ClassVar["ANSIColor"]
    WHITE: ClassVar["ANSIColor"]
    BRIGHT_BLACK: ClassVar["ANSIColor"]
    BRIGHT_RED: ClassVar["ANSIColor"]
    BRIGHT_GREEN: ClassVar["ANSIColor"]
    BRIGHT_YELLOW: ClassVar["ANSIColor"]
    BRIGHT_BLUE: ClassVar["ANSIColor"]
    BRIGHT_MAGENTA: ClassVar["ANSIColor"]
    BRIGHT_CYAN: ClassVar["ANSIColor"]
    BRIGHT_WHITE: ClassVar["ANSIColor"]

    def sequence(self, background: bool = False) -> str:
        """Return the bare SGR parameter (e.g. "31", "101")."""
        offset = 10 if background else 0
        if self.value < 8:
            return str(self.value + offset + 30)
        return str(self.value - 8 + offset + 90)

    def __str__(self) -> str:
        return palette_hex(self.value)


@dataclass(frozen=True, slots=True)
class ANSI256Color:
    """An index into the 256-color palette."""
    value: int
    mode: ClassVar[ColorMode] = ColorMode.EXTENDED_256

    def sequence(self, background: bool = False) -> str:
        prefix = BACKGROUND if background else FOREGROUND
        return f"{prefix};5;{self.value}"

    def __str__(self) -> str:
        return palette_hex(self.value)


@dataclass(frozen=True, slots=True)
class RGBColor:
    """A 24-bit color given as a hex string such as "#abcdef"."""
    hex: str
    mode: ClassVar[ColorMode] = ColorMode.TRUE_COLOR

    def rgb(self) -> tuple[int, int, int] | None:
        """Return the parsed (r, g, b) triple, or None if the hex is malformed."""
        return parse_hex(self.hex)

    def sequence(self, background: bool = False) -> str:
        rgb = self.rgb()
        if rgb is None:
            return ""
        prefix = BACKGROUND if background else FOREGROUND
        r, g, b = rgb
        return f"{prefix};2;{r};{g};{b}"

    def __str__(self) -> str:
        return self.hex


Color = Union[NoColor, ANSIColor, ANSI256Color, RGBColor]


def palette_hex(index: int) -> str:
    """Look up the reference hex for a palette index, "" if out of range."""
    if 0 <= index < len(ANSI_HEX):
        return ANSI_HEX[index]
    return ""


def to_rgb(color: Color) -> tuple[int, int, int] | None:
    """Resolve any color to an 8-bit RGB triple, or None if it has none."""
    if color.mode is ColorMode.TRUE_COLOR:
        return parse_hex(color.hex)
    if color.mode in (ColorMode.STANDARD_16, ColorMode.EXTENDED_256):
        hex_value = palette_hex(color.value)
        return parse_hex(hex_value) if hex_value else None
    return None


# Initialize class-level color constants
ANSIColor.BLACK = ANSIColor(0)
ANSIColor.RED = ANSIColor(1)
ANSIColor.GREEN = ANSIColor(2)
ANSIColor.YELLOW = ANSIColor(3)
ANSIColor.BLUE = ANSIColor(4)
ANSIColor.MAGENTA = ANSIColor(5)
ANSIColor.CYAN = ANSIColor(6)
ANSIColor.WHITE = ANSIColor(7)
ANSIColor.BRIGHT_BLACK = ANSIColor(8)
ANSIColor.BRIGHT_RED = ANSIColor(9)
ANSIColor.BRIGHT_GREEN = ANSIColor(10)
ANSIColor.BRIGHT_YELLOW = ANSIColor(11)
ANSIColor.BRIGHT_BLUE = ANSIColor(12)
ANSIColor.BRIGHT_MAGENTA = ANSIColor(13)
ANSIColor.BRIGHT_CYAN = ANSIColor(14)
ANSIColor.BRIGHT_WHITE = ANSIColor(15)


_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_prefix(value: str) -> int | None:
    """Read the decimal integer at the start of ``value``.

    Leading whitespace is skipped and anything after the digits is ignored,
    so "1.5" and "12px" give 1 and 12. Returns None if no digit is found.
    """
    match = _LEADING_INTEGER.match(value)
    if match is None:
        return None
    return int(match.group(1))


def color_from_string(value: str) -> Color | None:
    """Build a color from "#rrggbb" or a decimal palette index.

    Indices below 16 give an ANSIColor, the rest an ANSI256Color. The index
    is read with parse_int_prefix. Empty input or input without a leading
    integer returns None. The hex is kept as given; it is only parsed when
    a sequence is rendered or the color is converted.
    """
    if not value:
        return None
    if value.startswith("#"):
        return RGBColor(value)
    index = parse_int_prefix(value)
    if index is None:
        return None
    if index < 16:
        return ANSIColor(index)
    return ANSI256Color(index)


def parse_color(value: str) -> Color:
    """Strict form of color_from_string; raises InvalidColorError."""
    color = color_from_string(value)
    if color is None:
        raise InvalidColorError(value)
    if isinstance(color, RGBColor) and color.rgb() is None:
        raise InvalidColorError(value, "invalid hex color")
    return color
