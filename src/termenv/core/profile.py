"""Terminal color profiles."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from termenv.core.errors import InvalidProfileError

if TYPE_CHECKING:
    from termenv.core.color import Color
    from termenv.style import Style


class Profile(IntEnum):
    """
    Color capability of a destination.

    Lower values are more capable: TRUE_COLOR < ANSI256 < ANSI < ASCII.
    ASCII never emits color or style codes.
    """
    TRUE_COLOR = 0  # 24-bit
    ANSI256 = 1     # 8-bit
    ANSI = 2        # 4-bit
    ASCII = 3       # uncolored

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name

    def __format__(self, spec: str) -> str:
        return format(self.display_name, spec)

    @classmethod
    def from_name(cls, name: str) -> Profile:
        """Look up a profile by display or member name, ignoring case."""
        key = name.strip().lower().replace("_", "").replace("-", "")
        for profile, display in _DISPLAY_NAMES.items():
            if key == display.lower():
                return profile
        raise InvalidProfileError(name)

    def supports(self, other: Profile) -> bool:
        """True if colors of profile ``other`` display without conversion."""
        return self <= other

    def convert(self, color: Color) -> Color:
        """Transform a color to the nearest one this profile supports."""
        from termenv.core.convert import convert
        return convert(self, color)

    def color(self, value: str) -> Color | None:
        """Parse a hex or index string and convert it to this profile."""
        from termenv.core.color import color_from_string

        color = color_from_string(value)
        if color is None:
            return None
        return self.convert(color)

    def from_color(self, r: int, g: int, b: int) -> Color:
        """Convert an 8-bit RGB triple to this profile.

        Channels are clamped to 0-255 before formatting as "#rrggbb".
        """
        from termenv.core.color import RGBColor

        r, g, b = (min(max(int(c), 0), 255) for c in (r, g, b))
        return self.convert(RGBColor(f"#{r:02x}{g:02x}{b:02x}"))

    def string(self, *parts: str) -> Style:
        """Start a Style for the space-joined parts under this profile."""
        from termenv.style import Style
        return Style(self, " ".join(parts))


_DISPLAY_NAMES = {
    Profile.TRUE_COLOR: "TrueColor",
    Profile.ANSI256: "ANSI256",
    Profile.ANSI: "ANSI",
    Profile.ASCII: "Ascii",
}
