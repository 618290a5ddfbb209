"""Styled strings rendered as SGR escape sequences."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rich.cells import cell_len

from termenv.core.color import Color
from termenv.core.constants import (
    BLINK_SEQ,
    BOLD_SEQ,
    CROSS_OUT_SEQ,
    CSI,
    FAINT_SEQ,
    ITALIC_SEQ,
    OVERLINE_SEQ,
    RESET,
    REVERSE_SEQ,
    UNDERLINE_SEQ,
)
from termenv.core.profile import Profile


@dataclass(frozen=True)
class Style:
    """
    A string with rendering attributes applied.

    Every attribute method returns a new Style, so a partially built style
    can serve as a template for several others:

        >>> base = Style(Profile.TRUE_COLOR, "text").bold()
        >>> warn = base.foreground(ANSIColor.YELLOW)
        >>> err = base.foreground(ANSIColor.RED)
    """
    profile: Profile
    text: str = ""
    styles: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "styles", tuple(self.styles))

    def _with(self, code: str) -> Style:
        return replace(self, styles=self.styles + (code,))

    def foreground(self, color: Color | None) -> Style:
        """Set the foreground color.

        A color that renders to nothing still takes a slot, which can leave a
        stray ";" in the sequence. None leaves the style unchanged.
        """
        if color is None:
            return replace(self)
        return self._with(color.sequence(False))

    def background(self, color: Color | None) -> Style:
        """Set the background color; see foreground()."""
        if color is None:
            return replace(self)
        return self._with(color.sequence(True))

    def bold(self) -> Style:
        return self._with(BOLD_SEQ)

    def faint(self) -> Style:
        return self._with(FAINT_SEQ)

    def italic(self) -> Style:
        return self._with(ITALIC_SEQ)

    def underline(self) -> Style:
        return self._with(UNDERLINE_SEQ)

    def overline(self) -> Style:
        return self._with(OVERLINE_SEQ)

    def blink(self) -> Style:
        return self._with(BLINK_SEQ)

    def reverse(self) -> Style:
        return self._with(REVERSE_SEQ)

    def cross_out(self) -> Style:
        return self._with(CROSS_OUT_SEQ)

    def styled(self, text: str) -> str:
        """Render arbitrary text with this style's attributes."""
        if self.profile == Profile.ASCII or not self.styles:
            return text
        seq = ";".join(self.styles)
        if seq == "":
            return text
        return f"{CSI}{seq}m{text}{RESET}"

    def render(self) -> str:
        return self.styled(self.text)

    def width(self) -> int:
        """Number of terminal cells needed to display the text."""
        return cell_len(self.text)

    def __str__(self) -> str:
        return self.render()
