"""Downsample colors to the nearest color a profile can display.

RGB -> 256 uses the xterm cube/grey-ramp quantisation with a plain
Euclidean distance. 256 -> 16 compares against the 16 reference colors
in HSLuv space.
"""

import math
import sys

import hsluv

from termenv.core.color import (
    ANSI256Color,
    ANSIColor,
    Color,
    ColorMode,
    NoColor,
    palette_hex,
    parse_hex,
)
from termenv.core.constants import CUBE_LEVELS
from termenv.core.profile import Profile


def _cube_index(v: int) -> int:
    """Quantize one 0-255 channel to a 0-5 cube level."""
    if v < 48:
        return 0
    if v < 115:
        return 1
    return (v - 35) // 40


def _rgb_distance(a: tuple[float, float, float], b: tuple[float, float, float]) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def rgb_to_ansi256(r: int, g: int, b: int) -> ANSI256Color:
    """Map an 8-bit RGB triple to the nearest 256-palette entry."""
    ri, gi, bi = _cube_index(r), _cube_index(g), _cube_index(b)
    cube = 36 * ri + 6 * gi + bi  # 0..215

    cube_rgb = (CUBE_LEVELS[ri] / 255, CUBE_LEVELS[gi] / 255, CUBE_LEVELS[bi] / 255)

    average = (r + g + b) / 3
    if average > 238:
        gray = 23
    else:
        gray = int((average - 3) / 10)  # 0..23
    gray_value = (8 + 10 * gray) / 255
    gray_rgb = (gray_value, gray_value, gray_value)

    source = (r / 255, g / 255, b / 255)
    if _rgb_distance(source, cube_rgb) <= _rgb_distance(source, gray_rgb):
        return ANSI256Color(16 + cube)
    return ANSI256Color(232 + gray)


def hsluv_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Perceptual distance between two 8-bit RGB triples in HSLuv space.

    Hue is scaled down by 100 so it weighs roughly like saturation and
    lightness, which are compared on a 0-1 scale.
    """
    h1, s1, l1 = hsluv.rgb_to_hsluv([c / 255 for c in a])
    h2, s2, l2 = hsluv.rgb_to_hsluv([c / 255 for c in b])
    return math.sqrt(
        ((h1 - h2) / 100) ** 2
        + ((s1 - s2) / 100) ** 2
        + ((l1 - l2) / 100) ** 2
    )


def ansi256_to_ansi(color: ANSI256Color) -> ANSIColor:
    """Find the perceptually closest of the 16 ANSI colors."""
    hex_value = palette_hex(color.value)
    source = parse_hex(hex_value) if hex_value else None
    if source is None:
        return ANSIColor(0)

    result = 0
    min_distance = sys.float_info.max
    for i in range(16):
        distance = hsluv_distance(source, parse_hex(palette_hex(i)))
        if distance < min_distance:
            min_distance = distance
            result = i
    return ANSIColor(result)


def convert(profile: Profile, color: Color) -> Color:
    """Transform a color to one supported within the given profile.

    Never raises: malformed hex converts to NoColor.
    """
    if profile == Profile.ASCII:
        return NoColor()

    mode = color.mode
    if mode is ColorMode.EXTENDED_256:
        if profile == Profile.ANSI:
            return ansi256_to_ansi(color)
        return color
    if mode is ColorMode.TRUE_COLOR:
        rgb = parse_hex(color.hex)
        if rgb is None:
            return NoColor()
        if profile == Profile.TRUE_COLOR:
            return color
        reduced = rgb_to_ansi256(*rgb)
        if profile == Profile.ANSI:
            return ansi256_to_ansi(reduced)
        return reduced
    # NONE and STANDARD_16 are already representable everywhere else
    return color
