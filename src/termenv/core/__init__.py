"""Color model, profile detection and color conversion."""

from termenv.core.color import (
    ANSI256Color,
    ANSIColor,
    Color,
    ColorMode,
    NoColor,
    RGBColor,
    color_from_string,
    parse_int_prefix,
    parse_color,
    parse_hex,
    to_rgb,
)
from termenv.core.convert import ansi256_to_ansi, convert, rgb_to_ansi256
from termenv.core.detect import (
    cli_color_forced,
    detect_profile,
    env_color_profile,
    env_no_color,
    is_tty,
)
from termenv.core.environ import Environ, MappingEnviron, ProcessEnviron
from termenv.core.errors import InvalidColorError, InvalidProfileError, TermEnvError
from termenv.core.profile import Profile

__all__ = [
    "ANSI256Color",
    "ANSIColor",
    "Color",
    "ColorMode",
    "NoColor",
    "RGBColor",
    "color_from_string",
    "parse_int_prefix",
    "parse_color",
    "parse_hex",
    "to_rgb",
    "ansi256_to_ansi",
    "convert",
    "rgb_to_ansi256",
    "cli_color_forced",
    "detect_profile",
    "env_color_profile",
    "env_no_color",
    "is_tty",
    "Environ",
    "MappingEnviron",
    "ProcessEnviron",
    "InvalidColorError",
    "InvalidProfileError",
    "TermEnvError",
    "Profile",
]
