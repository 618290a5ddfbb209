"""Infer a destination's color profile from its environment.

Only environment variables and the stream's own TTY flag are consulted;
the terminal is never queried.
"""

import logging
from typing import Any

from termenv.core.environ import Environ
from termenv.core.profile import Profile

logger = logging.getLogger(__name__)

# TERM values of terminals known to support 24-bit color
TRUE_COLOR_TERMS = frozenset({
    "alacritty",
    "contour",
    "rio",
    "wezterm",
    "xterm-ghostty",
    "xterm-kitty",
})


def is_tty(
    stream: Any,
    environ: Environ,
    assume_tty: bool = False,
    unsafe: bool = False,
) -> bool:
    """Decide whether ``stream`` should be treated as an interactive terminal.

    ``assume_tty`` and ``unsafe`` force True. Under CI the answer is always
    False, even if the stream claims to be a terminal.
    """
    if assume_tty or unsafe:
        return True
    if environ.getenv("CI"):
        return False

    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # Closed or detached streams
        return False


def detect_profile(environ: Environ, tty: bool) -> Profile:
    """Return the best profile supported according to TERM and COLORTERM."""
    if not tty:
        return Profile.ASCII

    if environ.getenv("GOOGLE_CLOUD_SHELL") == "true":
        return Profile.TRUE_COLOR

    term = environ.getenv("TERM").lower()
    color_term = environ.getenv("COLORTERM").lower()

    if color_term in ("truecolor", "24bit"):
        # screen only passes through 256 colors; tmux handles 24-bit
        if term.startswith("screen") and environ.getenv("TERM_PROGRAM") != "tmux":
            return Profile.ANSI256
        return Profile.TRUE_COLOR

    if color_term in ("yes", "true"):
        return Profile.ANSI256

    if term in TRUE_COLOR_TERMS:
        return Profile.TRUE_COLOR

    if term in ("linux", "xterm"):
        return Profile.ANSI

    if "256color" in term:
        return Profile.ANSI256
    if "color" in term:
        return Profile.ANSI
    if "ansi" in term:
        return Profile.ANSI

    return Profile.ASCII


def cli_color_forced(environ: Environ) -> bool:
    """True if CLICOLOR_FORCE asks for color regardless of the terminal."""
    forced = environ.getenv("CLICOLOR_FORCE")
    return forced != "" and forced != "0"


def env_no_color(environ: Environ) -> bool:
    """True if NO_COLOR or CLICOLOR=0 disables color output."""
    return environ.getenv("NO_COLOR") != "" or (
        environ.getenv("CLICOLOR") == "0" and not cli_color_forced(environ)
    )


def env_color_profile(environ: Environ, tty: bool) -> Profile:
    """Profile after honouring NO_COLOR, CLICOLOR and CLICOLOR_FORCE.

    A forced color request lifts an Ascii detection to ANSI, never higher.
    """
    if env_no_color(environ):
        logger.debug("color disabled by NO_COLOR/CLICOLOR")
        return Profile.ASCII

    profile = detect_profile(environ, tty)
    if profile == Profile.ASCII and cli_color_forced(environ):
        logger.debug("CLICOLOR_FORCE set, upgrading Ascii to ANSI")
        return Profile.ANSI

    logger.debug("detected color profile %s (tty=%s)", profile, tty)
    return profile
