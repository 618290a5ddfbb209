"""Shared constants for terminal escape sequences and the reference palette."""

# ANSI escape sequences
ESC = "\x1b"
BEL = "\x07"
CSI = f"{ESC}["
OSC = f"{ESC}]"
ST = f"{ESC}\\"

# Color prefixes for extended SGR sequences
FOREGROUND = "38"
BACKGROUND = "48"

# SGR attribute codes
RESET_SEQ = "0"
BOLD_SEQ = "1"
FAINT_SEQ = "2"
ITALIC_SEQ = "3"
UNDERLINE_SEQ = "4"
BLINK_SEQ = "5"
REVERSE_SEQ = "7"
CROSS_OUT_SEQ = "9"
OVERLINE_SEQ = "53"

RESET = f"{CSI}{RESET_SEQ}m"

# Standard 16-color ANSI palette (xterm defaults)
_STANDARD_16: tuple[str, ...] = (
    "#000000",  # black
    "#800000",  # maroon
    "#008000",  # green
    "#808000",  # olive
    "#000080",  # navy
    "#800080",  # purple
    "#008080",  # teal
    "#c0c0c0",  # silver
    "#808080",  # grey
    "#ff0000",  # red
    "#00ff00",  # lime
    "#ffff00",  # yellow
    "#0000ff",  # blue
    "#ff00ff",  # fuchsia
    "#00ffff",  # aqua
    "#ffffff",  # white
)

# Channel values of the 6x6x6 color cube (indices 16-231)
CUBE_LEVELS: tuple[int, ...] = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)

# Index -> "#rrggbb" for all 256 colors
ANSI_HEX: tuple[str, ...] = (
    _STANDARD_16
    + tuple(
        f"#{CUBE_LEVELS[r]:02x}{CUBE_LEVELS[g]:02x}{CUBE_LEVELS[b]:02x}"
        for r in range(6)
        for g in range(6)
        for b in range(6)
    )
    + tuple(f"#{8 + 10 * i:02x}{8 + 10 * i:02x}{8 + 10 * i:02x}" for i in range(24))
)
