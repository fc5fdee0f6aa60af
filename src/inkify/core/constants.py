"""Shared constants for ANSI styling."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# SGR selector digits prefixed to a color suffix
FOREGROUND = "3"
BACKGROUND = "4"

# Text attribute fragments (SGR)
LIGHT = f"{CSI}2m"
NORMAL = f"{CSI}22m"
BOLD = f"{CSI}1m"
ITALIC = f"{CSI}3m"
UNDERLINE = f"{CSI}4m"
OVERLINE = f"{CSI}53m"
STRIKETHROUGH = f"{CSI}9m"
HIDE = f"{CSI}8m"
INVERT = f"{CSI}7m"

ATTRIBUTES = {
    "light": LIGHT,
    "normal": NORMAL,
    "bold": BOLD,
    "italic": ITALIC,
    "underline": UNDERLINE,
    "overline": OVERLINE,
    "strikethrough": STRIKETHROUGH,
    "hide": HIDE,
    "invert": INVERT,
}

# Standard 8-color palette (SGR 30-37 fg, 40-47 bg)
COLORS_8 = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

# xterm default RGB values for the 8 standard colors
STANDARD_RGB: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
)

# xterm default RGB values for the bright colors (256-color indices 8-15)
BRIGHT_RGB: tuple[tuple[int, int, int], ...] = (
    (127, 127, 127),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (92, 92, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

# Channel levels of the 6x6x6 color cube (256-color indices 16-231)
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

# Value ranges
RGB_MAX = 255
HUE_MAX = 360
PERCENT_MAX = 100

# Random color generation
DEFAULT_SEED = 14327
MAX_SEED = 2**31 - 1
