"""
inkify: ANSI colors and style chains for terminal text

Convert colors between RGB, HSL, HSV, hex and ANSI palette indices, and
compose escape sequences into reusable styles.

Quick Start:
    >>> from inkify import Color, Style
    >>> title = Style().bold().fg(Color.from_hex("#ff5733"))
    >>> print(title.apply("Hello, World!"))
    >>> print(f"{Style().italic().bg(Color.BLUE)}note{Style.RESET}")

Features:
    - HSL, HSV and hex to RGB conversion
    - 8-color, 256-color and 24-bit true color rendering
    - Validated, immutable Color values
    - Fluent, copyable Style builder
"""

__version__ = "0.1.0"

# Core types
from inkify.core.color import Color, ColorMode, InvalidColorError
from inkify.core.style import Style
from inkify.core.constants import RESET

# Conversions
from inkify.core.convert import (
    RAND_FAILURE,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    rand_in_range,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorMode",
    "InvalidColorError",
    "Style",
    "RESET",
    # Conversions
    "hsl_to_rgb",
    "hsv_to_rgb",
    "hex_to_rgb",
    "rand_in_range",
    "RAND_FAILURE",
]
