"""Core color conversion, color values, and style chains."""

from inkify.core.color import Color, ColorMode, InvalidColorError
from inkify.core.constants import RESET
from inkify.core.convert import (
    RAND_FAILURE,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    rand_in_range,
)
from inkify.core.style import Style

__all__ = [
    "Color",
    "ColorMode",
    "InvalidColorError",
    "Style",
    "RESET",
    "RAND_FAILURE",
    "hex_to_rgb",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "rand_in_range",
]
