"""Color representation for ANSI styling."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from random import SystemRandom
from typing import ClassVar

from inkify.core.constants import (
    BACKGROUND,
    BRIGHT_RGB,
    COLORS_8,
    CSI,
    CUBE_LEVELS,
    FOREGROUND,
    HUE_MAX,
    MAX_SEED,
    PERCENT_MAX,
    RGB_MAX,
    STANDARD_RGB,
)
from inkify.core.convert import (
    RAND_FAILURE,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    rand_in_range,
)

logger = logging.getLogger(__name__)

_STRICT_HEX = re.compile(r'#[0-9a-fA-F]{6}')


class InvalidColorError(ValueError):
    """Raised when a color is built from a value outside its legal range."""


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD = "8"          # Standard 8-color (SGR 30-37, 40-47)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_byte(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidColorError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= RGB_MAX:
        raise InvalidColorError(f"{name} value must be between 0 and {RGB_MAX}, got {value}")


def _check_range(name: str, value: object, upper: int) -> None:
    if not _is_number(value) or not 0 <= value <= upper:
        raise InvalidColorError(f"{name} value must be between 0 and {upper}, got {value!r}")


def _palette_rgb(index: int) -> tuple[int, int, int]:
    """Map a 256-color palette index to the xterm default RGB value."""
    if index < 8:
        return STANDARD_RGB[index]
    if index < 16:
        return BRIGHT_RGB[index - 8]
    if index < 232:
        index -= 16
        return (CUBE_LEVELS[index // 36], CUBE_LEVELS[(index // 6) % 6], CUBE_LEVELS[index % 6])
    level = 8 + (index - 232) * 10
    return (level, level, level)


@dataclass(frozen=True)
class Color:
    """
    An immutable color value that renders itself as an ANSI SGR fragment.

    Supports the standard 8 named colors, the 256-color palette, and
    24-bit true color. Every payload is validated on construction, so an
    invalid Color can never exist.

    Example:
        >>> Color.from_hex("#ff5733").render()
        '\\x1b[38;2;255;87;51m'
        >>> Color.RED.render(background=True)
        '\\x1b[41m'
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    # Standard 8 colors (index 0-7)
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not isinstance(self.mode, ColorMode):
            raise InvalidColorError(f"Invalid color mode: {self.mode!r}")

        if self.mode == ColorMode.TRUE_COLOR:
            if not isinstance(self.value, tuple) or len(self.value) != 3:
                raise InvalidColorError(f"True color value must be an (r, g, b) tuple, got {self.value!r}")
            for name, channel in zip(("Red", "Green", "Blue"), self.value):
                _check_byte(name, channel)
        elif self.mode == ColorMode.EXTENDED_256:
            if not isinstance(self.value, int) or isinstance(self.value, bool) or not 0 <= self.value <= 255:
                raise InvalidColorError(f"256-color index must be 0-255, got {self.value!r}")
        else:
            if not isinstance(self.value, int) or isinstance(self.value, bool) or not 0 <= self.value <= 7:
                raise InvalidColorError(f"Standard color index must be 0-7, got {self.value!r}")

    # -- Factories --

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create a Color from RGB values (0-255 each)."""
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> Color:
        """
        Create a true color from HSL values.

        Args:
            hue: Hue in degrees (0-360)
            saturation: Saturation as a percentage (0-100)
            lightness: Lightness as a percentage (0-100)
        """
        _check_range("Hue", hue, HUE_MAX)
        _check_range("Saturation", saturation, PERCENT_MAX)
        _check_range("Lightness", lightness, PERCENT_MAX)
        return cls.from_rgb(*hsl_to_rgb(hue, saturation, lightness))

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> Color:
        """Create a true color from HSV values (degrees, %, %)."""
        _check_range("Hue", hue, HUE_MAX)
        _check_range("Saturation", saturation, PERCENT_MAX)
        _check_range("Value", value, PERCENT_MAX)
        return cls.from_rgb(*hsv_to_rgb(hue, saturation, value))

    @classmethod
    def from_hex(cls, hex_code: str) -> Color:
        """
        Create a true color from a ``#rrggbb`` string.

        Unlike ``hex_to_rgb``, malformed input raises instead of falling
        back to white.
        """
        if not isinstance(hex_code, str) or not _STRICT_HEX.fullmatch(hex_code):
            raise InvalidColorError(f"Hex color must be '#' followed by 6 hex digits, got {hex_code!r}")
        return cls.from_rgb(*hex_to_rgb(hex_code))

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Create a standard color from its name (black, red, ..., white)."""
        key = name.strip().lower() if isinstance(name, str) else None
        if key not in COLORS_8:
            raise InvalidColorError(
                f"Unknown color name {name!r}, expected one of: {', '.join(COLORS_8)}"
            )
        return cls(ColorMode.STANDARD, COLORS_8[key])

    @classmethod
    def from_256(cls, index: int) -> Color:
        """Create a Color from a 256-color index."""
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def random(cls, seed: int | None = None) -> Color:
        """
        Create a random true color.

        Each channel is one ``rand_in_range`` draw. Passing a seed makes the
        result reproducible; without one a seed is taken from the system
        entropy source.
        """
        if seed is None:
            seed = SystemRandom().randint(1, MAX_SEED)
            logger.debug("Random color seed: %d", seed)

        channels = tuple(rand_in_range(0, RGB_MAX, seed + offset) for offset in range(3))
        if RAND_FAILURE in channels:
            raise InvalidColorError(f"Random color seed must be >= 1, got {seed!r}")
        return cls.from_rgb(*channels)

    # -- Readback --

    @property
    def rgb(self) -> tuple[int, int, int]:
        """RGB channels; palette colors use the xterm default palette."""
        if self.mode == ColorMode.TRUE_COLOR:
            assert isinstance(self.value, tuple)
            return self.value
        assert isinstance(self.value, int)
        return _palette_rgb(self.value)

    @property
    def red(self) -> int:
        return self.rgb[0]

    @property
    def green(self) -> int:
        return self.rgb[1]

    @property
    def blue(self) -> int:
        return self.rgb[2]

    # -- Rendering --

    @property
    def ansi(self) -> str:
        """Color-encoding suffix that follows the fg/bg selector digit."""
        if self.mode == ColorMode.STANDARD:
            return str(self.value)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"8;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"8;2;{r};{g};{b}"

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        return FOREGROUND + self.ansi

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        return BACKGROUND + self.ansi

    def render(self, background: bool = False) -> str:
        """Return the complete escape fragment selecting this color."""
        params = self.to_sgr_bg() if background else self.to_sgr_fg()
        return f"{CSI}{params}m"


# Initialize class-level color constants
Color.BLACK = Color(ColorMode.STANDARD, 0)
Color.RED = Color(ColorMode.STANDARD, 1)
Color.GREEN = Color(ColorMode.STANDARD, 2)
Color.YELLOW = Color(ColorMode.STANDARD, 3)
Color.BLUE = Color(ColorMode.STANDARD, 4)
Color.MAGENTA = Color(ColorMode.STANDARD, 5)
Color.CYAN = Color(ColorMode.STANDARD, 6)
Color.WHITE = Color(ColorMode.STANDARD, 7)
