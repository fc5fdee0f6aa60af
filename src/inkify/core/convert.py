"""Color-space conversion helpers.

These are low-level numeric functions. They do not validate ranges the way
the ``Color`` factories do: callers that need strict checking should go
through ``inkify.core.color.Color``.
"""

from __future__ import annotations

import logging
import math
import random
import re

from inkify.core.constants import DEFAULT_SEED, RGB_MAX

logger = logging.getLogger(__name__)

# Returned by rand_in_range() on invalid arguments. Legal results are never negative.
RAND_FAILURE = -1

_HEX_BODY = re.compile(r'^.([0-9a-fA-F]{6})$', re.DOTALL)

WHITE_RGB = (RGB_MAX, RGB_MAX, RGB_MAX)


def _round_channel(v: float) -> int:
    """Scale a 0-1 channel to a byte, rounding half up."""
    return max(0, min(RGB_MAX, math.floor(v * RGB_MAX + 0.5)))


def _sector(h: float, c: float, x: float) -> tuple[float, float, float]:
    """Pick the pre-offset (R, G, B) triple for the 60-degree hue sector of h."""
    if h < 60:
        return (c, x, 0.0)
    elif h < 120:
        return (x, c, 0.0)
    elif h < 180:
        return (0.0, c, x)
    elif h < 240:
        return (0.0, x, c)
    elif h < 300:
        return (x, 0.0, c)
    else:
        return (c, 0.0, x)


def _chroma_to_rgb(h: float, c: float, m: float) -> tuple[int, int, int]:
    x = c * (1 - abs(((h / 60) % 2) - 1))
    r, g, b = _sector(h, c, x)
    return (_round_channel(r + m), _round_channel(g + m), _round_channel(b + m))


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees (0-360)
        s: Saturation as a percentage (0-100)
        l: Lightness as a percentage (0-100)

    Returns:
        (r, g, b) tuple, each channel 0-255

    Example:
        >>> hsl_to_rgb(120, 100, 50)
        (0, 255, 0)
    """
    s /= 100
    l /= 100
    c = (1 - abs(2 * l - 1)) * s
    return _chroma_to_rgb(h, c, l - c / 2)


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees (0-360)
        s: Saturation as a percentage (0-100)
        v: Value (brightness) as a percentage (0-100)

    Returns:
        (r, g, b) tuple, each channel 0-255
    """
    s /= 100
    v /= 100
    c = v * s
    return _chroma_to_rgb(h, c, v - c)


def hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    """
    Convert a hex color code like ``"#ff5733"`` to an RGB tuple.

    The first character is treated as a sigil and skipped. Malformed input
    falls back to white (255, 255, 255) instead of raising; use
    ``Color.from_hex`` for strict parsing.
    """
    match = _HEX_BODY.match(hex_code) if isinstance(hex_code, str) else None
    if match is None:
        logger.debug("Malformed hex color %r, falling back to white", hex_code)
        return WHITE_RGB

    body = match.group(1)
    return (int(body[0:2], 16), int(body[2:4], 16), int(body[4:6], 16))


def rand_in_range(low: int = 0, high: int = 0, seed: int = DEFAULT_SEED) -> int:
    """
    Return a pseudo-random integer in [low, high], inclusive.

    The result depends only on the arguments: the same (low, high, seed)
    always produces the same value.

    Invalid arguments (low > high, a negative bound, or seed < 1) do not
    raise. They return ``RAND_FAILURE``, which callers must check before
    using the result as a color channel.
    """
    if low > high or low < 0 or high < 0 or seed < 1:
        return RAND_FAILURE

    if low == high:
        return low

    return random.Random(seed).randint(low, high)
