"""Parse color and style descriptions given on the command line."""

from __future__ import annotations

from typing import Callable

from inkify.core.color import Color, InvalidColorError
from inkify.core.constants import ATTRIBUTES
from inkify.core.style import Style


def _numbers(text: str, kind: Callable[[str], float], count: int = 3) -> list[float]:
    parts = [p for p in text.replace(" ", ",").split(",") if p]
    if len(parts) != count:
        raise InvalidColorError(f"Expected {count} comma-separated numbers, got {text!r}")
    try:
        return [kind(p) for p in parts]
    except ValueError:
        raise InvalidColorError(f"Cannot parse numbers: {text!r}") from None


def parse_color(value: str) -> Color:
    """Parse a color string to a Color.

    Accepts:
        - Hex colors: "#FF5733"
        - Named colors: "red", "cyan", ...
        - 256-color index: "256:196"
        - RGB: "rgb:255,87,51"
        - HSL / HSV: "hsl:120,100,50", "hsv:0,100,100"
        - Random: "random" or "random:42" for a fixed seed
    """
    value = value.strip()
    kind, _, args = value.partition(":")
    kind = kind.lower()

    if value.startswith("#"):
        return Color.from_hex(value)
    if kind == "random":
        seed = _numbers(args, int, 1)[0] if args else None
        return Color.random(seed)
    if not args:
        return Color.from_name(value)
    if kind == "256":
        return Color.from_256(_numbers(args, int, 1)[0])
    if kind == "rgb":
        return Color.from_rgb(*_numbers(args, int))
    if kind == "hsl":
        return Color.from_hsl(*_numbers(args, float))
    if kind == "hsv":
        return Color.from_hsv(*_numbers(args, float))

    raise InvalidColorError(f"Cannot parse color: {value!r}")


def parse_style(names: str | None, base: Style | None = None) -> Style:
    """Build a Style from comma-separated attribute names like "bold,italic"."""
    style = Style(base)
    for name in (names or "").split(","):
        name = name.strip().lower()
        if not name:
            continue
        if name not in ATTRIBUTES:
            raise ValueError(f"Unknown style {name!r}, expected one of: {', '.join(ATTRIBUTES)}")
        getattr(style, name)()
    return style
