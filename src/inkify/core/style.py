"""Fluent builder for chains of ANSI style fragments."""

from __future__ import annotations

from typing import ClassVar, Optional

from inkify.core import constants
from inkify.core.color import Color


class Style:
    """
    An ordered chain of ANSI escape fragments.

    Each method appends exactly one fragment and returns the same instance,
    so calls can be chained. Fragments are emitted in call order, letting
    later codes override earlier ones the way terminals apply them.

    The builder never appends a reset on its own; wrap text with
    ``apply()`` or add ``Style.RESET`` yourself. Instances are not
    synchronized: share one across threads only behind your own lock.

    Example:
        >>> heading = Style().bold().fg(Color.CYAN)
        >>> print(f"{heading}Title{Style.RESET}")
        >>> warning = Style(heading).underline()  # independent copy
    """

    RESET: ClassVar[str] = constants.RESET

    def __init__(self, style: Optional[Style] = None) -> None:
        if style is not None and not isinstance(style, Style):
            raise TypeError(f"Expected a Style to copy, got {type(style).__name__}")
        self._chain: list[str] = list(style._chain) if style is not None else []

    def _push(self, fragment: str) -> Style:
        self._chain.append(fragment)
        return self

    # -- Text attributes --

    def light(self) -> Style:
        """Apply light (faint) weight."""
        return self._push(constants.LIGHT)

    def normal(self) -> Style:
        """Apply normal weight."""
        return self._push(constants.NORMAL)

    def bold(self) -> Style:
        """Apply bold weight."""
        return self._push(constants.BOLD)

    def italic(self) -> Style:
        """Apply italic style."""
        return self._push(constants.ITALIC)

    def underline(self) -> Style:
        """Apply underline."""
        return self._push(constants.UNDERLINE)

    def overline(self) -> Style:
        """Apply overline. Not widely supported."""
        return self._push(constants.OVERLINE)

    def strikethrough(self) -> Style:
        """Apply strikethrough. Not widely supported."""
        return self._push(constants.STRIKETHROUGH)

    def hide(self) -> Style:
        """Hide the text."""
        return self._push(constants.HIDE)

    def invert(self) -> Style:
        """Swap foreground and background colors."""
        return self._push(constants.INVERT)

    # -- Colors --

    def foreground(self, color: Color) -> Style:
        """Set the foreground color."""
        if not isinstance(color, Color):
            raise TypeError(f"Expected a Color, got {type(color).__name__}")
        return self._push(color.render())

    def color(self, color: Color) -> Style:
        """Alias for foreground()."""
        return self.foreground(color)

    def fg(self, color: Color) -> Style:
        """Alias for foreground()."""
        return self.foreground(color)

    def background(self, color: Color) -> Style:
        """Set the background color."""
        if not isinstance(color, Color):
            raise TypeError(f"Expected a Color, got {type(color).__name__}")
        return self._push(color.render(background=True))

    def bg(self, color: Color) -> Style:
        """Alias for background()."""
        return self.background(color)

    # -- Output --

    @property
    def fragments(self) -> tuple[str, ...]:
        """Snapshot of the fragment chain in order."""
        return tuple(self._chain)

    def render(self) -> str:
        """Concatenate all fragments in order."""
        return ''.join(self._chain)

    def apply(self, text: str) -> str:
        """Wrap text in this style followed by a reset."""
        return f"{self.render()}{text}{self.RESET}"

    def copy(self) -> Style:
        """Return an independent copy of this style."""
        return Style(self)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._chain)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self._chain == other._chain

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Style({self.render()!r})"
