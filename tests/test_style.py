"""Tests for the Style builder."""

import pytest

from inkify.core.color import Color
from inkify.core.style import Style


class TestAttributes:
    """Each attribute method appends its fixed fragment."""

    @pytest.mark.parametrize(
        "method,fragment",
        [
            ("light", "\x1b[2m"),
            ("normal", "\x1b[22m"),
            ("bold", "\x1b[1m"),
            ("italic", "\x1b[3m"),
            ("underline", "\x1b[4m"),
            ("overline", "\x1b[53m"),
            ("strikethrough", "\x1b[9m"),
            ("hide", "\x1b[8m"),
            ("invert", "\x1b[7m"),
        ],
    )
    def test_fragment(self, method: str, fragment: str) -> None:
        style = Style()
        assert getattr(style, method)() is style
        assert style.render() == fragment
        assert len(style) == 1


class TestColors:
    """Foreground and background color methods."""

    def test_foreground_synonyms(self, sample_colors: dict[str, Color]) -> None:
        for color in sample_colors.values():
            expected = color.render()
            assert str(Style().foreground(color)) == expected
            assert str(Style().color(color)) == expected
            assert str(Style().fg(color)) == expected

    def test_background_synonyms(self, sample_colors: dict[str, Color]) -> None:
        for color in sample_colors.values():
            expected = color.render(background=True)
            assert str(Style().background(color)) == expected
            assert str(Style().bg(color)) == expected

    def test_exact_fragments(self) -> None:
        assert str(Style().fg(Color.GREEN)) == "\x1b[32m"
        assert str(Style().bg(Color.from_256(17))) == "\x1b[48;5;17m"
        assert str(Style().fg(Color.from_hex("#ff5733"))) == "\x1b[38;2;255;87;51m"

    def test_rejects_non_color(self) -> None:
        with pytest.raises(TypeError):
            Style().fg("red")
        with pytest.raises(TypeError):
            Style().bg((255, 0, 0))


class TestChaining:
    """Fragment order and copy semantics."""

    def test_order_preserved(self) -> None:
        style = Style().bold().underline()
        assert str(style) == "\x1b[1m\x1b[4m"
        assert style.fragments == ("\x1b[1m", "\x1b[4m")

    def test_later_colors_follow_earlier(self) -> None:
        style = Style().fg(Color.RED).fg(Color.BLUE)
        assert str(style) == "\x1b[31m\x1b[34m"

    def test_copy_is_independent(self) -> None:
        original = Style().bold().underline()
        before = str(original)
        copy = Style(original).italic()

        assert str(copy) == before + "\x1b[3m"
        assert str(original) == before
        assert len(original) == 2

    def test_copy_method(self) -> None:
        original = Style().bold()
        copy = original.copy()
        assert copy == original
        assert copy is not original
        copy.hide()
        assert copy != original

    def test_copy_requires_style(self) -> None:
        with pytest.raises(TypeError):
            Style("\x1b[1m")

    def test_empty(self) -> None:
        style = Style()
        assert str(style) == ""
        assert len(style) == 0
        assert style.fragments == ()

    def test_fragments_snapshot(self) -> None:
        style = Style().bold()
        snapshot = style.fragments
        style.italic()
        assert snapshot == ("\x1b[1m",)


class TestReset:
    """Reset handling."""

    def test_reset_constant(self) -> None:
        assert Style.RESET == "\x1b[0m"
        Style().bold().invert()
        assert Style.RESET == "\x1b[0m"

    def test_no_auto_reset(self) -> None:
        assert not str(Style().bold()).endswith(Style.RESET)

    def test_apply(self) -> None:
        style = Style().bold().fg(Color.RED)
        assert style.apply("hi") == "\x1b[1m\x1b[31mhi\x1b[0m"
        assert str(style) == "\x1b[1m\x1b[31m"

    def test_repr(self) -> None:
        assert repr(Style().bold()) == "Style('\\x1b[1m')"
