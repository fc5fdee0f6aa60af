"""Typer CLI application for previewing colors and styles."""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from inkify.cli.parse import parse_color, parse_style
from inkify.core.color import Color
from inkify.core.constants import COLORS_8
from inkify.core.style import Style

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="inkify",
        help="Preview ANSI colors and text styles in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(highlight=False)

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Preview ANSI colors and text styles in the terminal."""
        _configure_logging(verbose)

    @app.command()
    def swatch(
        color_value: Annotated[str, typer.Argument(help="Color: #rrggbb, name, 256:n, rgb:r,g,b, hsl:h,s,l, hsv:h,s,v, random[:seed]")],
        background: Annotated[bool, typer.Option("--background", "-b", help="Apply as background color")] = False,
        text: Annotated[str, typer.Option("--text", "-t", help="Sample text")] = "The quick brown fox",
        style: Annotated[Optional[str], typer.Option("--style", "-s", help="Attributes, e.g. bold,italic")] = None,
    ) -> None:
        """Show a color applied to sample text, with its escape fragment."""
        try:
            color = parse_color(color_value)
            chain = parse_style(style)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

        chain = chain.bg(color) if background else chain.fg(color)
        logger.debug("Rendered %d fragments for %s", len(chain), color_value)

        print(chain.apply(text))
        r, g, b = color.rgb
        console.print(f"[bold]Mode:[/]     {color.mode.name}")
        console.print(f"[bold]RGB:[/]      {r}, {g}, {b}")
        console.print(f"[bold]Hex:[/]      #{r:02x}{g:02x}{b:02x}")
        console.print(f"[bold]Sequence:[/] {escape(repr(chain.render()))}")

    @app.command()
    def palette(
        background: Annotated[bool, typer.Option("--background", "-b", help="Show as background swatches")] = False,
    ) -> None:
        """Show the standard colors and the 256-color palette."""

        def paint(color: Color, label: str) -> str:
            chain = Style().bg(color) if background else Style().fg(color)
            return chain.apply(label)

        console.print("[bold]Standard colors[/]")
        print(" ".join(paint(Color.from_name(name), name) for name in COLORS_8))

        console.print("[bold]256 colors[/]")
        for row_start in range(0, 256, 16):
            row = (paint(Color.from_256(i), f"{i:>4}") for i in range(row_start, row_start + 16))
            print("".join(row))

    return app
