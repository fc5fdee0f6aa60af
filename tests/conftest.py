"""Shared pytest fixtures."""

import pytest
import typer
from typer.testing import CliRunner

from inkify.cli.app import create_app
from inkify.core.color import Color


@pytest.fixture
def sample_colors() -> dict[str, Color]:
    """One color per backing mode."""
    return {
        "standard": Color.RED,
        "indexed": Color.from_256(196),
        "true": Color.from_rgb(255, 87, 51),
    }


@pytest.fixture
def seeds() -> range:
    """Seeds for sweeping random generation."""
    return range(1, 100)


@pytest.fixture
def app() -> typer.Typer:
    return create_app()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
