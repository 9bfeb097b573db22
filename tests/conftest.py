"""Shared pytest fixtures for mosaic generation tests."""

import random

import pytest

from mosaic.core.fixed_tiles import AlternatePosition, FixedTileSpec, TileRect
from mosaic.core.validation import LayoutValidator
from mosaic.formats.page_data import default_site


@pytest.fixture
def rng():
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def validator():
    """Shared layout validator."""
    return LayoutValidator()


@pytest.fixture
def site():
    """Built-in three-page site."""
    return default_site()


@pytest.fixture
def identity_tile():
    """Essential 4x1 label at (1, 1)."""
    return FixedTileSpec(
        primary=TileRect(row=1, col=1, width=4, height=1),
        alternate=AlternatePosition(row=1, col=1),
        color=9,
        text="Identity",
        font_size=1.6,
        essential=True,
    )


@pytest.fixture
def about_tile():
    """Navigation 2x1 tile at (1, 6), alternate (3, 1)."""
    return FixedTileSpec(
        primary=TileRect(row=1, col=6, width=2, height=1),
        alternate=AlternatePosition(row=3, col=1),
        color=10,
        text="About",
        font_size=1.3,
    )


@pytest.fixture
def link_tile():
    """Link 2x1 tile at (1, 9), alternate (5, 1)."""
    return FixedTileSpec(
        primary=TileRect(row=1, col=9, width=2, height=1),
        alternate=AlternatePosition(row=5, col=1),
        color=10,
        text="Source",
        url="https://example.com/source",
    )
