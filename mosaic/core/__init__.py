"""
Core mosaic functionality.

This package contains grid occupancy, coordinate normalization, tile shapes,
fixed tile placement, the generator pipeline and layout validation.
"""

from .fixed_tiles import (
    AlternatePosition,
    FixedTilePlacer,
    FixedTileSpec,
    PlacementStrategy,
    TileRect,
)
from .generator import GeneratorConfig, InvalidGridSpecError, MosaicGenerator
from .layout import Layout, PlacedTile
from .occupancy import GridOccupancy
from .tile_types import TILE_TYPES, RandomTileSampler, TileShape
from .validation import InvalidLayoutError, LayoutValidator

__all__ = [
    "AlternatePosition",
    "FixedTilePlacer",
    "FixedTileSpec",
    "PlacementStrategy",
    "TileRect",
    "GeneratorConfig",
    "InvalidGridSpecError",
    "MosaicGenerator",
    "Layout",
    "PlacedTile",
    "GridOccupancy",
    "TILE_TYPES",
    "RandomTileSampler",
    "TileShape",
    "InvalidLayoutError",
    "LayoutValidator",
]
