"""
Mosaic Grid

Procedural, gap-free tile mosaics with fixed content tiles.
"""

from .core import FixedTileSpec, GeneratorConfig, Layout, MosaicGenerator, PlacedTile

__all__ = ["FixedTileSpec", "GeneratorConfig", "Layout", "MosaicGenerator", "PlacedTile"]
