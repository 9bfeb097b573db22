"""
Mosaic Grid - Tile Shapes

Weighted palette of random tile shapes and the sampler that draws from it.
"""

import random
from dataclasses import dataclass
from typing import Sequence

from .constants import DEFAULT_TILE_TYPES


@dataclass(frozen=True)
class TileShape:
    """A random tile shape and its selection weight."""

    width: int
    height: int
    weight: float

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Tile shape must be at least 1x1, got {self.width}x{self.height}"
            )
        if self.weight <= 0:
            raise ValueError(f"Tile shape weight must be positive, got {self.weight}")


TILE_TYPES: tuple[TileShape, ...] = tuple(
    TileShape(width, height, weight) for width, height, weight in DEFAULT_TILE_TYPES
)


class RandomTileSampler:
    """
    Selects a tile shape using the palette as a cumulative distribution.

    Weights are accumulated in palette order and need not sum to 1. A draw
    that falls past the last cumulative weight (only possible through
    rounding, or when weights sum to less than 1) returns the first palette
    entry.
    """

    def __init__(
        self,
        tile_types: Sequence[TileShape] = TILE_TYPES,
        rng: random.Random | None = None,
    ):
        if not tile_types:
            raise ValueError("tile_types cannot be empty")

        self.tile_types = tuple(tile_types)
        self.rng = rng if rng is not None else random.Random()

    def sample(self) -> TileShape:
        """Draw one tile shape."""
        rand = self.rng.random()
        cumulative = 0.0

        for tile_type in self.tile_types:
            cumulative += tile_type.weight
            if rand < cumulative:
                return tile_type

        return self.tile_types[0]
