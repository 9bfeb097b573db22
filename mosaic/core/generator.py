"""
Mosaic Grid - Mosaic Generator

Generates a complete tile mosaic: fixed content tiles first, then randomly
sized filler tiles, then unit tiles on every remaining cell. Every pass covers
the whole grid with no gaps and no overlaps.
"""

import logging
import numbers
import random
from dataclasses import dataclass, field
from typing import List, Sequence

from .constants import MAX_PLACEMENT_ATTEMPTS, RANDOM_COLOR_MAX, RANDOM_COLOR_MIN
from .fixed_tiles import FixedTilePlacer, FixedTileSpec, PlacementStrategy
from .layout import Layout, PlacedTile, TileIdFactory
from .occupancy import GridOccupancy
from .tile_types import TILE_TYPES, RandomTileSampler, TileShape

logger = logging.getLogger(__name__)


def _is_grid_size(value) -> bool:
    """Positive integer, including numpy integers but not bools."""
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, bool)
        and value > 0
    )


class InvalidGridSpecError(ValueError):
    """Raised when a grid has a non-positive width or height."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(
            f"Grid dimensions must be positive integers, got {width}x{height}"
        )


@dataclass(frozen=True)
class GeneratorConfig:
    """Tunables for one generator."""

    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    color_min: int = RANDOM_COLOR_MIN
    color_max: int = RANDOM_COLOR_MAX
    tile_types: tuple[TileShape, ...] = field(default=TILE_TYPES)

    def __post_init__(self):
        if self.max_attempts < 0:
            raise ValueError(f"max_attempts cannot be negative, got {self.max_attempts}")
        if self.color_min > self.color_max:
            raise ValueError(
                f"Invalid color range {self.color_min}-{self.color_max}"
            )
        if not self.tile_types:
            raise ValueError("tile_types cannot be empty")


class MosaicGenerator:
    """
    Creates mosaic layouts for a fixed grid size and fixed tile batch.

    The generator holds only immutable inputs and the random source. Each
    call to generate_layout() allocates its own occupancy grid and passes it
    through the placement stages.
    """

    def __init__(
        self,
        grid_width: int,
        grid_height: int,
        fixed_tiles: Sequence[FixedTileSpec] = (),
        config: GeneratorConfig | None = None,
        rng: random.Random | None = None,
    ):
        """
        Args:
            grid_width: Number of grid columns (> 0)
            grid_height: Number of grid rows (> 0)
            fixed_tiles: Fixed tile batch, placed in order before random tiles
            config: Tunables (defaults to GeneratorConfig())
            rng: Random source; pass a seeded random.Random for reproducible layouts

        Raises:
            InvalidGridSpecError: If width or height is not a positive integer
        """
        if not _is_grid_size(grid_width) or not _is_grid_size(grid_height):
            raise InvalidGridSpecError(grid_width, grid_height)

        self.grid_width = int(grid_width)
        self.grid_height = int(grid_height)
        self.fixed_tiles = tuple(fixed_tiles)
        self.config = config if config is not None else GeneratorConfig()
        self.rng = rng if rng is not None else random.Random()
        self.sampler = RandomTileSampler(self.config.tile_types, self.rng)
        self.fixed_placer = FixedTilePlacer(
            self.fixed_tiles, self.grid_width, self.grid_height
        )

    def generate_pattern(self) -> List[PlacedTile]:
        """Generate a new mosaic and return its tiles in placement order."""
        return self.generate_layout().tiles

    def generate_layout(self) -> Layout:
        """Generate a new mosaic, including the fixed tile strategy used."""
        occupancy = GridOccupancy(self.grid_width, self.grid_height)
        ids = TileIdFactory()
        tiles: List[PlacedTile] = []

        strategy = self.fixed_placer.determine_strategy(occupancy)
        tiles.extend(self.fixed_placer.place(occupancy, strategy, ids))
        fixed_count = len(tiles)

        tiles.extend(self.place_random_tiles(occupancy, ids))
        random_count = len(tiles) - fixed_count

        tiles.extend(self.fill_empty_cells(occupancy, ids))

        logger.debug(
            "Generated %dx%d mosaic: %d fixed, %d random, %d fill tiles",
            self.grid_width,
            self.grid_height,
            fixed_count,
            random_count,
            len(tiles) - fixed_count - random_count,
        )

        return Layout(
            width=self.grid_width,
            height=self.grid_height,
            strategy=strategy.value,
            tiles=tiles,
        )

    def determine_placement_strategy(self) -> PlacementStrategy:
        """Strategy the fixed tiles would get on an empty grid."""
        occupancy = GridOccupancy(self.grid_width, self.grid_height)
        return self.fixed_placer.determine_strategy(occupancy)

    def place_random_tiles(
        self, occupancy: GridOccupancy, ids: TileIdFactory
    ) -> List[PlacedTile]:
        """
        Best-effort random filling with a bounded number of attempts.

        Each attempt samples a shape and a position anywhere on the grid and
        keeps the tile if it fits.
        """
        placed = []

        for _ in range(self.config.max_attempts):
            tile_type = self.sampler.sample()
            row = self.rng.randrange(self.grid_height)
            col = self.rng.randrange(self.grid_width)

            if occupancy.can_place(row, col, tile_type.width, tile_type.height):
                occupancy.place(row, col, tile_type.width, tile_type.height)
                placed.append(
                    PlacedTile(
                        row=row,
                        col=col,
                        width=tile_type.width,
                        height=tile_type.height,
                        id=ids.next_id("random", row, col),
                        color=self._random_color(),
                        kind="random",
                    )
                )

        return placed

    def fill_empty_cells(
        self, occupancy: GridOccupancy, ids: TileIdFactory
    ) -> List[PlacedTile]:
        """Place a 1x1 tile on every unoccupied cell, in row-major order."""
        placed = []

        for row, col in occupancy.iter_empty_cells():
            occupancy.place(row, col, 1, 1)
            placed.append(
                PlacedTile(
                    row=row,
                    col=col,
                    width=1,
                    height=1,
                    id=ids.next_id("fill", row, col),
                    color=self._random_color(),
                    kind="fill",
                )
            )

        return placed

    def _random_color(self) -> int:
        return self.rng.randint(self.config.color_min, self.config.color_max)
