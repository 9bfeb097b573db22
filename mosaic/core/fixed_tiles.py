"""
Mosaic Grid - Fixed Tile Placement

Places author-specified content tiles (labels, navigation, links) before any
random tile. The batch is placed as a unit: either every tile sits at its
primary position, or every tile sits at its alternate position, or only the
essential tiles are placed.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .coordinates import normalize_coordinate, usable_span
from .layout import PlacedTile, TileIdFactory
from .occupancy import GridOccupancy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TileRect:
    """A rectangle on the grid. Row and col may be negative before normalization."""

    row: int
    col: int
    width: int
    height: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Tile must be at least 1x1, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class AlternatePosition:
    """Alternate anchor for a fixed tile; missing size inherits the primary's."""

    row: int
    col: int
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class FixedTileSpec:
    """A fixed content tile with primary and optional alternate positions."""

    primary: TileRect
    color: int
    alternate: Optional[AlternatePosition] = None
    text: Optional[str] = None
    url: Optional[str] = None
    font_size: Optional[float] = None
    essential: bool = False

    def alternate_rect(self) -> Optional[TileRect]:
        """Alternate rectangle with inherited width/height, or None."""
        if self.alternate is None:
            return None

        width = self.alternate.width
        height = self.alternate.height
        return TileRect(
            row=self.alternate.row,
            col=self.alternate.col,
            width=width if width is not None else self.primary.width,
            height=height if height is not None else self.primary.height,
        )


class PlacementStrategy(Enum):
    """How the batch of fixed tiles is placed for one layout."""

    PRIMARY = "primary"
    ALTERNATE = "alternate"
    FALLBACK = "fallback"


class FixedTilePlacer:
    """
    Decides and applies the placement strategy for a batch of fixed tiles.

    Fixed tiles are checked against the usable span (grid dimension minus
    one) rather than the full grid, which keeps them off the far edge.
    """

    def __init__(
        self, fixed_tiles: Sequence[FixedTileSpec], grid_width: int, grid_height: int
    ):
        self.fixed_tiles = tuple(fixed_tiles)
        self.grid_width = grid_width
        self.grid_height = grid_height

    def get_normalized_position(
        self, tile: FixedTileSpec, use_alternate: bool
    ) -> TileRect:
        """
        Resolve the rectangle a tile would occupy.

        Args:
            tile: Fixed tile definition
            use_alternate: Use the alternate position when the tile declares one

        Returns:
            Rectangle with negative row/col normalized against the usable span
        """
        rect = tile.primary
        if use_alternate:
            rect = tile.alternate_rect() or tile.primary

        return TileRect(
            row=normalize_coordinate(rect.row, usable_span(self.grid_height)),
            col=normalize_coordinate(rect.col, usable_span(self.grid_width)),
            width=rect.width,
            height=rect.height,
        )

    def is_valid_placement(self, occupancy: GridOccupancy, rect: TileRect) -> bool:
        """Check a rectangle is inside the usable span and unoccupied."""
        return (
            rect.col + rect.width <= usable_span(self.grid_width)
            and rect.row + rect.height <= usable_span(self.grid_height)
            and occupancy.can_place(rect.row, rect.col, rect.width, rect.height)
        )

    def batch_fits(self, occupancy: GridOccupancy, use_alternate: bool) -> bool:
        """
        Check every fixed tile fits at the chosen positions at the same time.

        Tiles are placed on a scratch copy as they pass, so fixed tiles that
        overlap each other make the batch fail.
        """
        scratch = occupancy.copy()

        for tile in self.fixed_tiles:
            rect = self.get_normalized_position(tile, use_alternate)
            if not self.is_valid_placement(scratch, rect):
                return False
            scratch.place(rect.row, rect.col, rect.width, rect.height)

        return True

    def determine_strategy(self, occupancy: GridOccupancy) -> PlacementStrategy:
        """Pick PRIMARY if the batch fits there, else ALTERNATE, else FALLBACK."""
        if self.batch_fits(occupancy, use_alternate=False):
            strategy = PlacementStrategy.PRIMARY
        elif self.batch_fits(occupancy, use_alternate=True):
            strategy = PlacementStrategy.ALTERNATE
        else:
            strategy = PlacementStrategy.FALLBACK

        logger.debug(
            "Fixed tile strategy %s for %d tile(s) on %dx%d grid",
            strategy.value,
            len(self.fixed_tiles),
            self.grid_width,
            self.grid_height,
        )
        return strategy

    def place(
        self,
        occupancy: GridOccupancy,
        strategy: PlacementStrategy,
        ids: TileIdFactory,
    ) -> List[PlacedTile]:
        """
        Place fixed tiles according to the strategy.

        Args:
            occupancy: Occupancy of the current pass (modified in place)
            strategy: Result of determine_strategy()
            ids: Id factory of the current pass

        Returns:
            Placed fixed tiles in definition order
        """
        if strategy is PlacementStrategy.FALLBACK:
            return self.place_essential_tiles(occupancy, ids)

        use_alternate = strategy is PlacementStrategy.ALTERNATE
        placed = []

        for tile in self.fixed_tiles:
            rect = self.get_normalized_position(tile, use_alternate)

            # Re-check each tile; the strategy check ran on a scratch copy
            if self.is_valid_placement(occupancy, rect):
                placed.append(self._place_tile(occupancy, tile, rect, ids))
            else:
                logger.debug("Dropped fixed tile %r at %s", tile.text, rect)

        return placed

    def place_essential_tiles(
        self, occupancy: GridOccupancy, ids: TileIdFactory
    ) -> List[PlacedTile]:
        """Place only essential tiles at their primary position, if each fits."""
        placed = []

        for tile in self.fixed_tiles:
            if not tile.essential:
                logger.debug("Fallback layout skips fixed tile %r", tile.text)
                continue

            rect = self.get_normalized_position(tile, use_alternate=False)
            if self.is_valid_placement(occupancy, rect):
                placed.append(self._place_tile(occupancy, tile, rect, ids))
            else:
                logger.debug("Essential tile %r does not fit at %s", tile.text, rect)

        return placed

    def _place_tile(
        self,
        occupancy: GridOccupancy,
        tile: FixedTileSpec,
        rect: TileRect,
        ids: TileIdFactory,
    ) -> PlacedTile:
        occupancy.place(rect.row, rect.col, rect.width, rect.height)
        return PlacedTile(
            row=rect.row,
            col=rect.col,
            width=rect.width,
            height=rect.height,
            id=ids.next_id("fixed", rect.row, rect.col),
            color=tile.color,
            text=tile.text,
            url=tile.url,
            font_size=tile.font_size,
            kind="fixed",
        )
