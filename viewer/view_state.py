"""
Mosaic Grid - View State

Maps the viewport to grid dimensions and screen positions to tiles.
"""

from pygame import Rect

from mosaic.core.constants import TILE_SIZE
from mosaic.core.layout import Layout, PlacedTile


def _check_viewport(viewport_width: int, viewport_height: int):
    if viewport_width < 0 or viewport_height < 0:
        raise ValueError(
            f"Viewport cannot be negative, got {viewport_width}x{viewport_height}"
        )


class ViewState:
    """Viewport size and coordinate transformations."""

    def __init__(self, viewport_width: int, viewport_height: int, cell_size: int = TILE_SIZE):
        """
        Initialize view state.

        Args:
            viewport_width: Viewport width in pixels
            viewport_height: Viewport height in pixels
            cell_size: Size of one grid cell in pixels
        """
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}")
        _check_viewport(viewport_width, viewport_height)

        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.cell_size = cell_size

    def grid_dimensions(self) -> tuple[int, int]:
        """
        Grid (width, height) in cells covering the whole viewport.

        One extra cell per axis covers the partial cell at the far edge.
        """
        return (
            self.viewport_width // self.cell_size + 1,
            self.viewport_height // self.cell_size + 1,
        )

    def resize(self, viewport_width: int, viewport_height: int) -> bool:
        """
        Update the viewport size.

        Returns:
            True if the grid dimensions changed

        Raises:
            ValueError: If either dimension is negative
        """
        _check_viewport(viewport_width, viewport_height)
        before = self.grid_dimensions()
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        return self.grid_dimensions() != before

    def screen_to_tile(self, screen_pos: tuple[int, int]) -> tuple[int, int] | None:
        """
        Convert screen position to grid coordinates.

        Args:
            screen_pos: Screen position (x, y) in pixels

        Returns:
            Grid coordinates (row, col), or None if outside the grid
        """
        width, height = self.grid_dimensions()
        grid_rect = Rect(0, 0, width * self.cell_size, height * self.cell_size)
        if not grid_rect.collidepoint(screen_pos):
            return None

        return (screen_pos[1] // self.cell_size, screen_pos[0] // self.cell_size)

    def tile_rect(self, tile: PlacedTile) -> Rect:
        """Screen rectangle covered by a placed tile."""
        return Rect(
            tile.col * self.cell_size,
            tile.row * self.cell_size,
            tile.width * self.cell_size,
            tile.height * self.cell_size,
        )

    def tile_at(self, layout: Layout, screen_pos: tuple[int, int]) -> PlacedTile | None:
        """Find the tile under a screen position."""
        for tile in layout.tiles:
            if self.tile_rect(tile).collidepoint(screen_pos):
                return tile
        return None
