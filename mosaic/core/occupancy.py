"""
Mosaic Grid - Grid Occupancy

Boolean occupancy map used to keep placed tiles from overlapping.
"""

from typing import Iterator, Tuple

import numpy as np


class GridOccupancy:
    """Tracks occupied cells of a width x height grid (True = occupied)."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=bool)

    def reset(self):
        """Mark every cell unoccupied."""
        self.cells = np.zeros((self.height, self.width), dtype=bool)

    def in_bounds(self, row: int, col: int, width: int, height: int) -> bool:
        """Check the rectangle lies entirely inside the grid."""
        return (
            row >= 0
            and col >= 0
            and row + height <= self.height
            and col + width <= self.width
        )

    def can_place(self, row: int, col: int, width: int, height: int) -> bool:
        """Check a tile fits inside the grid without overlapping placed tiles."""
        if not self.in_bounds(row, col, width, height):
            return False

        return not self.cells[row : row + height, col : col + width].any()

    def place(self, row: int, col: int, width: int, height: int):
        """
        Mark the rectangle occupied.

        No bounds or overlap check is done here; callers check can_place first.
        """
        self.cells[row : row + height, col : col + width] = True

    def is_occupied(self, row: int, col: int) -> bool:
        return bool(self.cells[row, col])

    def iter_empty_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) of unoccupied cells in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                if not self.cells[row, col]:
                    yield row, col

    @property
    def occupied_count(self) -> int:
        return int(self.cells.sum())

    @property
    def is_full(self) -> bool:
        return bool(self.cells.all())

    def copy(self) -> "GridOccupancy":
        """Independent copy, used to simulate placements."""
        clone = GridOccupancy(self.width, self.height)
        clone.cells = self.cells.copy()
        return clone
