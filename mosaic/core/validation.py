"""
Mosaic Grid - Layout Validation

Validates that a layout covers its grid exactly once.
Catches gaps, overlapping tiles and tiles outside the grid before a layout is
written or rendered.
"""

from dataclasses import dataclass

import numpy as np

from .layout import Layout


@dataclass
class InvalidCell:
    """A single cell that is not covered exactly once."""

    row: int
    col: int
    coverage: int

    def __str__(self) -> str:
        if self.coverage == 0:
            return f"Row {self.row}, Col {self.col}: not covered (gap)"
        return f"Row {self.row}, Col {self.col}: covered {self.coverage} times (overlap)"


class InvalidLayoutError(Exception):
    """Raised when a layout has gaps, overlaps or out-of-bounds tiles."""

    def __init__(
        self,
        layout: Layout,
        invalid_cells: list[InvalidCell],
        out_of_bounds: list[str],
    ):
        self.width = layout.width
        self.height = layout.height
        self.invalid_cells = invalid_cells
        self.out_of_bounds = out_of_bounds
        super().__init__(str(self))

    def __str__(self) -> str:
        lines = [f"Layout {self.width}x{self.height} is not a valid mosaic:"]

        if self.out_of_bounds:
            lines.append(f"  {len(self.out_of_bounds)} tile(s) extend outside the grid:")
            for tile_id in self.out_of_bounds[:10]:
                lines.append(f"    {tile_id}")
            if len(self.out_of_bounds) > 10:
                lines.append(f"    ... and {len(self.out_of_bounds) - 10} more")

        if self.invalid_cells:
            lines.append(
                f"  Found {len(self.invalid_cells)} cell(s) not covered exactly once:"
            )
            for cell in self.invalid_cells[:10]:
                lines.append(f"    {cell}")
            if len(self.invalid_cells) > 10:
                lines.append(f"    ... and {len(self.invalid_cells) - 10} more")

        return "\n".join(lines)


class LayoutValidator:
    """Validates layouts for exact single coverage.

    Every cell in [0, height) x [0, width) must be covered by exactly one
    tile, and no tile may extend outside the grid.
    """

    def coverage_map(self, layout: Layout) -> np.ndarray:
        """Count how many tiles cover each cell (clipped to the grid)."""
        coverage = np.zeros((layout.height, layout.width), dtype=int)

        for tile in layout.tiles:
            row_start = max(tile.row, 0)
            col_start = max(tile.col, 0)
            row_end = min(tile.row + tile.height, layout.height)
            col_end = min(tile.col + tile.width, layout.width)
            if row_start < row_end and col_start < col_end:
                coverage[row_start:row_end, col_start:col_end] += 1

        return coverage

    def find_out_of_bounds(self, layout: Layout) -> list[str]:
        """Ids of tiles that extend outside the grid."""
        return [
            tile.id
            for tile in layout.tiles
            if tile.row < 0
            or tile.col < 0
            or tile.row + tile.height > layout.height
            or tile.col + tile.width > layout.width
        ]

    def find_invalid_cells(self, layout: Layout) -> list[InvalidCell]:
        """Cells covered zero times or more than once, in row-major order."""
        coverage = self.coverage_map(layout)
        rows, cols = np.nonzero(coverage != 1)
        return [
            InvalidCell(int(row), int(col), int(coverage[row, col]))
            for row, col in zip(rows, cols)
        ]

    def is_valid(self, layout: Layout) -> bool:
        return not self.find_out_of_bounds(layout) and not self.find_invalid_cells(
            layout
        )

    def validate(self, layout: Layout) -> None:
        """Validate a layout.

        Args:
            layout: The layout to validate

        Raises:
            InvalidLayoutError: If any cell is not covered exactly once or any
                tile extends outside the grid
        """
        out_of_bounds = self.find_out_of_bounds(layout)
        invalid_cells = self.find_invalid_cells(layout)

        if out_of_bounds or invalid_cells:
            raise InvalidLayoutError(layout, invalid_cells, out_of_bounds)
