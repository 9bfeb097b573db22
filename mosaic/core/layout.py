"""
Mosaic Grid - Layout Model

Placed tiles and the layout produced by one generation pass.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PlacedTile:
    """A tile positioned on the grid, spanning [col, col+width) x [row, row+height)."""

    row: int
    col: int
    width: int
    height: int
    id: str
    color: int
    text: Optional[str] = None
    url: Optional[str] = None
    font_size: Optional[float] = None
    kind: str = "fill"  # "fixed", "random" or "fill"

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, row: int, col: int) -> bool:
        """Check whether the tile covers a grid cell."""
        return (
            self.row <= row < self.row + self.height
            and self.col <= col < self.col + self.width
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization, omitting unset content."""
        data: Dict[str, Any] = {
            "id": self.id,
            "kind": self.kind,
            "row": self.row,
            "col": self.col,
            "width": self.width,
            "height": self.height,
            "color": self.color,
        }
        if self.text is not None:
            data["text"] = self.text
        if self.url is not None:
            data["url"] = self.url
        if self.font_size is not None:
            data["font_size"] = self.font_size
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "PlacedTile":
        """Create a placed tile from dictionary."""
        return PlacedTile(
            row=data["row"],
            col=data["col"],
            width=data["width"],
            height=data["height"],
            id=data["id"],
            color=data["color"],
            text=data.get("text"),
            url=data.get("url"),
            font_size=data.get("font_size"),
            kind=data.get("kind", "fill"),
        )


@dataclass
class Layout:
    """Result of one generation pass."""

    width: int
    height: int
    strategy: str
    tiles: List[PlacedTile] = field(default_factory=list)

    def tiles_of_kind(self, kind: str) -> List[PlacedTile]:
        return [tile for tile in self.tiles if tile.kind == kind]

    @property
    def fixed_tiles(self) -> List[PlacedTile]:
        return self.tiles_of_kind("fixed")

    def tile_at(self, row: int, col: int) -> Optional[PlacedTile]:
        """Get the tile covering a grid cell, or None."""
        for tile in self.tiles:
            if tile.contains(row, col):
                return tile
        return None


class TileIdFactory:
    """Issues ids unique within one generation pass."""

    def __init__(self):
        self.counter = 0

    def next_id(self, kind: str, row: int, col: int) -> str:
        tile_id = f"{kind}-{row}-{col}-{self.counter}"
        self.counter += 1
        return tile_id
