"""
Mosaic Grid - Layout Data

JSON export and import of generated layouts.
"""

from pathlib import Path
from typing import Any, Dict

from . import compact_json as json
from ..core.layout import Layout, PlacedTile


def layout_to_dict(layout: Layout) -> Dict[str, Any]:
    """Convert a layout to dictionary for JSON serialization."""
    return {
        "width": layout.width,
        "height": layout.height,
        "strategy": layout.strategy,
        "tiles": [tile.to_dict() for tile in layout.tiles],
    }


def layout_from_dict(data: Dict[str, Any]) -> Layout:
    return Layout(
        width=data["width"],
        height=data["height"],
        strategy=data.get("strategy", "primary"),
        tiles=[PlacedTile.from_dict(tile) for tile in data.get("tiles", [])],
    )


def save_layout(layout: Layout, path: str | Path):
    """
    Save layout to JSON file, one tile per line.

    Args:
        layout: Layout to save
        path: File path to save to (can be string or Path)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(layout_to_dict(layout), f, indent=2)


def load_layout(path: str | Path) -> Layout:
    with open(Path(path)) as f:
        return layout_from_dict(json.load(f))
