"""
Mosaic Grid - Page Data

Fixed tile definitions for a multi-page site: static tiles shown on every
page, page-specific tiles, and the navigation labels that switch pages.
Handles loading from and saving to JSON files.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from . import compact_json as json
from ..core.constants import CONTENT_COLOR, IDENTITY_COLOR
from ..core.fixed_tiles import AlternatePosition, FixedTileSpec, TileRect


class PageDataError(ValueError):
    """Raised when page definition data is malformed."""

    pass


def fixed_tile_from_dict(data: Dict[str, Any]) -> FixedTileSpec:
    """
    Create a fixed tile definition from dictionary.

    Args:
        data: Tile dictionary with row/col/width/height/color and optional
            text, url, font_size, essential and alternate keys

    Returns:
        FixedTileSpec instance

    Raises:
        PageDataError: If a required key is missing or a value is invalid
    """
    try:
        primary = TileRect(
            row=int(data["row"]),
            col=int(data["col"]),
            width=int(data["width"]),
            height=int(data["height"]),
        )

        alternate = None
        alt = data.get("alternate")
        if alt is not None:
            alternate = AlternatePosition(
                row=int(alt["row"]),
                col=int(alt["col"]),
                width=int(alt["width"]) if "width" in alt else None,
                height=int(alt["height"]) if "height" in alt else None,
            )

        font_size = data.get("font_size")
        return FixedTileSpec(
            primary=primary,
            alternate=alternate,
            color=int(data["color"]),
            text=data.get("text"),
            url=data.get("url"),
            font_size=float(font_size) if font_size is not None else None,
            essential=bool(data.get("essential", False)),
        )
    except KeyError as e:
        raise PageDataError(f"Fixed tile is missing required key {e}") from e
    except (TypeError, ValueError) as e:
        raise PageDataError(f"Invalid fixed tile {data!r}: {e}") from e


def fixed_tile_to_dict(tile: FixedTileSpec) -> Dict[str, Any]:
    """Convert a fixed tile definition to dictionary for JSON serialization."""
    data: Dict[str, Any] = {
        "row": tile.primary.row,
        "col": tile.primary.col,
        "width": tile.primary.width,
        "height": tile.primary.height,
        "color": tile.color,
    }
    if tile.alternate is not None:
        alt: Dict[str, Any] = {"row": tile.alternate.row, "col": tile.alternate.col}
        if tile.alternate.width is not None:
            alt["width"] = tile.alternate.width
        if tile.alternate.height is not None:
            alt["height"] = tile.alternate.height
        data["alternate"] = alt
    if tile.text is not None:
        data["text"] = tile.text
    if tile.url is not None:
        data["url"] = tile.url
    if tile.font_size is not None:
        data["font_size"] = tile.font_size
    if tile.essential:
        data["essential"] = True
    return data


class SiteData:
    """Static and per-page fixed tiles plus navigation labels."""

    def __init__(
        self,
        static_tiles: Optional[List[FixedTileSpec]] = None,
        pages: Optional[Dict[str, List[FixedTileSpec]]] = None,
        home_page: str = "home",
        navigation: Optional[Dict[str, str]] = None,
    ):
        self.static_tiles: List[FixedTileSpec] = list(static_tiles or [])
        self.pages: Dict[str, List[FixedTileSpec]] = dict(pages or {home_page: []})
        self.home_page = home_page
        self.navigation: Dict[str, str] = dict(navigation or {})
        self.filepath: Optional[Path] = None
        self.validate()

    @property
    def page_names(self) -> List[str]:
        return list(self.pages)

    def validate(self):
        """
        Check the home page and every navigation target exist.

        Raises:
            PageDataError: If a page name is unknown
        """
        if self.home_page not in self.pages:
            raise PageDataError(f"Home page '{self.home_page}' is not defined")

        for label, page in self.navigation.items():
            if page not in self.pages:
                raise PageDataError(
                    f"Navigation label '{label}' points to unknown page '{page}'"
                )

    def fixed_tiles_for(self, page: str) -> List[FixedTileSpec]:
        """
        Get the fixed tile batch for a page: static tiles first, then the page's own.

        Raises:
            PageDataError: If the page is not defined
        """
        if page not in self.pages:
            raise PageDataError(f"Unknown page '{page}'")
        return self.static_tiles + self.pages[page]

    def page_for_label(self, text: Optional[str]) -> Optional[str]:
        """Get the page a navigation label switches to, or None."""
        if text is None:
            return None
        return self.navigation.get(text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home_page": self.home_page,
            "navigation": dict(self.navigation),
            "static_tiles": [fixed_tile_to_dict(tile) for tile in self.static_tiles],
            "pages": {
                name: [fixed_tile_to_dict(tile) for tile in tiles]
                for name, tiles in self.pages.items()
            },
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SiteData":
        """
        Create site data from dictionary.

        Raises:
            PageDataError: If the data is malformed
        """
        if not isinstance(data, dict):
            raise PageDataError("Site data must be a JSON object")

        pages_data = data.get("pages")
        if not isinstance(pages_data, dict) or not pages_data:
            raise PageDataError("Site data must define at least one page")

        static_data = data.get("static_tiles", [])
        if not isinstance(static_data, list):
            raise PageDataError("'static_tiles' must be a list of tiles")

        for name, tiles in pages_data.items():
            if not isinstance(tiles, list):
                raise PageDataError(f"Page '{name}' must be a list of tiles")

        navigation = data.get("navigation", {})
        if not isinstance(navigation, dict) or not all(
            isinstance(label, str) and isinstance(page, str)
            for label, page in navigation.items()
        ):
            raise PageDataError("'navigation' must map label strings to page names")

        home_page = data.get("home_page", "home")
        if not isinstance(home_page, str):
            raise PageDataError(f"'home_page' must be a page name, got {home_page!r}")

        return SiteData(
            static_tiles=[fixed_tile_from_dict(t) for t in static_data],
            pages={
                name: [fixed_tile_from_dict(t) for t in tiles]
                for name, tiles in pages_data.items()
            },
            home_page=home_page,
            navigation=navigation,
        )

    def save(self, path: str | Path):
        """
        Save site data to JSON file.

        Args:
            path: File path to save to (can be string or Path)
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        self.filepath = path

    @staticmethod
    def load(path: str | Path) -> "SiteData":
        """
        Load site data from JSON file.

        Args:
            path: File path to load from (can be string or Path)

        Returns:
            Loaded SiteData instance

        Raises:
            PageDataError: If the file content is malformed
        """
        path = Path(path)

        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise PageDataError(f"Invalid JSON in {path}: {e}") from e

        site = SiteData.from_dict(data)
        site.filepath = path
        return site


IDENTITY_LABEL = "Mosaic Grid"

# Built-in site used when no page file is given
DEFAULT_SITE_DATA: Dict[str, Any] = {
    "home_page": "home",
    "navigation": {
        IDENTITY_LABEL: "home",
        "About": "about",
        "Projects": "projects",
    },
    "static_tiles": [
        {
            "row": 1, "col": 1, "width": 4, "height": 1,
            "color": IDENTITY_COLOR, "text": IDENTITY_LABEL, "font_size": 1.6,
            "essential": True, "alternate": {"row": 1, "col": 1},
        },
    ],
    "pages": {
        "home": [
            {
                "row": 1, "col": 6, "width": 2, "height": 1,
                "color": CONTENT_COLOR, "text": "About", "font_size": 1.3,
                "alternate": {"row": 3, "col": 1},
            },
            {
                "row": 1, "col": 9, "width": 2, "height": 1,
                "color": CONTENT_COLOR, "text": "Projects", "font_size": 1.3,
                "alternate": {"row": 5, "col": 1},
            },
        ],
        "about": [
            {
                "row": 1, "col": 6, "width": 5, "height": 1,
                "color": CONTENT_COLOR, "text": "Procedural tile mosaics.",
                "font_size": 1.1, "alternate": {"row": 3, "col": 1},
            },
            {
                "row": 1, "col": 12, "width": 2, "height": 1,
                "color": CONTENT_COLOR, "text": "Source",
                "url": "https://example.com/mosaic-grid", "font_size": 1.1,
                "alternate": {"row": 5, "col": 1},
            },
        ],
        "projects": [
            {
                "row": 1, "col": 6, "width": 5, "height": 1,
                "color": CONTENT_COLOR, "text": "Name Generator",
                "url": "https://example.com/names", "font_size": 1.2,
                "alternate": {"row": 3, "col": 1},
            },
            {
                "row": 1, "col": 12, "width": 2, "height": 1,
                "color": CONTENT_COLOR, "text": "Circuits",
                "url": "https://example.com/circuits", "font_size": 1.2,
                "alternate": {"row": 5, "col": 1},
            },
        ],
    },
}


def default_site() -> SiteData:
    """Build the built-in three-page site."""
    return SiteData.from_dict(DEFAULT_SITE_DATA)
