"""
Mosaic Grid - Navigation State

Tracks the active page, selects its fixed tiles, regenerates the mosaic and
resolves what a click on a tile does.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from mosaic.core.fixed_tiles import FixedTileSpec
from mosaic.core.generator import GeneratorConfig, MosaicGenerator
from mosaic.core.layout import Layout, PlacedTile
from mosaic.formats.page_data import SiteData, default_site

from .view_state import ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClickAction:
    """Outcome of clicking a tile."""

    kind: str  # "navigate", "open_url" or "none"
    page: Optional[str] = None
    url: Optional[str] = None


NO_ACTION = ClickAction("none")


class NavigationState:
    """Page state and mosaic regeneration for one view."""

    def __init__(
        self,
        view_state: ViewState,
        site: SiteData | None = None,
        config: GeneratorConfig | None = None,
        rng: random.Random | None = None,
    ):
        self.view_state = view_state
        self.site = site if site is not None else default_site()
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.current_page = self.site.home_page
        self.layout: Layout | None = None

    def fixed_tiles(self) -> List[FixedTileSpec]:
        """Fixed tile batch of the active page."""
        return self.site.fixed_tiles_for(self.current_page)

    def generate(self) -> Layout:
        """Generate a new layout for the current viewport and page."""
        width, height = self.view_state.grid_dimensions()
        generator = MosaicGenerator(
            width, height, self.fixed_tiles(), config=self.config, rng=self.rng
        )
        self.layout = generator.generate_layout()
        return self.layout

    def resize(self, viewport_width: int, viewport_height: int) -> bool:
        """
        Update the viewport and regenerate if the grid size changed.

        Returns:
            True if a new layout was generated
        """
        if not self.view_state.resize(viewport_width, viewport_height):
            return False

        self.generate()
        return True

    def navigate(self, page: str):
        """Switch to a page and regenerate."""
        # Validates the page name before switching
        self.site.fixed_tiles_for(page)
        logger.debug("Navigating from %s to %s", self.current_page, page)
        self.current_page = page
        self.generate()

    def is_clickable(self, tile: PlacedTile) -> bool:
        """Tiles with a URL or a navigation label respond to clicks."""
        return bool(tile.url) or self.site.page_for_label(tile.text) is not None

    def handle_click(self, tile: PlacedTile) -> ClickAction:
        """
        Resolve a click on a tile.

        Navigation labels take precedence over URLs. Navigating switches the
        page and regenerates the layout; URLs are returned for the caller to
        open.
        """
        page = self.site.page_for_label(tile.text)
        if page is not None:
            self.navigate(page)
            return ClickAction("navigate", page=page)

        if tile.url:
            return ClickAction("open_url", url=tile.url)

        return NO_ACTION

    def click_at(self, screen_pos: tuple[int, int]) -> ClickAction:
        """Resolve a click at a screen position on the current layout."""
        if self.layout is None:
            return NO_ACTION

        tile = self.view_state.tile_at(self.layout, screen_pos)
        if tile is None:
            return NO_ACTION

        return self.handle_click(tile)
