"""
Mosaic Grid - PIL Renderer

PIL-based rendering for generating PNG previews of mosaic layouts.
Used by the render tool to create static images.
"""

try:
    from PIL import Image, ImageDraw, ImageFont
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.constants import (
    COLORS,
    GRID_LINE_COLOR,
    TEXT_COLOR,
    TILE_SIZE,
    UNKNOWN_COLOR,
    RGBColor,
)
from ..core.layout import Layout, PlacedTile

# Base text height as a fraction of the cell size, scaled by tile font_size
TEXT_SCALE = 0.3


def tile_color(color: int) -> RGBColor:
    """Map a tile color index to RGB."""
    return COLORS.get(color, UNKNOWN_COLOR)


def tile_pixel_box(
    tile: PlacedTile, cell_size: int = TILE_SIZE, gap: int = 0
) -> tuple[int, int, int, int]:
    """Pixel box (left, top, right, bottom) covered by a tile, inclusive."""
    left = tile.col * cell_size + gap
    top = tile.row * cell_size + gap
    right = (tile.col + tile.width) * cell_size - 1 - gap
    bottom = (tile.row + tile.height) * cell_size - 1 - gap
    return left, top, right, bottom


def render_layout_to_image(
    layout: Layout,
    cell_size: int = TILE_SIZE,
    gap: int = 1,
    render_text: bool = True,
) -> Image.Image:
    """
    Render a layout to a PIL Image.

    Args:
        layout: Generated layout
        cell_size: Size of one grid cell in pixels
        gap: Pixels left uncovered around each tile to outline it
        render_text: Whether to draw tile text (default: True)

    Returns:
        PIL Image object of size (width * cell_size, height * cell_size)
    """
    img = Image.new(
        "RGB", (layout.width * cell_size, layout.height * cell_size), GRID_LINE_COLOR
    )
    draw = ImageDraw.Draw(img)

    for tile in layout.tiles:
        draw.rectangle(tile_pixel_box(tile, cell_size, gap), fill=tile_color(tile.color))

    if render_text:
        for tile in layout.tiles:
            if tile.text:
                _render_tile_text(draw, tile, cell_size)

    return img


def _render_tile_text(draw: ImageDraw.ImageDraw, tile: PlacedTile, cell_size: int):
    """Draw a tile's text centered in its box."""
    font_size = tile.font_size if tile.font_size is not None else 1.0
    font = ImageFont.load_default(size=max(8, round(cell_size * TEXT_SCALE * font_size)))

    left, top, right, bottom = tile_pixel_box(tile, cell_size)
    text_left, text_top, text_right, text_bottom = draw.textbbox(
        (0, 0), tile.text, font=font
    )
    x = left + ((right - left) - (text_right - text_left)) / 2 - text_left
    y = top + ((bottom - top) - (text_bottom - text_top)) / 2 - text_top

    draw.text((x, y), tile.text, fill=TEXT_COLOR, font=font)
