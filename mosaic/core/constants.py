"""
Mosaic Grid - Colors, Dimensions and Tunables

Shared constants for the generator, renderer and viewer tools.
"""

from typing import Dict, Tuple

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

# Size of each grid cell in pixels
TILE_SIZE = 60

# Maximum attempts to place random tiles per generation pass
MAX_PLACEMENT_ATTEMPTS = 1000

# Inclusive range of color indices assigned to random and fill tiles
RANDOM_COLOR_MIN = 1
RANDOM_COLOR_MAX = 8

# Colors reserved for fixed content tiles
IDENTITY_COLOR = 9
CONTENT_COLOR = 10

# Cells reserved on the far edge when validating fixed tiles
USABLE_SPAN_MARGIN = 1

# (width, height, weight) - higher weights are more likely to appear
DEFAULT_TILE_TYPES = [
    (1, 1, 0.3),   # Small squares (most common)
    (2, 1, 0.2),   # Horizontal rectangles
    (1, 2, 0.2),   # Vertical rectangles
    (2, 2, 0.1),   # Medium squares
    (1, 3, 0.08),  # Tall rectangles
    (3, 1, 0.08),  # Wide rectangles
    (2, 3, 0.02),  # Large verticals (rare)
    (3, 2, 0.02),  # Large horizontals (rare)
]

# Color index -> RGB, used by the PIL renderer
COLORS: Dict[int, RGBColor] = {
    1: (0x26, 0x46, 0x53),
    2: (0x2A, 0x9D, 0x8F),
    3: (0xE9, 0xC4, 0x6A),
    4: (0xF4, 0xA2, 0x61),
    5: (0xE7, 0x6F, 0x51),
    6: (0x8A, 0xB1, 0x7D),
    7: (0x3D, 0x5A, 0x80),
    8: (0x98, 0xC1, 0xD9),
    9: (0x1D, 0x1D, 0x1D),   # Identity tile
    10: (0x33, 0x33, 0x33),  # Navigation / content tiles
}

# Fallback for color indices missing from COLORS
UNKNOWN_COLOR: RGBColor = (0xFF, 0x00, 0xFF)

TEXT_COLOR: RGBColor = (0xFF, 0xFF, 0xFF)
GRID_LINE_COLOR: RGBColor = (0x10, 0x10, 0x10)
