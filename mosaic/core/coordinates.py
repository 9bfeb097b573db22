"""
Mosaic Grid - Coordinate Normalization

Fixed tiles may be anchored to the bottom/right edge with negative
coordinates, counted back from the usable span.
"""

from .constants import USABLE_SPAN_MARGIN


def usable_span(dimension: int) -> int:
    """Grid dimension minus the margin reserved for fixed tiles."""
    return dimension - USABLE_SPAN_MARGIN


def normalize_coordinate(coordinate: int, dimension: int) -> int:
    """
    Convert a negative coordinate to an absolute one by counting from the end.

    Args:
        coordinate: Row or column, possibly negative
        dimension: Usable span along the same axis

    Returns:
        ``coordinate`` if non-negative, otherwise ``dimension + coordinate``

    Example:
        >>> normalize_coordinate(-1, 14)
        13
    """
    return coordinate if coordinate >= 0 else dimension + coordinate
