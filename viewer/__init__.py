"""
Mosaic Grid - Viewer Package

Consumer-side helpers: viewport to grid conversion, tile hit-testing and
page navigation around the mosaic generator.
"""

from .navigation import ClickAction, NavigationState
from .view_state import ViewState

__all__ = ['ClickAction', 'NavigationState', 'ViewState']
