"""
File formats: page definitions and layout export.
"""

from .layout_data import layout_from_dict, layout_to_dict, load_layout, save_layout
from .page_data import PageDataError, SiteData, default_site

__all__ = [
    "layout_from_dict",
    "layout_to_dict",
    "load_layout",
    "save_layout",
    "PageDataError",
    "SiteData",
    "default_site",
]
