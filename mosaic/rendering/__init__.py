"""
Rendering of mosaic layouts to images.
"""
