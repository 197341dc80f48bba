"""
IdenticonLib - Identicon record model and derivation stages

This module provides the immutable image record and the pure functions
that derive its color, grid and pixel map from a digest.
"""

from Identicon_Libs.IdenticonLib.identicon_models import (
    GridCell,
    IdenticonImage,
    PixelRegion,
    Point,
    RgbColor,
)
from Identicon_Libs.IdenticonLib.identicon_ops import (
    hash_input,
    pick_color,
    mirror_row,
    build_grid,
    filter_odd_squares,
    build_pixel_map,
)

__all__ = [
    "GridCell",
    "IdenticonImage",
    "PixelRegion",
    "Point",
    "RgbColor",
    "hash_input",
    "pick_color",
    "mirror_row",
    "build_grid",
    "filter_odd_squares",
    "build_pixel_map",
]
