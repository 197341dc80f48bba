"""
Identicon data models.

This module defines the immutable record that flows through the identicon
pipeline, plus the small value types it carries.

Classes:
    GridCell: A grid value paired with its row-major position
    PixelRegion: Top-left and bottom-right corners of a filled square
    IdenticonImage: Accumulating record filled in stage by stage

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)
    Point: An (x, y) integer coordinate on the canvas
"""

from dataclasses import dataclass, replace
from typing import NamedTuple, Optional, Tuple

RgbColor = Tuple[int, int, int]
Point = Tuple[int, int]


class GridCell(NamedTuple):
    value: int
    index: int


class PixelRegion(NamedTuple):
    top_left: Point
    bottom_right: Point


@dataclass(frozen=True)
class IdenticonImage:
    """Record accumulated by the pipeline stages.

    Attributes:
        hex: Digest bytes as integers 0-255
        color: RGB fill color, set by the color selector
        grid: Mirrored (and later filtered) grid cells
        pixel_map: Regions to fill, one per retained cell
    """
    hex: Tuple[int, ...] = ()
    color: Optional[RgbColor] = None
    grid: Tuple[GridCell, ...] = ()
    pixel_map: Tuple[PixelRegion, ...] = ()

    def evolve(self, **changes) -> "IdenticonImage":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
