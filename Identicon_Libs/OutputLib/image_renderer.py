"""
Rasterization of identicon pixel maps.

Functions:
    canvas_size_for: Canvas dimensions needed for a record's grid
    render_image: Fill pixel regions on a new PIL Image
    draw_image: Render and encode the image as PNG bytes
"""

import io
import logging
from typing import Sequence, Tuple

from Identicon_Libs.constants import (
    CANVAS_SIZE,
    CELL_SIZE,
    CHUNK_SIZE,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_OUTPUT_FORMAT,
    GRID_COLUMNS,
)
from Identicon_Libs.IdenticonLib.identicon_models import (
    IdenticonImage,
    PixelRegion,
    RgbColor,
)
from Identicon_Libs.pillow_compat import Image, ImageDraw

logger = logging.getLogger(__name__)


def canvas_size_for(
    image: IdenticonImage,
    cell_size: int = CELL_SIZE,
    columns: int = GRID_COLUMNS,
) -> Tuple[int, int]:
    """
    Compute the canvas needed to hold every row of the grid.

    The row count comes from the digest rather than the grid, since filtering
    may have removed whole rows. A 16-byte digest gives 250x250.
    """
    rows = len(image.hex) // CHUNK_SIZE
    return (columns * cell_size, rows * cell_size)


def render_image(
    color: RgbColor,
    pixel_map: Sequence[PixelRegion],
    canvas_size: Tuple[int, int] = CANVAS_SIZE,
    background: RgbColor = DEFAULT_BACKGROUND_COLOR,
) -> "Image.Image":
    """
    Fill each region solid with `color` on a new RGB canvas.

    Regions are half-open: a region from (50, 0) to (100, 50) covers pixel
    columns 50-99 and rows 0-49.

    Args:
        color: RGB fill color
        pixel_map: Regions to fill, in any order
        canvas_size: (width, height) of the canvas
        background: RGB color of unfilled pixels

    Returns:
        A PIL Image in RGB mode
    """
    canvas = Image.new("RGB", tuple(canvas_size), tuple(background))
    draw = ImageDraw.Draw(canvas)
    fill = tuple(color)

    for top_left, bottom_right in pixel_map:
        x0, y0 = top_left
        x1, y1 = bottom_right
        draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=fill)

    return canvas


def draw_image(
    color: RgbColor,
    pixel_map: Sequence[PixelRegion],
    canvas_size: Tuple[int, int] = CANVAS_SIZE,
    background: RgbColor = DEFAULT_BACKGROUND_COLOR,
) -> bytes:
    """
    Render the regions and encode the result as a PNG byte buffer.

    Returns:
        PNG-encoded image bytes
    """
    canvas = render_image(color, pixel_map, canvas_size, background)

    buffer = io.BytesIO()
    canvas.save(buffer, format=DEFAULT_OUTPUT_FORMAT)
    data = buffer.getvalue()

    logger.debug(
        f"Rendered {len(pixel_map)} regions on {canvas_size[0]}x{canvas_size[1]} "
        f"canvas ({len(data)} bytes)"
    )
    return data
