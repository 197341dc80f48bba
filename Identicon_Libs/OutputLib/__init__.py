"""
OutputLib - Rendering and persistence of identicons

This module turns a finished pixel map into PNG bytes and writes
them to disk.
"""

from Identicon_Libs.OutputLib.image_renderer import (
    canvas_size_for,
    render_image,
    draw_image,
)
from Identicon_Libs.OutputLib.image_writer import (
    ImageWriterConfig,
    ImageWriter,
    save_image,
)

__all__ = [
    "canvas_size_for",
    "render_image",
    "draw_image",
    "ImageWriterConfig",
    "ImageWriter",
    "save_image",
]
