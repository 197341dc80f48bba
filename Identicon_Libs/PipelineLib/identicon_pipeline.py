"""
Identicon Pipeline

Runs the derivation stages in order over an immutable IdenticonImage, then
hands the result to the rasterizer and the writer. Each collaborator can be
replaced by a keyword argument so tests can substitute fakes.

Functions:
    run_stages: Apply a sequence of stages to a record
    build_identicon: Hash an input and run every derivation stage
    generate_identicon: Build, render and save an identicon
    main: Create `<input>.png` in the current directory
"""

from functools import partial
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Union
import logging

from Identicon_Libs.HashLib.hash_registry import HashFunction, get_default_registry
from Identicon_Libs.IdenticonLib.identicon_models import IdenticonImage, PixelRegion, RgbColor
from Identicon_Libs.IdenticonLib.identicon_ops import (
    hash_input,
    pick_color,
    build_grid,
    filter_odd_squares,
    build_pixel_map,
)
from Identicon_Libs.OutputLib.image_renderer import canvas_size_for, draw_image
from Identicon_Libs.OutputLib.image_writer import ImageWriter, ImageWriterConfig
from Identicon_Libs.PipelineLib.identicon_config import IdenticonConfig

logger = logging.getLogger(__name__)

Stage = Callable[[IdenticonImage], IdenticonImage]
Renderer = Callable[[RgbColor, Sequence[PixelRegion], Tuple[int, int], RgbColor], bytes]
Writer = Callable[[bytes, str], Path]


def default_stages(cell_size: int) -> Tuple[Stage, ...]:
    """Stages run after hashing, in execution order."""
    return (
        pick_color,
        build_grid,
        filter_odd_squares,
        partial(build_pixel_map, cell_size=cell_size),
    )


def _stage_name(stage: Stage) -> str:
    func = getattr(stage, "func", stage)
    return getattr(func, "__name__", repr(func))


def run_stages(image: IdenticonImage, stages: Sequence[Stage]) -> IdenticonImage:
    """
    Apply stages in order, feeding each the previous stage's record.

    Raises:
        Exception: Whatever a stage raises, unchanged; later stages do not run
    """
    for stage in stages:
        name = _stage_name(stage)
        try:
            image = stage(image)
        except Exception:
            logger.error(f"Stage {name} failed")
            raise
        logger.debug(f"Stage {name} complete")
    return image


def build_identicon(
    input: Union[str, bytes],
    config: Optional[IdenticonConfig] = None,
    hash_function: Optional[HashFunction] = None,
) -> IdenticonImage:
    """
    Hash the input and run every derivation stage.

    Args:
        input: Identicon seed
        config: Settings (hash algorithm and cell size are used here)
        hash_function: Overrides the configured hash algorithm

    Returns:
        Finished IdenticonImage with hex, color, filtered grid and pixel map
    """
    config = config or IdenticonConfig()
    if hash_function is None:
        hash_function = get_default_registry().get_hash_function(config.hash_algorithm)

    image = hash_input(input, hash_function)
    return run_stages(image, default_stages(config.cell_size))


def generate_identicon(
    input: str,
    config: Optional[IdenticonConfig] = None,
    hash_function: Optional[HashFunction] = None,
    renderer: Optional[Renderer] = None,
    writer: Optional[Writer] = None,
    name: Optional[str] = None,
) -> Path:
    """
    Build, render and save the identicon for `input`.

    Args:
        input: Identicon seed
        config: Settings; defaults write `<input>.png` to the current directory
        hash_function: Replacement hash collaborator
        renderer: Replacement rasterizer taking (color, pixel_map, canvas_size, background)
        writer: Replacement persistence taking (data, name)
        name: Base file name (default: the input itself)

    Returns:
        Path reported by the writer

    Raises:
        UnderflowError: If the digest is too short for a stage
        PersistenceError: If the image cannot be written
    """
    config = config or IdenticonConfig()
    renderer = renderer or draw_image
    if writer is None:
        writer = ImageWriter(
            ImageWriterConfig(
                output_dir=config.output_dir,
                overwrite=config.overwrite,
                create_directories=config.create_directories,
            )
        ).write

    image = build_identicon(input, config, hash_function)
    canvas_size = canvas_size_for(image, cell_size=config.cell_size)

    data = renderer(image.color, image.pixel_map, canvas_size, config.background_color)
    return writer(data, input if name is None else name)


def main(input: str) -> Path:
    """
    Create a new identicon png image named after the given string.

    Example:
        >>> main("hipster")
        PosixPath('/current/dir/hipster.png')
    """
    return generate_identicon(input)
