"""
Core identicon derivation operations.

Each function takes an IdenticonImage and returns a new one with a single
field filled in; nothing is mutated in place.

Functions:
    hash_input: Hash a string into digest bytes
    pick_color: Use the first three digest bytes as the RGB color
    mirror_row: Make a row palindromic by appending its second and first values
    build_grid: Chunk, mirror, flatten and index the digest
    filter_odd_squares: Drop cells with odd values
    build_pixel_map: Map cell indices to square corners on the canvas
"""

import logging
from typing import List, Optional, Sequence, Union

from Identicon_Libs.constants import (
    CELL_SIZE,
    CHUNK_SIZE,
    GRID_COLUMNS,
    INPUT_ENCODING,
    MIN_DIGEST_LENGTH,
    MIN_MIRROR_ROW_LENGTH,
)
from Identicon_Libs.exceptions import UnderflowError
from Identicon_Libs.HashLib.hash_registry import HashFunction, get_default_registry
from Identicon_Libs.IdenticonLib.identicon_models import (
    GridCell,
    IdenticonImage,
    PixelRegion,
)

logger = logging.getLogger(__name__)


def hash_input(
    input: Union[str, bytes],
    hash_function: Optional[HashFunction] = None,
) -> IdenticonImage:
    """
    Hash the input and store the digest as a tuple of byte values.

    Args:
        input: Seed string (encoded as UTF-8) or raw bytes
        hash_function: Callable returning a fixed-length digest. Defaults to
                       the registry's MD5 entry.

    Returns:
        A new IdenticonImage with only `hex` populated

    Raises:
        TypeError: If input is neither str nor bytes

    Example:
        >>> hash_input("asdf").hex
        (145, 46, 200, 3, 178, 206, 73, 228, 165, 65, 6, 141, 73, 90, 181, 112)
    """
    if hash_function is None:
        hash_function = get_default_registry().get_hash_function()

    if isinstance(input, str):
        data = input.encode(INPUT_ENCODING)
    elif isinstance(input, (bytes, bytearray)):
        data = bytes(input)
    else:
        raise TypeError(f"input must be str or bytes, got {type(input).__name__}")

    digest = tuple(hash_function(data))
    logger.debug(f"Hashed {len(data)} input bytes into {len(digest)} digest bytes")
    return IdenticonImage(hex=digest)


def pick_color(image: IdenticonImage) -> IdenticonImage:
    """
    Use the first three digest bytes as the RGB color.

    Raises:
        UnderflowError: If the digest holds fewer than three bytes
    """
    if len(image.hex) < MIN_DIGEST_LENGTH:
        raise UnderflowError("digest", MIN_DIGEST_LENGTH, len(image.hex))

    r, g, b = image.hex[:3]
    return image.evolve(color=(r, g, b))


def mirror_row(row: Sequence[int]) -> List[int]:
    """
    Append the second and first elements of a row to its end.

    Example:
        >>> mirror_row([1, 2, 3])
        [1, 2, 3, 2, 1]

    Raises:
        UnderflowError: If the row has fewer than two elements
    """
    if len(row) < MIN_MIRROR_ROW_LENGTH:
        raise UnderflowError("row", MIN_MIRROR_ROW_LENGTH, len(row))

    first, second = row[0], row[1]
    return list(row) + [second, first]


def _chunk(values: Sequence[int], size: int) -> List[Sequence[int]]:
    # Incomplete trailing chunks are discarded
    return [values[i:i + size] for i in range(0, len(values) - size + 1, size)]


def build_grid(image: IdenticonImage) -> IdenticonImage:
    """
    Build the mirrored, indexed grid from the digest.

    The digest is split into rows of three (an incomplete final row is
    dropped), each row is mirrored into five values, and the flattened
    values are paired with their position.

    For a 16-byte digest this yields 25 cells; the last byte is unused.
    """
    rows = _chunk(image.hex, CHUNK_SIZE)
    values = [value for row in rows for value in mirror_row(row)]
    grid = tuple(GridCell(value, index) for index, value in enumerate(values))

    dropped = len(image.hex) % CHUNK_SIZE
    if dropped:
        logger.debug(f"Dropped {dropped} trailing digest byte(s) from grid")

    return image.evolve(grid=grid)


def filter_odd_squares(image: IdenticonImage) -> IdenticonImage:
    """Keep only cells with an even value, preserving order and indices."""
    grid = tuple(cell for cell in image.grid if cell.value % 2 == 0)
    return image.evolve(grid=grid)


def build_pixel_map(
    image: IdenticonImage,
    cell_size: int = CELL_SIZE,
    columns: int = GRID_COLUMNS,
) -> IdenticonImage:
    """
    Convert each cell index into the corners of a square on the canvas.

    Args:
        image: Record with a (filtered) grid
        cell_size: Edge length of each square in pixels
        columns: Number of cells per grid row

    Returns:
        A new IdenticonImage with `pixel_map` populated, one region per cell

    Example:
        >>> cell = GridCell(46, 1)
        >>> build_pixel_map(IdenticonImage(grid=(cell,))).pixel_map
        (PixelRegion(top_left=(50, 0), bottom_right=(100, 50)),)
    """
    pixel_map = []
    for cell in image.grid:
        horizontal = (cell.index % columns) * cell_size
        vertical = (cell.index // columns) * cell_size
        top_left = (horizontal, vertical)
        bottom_right = (horizontal + cell_size, vertical + cell_size)
        pixel_map.append(PixelRegion(top_left, bottom_right))

    return image.evolve(pixel_map=tuple(pixel_map))
