"""
Persistence of rendered identicons.

Writes PNG bytes to `<name>.png` inside an output directory, refusing names
that would place the file outside that directory.

Classes:
    ImageWriterConfig: Configuration for writing images
    ImageWriter: Resolves target paths and writes image bytes

Functions:
    save_image: Convenience wrapper writing bytes with default settings
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Union
import logging

from Identicon_Libs.constants import DEFAULT_OUTPUT_DIR, IMAGE_EXTENSION
from Identicon_Libs.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@dataclass
class ImageWriterConfig:
    """Configuration for writing images.

    Attributes:
        output_dir: Directory the images are written into (default: current directory)
        extension: Extension appended to the image name (default: .png)
        overwrite: Overwrite existing files (default: True)
        create_directories: Create missing directories (default: True)
    """
    output_dir: str = DEFAULT_OUTPUT_DIR
    extension: str = IMAGE_EXTENSION
    overwrite: bool = True
    create_directories: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageWriterConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)


class ImageWriter:
    """Resolves output paths and writes image bytes to disk."""

    def __init__(self, config: ImageWriterConfig = None):
        self.config = config or ImageWriterConfig()
        self._base_dir = Path(self.config.output_dir).resolve()

    def resolve_path(self, name: str) -> Path:
        """
        Resolve `<name><extension>` inside the output directory.

        Args:
            name: Base file name, typically the identicon seed

        Returns:
            Absolute path of the target file

        Raises:
            PersistenceError: If the name contains '..', is not a valid path or
                              resolves outside the output directory
        """
        path = Path(f"{name}{self.config.extension}")

        for part in path.parts:
            if part == "..":
                raise PersistenceError(
                    f"Path traversal detected: image name contains '..': {name}"
                )

        try:
            resolved_path = (self._base_dir / path).resolve()
        except ValueError as e:
            raise PersistenceError(f"Invalid image name {name!r}: {e}") from e

        try:
            resolved_path.relative_to(self._base_dir)
        except ValueError:
            raise PersistenceError(
                f"Image name '{name}' resolves to '{resolved_path}' "
                f"which is outside the output directory '{self._base_dir}'"
            )

        return resolved_path

    def write(self, data: bytes, name: str) -> Path:
        """
        Write image bytes to `<name><extension>`.

        Args:
            data: Encoded image bytes
            name: Base file name

        Returns:
            Path where the image was written

        Raises:
            PersistenceError: If the file exists and overwrite=False, or the
                              bytes cannot be written
        """
        output_file = self.resolve_path(name)

        if output_file.exists() and not self.config.overwrite:
            raise PersistenceError(
                f"Output file already exists: {output_file}. "
                f"Set overwrite=True to replace."
            )

        try:
            if self.config.create_directories:
                output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_bytes(data)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Failed to write image to {output_file}: {e}") from e

        logger.info(f"Wrote {len(data)} bytes to {output_file}")
        return output_file


def save_image(
    data: bytes,
    name: str,
    output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
    overwrite: bool = True,
    create_directories: bool = True,
) -> Path:
    """
    Save encoded image bytes as `<name>.png` in `output_dir`.

    Example:
        >>> save_image(png_bytes, "hipster")
        PosixPath('/current/dir/hipster.png')
    """
    config = ImageWriterConfig(
        output_dir=str(output_dir),
        overwrite=overwrite,
        create_directories=create_directories,
    )
    return ImageWriter(config).write(data, name)
