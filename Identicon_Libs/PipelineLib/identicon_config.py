"""
Configuration for the identicon pipeline.

Classes:
    IdenticonConfig: Settings for hashing, rendering and output

Functions:
    load_config: Load configuration from a JSON file
    load_config_from_env: Load the file named by IDENTICON_CONFIG, or defaults
"""

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
import json
import logging
import os

from Identicon_Libs.constants import (
    CELL_SIZE,
    CONFIG_ENV_VAR,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIR,
    FIELD_BACKGROUND_COLOR,
)
from Identicon_Libs.exceptions import ConfigError
from Identicon_Libs.HashLib.hash_registry import get_default_registry

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class IdenticonConfig:
    """Configuration for identicon generation.

    Attributes:
        hash_algorithm: Registered hash algorithm name (default: md5)
        cell_size: Edge length of each grid square in pixels (default: 50)
        background_color: RGB color of unfilled cells (default: white)
        output_dir: Directory images are written into (default: current directory)
        overwrite: Replace an existing image file (default: True)
        create_directories: Create the output directory if missing (default: True)
        log_level: Logging level name used by the command line tool
    """
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    cell_size: int = CELL_SIZE
    background_color: Tuple[int, int, int] = field(default=DEFAULT_BACKGROUND_COLOR)
    output_dir: str = DEFAULT_OUTPUT_DIR
    overwrite: bool = True
    create_directories: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data[FIELD_BACKGROUND_COLOR] = list(self.background_color)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IdenticonConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if FIELD_BACKGROUND_COLOR in filtered:
            color = filtered[FIELD_BACKGROUND_COLOR]
            if not isinstance(color, (list, tuple)):
                raise ConfigError(f"background_color must be three integers 0-255, got {color!r}")
            filtered[FIELD_BACKGROUND_COLOR] = tuple(color)
        config = cls(**filtered)
        config.validate()
        return config

    def validate(self) -> None:
        """
        Check every field.

        Raises:
            ConfigError: If any value is out of range or unknown
        """
        if not get_default_registry().has_algorithm(self.hash_algorithm):
            available = ", ".join(get_default_registry().list_algorithms())
            raise ConfigError(
                f"Unknown hash algorithm '{self.hash_algorithm}'. "
                f"Available algorithms: {available}"
            )

        if isinstance(self.cell_size, bool) or not isinstance(self.cell_size, int) or self.cell_size <= 0:
            raise ConfigError(f"cell_size must be a positive integer, got {self.cell_size!r}")

        color = self.background_color
        if not isinstance(color, (list, tuple)) or len(color) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
            raise ConfigError(f"background_color must be three integers 0-255, got {color!r}")

        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")


def load_config(path: Union[str, Path]) -> IdenticonConfig:
    """
    Load configuration from a JSON file.

    Missing keys fall back to defaults; unknown keys are ignored.

    Raises:
        ConfigError: If the file cannot be read, is not a JSON object or
                     holds invalid values
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    logger.debug(f"Loaded config from {path}")
    return IdenticonConfig.from_dict(data)


def load_config_from_env(environ: Optional[Dict[str, str]] = None) -> IdenticonConfig:
    """Load the config file named by IDENTICON_CONFIG, or return defaults."""
    environ = os.environ if environ is None else environ
    config_path = environ.get(CONFIG_ENV_VAR)
    if config_path:
        return load_config(config_path)
    return IdenticonConfig()
