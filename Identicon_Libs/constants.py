"""
Constants and configuration values for the identicon generator.

This module centralizes all constant values, magic numbers, and
configuration defaults used throughout the library.
"""

# Grid layout
CHUNK_SIZE = 3
GRID_COLUMNS = 5
CELL_SIZE = 50
CANVAS_SIZE = (GRID_COLUMNS * CELL_SIZE, GRID_COLUMNS * CELL_SIZE)

# Minimum lengths required by the derivation stages
MIN_DIGEST_LENGTH = 3
MIN_MIRROR_ROW_LENGTH = 2

# Colors
DEFAULT_BACKGROUND_COLOR = (255, 255, 255)

# Hashing
DEFAULT_HASH_ALGORITHM = "md5"
INPUT_ENCODING = "utf-8"

# File output
IMAGE_EXTENSION = ".png"
DEFAULT_OUTPUT_FORMAT = "PNG"
DEFAULT_OUTPUT_DIR = "."

# Configuration
CONFIG_ENV_VAR = "IDENTICON_CONFIG"
DEFAULT_LOG_LEVEL = "WARNING"

# Config field names
FIELD_BACKGROUND_COLOR = "background_color"
