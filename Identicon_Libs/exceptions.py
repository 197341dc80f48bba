"""
Exception types raised by the identicon library.

Classes:
    IdenticonError: Base class for all library errors
    UnderflowError: A sequence is shorter than a stage requires
    PersistenceError: Image bytes could not be written to disk
    ConfigError: Configuration values are invalid
"""


class IdenticonError(Exception):
    """Base class for identicon errors."""


class UnderflowError(IdenticonError, ValueError):
    """Raised when a digest or row holds fewer elements than a stage needs."""

    def __init__(self, what: str, required: int, actual: int):
        self.what = what
        self.required = required
        self.actual = actual
        super().__init__(
            f"{what} requires at least {required} elements, got {actual}"
        )


class PersistenceError(IdenticonError, OSError):
    """Raised when the rendered image cannot be persisted."""


class ConfigError(IdenticonError, ValueError):
    """Raised for invalid configuration values or files."""
