"""
Hash Function Registry and Manager.

This module provides a centralized registry of digest functions. The identicon
pipeline only needs a callable that turns bytes into a fixed-length digest;
the registry maps algorithm names to such callables so the algorithm can be
chosen from configuration.

Classes:
    HashRegistry: Registry for hash functions

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_hash_functions: Register the built-in hashlib algorithms
"""

from typing import Any, Callable, Dict, List, Optional
import hashlib
import logging

from Identicon_Libs.constants import DEFAULT_HASH_ALGORITHM
from Identicon_Libs.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Type alias for hash function
HashFunction = Callable[[bytes], bytes]


class HashRegistry:
    """
    Registry for hash functions.

    Example:
        >>> registry = HashRegistry()
        >>> registry.register("md5", lambda data: hashlib.md5(data).digest(), digest_size=16)
        >>> digest = registry.get_hash_function("md5")(b"asdf")
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._functions: Dict[str, HashFunction] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        name: str,
        hash_function: HashFunction,
        digest_size: int,
        description: str = "",
    ) -> None:
        """
        Register a hash function.

        Args:
            name: Unique algorithm name (case-insensitive, e.g. "md5")
            hash_function: Callable taking bytes and returning the digest
            digest_size: Length of the digest in bytes
            description: Human-readable description

        Raises:
            ValueError: If name is empty, hash_function is not callable or
                        digest_size is not positive
            RuntimeError: If name is already registered
        """
        name = str(name).strip().lower()

        if not name:
            raise ValueError("name cannot be empty")

        if not callable(hash_function):
            raise ValueError(f"hash_function must be callable, got {type(hash_function)}")

        if int(digest_size) <= 0:
            raise ValueError(f"digest_size must be positive, got {digest_size}")

        if name in self._functions:
            raise RuntimeError(
                f"Hash algorithm '{name}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._functions[name] = hash_function
        self._metadata[name] = {
            "digest_size": int(digest_size),
            "description": str(description),
        }

        logger.debug(f"Registered hash function: {name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a hash function.

        Returns:
            True if unregistered, False if name was not registered
        """
        name = str(name).strip().lower()

        if name in self._functions:
            del self._functions[name]
            del self._metadata[name]
            logger.debug(f"Unregistered hash function: {name}")
            return True

        return False

    def get_hash_function(self, name: str = DEFAULT_HASH_ALGORITHM) -> HashFunction:
        """
        Get the hash function for an algorithm name.

        Raises:
            ConfigError: If name is not registered
        """
        name = str(name).strip().lower()

        if name not in self._functions:
            available = ", ".join(self.list_algorithms())
            raise ConfigError(
                f"Unknown hash algorithm '{name}'. "
                f"Available algorithms: {available}"
            )

        return self._functions[name]

    def has_algorithm(self, name: str) -> bool:
        return str(name).strip().lower() in self._functions

    def list_algorithms(self) -> List[str]:
        """Sorted list of registered algorithm names."""
        return sorted(self._functions.keys())

    def get_metadata(self, name: str) -> Dict[str, Any]:
        """
        Get metadata (digest_size, description) for an algorithm.

        Raises:
            KeyError: If name is not registered
        """
        name = str(name).strip().lower()

        if name not in self._metadata:
            raise KeyError(f"No metadata for hash algorithm: {name}")

        return dict(self._metadata[name])

    def clear(self) -> None:
        """Clear all registered hash functions. Use with caution."""
        self._functions.clear()
        self._metadata.clear()
        logger.warning("Hash registry cleared")


# Global singleton registry
_default_registry: Optional[HashRegistry] = None


def get_default_registry() -> HashRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in algorithms.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = HashRegistry()
        register_default_hash_functions(_default_registry)

    return _default_registry


def _hashlib_function(algorithm: str) -> HashFunction:
    def digest(data: bytes) -> bytes:
        return hashlib.new(algorithm, data).digest()

    digest.__name__ = f"{algorithm}_digest"
    return digest


def register_default_hash_functions(registry: HashRegistry) -> None:
    """
    Register the hashlib algorithms available on every platform.

    Args:
        registry: The registry to register hash functions with
    """
    descriptions = {
        "md5": "128-bit MD5, the classic identicon seed (25-cell grid)",
        "sha1": "160-bit SHA-1",
        "sha256": "256-bit SHA-2",
        "sha512": "512-bit SHA-2",
        "blake2b": "512-bit BLAKE2b",
        "blake2s": "256-bit BLAKE2s",
    }

    for algorithm, description in descriptions.items():
        registry.register(
            name=algorithm,
            hash_function=_hashlib_function(algorithm),
            digest_size=hashlib.new(algorithm).digest_size,
            description=description,
        )

    logger.info("Registered default hash functions")
