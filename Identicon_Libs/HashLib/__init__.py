"""
HashLib - Digest functions for seeding identicons
"""

from Identicon_Libs.HashLib.hash_registry import (
    HashFunction,
    HashRegistry,
    get_default_registry,
    register_default_hash_functions,
)

__all__ = [
    "HashFunction",
    "HashRegistry",
    "get_default_registry",
    "register_default_hash_functions",
]
