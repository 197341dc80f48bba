"""
Pytest configuration and shared fixtures for identicon tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest


ASDF_DIGEST = (145, 46, 200, 3, 178, 206, 73, 228, 165, 65, 6, 141, 73, 90, 181, 112)


@pytest.fixture
def asdf_digest():
    """MD5 digest of "asdf" as byte values."""
    return ASDF_DIGEST


@pytest.fixture
def fixed_hash():
    """
    Provide a factory for fake hash functions.

    Returns:
        Callable taking a sequence of byte values and returning a hash
        function that ignores its input and yields those bytes
    """
    def factory(values):
        digest = bytes(values)

        def fake_hash(data: bytes) -> bytes:
            return digest

        return fake_hash

    return factory


@pytest.fixture
def output_dir(tmp_path):
    """
    Provide a temporary directory for written images.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Path object pointing to a temporary directory
    """
    return tmp_path
