"""Random-bytes API package.

This package provides the RandomByteGenerator and its configuration types.
"""

from random_bytes.api.generator import (
    GENERATE_ATTEMPTS,
    EntropyConfig,
    RandomByteGenerator,
    RandomBytesConfig,
)

__all__ = [
    # Generator
    "RandomByteGenerator",
    "GENERATE_ATTEMPTS",
    # Configuration types
    "EntropyConfig",
    "RandomBytesConfig",
]
