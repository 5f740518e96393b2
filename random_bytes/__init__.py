"""Random-bytes Python implementation.

This package generates cryptographically strong random bytes, retrying when the
platform CSPRNG reports that it has not been seeded yet.

Main Components:
    - random_bytes: Default generator backed by the operating system CSPRNG
    - RandomByteGenerator: Generator over an entropy source you provide
    - Interfaces: Protocol definitions for entropy sources
    - Sources: The operating system entropy source

Example:
    >>> from random_bytes import random_bytes
    >>> len(random_bytes.sync(18))
    18
"""

from random_bytes.api import (
    GENERATE_ATTEMPTS,
    EntropyConfig,
    RandomByteGenerator,
    RandomBytesConfig,
)
from random_bytes.exceptions import (
    ArgumentError,
    EntropyError,
    NotSeededError,
    RandomBytesError,
)
from random_bytes.sources import SystemEntropySource

__version__ = "0.1.0"

random_bytes = RandomByteGenerator(
    RandomBytesConfig(entropy=EntropyConfig(source=SystemEntropySource()))
)

__all__ = [
    # API
    "random_bytes",
    "RandomByteGenerator",
    "RandomBytesConfig",
    "EntropyConfig",
    "GENERATE_ATTEMPTS",
    "SystemEntropySource",
    # Exceptions
    "RandomBytesError",
    "ArgumentError",
    "EntropyError",
    "NotSeededError",
]
