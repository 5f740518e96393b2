"""Entropy source implementations for random-bytes."""

from .system import SystemEntropySource

__all__ = [
    "SystemEntropySource",
]
