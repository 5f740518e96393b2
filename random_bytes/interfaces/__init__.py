"""Random-bytes interfaces package.

This package provides protocol definitions for entropy sources.
"""

from .entropy import NOT_SEEDED_MARKER, Completion, IEntropySource, is_not_seeded

__all__ = [
    # entropy
    "Completion",
    "IEntropySource",
    "NOT_SEEDED_MARKER",
    "is_not_seeded",
]
