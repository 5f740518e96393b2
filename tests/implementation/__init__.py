"""Reference implementations for random-bytes testing."""

from .entropy import NOT_SEEDED_MESSAGE, ScriptedEntropySource

__all__ = [
    "NOT_SEEDED_MESSAGE",
    "ScriptedEntropySource",
]
