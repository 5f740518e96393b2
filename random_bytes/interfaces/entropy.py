"""Entropy source interfaces for random-bytes.

This module defines the protocol an entropy source (the platform CSPRNG, or
anything standing in for it) must satisfy.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

Completion = Callable[[Optional[BaseException], Optional[bytes]], None]

NOT_SEEDED_MARKER = "PRNG not seeded"


def is_not_seeded(error: BaseException) -> bool:
    """Report whether an error is the retryable "not seeded" condition."""
    return NOT_SEEDED_MARKER in str(error)


class IEntropySource(Protocol):
    """Interface for a cryptographically secure random byte source."""

    def generate_sync(self, size: int) -> bytes:
        """Generate random bytes, blocking until they are available.

        Args:
            size: The number of bytes to generate.

        Returns:
            Exactly size random bytes.

        Raises:
            Exception: When generation fails. A message containing
                "PRNG not seeded" marks the retryable failure.
        """
        ...

    def generate(self, size: int, completion: Completion) -> None:
        """Generate random bytes without blocking the caller.

        The completion is called exactly once, as completion(error, data).
        It may be called from the event loop thread, from a worker thread,
        or before this method returns.

        Args:
            size: The number of bytes to generate.
            completion: Receives (None, data) on success or (error, None) on failure.
        """
        ...
