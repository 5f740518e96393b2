"""Exception classes for random-bytes.

This module defines custom exception types used throughout the random-bytes library.
"""

from __future__ import annotations

from typing import Optional


class RandomBytesError(Exception):
    """Base exception class for all random-bytes errors."""

    pass


class ArgumentError(RandomBytesError, TypeError):
    """Exception raised when a call is made with invalid arguments.

    Always raised synchronously at the call site, whatever the calling convention.
    """

    pass


class EntropyError(RandomBytesError):
    """Exception raised when an entropy source fails to produce bytes."""

    pass


class NotSeededError(EntropyError):
    """Exception raised when the PRNG is still not seeded after every attempt."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None) -> None:
        """Initialize the error.

        Args:
            attempts: How many generation attempts were made.
            last_error: The not-seeded error reported by the final attempt.
        """
        message = f"PRNG not seeded after {attempts} attempts"
        if last_error is not None:
            message = f"{message}: {last_error}"
        super().__init__(message)
        self.attempts = attempts
        self.__cause__ = last_error
