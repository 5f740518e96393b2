"""Scripted entropy source for testing.

This module provides an IEntropySource whose failures are scripted, standing
in for a platform CSPRNG that has not been seeded yet.
"""

from __future__ import annotations

import asyncio
import secrets
from typing import Optional

from random_bytes.interfaces.entropy import Completion, IEntropySource

# The form OpenSSL reports when its PRNG has not been seeded.
NOT_SEEDED_MESSAGE = "error:24064064:random number generator:SSLEAY_RAND_BYTES:PRNG not seeded"


class ScriptedEntropySource(IEntropySource):
    """Entropy source that fails a scripted number of times before succeeding.

    Attributes:
        failures: Remaining "not seeded" failures, or None to fail forever.
        error: If set, raised on every attempt instead of generating bytes.
        length: If set, the number of bytes returned regardless of the request.
        inline: Whether the asynchronous form completes before returning.
        attempts: How many times generation has been attempted.
    """

    def __init__(
        self,
        failures: Optional[int] = 0,
        error: Optional[Exception] = None,
        length: Optional[int] = None,
        inline: bool = True,
    ) -> None:
        self.failures = failures
        self.error = error
        self.length = length
        self.inline = inline
        self.attempts = 0

    def _next(self, size: int) -> bytes:
        self.attempts += 1

        if self.error is not None:
            raise self.error

        if self.failures is None:
            raise RuntimeError(NOT_SEEDED_MESSAGE)

        if self.failures > 0:
            self.failures -= 1
            raise RuntimeError(NOT_SEEDED_MESSAGE)

        return secrets.token_bytes(size if self.length is None else self.length)

    def generate_sync(self, size: int) -> bytes:
        return self._next(size)

    def generate(self, size: int, completion: Completion) -> None:
        try:
            data: Optional[bytes] = self._next(size)
            error: Optional[BaseException] = None
        except Exception as e:
            data, error = None, e

        if self.inline:
            completion(error, data)
        else:
            asyncio.get_running_loop().call_soon(completion, error, data)
