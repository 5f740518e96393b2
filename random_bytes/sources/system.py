"""Operating system entropy source.

This module provides the default IEntropySource, backed by the kernel CSPRNG.
"""

from __future__ import annotations

import asyncio
import os
import secrets

from random_bytes.exceptions import EntropyError
from random_bytes.interfaces.entropy import Completion, IEntropySource

NOT_SEEDED_MESSAGE = "error:random number generator:getrandom:PRNG not seeded"


class SystemEntropySource(IEntropySource):
    """Entropy source that reads from the operating system CSPRNG.

    Where os.getrandom is available the read is non-blocking, so a kernel whose
    pool is not yet initialised is reported as "PRNG not seeded" instead of
    stalling the caller. Elsewhere secrets.token_bytes is used.
    """

    def generate_sync(self, size: int) -> bytes:
        """Generate random bytes.

        Args:
            size: The number of bytes to generate.

        Returns:
            Exactly size random bytes.

        Raises:
            EntropyError: If the kernel pool is not initialised yet.
            OSError: For any other failure of the underlying system call.
        """
        if not hasattr(os, "getrandom"):
            return secrets.token_bytes(size)

        chunks = []
        remaining = size
        while remaining > 0:
            try:
                chunk = os.getrandom(remaining, os.GRND_NONBLOCK)
            except BlockingIOError as e:
                raise EntropyError(NOT_SEEDED_MESSAGE) from e
            chunks.append(chunk)
            remaining -= len(chunk)

        return b"".join(chunks)

    def generate(self, size: int, completion: Completion) -> None:
        """Generate random bytes on the running loop's default executor.

        The completion is called on the event loop thread once the read finishes.

        Args:
            size: The number of bytes to generate.
            completion: Receives (None, data) on success or (error, None) on failure.
        """
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, self.generate_sync, size)

        def on_done(done: asyncio.Future) -> None:
            if done.cancelled():
                completion(EntropyError("generation cancelled"), None)
                return

            error = done.exception()
            if error is not None:
                completion(error, None)
            else:
                completion(None, done.result())

        future.add_done_callback(on_done)
