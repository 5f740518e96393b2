"""RandomByteGenerator implementation.

This module provides the RandomByteGenerator class, which asks an entropy
source for random bytes and retries while the source reports that its PRNG is
not seeded. Results are available synchronously, through a callback, or as an
asyncio future.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from random_bytes.exceptions import ArgumentError, EntropyError, NotSeededError
from random_bytes.interfaces import IEntropySource, is_not_seeded

logger = logging.getLogger(__name__)

GENERATE_ATTEMPTS = 3


@dataclass
class EntropyConfig:
    """Configuration for the entropy source.

    Attributes:
        source: The CSPRNG capability bytes are requested from.
    """

    source: IEntropySource


@dataclass
class RandomBytesConfig:
    """Complete configuration for RandomByteGenerator.

    Attributes:
        entropy: Entropy source configuration.
        deferred: Whether calls without a callback may return a future. When
            False, a callback is required for asynchronous generation.
    """

    entropy: EntropyConfig
    deferred: bool = True


def _check_size(size: Any) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise ArgumentError("argument size must be a non-negative integer")


def _check_length(data: Any, size: int) -> bytes:
    if data is None:
        data = b""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise EntropyError(f"expected random bytes, got {type(data).__name__}")
    if len(data) != size:
        raise EntropyError(f"expected {size} random bytes, got {len(data)}")
    return bytes(data)


class RandomByteGenerator:
    """Generator of cryptographically strong random bytes.

    A request makes at most GENERATE_ATTEMPTS attempts against the entropy
    source. Only the "PRNG not seeded" failure is retried, immediately; any
    other failure is handed back to the caller unchanged.

    Example:
        ```python
        generator = RandomByteGenerator(
            RandomBytesConfig(entropy=EntropyConfig(source=SystemEntropySource()))
        )

        key = generator.sync(32)
        nonce = await generator(16)
        generator(16, lambda error, data=None: ...)
        ```

    Attributes:
        args: Complete configuration containing the entropy source.
    """

    def __init__(self, args: RandomBytesConfig) -> None:
        """Initialize the generator.

        Args:
            args: Complete configuration containing the entropy source and
                whether futures may be returned.
        """
        self.args = args

    def __call__(
        self, size: int, callback: Optional[Callable[..., Any]] = None
    ) -> Optional[asyncio.Future[bytes]]:
        """Generate random bytes asynchronously.

        With a callback, behaves like generate_callback and returns None.
        Without one, behaves like generate_deferred and returns a future.

        Args:
            size: The number of bytes to generate.
            callback: Optional completion callback.

        Returns:
            A future resolving to the bytes, or None when a callback was given.

        Raises:
            ArgumentError: If the callback is not callable, or is missing while
                futures are unavailable.
        """
        if callback is not None:
            self.generate_callback(size, callback)
            return None
        return self.generate_deferred(size)

    def sync(self, size: int) -> bytes:
        """Alias of generate_sync."""
        return self.generate_sync(size)

    def generate_sync(self, size: int) -> bytes:
        """Generate random bytes, blocking the calling thread.

        Args:
            size: The number of bytes to generate.

        Returns:
            Exactly size random bytes.

        Raises:
            ArgumentError: If size is not a non-negative integer.
            NotSeededError: If the PRNG was not seeded on any attempt.
            EntropyError: If the source returned the wrong number of bytes.
            Exception: Any other source failure, re-raised unchanged.
        """
        _check_size(size)
        source = self.args.entropy.source
        last_error: Optional[Exception] = None

        for attempt in range(1, GENERATE_ATTEMPTS + 1):
            try:
                data = source.generate_sync(size)
            except Exception as e:
                if not is_not_seeded(e):
                    raise
                last_error = e
                if attempt < GENERATE_ATTEMPTS:
                    logger.debug(
                        "PRNG not seeded on attempt %d for %d bytes, retrying", attempt, size
                    )
                continue

            return _check_length(data, size)

        logger.warning("PRNG not seeded after %d attempts", GENERATE_ATTEMPTS)
        raise NotSeededError(GENERATE_ATTEMPTS, last_error) from last_error

    def generate_callback(self, size: int, callback: Callable[..., Any]) -> None:
        """Generate random bytes and deliver them to a callback.

        The callback is called exactly once on the running event loop, never
        before this method returns: callback(None, data) on success, or
        callback(error) on failure. Each retry runs as a separate loop step.

        Args:
            size: The number of bytes to generate.
            callback: The completion callback.

        Raises:
            ArgumentError: If the callback is missing or not callable, or if
                size is not a non-negative integer.
            RuntimeError: If there is no running event loop.
        """
        if callback is None:
            raise ArgumentError("argument callback is required")
        if not callable(callback):
            raise ArgumentError("argument callback must be a function")
        _check_size(size)

        loop = asyncio.get_running_loop()
        source = self.args.entropy.source
        attempts = 0

        def finish(*outcome: Any) -> None:
            loop.call_soon_threadsafe(callback, *outcome)

        def handle(error: Optional[BaseException], data: Optional[bytes]) -> None:
            if error is None:
                try:
                    checked = _check_length(data, size)
                except Exception as e:
                    finish(e)
                    return
                finish(None, checked)
            elif not is_not_seeded(error):
                finish(error)
            elif attempts < GENERATE_ATTEMPTS:
                logger.debug(
                    "PRNG not seeded on attempt %d for %d bytes, retrying", attempts, size
                )
                loop.call_soon_threadsafe(attempt)
            else:
                logger.warning("PRNG not seeded after %d attempts", attempts)
                finish(NotSeededError(attempts, error))

        def attempt() -> None:
            nonlocal attempts
            attempts += 1
            completed = False

            def on_complete(error: Optional[BaseException], data: Optional[bytes]) -> None:
                nonlocal completed
                if completed:
                    logger.warning("ignoring duplicate completion from entropy source")
                    return
                completed = True
                handle(error, data)

            try:
                source.generate(size, on_complete)
            except Exception as e:
                on_complete(e, None)

        attempt()

    def generate_deferred(self, size: int) -> asyncio.Future[bytes]:
        """Generate random bytes as a future.

        The future is created on the running event loop and returned at once.
        Cancelling it does not stop the request.

        Args:
            size: The number of bytes to generate.

        Returns:
            A future resolving to exactly size random bytes, or failing with the
            same errors generate_callback would deliver.

        Raises:
            ArgumentError: If futures are disabled in the configuration, or if
                size is not a non-negative integer.
            RuntimeError: If there is no running event loop.
        """
        if not self.args.deferred:
            raise ArgumentError("argument callback is required")
        _check_size(size)

        loop = asyncio.get_running_loop()
        future: asyncio.Future[bytes] = loop.create_future()

        def settle(error: Optional[BaseException], data: Optional[bytes] = None) -> None:
            if future.cancelled():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(data)

        self.generate_callback(size, settle)
        return future
