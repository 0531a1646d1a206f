"""Host CSPRNG entropy sources.

``system`` wraps ``os.urandom()`` and is the default source. ``getrandom``
wraps ``os.getrandom()`` and is only available where the host exposes the
``getrandom(2)`` system call (Linux). Both are cryptographically secure.
"""

from __future__ import annotations

import logging
import os

from secure_random.entropy.base import EntropySource
from secure_random.entropy.registry import register_entropy_source
from secure_random.exceptions import EntropySourceUnavailableError

logger = logging.getLogger("secure_random")


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """``os.urandom()`` wrapper: always available, cryptographically secure.

    The handle holds no OS resource; ``close()`` only flips it into the
    closed state, after which it refuses to produce bytes.
    """

    def __init__(self) -> None:
        self._closed = False

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """``True`` until the source is closed."""
        return not self._closed

    @property
    def closed(self) -> bool:
        """Whether ``close()`` has been called."""
        return self._closed

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy from ``os.urandom()``.

        Raises:
            EntropySourceUnavailableError: If the source is closed or the OS
                cannot provide randomness.
        """
        if self._closed:
            raise EntropySourceUnavailableError(f"Entropy source {self.name!r} is closed")
        try:
            return os.urandom(n)
        except NotImplementedError as exc:
            raise EntropySourceUnavailableError("os.urandom() is unsupported on this host") from exc

    def close(self) -> None:
        """Mark the source closed. Idempotent."""
        if not self._closed:
            self._closed = True
            logger.debug("Closed entropy source %r", self.name)


@register_entropy_source("getrandom")
class GetrandomEntropySource(SystemEntropySource):
    """``os.getrandom()`` wrapper, blocking until the kernel pool is seeded."""

    @property
    def name(self) -> str:
        """Return ``'getrandom'``."""
        return "getrandom"

    @property
    def is_available(self) -> bool:
        """``True`` when the host exposes ``os.getrandom`` and the source is open."""
        return hasattr(os, "getrandom") and not self._closed

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from ``getrandom(2)``.

        Short reads (possible for very large requests) are retried until *n*
        bytes have been collected.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropySourceUnavailableError: If the source is closed or the
                system call is unsupported or fails.
        """
        if self._closed:
            raise EntropySourceUnavailableError(f"Entropy source {self.name!r} is closed")
        if not hasattr(os, "getrandom"):
            raise EntropySourceUnavailableError("os.getrandom() is not available on this host")
        chunks: list[bytes] = []
        remaining = n
        try:
            while remaining > 0:
                chunk = os.getrandom(remaining)
                chunks.append(chunk)
                remaining -= len(chunk)
        except OSError as exc:
            raise EntropySourceUnavailableError(f"getrandom() failed: {exc}") from exc
        return b"".join(chunks)
