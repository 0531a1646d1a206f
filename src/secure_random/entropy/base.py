"""Abstract base class for all entropy sources.

An entropy source is the handle to the host CSPRNG. It is acquired by a
sampler, used to fill buffers, and released with ``close()``. The ABC
provides a concrete ``fill()`` that delegates to ``get_random_bytes()`` and a
concrete ``health_check()`` method. Subclasses must implement the four
abstract members: ``name``, ``is_available``, ``get_random_bytes()``, and
``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from secure_random.exceptions import EntropySourceUnavailableError


class EntropySource(ABC):
    """Abstract base for all entropy sources.

    Implementations must provide random bytes on demand and must make
    ``close()`` idempotent. A source is owned by exactly one sampler at a
    time and is not safe for unsynchronized concurrent use.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropySourceUnavailableError: If the source cannot provide bytes.
        """

    def fill(self, buffer: bytearray | memoryview) -> None:
        """Fill *buffer* entirely with random bytes.

        The operation is all-or-nothing: when the source returns a short or
        oversized read, *buffer* is left untouched and
        :class:`EntropySourceUnavailableError` is raised.

        Args:
            buffer: Writable, fixed-length buffer supplied by the caller.

        Raises:
            EntropySourceUnavailableError: If the source cannot fill the buffer.
        """
        n = len(buffer)
        data = self.get_random_bytes(n)
        if len(data) != n:
            raise EntropySourceUnavailableError(
                f"Entropy source {self.name!r} returned {len(data)} bytes, expected {n}"
            )
        buffer[:] = data

    @abstractmethod
    def close(self) -> None:
        """Release the underlying handle. Safe to call more than once."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
