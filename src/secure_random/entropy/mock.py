"""Seeded mock entropy source for tests.

Generates uniform bytes from a numpy ``Generator`` so tests can be
deterministic, and records lifecycle calls so ownership of the handle can
be asserted. Not registered: configuration can only select CSPRNG-backed
sources.
"""

from __future__ import annotations

import numpy as np

from secure_random.entropy.base import EntropySource
from secure_random.exceptions import EntropySourceUnavailableError


class MockUniformSource(EntropySource):
    """Deterministic, non-cryptographic entropy source for testing.

    Args:
        seed: Optional RNG seed for reproducible output.

    Attributes:
        call_count: Number of ``get_random_bytes()`` calls served.
        close_count: Number of times ``close()`` was invoked.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        self._closed = False
        self.call_count = 0
        self.close_count = 0

    @property
    def name(self) -> str:
        """Return ``'mock_uniform'``."""
        return "mock_uniform"

    @property
    def is_available(self) -> bool:
        """``True`` until the source is closed."""
        return not self._closed

    @property
    def closed(self) -> bool:
        """Whether ``close()`` has been called."""
        return self._closed

    def get_random_bytes(self, n: int) -> bytes:
        """Generate *n* uniform bytes from the seeded generator.

        Raises:
            EntropySourceUnavailableError: If the source has been closed.
        """
        if self._closed:
            raise EntropySourceUnavailableError("mock_uniform source is closed")
        self.call_count += 1
        return self._rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()

    def close(self) -> None:
        """Mark the source closed and count the call."""
        self.close_count += 1
        self._closed = True
