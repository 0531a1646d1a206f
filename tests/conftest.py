"""Shared pytest fixtures for secure-random tests.

Provides configuration objects isolated from the environment, seeded mock
entropy sources, and test doubles that return fixed byte patterns.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from secure_random.config import SecureRandomConfig
from secure_random.entropy.base import EntropySource
from secure_random.entropy.mock import MockUniformSource


class FixedBytesSource(EntropySource):
    """Test double: replays *pattern* cyclically and counts lifecycle calls."""

    def __init__(self, pattern: bytes) -> None:
        self._pattern = pattern
        self._offset = 0
        self.requests: list[int] = []
        self.close_count = 0

    @property
    def name(self) -> str:
        return "fixed"

    @property
    def is_available(self) -> bool:
        return self.close_count == 0

    def get_random_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        out = bytearray()
        for _ in range(n):
            out.append(self._pattern[self._offset % len(self._pattern)])
            self._offset += 1
        return bytes(out)

    def close(self) -> None:
        self.close_count += 1


class ShortReadSource(FixedBytesSource):
    """Test double: always returns one byte fewer than requested."""

    def get_random_bytes(self, n: int) -> bytes:
        return super().get_random_bytes(n)[:-1]


@pytest.fixture
def default_config() -> SecureRandomConfig:
    """Return a config with all default values, ignoring any ``.env`` file."""
    return SecureRandomConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> SecureRandomConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return SecureRandomConfig(
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def mock_entropy_source() -> MockUniformSource:
    """Return a seeded MockUniformSource for reproducible tests."""
    return MockUniformSource(seed=42)


@pytest.fixture
def tracking_factory() -> tuple[Callable[[], EntropySource], list[MockUniformSource]]:
    """Return a source factory plus the list of every source it handed out."""
    created: list[MockUniformSource] = []

    def factory() -> EntropySource:
        source = MockUniformSource(seed=len(created))
        created.append(source)
        return source

    return factory, created
