"""Stateless sampler: one entropy source handle per call.

Every call validates its arguments, acquires a fresh entropy source, draws
what it needs and releases the source again, on success and on failure.
Nothing is carried between calls, so a StatelessSampler can be shared
freely between threads. Acquiring a handle is the most expensive step;
loops that generate many values should use
:class:`~secure_random.context.SamplerContext` instead.

The module-level :func:`generate_bytes` and :func:`generate_range` also
load the configuration (environment and ``.env``) on every call. Callers
generating repeatedly should build one :class:`StatelessSampler` and reuse it.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from functools import partial
from typing import TYPE_CHECKING

from secure_random.bounded import (
    RANGE_SAMPLE_BYTES,
    read_bytes,
    sample_range,
    validate_range,
    validate_size,
)
from secure_random.config import SecureRandomConfig, load_config
from secure_random.entropy.registry import acquire_entropy_source
from secure_random.logging.logger import SamplingLogger
from secure_random.logging.types import SampleRecord

if TYPE_CHECKING:
    from collections.abc import Callable

    from secure_random.entropy.base import EntropySource


class SecureRandom(ABC):
    """Common surface of the stateless sampler and the sampler context."""

    @abstractmethod
    def generate_bytes(self, size: int) -> bytes:
        """Return *size* cryptographically secure random bytes.

        Raises:
            InvalidArgumentError: If *size* is less than one.
        """

    @abstractmethod
    def generate_range(self, min_value: int, max_value: int) -> int:
        """Return a random integer in ``[min_value, max_value]``.

        Raises:
            InvalidArgumentError: If *max_value* is less than or equal to
                *min_value*.
        """


def make_sample_record(
    operation: str,
    sampler: str,
    source: EntropySource,
    started_ns: int,
    *,
    size: int | None = None,
    min_value: int | None = None,
    max_value: int | None = None,
    bytes_drawn: int,
) -> SampleRecord:
    """Describe a completed operation that started at ``perf_counter_ns() == started_ns``."""
    return SampleRecord(
        timestamp_ns=time.time_ns(),
        operation=operation,
        sampler=sampler,
        entropy_source_used=source.name,
        source_reused=sampler == "context",
        size=size,
        min_value=min_value,
        max_value=max_value,
        bytes_drawn=bytes_drawn,
        elapsed_ms=(time.perf_counter_ns() - started_ns) / 1e6,
    )


class StatelessSampler(SecureRandom):
    """Generate random data with a new entropy source for every call.

    Args:
        config: Configuration; loaded from the environment when omitted.
        source_factory: Callable returning a fresh, open EntropySource.
            Defaults to acquiring the configured source from the registry.

    Raises:
        ConfigValidationError: If *config* is omitted and the environment
            holds an invalid ``SECURE_RANDOM_*`` value.
    """

    def __init__(
        self,
        config: SecureRandomConfig | None = None,
        source_factory: Callable[[], EntropySource] | None = None,
    ) -> None:
        self._config = config if config is not None else load_config()
        self._source_factory = (
            source_factory
            if source_factory is not None
            else partial(acquire_entropy_source, self._config)
        )
        self._logger = SamplingLogger(self._config)

    @property
    def config(self) -> SecureRandomConfig:
        """The configuration this sampler acquires sources with."""
        return self._config

    @property
    def sampling_logger(self) -> SamplingLogger:
        """The diagnostic logger for this sampler."""
        return self._logger

    def generate_bytes(self, size: int) -> bytes:
        """Return *size* random bytes from a freshly acquired source.

        Raises:
            InvalidArgumentError: If *size* is less than one; no source is
                acquired in that case.
            EntropySourceUnavailableError: If no source can be acquired or
                it fails to provide the bytes.
        """
        validate_size(size)
        started = time.perf_counter_ns()
        source = self._source_factory()
        try:
            data = read_bytes(source, size)
        finally:
            source.close()
        self._logger.log_sample(
            make_sample_record(
                "generate_bytes", "stateless", source, started, size=size, bytes_drawn=size
            )
        )
        return data

    def generate_range(self, min_value: int, max_value: int) -> int:
        """Return an integer in ``[min_value, max_value]`` from a freshly acquired source.

        Raises:
            InvalidArgumentError: If the bounds are invalid; no source is
                acquired in that case.
            EntropySourceUnavailableError: If no source can be acquired or
                it fails to provide the bytes.
        """
        validate_range(min_value, max_value)
        started = time.perf_counter_ns()
        source = self._source_factory()
        try:
            value = sample_range(source, min_value, max_value)
        finally:
            source.close()
        self._logger.log_sample(
            make_sample_record(
                "generate_range",
                "stateless",
                source,
                started,
                min_value=min_value,
                max_value=max_value,
                bytes_drawn=RANGE_SAMPLE_BYTES,
            )
        )
        return value


def generate_bytes(size: int) -> bytes:
    """Return *size* random bytes using a one-shot :class:`StatelessSampler`.

    Loads the configuration from the environment on every call.

    Raises:
        ConfigValidationError: If the environment configuration is invalid.
        InvalidArgumentError: If *size* is less than one.
    """
    return StatelessSampler().generate_bytes(size)


def generate_range(min_value: int, max_value: int) -> int:
    """Return an integer in ``[min_value, max_value]`` via a one-shot :class:`StatelessSampler`.

    Loads the configuration from the environment on every call.

    Raises:
        ConfigValidationError: If the environment configuration is invalid.
        InvalidArgumentError: If the bounds are invalid.
    """
    return StatelessSampler().generate_range(min_value, max_value)
