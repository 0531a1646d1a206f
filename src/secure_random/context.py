"""Sampler context: one entropy source handle reused across many calls.

A :class:`SamplerContext` acquires its entropy source once, at
construction, and keeps it until :meth:`SamplerContext.release` is called
or the ``with`` block that owns it exits::

    with SamplerContext() as ctx:
        salt = ctx.generate_bytes(16)
        index = ctx.generate_range(0, len(items) - 1)

State machine::

    OPEN --release()--> RELEASED
    RELEASED --release()--> RELEASED   (no-op)

Every generation call first checks that the context is still open and only
then validates its arguments, so a released context always reports
:class:`UseAfterReleaseError` regardless of the arguments passed.

The context holds one mutable handle and is not safe for unsynchronized
concurrent use; callers sharing it between threads must serialize access.
"""

from __future__ import annotations

import enum
import logging
import time
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
from secure_random.exceptions import UseAfterReleaseError
from secure_random.logging.logger import SamplingLogger
from secure_random.sampler import SecureRandom, make_sample_record

if TYPE_CHECKING:
    from types import TracebackType

    from secure_random.entropy.base import EntropySource

logger = logging.getLogger("secure_random")


class ContextState(enum.Enum):
    """Lifecycle states of a :class:`SamplerContext`."""

    OPEN = "open"
    RELEASED = "released"


class SamplerContext(SecureRandom):
    """Generate random data reusing a single entropy source.

    Args:
        config: Configuration; loaded from the environment when omitted.
        source: An already-acquired, open EntropySource to take ownership
            of. When omitted, the configured source is acquired.

    Raises:
        EntropySourceUnavailableError: If the configured source cannot be
            acquired.
        ConfigValidationError: If *config* is omitted and the environment
            holds an invalid ``SECURE_RANDOM_*`` value.
    """

    def __init__(
        self,
        config: SecureRandomConfig | None = None,
        source: EntropySource | None = None,
    ) -> None:
        self._config = config if config is not None else load_config()
        self._logger = SamplingLogger(self._config)
        self._source: EntropySource = (
            source if source is not None else acquire_entropy_source(self._config)
        )
        self._source_name = self._source.name
        self._state = ContextState.OPEN

    @property
    def state(self) -> ContextState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_released(self) -> bool:
        """Whether :meth:`release` has been called."""
        return self._state is ContextState.RELEASED

    @property
    def source_name(self) -> str:
        """Name of the entropy source owned by this context."""
        return self._source_name

    @property
    def sampling_logger(self) -> SamplingLogger:
        """The diagnostic logger for this context."""
        return self._logger

    def _ensure_open(self) -> EntropySource:
        if self._state is ContextState.RELEASED:
            raise UseAfterReleaseError(f"{type(self).__module__}.{type(self).__qualname__}")
        return self._source

    def generate_bytes(self, size: int) -> bytes:
        """Return *size* random bytes from the context's source.

        Raises:
            UseAfterReleaseError: If the context has been released.
            InvalidArgumentError: If *size* is less than one.
            EntropySourceUnavailableError: If the source fails.
        """
        source = self._ensure_open()
        validate_size(size)
        started = time.perf_counter_ns()
        data = read_bytes(source, size)
        self._logger.log_sample(
            make_sample_record(
                "generate_bytes", "context", source, started, size=size, bytes_drawn=size
            )
        )
        return data

    def generate_range(self, min_value: int, max_value: int) -> int:
        """Return an integer in ``[min_value, max_value]`` from the context's source.

        Raises:
            UseAfterReleaseError: If the context has been released.
            InvalidArgumentError: If the bounds are invalid.
            EntropySourceUnavailableError: If the source fails.
        """
        source = self._ensure_open()
        validate_range(min_value, max_value)
        started = time.perf_counter_ns()
        value = sample_range(source, min_value, max_value)
        self._logger.log_sample(
            make_sample_record(
                "generate_range",
                "context",
                source,
                started,
                min_value=min_value,
                max_value=max_value,
                bytes_drawn=RANGE_SAMPLE_BYTES,
            )
        )
        return value

    def release(self) -> None:
        """Release the entropy source. Idempotent.

        The context is marked released before the source is closed, so it
        stays unusable even if closing the source raises.
        """
        if self._state is ContextState.RELEASED:
            return
        self._state = ContextState.RELEASED
        logger.debug("Releasing sampler context (source=%s)", self._source_name)
        self._source.close()

    def __enter__(self) -> SamplerContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source_name!r}, state={self._state.value!r})"
