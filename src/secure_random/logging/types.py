"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SampleRecord:
    """Immutable record of a single completed generation operation.

    Describes the request and its cost, never the generated output.

    Attributes:
        timestamp_ns: Wall-clock time of the operation (nanoseconds since epoch).
        operation: ``'generate_bytes'`` or ``'generate_range'``.
        sampler: ``'stateless'`` or ``'context'``.
        entropy_source_used: Name of the entropy source that provided bytes.
        source_reused: True if the handle outlives the call (context).
        size: Requested byte count, or ``None`` for range requests.
        min_value: Lower bound of a range request, or ``None``.
        max_value: Upper bound of a range request, or ``None``.
        bytes_drawn: Number of bytes read from the entropy source.
        elapsed_ms: Total time for the operation (milliseconds), including
            source acquisition and release for the stateless sampler.
    """

    timestamp_ns: int
    operation: str
    sampler: str
    entropy_source_used: str
    source_reused: bool
    size: int | None
    min_value: int | None
    max_value: int | None
    bytes_drawn: int
    elapsed_ms: float
