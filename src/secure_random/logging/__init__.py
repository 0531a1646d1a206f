"""Diagnostic logging subsystem for secure-random.

Provides immutable per-operation sample records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from secure_random.logging.logger import SamplingLogger
from secure_random.logging.types import SampleRecord

__all__ = [
    "SampleRecord",
    "SamplingLogger",
]
