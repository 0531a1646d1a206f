"""Entropy source subsystem for secure-random.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from secure_random.entropy import EntropySource, EntropySourceRegistry
    from secure_random.entropy import SystemEntropySource
"""

from secure_random.entropy.base import EntropySource
from secure_random.entropy.mock import MockUniformSource
from secure_random.entropy.registry import (
    EntropySourceRegistry,
    acquire_entropy_source,
    register_entropy_source,
)
from secure_random.entropy.system import GetrandomEntropySource, SystemEntropySource

__all__ = [
    "EntropySource",
    "EntropySourceRegistry",
    "GetrandomEntropySource",
    "MockUniformSource",
    "SystemEntropySource",
    "acquire_entropy_source",
    "register_entropy_source",
]
