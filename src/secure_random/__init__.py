"""secure-random: uniform random bytes and bounded integers from the host CSPRNG.

Two ways to generate values:

- :func:`generate_bytes` / :func:`generate_range` (or a
  :class:`StatelessSampler`) acquire and release an entropy source on every
  call.
- :class:`SamplerContext` keeps one entropy source open across many calls
  until it is released.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("secure-random")
except PackageNotFoundError:
    __version__ = "0.0.0"

from secure_random.bounded import INT32_MAX, INT32_MIN
from secure_random.config import SecureRandomConfig, load_config
from secure_random.context import ContextState, SamplerContext
from secure_random.exceptions import (
    ConfigValidationError,
    EntropySourceUnavailableError,
    InvalidArgumentError,
    SecureRandomError,
    UseAfterReleaseError,
)
from secure_random.sampler import SecureRandom, StatelessSampler, generate_bytes, generate_range

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "ConfigValidationError",
    "ContextState",
    "EntropySourceUnavailableError",
    "InvalidArgumentError",
    "SamplerContext",
    "SecureRandom",
    "SecureRandomConfig",
    "SecureRandomError",
    "StatelessSampler",
    "UseAfterReleaseError",
    "__version__",
    "generate_bytes",
    "generate_range",
    "load_config",
]
