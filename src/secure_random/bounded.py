"""Bounded-integer sampling and shared request validation.

:func:`sample_range` maps 4 bytes of entropy onto the inclusive range
``[min_value, max_value]`` by direct modulo::

    u32    = int.from_bytes(4 random bytes, "little")
    offset = u32 % (max_value - min_value + 1)
    return min_value + offset

Bounds are signed 32-bit integers, so the range holds at most 2**32 values
and every offset is reachable. The reduction is *not* rejection sampling:
when the range size does not divide 2**32, the lowest ``2**32 % range_size``
offsets are each one count more likely out of 2**32. That bias is
negligible for ranges much smaller than 2**32 and is accepted in exchange
for a single fixed-size draw per value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from secure_random.exceptions import (
    MAX_CANNOT_BE_LESS_OR_EQUAL_TO_MIN,
    SIZE_CANNOT_BE_LESS_THAN_ONE,
    InvalidArgumentError,
)

if TYPE_CHECKING:
    from secure_random.entropy.base import EntropySource

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Bytes drawn per bounded value; read as an unsigned little-endian integer.
RANGE_SAMPLE_BYTES = 4
RANGE_BYTE_ORDER = "little"


def _require_int(value: object, parameter: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(parameter, f"{parameter} must be an integer.")


def validate_size(size: int) -> None:
    """Reject byte-buffer requests smaller than one byte.

    Raises:
        InvalidArgumentError: With ``parameter == 'size'``.
    """
    _require_int(size, "size")
    if size < 1:
        raise InvalidArgumentError("size", SIZE_CANNOT_BE_LESS_THAN_ONE)


def validate_range(min_value: int, max_value: int) -> None:
    """Reject range requests outside the signed 32-bit domain or with ``max <= min``.

    Raises:
        InvalidArgumentError: With ``parameter`` set to ``'min'`` or ``'max'``.
    """
    _require_int(min_value, "min")
    _require_int(max_value, "max")
    if not INT32_MIN <= min_value <= INT32_MAX:
        raise InvalidArgumentError("min", "min must be a signed 32-bit integer.")
    if not INT32_MIN <= max_value <= INT32_MAX:
        raise InvalidArgumentError("max", "max must be a signed 32-bit integer.")
    if max_value <= min_value:
        raise InvalidArgumentError("max", MAX_CANNOT_BE_LESS_OR_EQUAL_TO_MIN)


def read_bytes(source: EntropySource, size: int) -> bytes:
    """Fill a fresh buffer of *size* bytes from *source*.

    Callers validate *size* first.
    """
    buffer = bytearray(size)
    source.fill(buffer)
    return bytes(buffer)


def sample_range(source: EntropySource, min_value: int, max_value: int) -> int:
    """Return an integer from ``[min_value, max_value]`` using *source*.

    Args:
        source: Open entropy source; exactly 4 bytes are drawn from it.
        min_value: Inclusive lower bound.
        max_value: Inclusive upper bound, strictly greater than *min_value*.

    Returns:
        A value ``v`` with ``min_value <= v <= max_value``.

    Raises:
        InvalidArgumentError: If the bounds are invalid. Nothing is drawn
            from *source* in that case.
        EntropySourceUnavailableError: If *source* cannot provide 4 bytes.
    """
    validate_range(min_value, max_value)
    range_size = max_value - min_value + 1
    raw = read_bytes(source, RANGE_SAMPLE_BYTES)
    offset = int.from_bytes(raw, RANGE_BYTE_ORDER, signed=False) % range_size
    return min_value + offset
