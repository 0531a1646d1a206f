"""Diagnostic logger for generation events.

Uses the standard ``logging`` module with the ``"secure_random"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis. Generated values never
reach the log.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from secure_random.config import SecureRandomConfig
    from secure_random.logging.types import SampleRecord

logger = logging.getLogger("secure_random")


class SamplingLogger:
    """Per-operation diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per operation with the request shape,
        source name and elapsed time.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: SecureRandomConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SampleRecord] = []

    def log_sample(self, record: SampleRecord) -> None:
        """Log a single generation event.

        Args:
            record: Immutable record of the completed operation.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            if record.size is not None:
                request = f"size={record.size}"
            else:
                request = f"min={record.min_value} max={record.max_value}"
            logger.info(
                "op=%s sampler=%s %s source=%s%s bytes=%d total=%.3fms",
                record.operation,
                record.sampler,
                request,
                record.entropy_source_used,
                " [REUSED]" if record.source_reused else "",
                record.bytes_drawn,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("sample_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[SampleRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        elapsed = [r.elapsed_ms for r in self._records]
        return {
            "total_operations": n,
            "bytes_operations": sum(1 for r in self._records if r.operation == "generate_bytes"),
            "range_operations": sum(1 for r in self._records if r.operation == "generate_range"),
            "total_bytes_drawn": sum(r.bytes_drawn for r in self._records),
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
            "reused_source_rate": sum(1 for r in self._records if r.source_reused) / n,
        }
