"""
Aggregation of per-container memory figures into report records.
"""

import logging
from typing import Any, List, Optional, Tuple

from ..models.records import (
    SHORT_ID_LENGTH,
    ContainerInfo,
    ContainerRecord,
    ReportTotals,
)
from ..validation import InvalidIdentifierError

logger = logging.getLogger(__name__)

# Sentinel for "use the system memory total given at construction".
_RUN_DEFAULT = object()


def short_container_id(full_id: str) -> str:
    """
    Return the first SHORT_ID_LENGTH characters of a container ID.

    Raises:
        InvalidIdentifierError: If the ID is shorter than SHORT_ID_LENGTH.
    """
    if len(full_id) < SHORT_ID_LENGTH:
        raise InvalidIdentifierError(
            f"container ID '{full_id}' is shorter than {SHORT_ID_LENGTH} characters",
            container_id=full_id,
        )
    return full_id[:SHORT_ID_LENGTH]


def memory_percentage(memory_usage_bytes: int, total_system_memory_bytes: Optional[int]) -> Optional[float]:
    """Share of system memory in percent, or None if the total is unknown or zero."""
    if not total_system_memory_bytes or total_system_memory_bytes <= 0:
        return None
    return memory_usage_bytes / total_system_memory_bytes * 100.0


class Aggregator:
    """
    Collects ContainerRecords for one report run and keeps the running total.

    Records are kept in the order they were recorded (discovery order), which
    the reporter relies on to break ties between equal usages.

    Attributes:
        total_system_memory_bytes: System memory total used for percentages,
                                   or None when percentages are disabled.
    """

    def __init__(self, total_system_memory_bytes: Optional[int] = None):
        self.total_system_memory_bytes = total_system_memory_bytes
        self._records: List[ContainerRecord] = []
        self._totals = ReportTotals()

    def record(
        self,
        name: str,
        full_id: str,
        memory_usage_bytes: int,
        total_system_memory_bytes: Any = _RUN_DEFAULT,
    ) -> ContainerRecord:
        """
        Create a record for one container and add its usage to the total.

        Nothing is recorded if the ID is invalid.

        Args:
            name: Display name of the container.
            full_id: Full container ID.
            memory_usage_bytes: Effective memory usage in bytes.
            total_system_memory_bytes: Overrides the run's system memory total
                                       for this record. None disables the percentage.

        Returns:
            The new ContainerRecord.

        Raises:
            InvalidIdentifierError: If full_id is shorter than SHORT_ID_LENGTH.
            ValueError: If memory_usage_bytes is negative.
        """
        if memory_usage_bytes < 0:
            raise ValueError(f"memory usage must be non-negative, got {memory_usage_bytes}")
        short_id = short_container_id(full_id)

        if total_system_memory_bytes is _RUN_DEFAULT:
            total_system_memory_bytes = self.total_system_memory_bytes

        record = ContainerRecord(
            name=name,
            short_id=short_id,
            memory_usage_bytes=memory_usage_bytes,
            memory_percentage=memory_percentage(memory_usage_bytes, total_system_memory_bytes),
        )
        self._records.append(record)
        self._totals.memory_usage_bytes += memory_usage_bytes
        self._totals.recorded += 1
        logger.debug(f"Recorded {name} ({short_id}): {memory_usage_bytes} B")
        return record

    def skip(self, container: ContainerInfo, reason: Exception) -> None:
        """Count a container that could not be processed."""
        self._totals.skipped += 1
        logger.debug(f"Skipped {container.name} ({container.id}): {reason}")

    @property
    def records(self) -> Tuple[ContainerRecord, ...]:
        """Records in discovery order."""
        return tuple(self._records)

    @property
    def total_memory_usage_bytes(self) -> int:
        return self._totals.memory_usage_bytes

    @property
    def totals(self) -> ReportTotals:
        return self._totals
