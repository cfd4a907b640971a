"""
Container and report data models.

This module defines the data structures that flow through a single report
generation:

- ContainerInfo: a running container as listed by the runtime.
- ContainerStatSnapshot: the memory part of one statistics snapshot.
- ContainerRecord: the effective memory usage of one container, ready to render.
- ReportTotals: running totals owned by the aggregator for one run.

None of these objects outlive the run that created them.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

# Number of leading characters of a full container ID shown in reports.
SHORT_ID_LENGTH = 12


@dataclass(frozen=True)
class ContainerInfo:
    """A running container as returned by the runtime's container listing."""

    id: str
    name: str


@dataclass(frozen=True)
class ContainerStatSnapshot:
    """
    Memory counters of a single point-in-time statistics snapshot.

    Attributes:
        usage: Total memory usage in bytes as reported by the memory cgroup.
        stats: Named sub-metrics in bytes (e.g. "cache", "rss", "inactive_file").
    """

    usage: int
    stats: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ContainerRecord:
    """
    Effective memory usage of one container.

    Attributes:
        name: Display name of the container.
        short_id: First SHORT_ID_LENGTH characters of the container ID.
        memory_usage_bytes: Effective memory usage in bytes (never negative).
        memory_percentage: Share of total system memory in percent, or None
                           when the system total is unknown.
    """

    name: str
    short_id: str
    memory_usage_bytes: int
    memory_percentage: Optional[float] = None


@dataclass
class ReportTotals:
    """Running totals accumulated while a report is being built."""

    # Sum of memory_usage_bytes over all recorded containers.
    memory_usage_bytes: int = 0
    # Number of containers recorded.
    recorded: int = 0
    # Number of containers skipped because of per-container failures.
    skipped: int = 0
