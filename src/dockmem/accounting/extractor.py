"""
Extraction of effective memory usage from container statistics snapshots.

The memory cgroup's "usage" counter includes page cache that the kernel has
charged to the container. That cache is reclaimable, so it is subtracted to
get a figure closer to the memory actually held by the application:

    effective = memory_stats.usage - memory_stats.stats.cache

This module provides:
- decode_snapshot: parse one JSON statistics document into a ContainerStatSnapshot.
- effective_memory_usage: compute the effective usage of a decoded snapshot.
"""

import json
import logging
from typing import IO, Any, Dict, Optional

from ..models.records import ContainerStatSnapshot
from ..validation import SnapshotDecodeError

logger = logging.getLogger(__name__)

CACHE_METRIC = "cache"


def _as_byte_count(value: Any, field_name: str, container_id: Optional[str]) -> int:
    # bool is an int subclass but never a valid counter.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SnapshotDecodeError(
            f"'{field_name}' is not a non-negative integer: {value!r}",
            container_id=container_id,
        )
    return value


def parse_snapshot(document: Any, container_id: Optional[str] = None) -> ContainerStatSnapshot:
    """
    Build a ContainerStatSnapshot from an already-parsed stats document.

    A missing `memory_stats.usage` counts as 0, since the daemon leaves the
    memory section empty for containers that are shutting down.

    Args:
        document: The decoded JSON object returned by the stats endpoint.
        container_id: ID of the container, used in error messages only.

    Returns:
        The memory part of the snapshot.

    Raises:
        SnapshotDecodeError: If the document does not have the expected shape.
    """
    if not isinstance(document, dict):
        raise SnapshotDecodeError(
            f"stats document is not a JSON object: {type(document).__name__}",
            container_id=container_id,
        )

    memory_stats = document.get("memory_stats") or {}
    if not isinstance(memory_stats, dict):
        raise SnapshotDecodeError(
            "'memory_stats' is not a JSON object", container_id=container_id
        )

    usage = _as_byte_count(memory_stats.get("usage", 0), "memory_stats.usage", container_id)

    raw_stats = memory_stats.get("stats") or {}
    if not isinstance(raw_stats, dict):
        raise SnapshotDecodeError(
            "'memory_stats.stats' is not a JSON object", container_id=container_id
        )
    stats: Dict[str, int] = {
        str(key): _as_byte_count(value, f"memory_stats.stats.{key}", container_id)
        for key, value in raw_stats.items()
    }

    return ContainerStatSnapshot(usage=usage, stats=stats)


def decode_snapshot(stream: IO[bytes], container_id: Optional[str] = None) -> ContainerStatSnapshot:
    """
    Read and decode one JSON statistics document from a binary stream.

    The stream is only read, never closed; closing is the job of whoever
    opened it.

    Raises:
        SnapshotDecodeError: If the stream does not contain a valid document.
    """
    try:
        document = json.load(stream)
    except (UnicodeDecodeError, ValueError) as e:
        # json.JSONDecodeError is a ValueError subclass.
        raise SnapshotDecodeError(
            f"invalid stats JSON: {e}", container_id=container_id
        ) from e
    return parse_snapshot(document, container_id=container_id)


def effective_memory_usage(snapshot: ContainerStatSnapshot) -> int:
    """
    Compute the effective memory usage of a container in bytes.

    Returns `usage - cache` when the snapshot carries a "cache" sub-metric and
    `usage` otherwise. If the cache is larger than the usage, which happens
    briefly while the kernel is updating its counters, the result is 0.
    """
    cache = snapshot.stats.get(CACHE_METRIC, 0)
    if cache > snapshot.usage:
        logger.debug(
            f"Cache ({cache} B) exceeds usage ({snapshot.usage} B); clamping effective usage to 0"
        )
        return 0
    return snapshot.usage - cache
