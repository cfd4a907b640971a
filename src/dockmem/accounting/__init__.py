"""
Memory accounting for dockmem.

This package turns raw statistics snapshots into effective memory figures
and aggregates them into per-container records and a run total.
"""

from .aggregator import Aggregator, memory_percentage, short_container_id
from .extractor import decode_snapshot, effective_memory_usage, parse_snapshot

__all__ = [
    "Aggregator",
    "decode_snapshot",
    "effective_memory_usage",
    "memory_percentage",
    "parse_snapshot",
    "short_container_id",
]
