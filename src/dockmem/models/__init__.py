"""
Data models and structures for dockmem.

Configuration Models:
- Runtime connection, report rendering and logging settings

Record Models:
- Listed containers and their statistics snapshots
- Per-container memory records and run totals

All models are dataclasses; the record models are immutable.
"""

# Configuration models
from .config import AppConfig, LoggingConfig, ReportConfig, RuntimeConfig

# Record models
from .records import (
    SHORT_ID_LENGTH,
    ContainerInfo,
    ContainerRecord,
    ContainerStatSnapshot,
    ReportTotals,
)

__all__ = [
    # Configuration
    "AppConfig",
    "LoggingConfig",
    "ReportConfig",
    "RuntimeConfig",
    # Records
    "SHORT_ID_LENGTH",
    "ContainerInfo",
    "ContainerRecord",
    "ContainerStatSnapshot",
    "ReportTotals",
]
