"""
dockmem: per-container memory report for a Docker host.

This package lists the running containers, computes each one's effective
memory usage (cgroup usage minus page cache) and prints them sorted by
usage, with a total and an optional share of system memory.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Data structures and type definitions
- validation: Error taxonomy, input validation and error handling
- formatting: Human-readable byte counts
- accounting: Effective memory extraction and aggregation
- reporting: Sorted, column-aligned report rendering
- runtime: Container runtime and system memory collaborators
- cli: Command-line interface and report runner

Usage:
    From command line:
        dockmem [options]
        python -m dockmem.cli.main [options]

    Programmatically:
        from dockmem import DockerRuntime, PsutilSystemMemory, Reporter, ReportRunner
        with DockerRuntime() as runtime:
            runtime.connect()
            ReportRunner(runtime, Reporter(), PsutilSystemMemory()).run()
"""

# Main interfaces
from .config import get_config, clear_config_cache, set_config_path
from .cli.orchestrator import ReportRunner
from .cli import main_cli

# Core logic
from .formatting import format_bytes
from .accounting import Aggregator, decode_snapshot, effective_memory_usage
from .reporting import Reporter, sort_records

# Collaborators
from .runtime import (
    ContainerRuntime,
    DockerRuntime,
    NoSystemMemory,
    PsutilSystemMemory,
    SystemMemorySource,
)

# Model classes for external use
from .models import (
    AppConfig,
    ContainerInfo,
    ContainerRecord,
    ContainerStatSnapshot,
    ReportTotals,
)

# Errors
from .validation import (
    DockmemError,
    DaemonConnectionError,
    StatsUnavailableError,
    SnapshotDecodeError,
    InvalidIdentifierError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "ReportRunner",
    "main_cli",
    # Core logic
    "format_bytes",
    "Aggregator",
    "decode_snapshot",
    "effective_memory_usage",
    "Reporter",
    "sort_records",
    # Collaborators
    "ContainerRuntime",
    "DockerRuntime",
    "NoSystemMemory",
    "PsutilSystemMemory",
    "SystemMemorySource",
    # Models
    "AppConfig",
    "ContainerInfo",
    "ContainerRecord",
    "ContainerStatSnapshot",
    "ReportTotals",
    # Errors
    "DockmemError",
    "DaemonConnectionError",
    "StatsUnavailableError",
    "SnapshotDecodeError",
    "InvalidIdentifierError",
    "ValidationError",
]
