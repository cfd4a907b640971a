"""
Configuration data models.

This module contains the configuration data structures for the runtime
connection, report rendering and logging, as loaded from `config.toml`.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RuntimeConfig:
    """
    Settings for connecting to the container runtime daemon.
    """

    # Daemon URL (e.g. "unix:///var/run/docker.sock"). None means "from environment".
    base_url: Optional[str] = None
    # Timeout in seconds applied to every call made to the daemon.
    timeout: float = 10.0


@dataclass
class ReportConfig:
    """
    Settings for the rendered memory report.
    """

    # Whether to query system memory and render the MEM % column.
    show_percentage: bool = True
    # Minimum number of spaces between table columns.
    column_padding: int = 3
    # Title line printed above the table. Empty string disables it.
    title: str = "Docker Container Memory Usage"


@dataclass
class LoggingConfig:
    """
    Settings for diagnostic logging.
    """

    level: str = "INFO"


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
