"""
Command-line interface for the dockmem package.

This module provides the main CLI entry point and the report runner.
"""

from .main import main_cli
from .orchestrator import ReportRunner

__all__ = [
    "main_cli",
    "ReportRunner",
]
