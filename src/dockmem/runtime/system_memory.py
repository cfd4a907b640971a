"""
System memory query implementation using the 'psutil' library.
"""

import logging
from typing import Optional

import psutil

from .base import SystemMemorySource

logger = logging.getLogger(__name__)


class PsutilSystemMemory(SystemMemorySource):
    """Reports the host's total physical memory via `psutil.virtual_memory()`."""

    def total_memory(self) -> Optional[int]:
        try:
            total = psutil.virtual_memory().total
        except (psutil.Error, OSError) as e:
            # Percentages are optional, so a failed query only disables them.
            logger.warning(f"Could not get system memory, percentages disabled: {e}")
            return None

        logger.debug(f"Total system memory: {total} bytes")
        return total


class NoSystemMemory(SystemMemorySource):
    """A source that never knows the system total; used to disable percentages."""

    def total_memory(self) -> Optional[int]:
        return None
