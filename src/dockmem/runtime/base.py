"""
Defines the abstract collaborators the report driver depends on.

This module provides:
- ContainerRuntime: an abstract base class (ABC) for a container runtime
  connection that can list running containers and open statistics snapshots.
- SystemMemorySource: an ABC for querying the host's total memory.

Concrete implementations are injected into the report driver, so tests and
other runtimes can supply their own.
"""

import logging
from abc import ABC, abstractmethod
from typing import IO, ContextManager, List, Optional

from ..models.records import ContainerInfo

logger = logging.getLogger(__name__)


class ContainerRuntime(ABC):
    """
    Abstract base class for container runtime connections.

    Runtimes are context managers; leaving the `with` block closes the
    connection.
    """

    @abstractmethod
    def list_containers(self) -> List[ContainerInfo]:
        """
        Lists the running containers.

        Returns:
            One ContainerInfo per running container, in the order the runtime
            reports them.

        Raises:
            DaemonConnectionError: If the daemon cannot be reached or the
                                   listing fails.
        """
        pass

    @abstractmethod
    def open_stats(self, container_id: str) -> ContextManager[IO[bytes]]:
        """
        Opens a single (non-streaming) statistics snapshot for a container.

        The returned context manager yields a binary stream holding one JSON
        statistics document and closes it on exit, whether or not the
        document could be decoded.

        Args:
            container_id: Full ID of the container.

        Raises:
            StatsUnavailableError: If the snapshot cannot be fetched. May be
                                   raised on entering the context manager.
        """
        pass

    def close(self) -> None:
        """Releases the connection. The default implementation does nothing."""
        pass

    def __enter__(self) -> "ContainerRuntime":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class SystemMemorySource(ABC):
    """Abstract base class for host memory queries."""

    @abstractmethod
    def total_memory(self) -> Optional[int]:
        """
        Returns the total physical memory of the host in bytes.

        Returns:
            The total in bytes, or None if it cannot be determined. A result of
            None or 0 disables percentages in the report.
        """
        pass
