"""
Report runner for CLI integration.

This module provides the runner that drives one report generation: it asks
the injected collaborators for the container list and the system memory
total, processes the containers one at a time and hands the results to the
reporter.
"""

import logging
from typing import Optional

from ..accounting import Aggregator, decode_snapshot, effective_memory_usage
from ..models.records import ContainerInfo
from ..reporting import Reporter
from ..runtime.base import ContainerRuntime, SystemMemorySource
from ..validation import ContainerError, handle_container_error

logger = logging.getLogger(__name__)


class ReportRunner:
    """
    Generates one container memory report.

    Collaborators are passed in at construction; the runner holds no global
    state and can be run more than once.
    """

    def __init__(
        self,
        runtime: ContainerRuntime,
        reporter: Reporter,
        system_memory: Optional[SystemMemorySource] = None,
    ):
        """
        Initialize the report runner.

        Args:
            runtime: Connection used to list containers and fetch their stats
            reporter: Renders the final report
            system_memory: Source of the system memory total; None disables
                           percentages
        """
        self.runtime = runtime
        self.reporter = reporter
        self.system_memory = system_memory

    def collect(self) -> Aggregator:
        """
        Fetch and aggregate the memory usage of every running container.

        A container whose stats cannot be fetched or decoded, or whose ID is
        invalid, is logged and skipped.

        Returns:
            The aggregator holding this run's records and totals

        Raises:
            DaemonConnectionError: If the containers cannot be listed
        """
        total_system_memory = (
            self.system_memory.total_memory() if self.system_memory is not None else None
        )

        containers = self.runtime.list_containers()
        logger.info(f"Containers running: {len(containers)}")

        aggregator = Aggregator(total_system_memory_bytes=total_system_memory)
        for container in containers:
            try:
                self._process_container(container, aggregator)
            except ContainerError as e:
                handle_container_error(e, logger=logger)
                aggregator.skip(container, e)

        totals = aggregator.totals
        if totals.skipped:
            logger.info(
                f"Skipped {totals.skipped} of {len(containers)} containers; "
                f"totals only include the remaining {totals.recorded}"
            )
        return aggregator

    def _process_container(self, container: ContainerInfo, aggregator: Aggregator) -> None:
        # The stream is closed when the with block exits, including on decode errors.
        with self.runtime.open_stats(container.id) as stream:
            snapshot = decode_snapshot(stream, container_id=container.id)

        aggregator.record(
            name=container.name,
            full_id=container.id,
            memory_usage_bytes=effective_memory_usage(snapshot),
        )

    def run(self) -> Aggregator:
        """
        Collect the containers' memory usage and render the report.

        Returns:
            The aggregator of the run

        Raises:
            DaemonConnectionError: If the containers cannot be listed; nothing
                                   is rendered in that case
        """
        aggregator = self.collect()
        self.reporter.render(aggregator.records, aggregator.total_memory_usage_bytes)
        return aggregator
