"""
Rendering of the container memory report.

The report is a column-aligned text table followed by a total line:

    Docker Container Memory Usage
    NAME   ID             MEMORY USAGE   MEM %
    ----   --             ------------   -----
    web    0123456789ab   500.00 MiB     24.41%
    db     ba9876543210   200.00 MiB     9.77%

    Total Memory Usage (All Containers): 700.00 MiB

The MEM % column is only rendered when at least one record has a percentage.
"""

import logging
import sys
from typing import IO, Iterable, List, Optional, Sequence

from ..formatting import format_bytes
from ..models.records import ContainerRecord

logger = logging.getLogger(__name__)

NAME_HEADER = "NAME"
ID_HEADER = "ID"
MEMORY_HEADER = "MEMORY USAGE"
PERCENT_HEADER = "MEM %"
TOTAL_LABEL = "Total Memory Usage (All Containers):"


def sort_records(records: Iterable[ContainerRecord]) -> List[ContainerRecord]:
    """Sort records by memory usage, largest first; equal usages keep their order."""
    # sorted() is stable, so reverse=True keeps equal keys in input order.
    return sorted(records, key=lambda r: r.memory_usage_bytes, reverse=True)


class Reporter:
    """
    Writes the memory report to an output stream.

    Attributes:
        stream: Where the report is written. Defaults to sys.stdout at render time.
        padding: Minimum number of spaces between columns.
        title: Line printed above the table; empty to omit it.
    """

    def __init__(
        self,
        stream: Optional[IO[str]] = None,
        padding: int = 3,
        title: str = "Docker Container Memory Usage",
    ):
        if padding < 1:
            raise ValueError(f"padding must be >= 1, got {padding}")
        self.stream = stream
        self.padding = padding
        self.title = title

    def format_table(self, records: Sequence[ContainerRecord]) -> List[str]:
        """
        Build the aligned table lines (header, separator, one row per record).

        The records are rendered in the order given.
        """
        show_percent = any(r.memory_percentage is not None for r in records)

        header = [NAME_HEADER, ID_HEADER, MEMORY_HEADER]
        if show_percent:
            header.append(PERCENT_HEADER)
        rows = [header, ["-" * len(cell) for cell in header]]

        for record in records:
            row = [record.name, record.short_id, format_bytes(record.memory_usage_bytes)]
            if show_percent:
                row.append(
                    "" if record.memory_percentage is None else f"{record.memory_percentage:.2f}%"
                )
            rows.append(row)

        # The last column is not padded, so lines carry no trailing whitespace.
        widths = [max(len(row[col]) for row in rows) for col in range(len(header) - 1)]
        lines = []
        for row in rows:
            cells = [cell.ljust(width + self.padding) for cell, width in zip(row, widths)]
            cells.append(row[-1])
            lines.append("".join(cells).rstrip())
        return lines

    def render(self, records: Iterable[ContainerRecord], total: int) -> None:
        """
        Sort the records and write the full report.

        Args:
            records: Records in discovery order.
            total: Total memory usage in bytes of the given records.
        """
        stream = self.stream if self.stream is not None else sys.stdout
        ordered = sort_records(records)
        logger.debug(f"Rendering report with {len(ordered)} containers")

        lines = []
        if self.title:
            lines.append(self.title)
        lines.extend(self.format_table(ordered))
        lines.append("")
        lines.append(f"{TOTAL_LABEL} {format_bytes(total)}")

        stream.write("\n".join(lines) + "\n")
        stream.flush()
