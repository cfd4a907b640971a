"""
Report rendering for dockmem.
"""

from .reporter import Reporter, sort_records

__all__ = [
    "Reporter",
    "sort_records",
]
