"""Core data abstractions shared across the library."""

from .table import (
    Column,
    Row,
    Table,
    TableError,
    read_table,
    write_table,
)
from .statistics import (
    count,
    summation,
    mean,
    variance,
    RunningStats,
)

__all__ = [
    "Column",
    "Row",
    "Table",
    "TableError",
    "read_table",
    "write_table",
    "count",
    "summation",
    "mean",
    "variance",
    "RunningStats",
]
