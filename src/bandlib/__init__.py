"""bandlib: variance-minimising discretization of numeric table columns."""

from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    ParamValidationError,
    RunningStats,
    Table,
    TableError,
    read_table,
    write_table,
)
from .discretize import (
    DiscretizationError,
    DiscretizationResult,
    Discretizer,
    Partition,
    PartitionConfig,
    PartitionDriver,
    SplitFinder,
    discretize_table,
)

__all__ = [
    "__version__",
    "ParamValidationError",
    "RunningStats",
    "Table",
    "TableError",
    "read_table",
    "write_table",
    "DiscretizationError",
    "DiscretizationResult",
    "Discretizer",
    "Partition",
    "PartitionConfig",
    "PartitionDriver",
    "SplitFinder",
    "discretize_table",
]
