"""Variance-minimising discretization of a numeric column into labelled bands."""

from .config import PartitionConfig
from .split_finder import (
    SplitCandidate,
    SplitFinder,
    argmin,
    blended_stddev,
)
from .partition import (
    Partition,
    PartitionDriver,
    TraceSink,
    band_label,
    cuts,
)
from .sorting import (
    SORT_STRATEGIES,
    sort_order,
    sort_rows,
    sort_table,
)
from .pipeline import (
    BEST,
    REST,
    CUT_COLUMN,
    DiscretizationError,
    DiscretizationResult,
    Discretizer,
    discretize_table,
    partitions_from_cuts,
)

__all__ = [
    "PartitionConfig",
    "SplitCandidate",
    "SplitFinder",
    "argmin",
    "blended_stddev",
    "Partition",
    "PartitionDriver",
    "TraceSink",
    "band_label",
    "cuts",
    "SORT_STRATEGIES",
    "sort_order",
    "sort_rows",
    "sort_table",
    "BEST",
    "REST",
    "CUT_COLUMN",
    "DiscretizationError",
    "DiscretizationResult",
    "Discretizer",
    "discretize_table",
    "partitions_from_cuts",
]
