"""Entry point for the core library components."""

from __future__ import annotations

from .data import (
    RunningStats,
    Table,
    TableError,
    read_table,
    write_table,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__: list[str] = [
    "RunningStats",
    "Table",
    "TableError",
    "read_table",
    "write_table",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
