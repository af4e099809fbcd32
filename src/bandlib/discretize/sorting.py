"""
Stable ascending sort of table rows by a numeric column.
"""
# 说明：按数值列对表格行做稳定升序排序（相同键值保持原有相对顺序）。
# 策略：
# - "merge"：Python 内置 sorted（Timsort，基于归并，稳定）
# - "argsort"：numpy.argsort(kind="stable")
# 两种策略输出完全一致，仅实现路径不同。

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from bandlib.core.data.table import Column, Row, Table
from bandlib.core.utils.config import get_config
from bandlib.core.utils.param_validation import ensure

SORT_STRATEGIES = ("merge", "argsort")


def sort_order(keys: Sequence[float], strategy: str = "merge") -> List[int]:
    """Row positions that sort ``keys`` ascending, ties in input order."""
    ensure(strategy in SORT_STRATEGIES, f"unknown sort strategy '{strategy}'")
    if strategy == "argsort":
        return np.argsort(np.asarray(keys, dtype=np.float64), kind="stable").tolist()
    return sorted(range(len(keys)), key=keys.__getitem__)


def sort_rows(rows: Sequence[Row], key_index: int, strategy: str = "merge") -> List[Row]:
    keys = [float(row[key_index]) for row in rows]
    return [rows[i] for i in sort_order(keys, strategy)]


def sort_table(table: Table, column: Column = -1, strategy: Optional[str] = None) -> Table:
    """Return ``table`` with rows stably sorted by the numeric ``column``."""
    strategy = strategy or get_config().sort_strategy
    keys = table.numeric_column(column)
    return table.take(sort_order(keys.tolist(), strategy))
