"""
Unit tests for the stable row sort.
"""
# 说明：稳定排序工具的单元测试：两种策略结果一致、相同键保持输入顺序、未知策略报错。

import pytest

from bandlib.core.data import Table
from bandlib.core.utils import ParamValidationError, configure
from bandlib.discretize import sort_order, sort_rows, sort_table


def test_sort_order_is_stable_for_both_strategies() -> None:
    keys = [3.0, 1.0, 3.0, 2.0, 1.0]
    assert sort_order(keys, "merge") == [1, 4, 3, 0, 2]
    assert sort_order(keys, "argsort") == [1, 4, 3, 0, 2]


def test_sort_order_rejects_unknown_strategy() -> None:
    with pytest.raises(ParamValidationError):
        sort_order([1.0], "bogo")


def test_sort_rows_by_key_index() -> None:
    rows = [["b", "2"], ["a", "10"], ["c", "2"]]
    assert sort_rows(rows, 1) == [["b", "2"], ["c", "2"], ["a", "10"]]


def test_sort_table_sorts_numerically_by_last_column() -> None:
    table = Table(["id", "dom"], [["x", "10"], ["y", "9"], ["z", "-1"], ["w", "9"]])
    ordered = sort_table(table)
    assert ordered.rows == [["z", "-1"], ["y", "9"], ["w", "9"], ["x", "10"]]
    assert ordered.header == ["id", "dom"]


def test_sort_table_uses_configured_default_strategy() -> None:
    configure(sort_strategy="argsort")
    table = Table(["dom"], [["2"], ["1"]])
    assert sort_table(table).rows == [["1"], ["2"]]
