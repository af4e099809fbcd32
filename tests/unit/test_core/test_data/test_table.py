"""
Unit tests for the Table abstraction and its text stream reader / writer.
"""
# 说明：Table 表格抽象以及 read_table / write_table 的单元测试。
# 覆盖：
# - read_table：表头解析、空行跳过、字段去空白、行宽不一致与缺少表头时报错
# - column_index / numeric_column：按名称或下标定位列，非数值与非有限值立即报错
# - with_column / drop_column / take：派生新表
# - write_table：逗号分隔输出

import io

import numpy as np
import pytest

from bandlib.core.data import Table, TableError, read_table, write_table


def test_read_table_strips_fields_and_skips_blank_lines() -> None:
    stream = io.StringIO("name, dom\n\na, 3\nb,1\n\n")
    table = read_table(stream)
    assert table.header == ["name", "dom"]
    assert table.rows == [["a", "3"], ["b", "1"]]
    assert len(table) == 2
    assert table.width == 2


def test_read_table_rejects_ragged_rows() -> None:
    with pytest.raises(TableError, match="line 3"):
        read_table(io.StringIO("a,b\n1,2\n3\n"))


def test_read_table_requires_header() -> None:
    with pytest.raises(TableError, match="missing header"):
        read_table(io.StringIO("\n\n"))


def test_table_construction_validates_width() -> None:
    with pytest.raises(TableError):
        Table(["a", "b"], [["1"]])


def test_column_index_by_name_and_position() -> None:
    table = Table(["a", "b", "c"], [["1", "2", "3"]])
    assert table.column_index("b") == 1
    assert table.column_index(-1) == 2
    assert table.column_index(0) == 0
    with pytest.raises(TableError):
        table.column_index("missing")
    with pytest.raises(TableError):
        table.column_index(3)


def test_numeric_column_parses_float64() -> None:
    table = Table(["x"], [["1"], ["2.5"], ["-3e2"]])
    values = table.numeric_column("x")
    assert values.dtype == np.float64
    assert values.tolist() == [1.0, 2.5, -300.0]


@pytest.mark.parametrize("text", ["abc", "", "nan", "inf"])
def test_numeric_column_fails_fast_on_bad_values(text: str) -> None:
    table = Table(["x"], [["1"], [text]])
    with pytest.raises(TableError, match="row 2"):
        table.numeric_column(0)


def test_with_column_appends_or_replaces() -> None:
    table = Table(["a"], [["1"], ["2"]])
    appended = table.with_column("tag", ["x", "y"])
    assert appended.header == ["a", "tag"]
    assert appended.rows == [["1", "x"], ["2", "y"]]

    replaced = appended.with_column("tag", ["p", "q"])
    assert replaced.header == ["a", "tag"]
    assert replaced.rows == [["1", "p"], ["2", "q"]]
    # 原表不被修改
    assert table.rows == [["1"], ["2"]]


def test_with_column_rejects_wrong_length() -> None:
    with pytest.raises(TableError):
        Table(["a"], [["1"]]).with_column("tag", [])


def test_drop_column_and_take() -> None:
    table = Table(["a", "b"], [["1", "x"], ["2", "y"]])
    assert table.drop_column("a").rows == [["x"], ["y"]]
    assert table.take([1, 0]).rows == [["2", "y"], ["1", "x"]]


def test_write_table_round_trips_text() -> None:
    table = Table(["a", "b"], [["1", "x"], ["2", "y"]])
    out = io.StringIO()
    write_table(table, out)
    assert out.getvalue() == "a,b\n1,x\n2,y\n"
    assert read_table(io.StringIO(out.getvalue())) == table
