"""
Table abstraction for the comma-separated streams the pipeline reads and writes.

Responsibilities:
    * parse a header row plus data rows from a text stream
    * resolve columns by name or position and extract numeric columns
    * derive new tables by reordering rows or replacing/appending a column
    * write the table back out in the same comma-separated format
"""
# 说明：表格抽象，覆盖管道读写的逗号分隔文本流。
# 职责：
# - 从文本流解析表头与数据行（字段去除首尾空白，兼容上游工具输出的 ", " 分隔符）
# - 按列名或下标定位列，并将目标列解析为 float64 数组（遇到非数值/NaN/无穷立即报错）
# - 通过重排行（take）、替换或追加列（with_column）、删除列（drop_column）派生新表
# - 以相同的逗号分隔格式写回文本流

from __future__ import annotations

import csv
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, TextIO, Union

import numpy as np

Row = List[str]
Column = Union[int, str]
# 列引用：整数下标（可为负）或表头中的列名


class TableError(RuntimeError):
    """Raised when the input table is malformed or a column cannot be resolved."""
    # 表格相关操作失败时抛出的异常（缺少表头、行宽不一致、非数值目标值等）


@dataclass
class Table:
    """Header plus rows of raw field text."""

    header: List[str]
    rows: List[Row] = field(default_factory=list)

    def __post_init__(self) -> None:
        # 校验每一行的字段数都与表头一致
        width = len(self.header)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise TableError(f"row {index + 1} has {len(row)} fields, expected {width}")

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.header)

    def column_index(self, column: Column) -> int:
        # 将列名或（可为负的）下标统一解析为非负下标
        if isinstance(column, str):
            try:
                return self.header.index(column)
            except ValueError:
                raise TableError(f"unknown column '{column}'") from None
        if not -self.width <= column < self.width:
            raise TableError(f"column index {column} out of range for {self.width} columns")
        return column % self.width

    def column(self, column: Column) -> List[str]:
        index = self.column_index(column)
        return [row[index] for row in self.rows]

    def numeric_column(self, column: Column) -> np.ndarray:
        """Parse a column to float64, failing on any non-finite or non-numeric text."""
        index = self.column_index(column)
        values = np.empty(len(self.rows), dtype=np.float64)
        for position, row in enumerate(self.rows):
            text = row[index]
            try:
                number = float(text)
            except ValueError:
                raise TableError(
                    f"row {position + 1}: value '{text}' in column '{self.header[index]}' is not numeric"
                ) from None
            if not math.isfinite(number):
                raise TableError(
                    f"row {position + 1}: value '{text}' in column '{self.header[index]}' is not finite"
                )
            values[position] = number
        return values

    def take(self, order: Iterable[int]) -> "Table":
        # 按给定下标顺序重排行，返回新表（行对象本身按引用共享）
        return Table(list(self.header), [self.rows[i] for i in order])

    def with_column(self, name: str, values: Sequence[str]) -> "Table":
        """Return a copy where column ``name`` holds ``values``; appended if absent."""
        if len(values) != len(self.rows):
            raise TableError(f"column '{name}' has {len(values)} values for {len(self.rows)} rows")
        if name in self.header:
            index = self.header.index(name)
            rows = [row[:index] + [value] + row[index + 1:] for row, value in zip(self.rows, values)]
            return Table(list(self.header), rows)
        return Table(self.header + [name], [row + [value] for row, value in zip(self.rows, values)])

    def drop_column(self, name: str) -> "Table":
        index = self.column_index(name)
        header = self.header[:index] + self.header[index + 1:]
        return Table(header, [row[:index] + row[index + 1:] for row in self.rows])


def read_table(stream: TextIO) -> Table:
    """
    Read a header line and data lines of comma-separated values.

    Blank lines are skipped and surrounding whitespace is stripped from every
    field. A data line whose width differs from the header raises TableError.
    """
    # 读取：第一条非空行为表头，其余非空行为数据行
    reader = csv.reader(stream)
    header: List[str] = []
    rows: List[Row] = []
    for line_number, record in enumerate(reader, start=1):
        fields = [value.strip() for value in record]
        if not any(fields):
            continue
        if not header:
            header = fields
            continue
        if len(fields) != len(header):
            raise TableError(f"line {line_number} has {len(fields)} fields, expected {len(header)}")
        rows.append(fields)
    if not header:
        raise TableError("missing header row")
    return Table(header, rows)


def write_table(table: Table, stream: TextIO) -> None:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(table.header)
    writer.writerows(table.rows)
