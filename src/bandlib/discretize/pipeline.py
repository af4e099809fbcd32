"""
End-to-end discretization of one table column.

Responsibilities
  - Resolve the target column, stably sort the rows by it and derive the
    partition thresholds from the whole column.
  - Run the partition driver and write one band label per row into the
    label column (appended, or overwritten when already present).
  - Support the two-stage variant: annotate rows with their partition's cut
    bound, then label a table from such an upstream cut column.
  - Summarise the resulting bands for reporting.

Usage Context
  - Called by the command line tools; usable directly as a library call.
"""
# 说明：单列离散化的端到端流程。
# 职责：
# - Discretizer.label：解析目标列 -> 稳定排序 -> 基于整列推导阈值 -> 切分 -> 写入标签列
# - Discretizer.annotate_cuts / label_from_cuts：两阶段管道，先追加切分上界列，再由该列还原区间并打标签
# - partitions_from_cuts：校验并从切分上界列还原区间
# - DiscretizationResult.summary：按区间汇总统计量（均值、标准差、上下界），供报告输出
# 约定：标签列已存在时先移除再计算，因此对已打标签的表重复执行结果一致（幂等）

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from bandlib.core.data.statistics import RunningStats
from bandlib.core.data.table import Column, Table, TableError
from bandlib.core.utils.config import get_config
from bandlib.core.utils.logging import get_logger

from .config import PartitionConfig
from .partition import Partition, PartitionDriver, TraceSink, band_label
from .sorting import sort_table

logger = get_logger(__name__)

BEST = "best"
REST = "rest"
CUT_COLUMN = "cut"


class DiscretizationError(RuntimeError):
    """Raised when an upstream cut column does not describe valid partitions."""


@dataclass
class DiscretizationResult:
    """Labelled table together with the partitions and thresholds that produced it."""
    # 离散化结果：输出表、区间列表、阈值配置，以及排序后的目标值（用于汇总统计）

    table: Table
    partitions: List[Partition]
    config: PartitionConfig
    values: np.ndarray

    def summary(self) -> List[Dict[str, Any]]:
        # 逐区间统计：样本数、均值、标准差、最小/最大值
        bands = []
        for partition in self.partitions:
            stats = RunningStats.from_values(
                self.values[partition.lo:partition.hi + 1].tolist(), epsilon=self.config.epsilon
            )
            entry = partition.to_dict()
            entry.update(
                mean=stats.mean,
                stddev=stats.stddev,
                min=stats.min,
                max=stats.max,
            )
            bands.append(entry)
        return bands

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": len(self.table),
            "config": self.config.to_dict(),
            "bands": self.summary(),
        }


def partitions_from_cuts(cuts: Sequence[int]) -> List[Partition]:
    """
    Rebuild partitions from a per-row column of exclusive upper bounds.

    Each run of equal values must end exactly at ``value - 1``; the last run
    therefore carries ``len(cuts)``.
    """
    partitions: List[Partition] = []
    n = len(cuts)
    lo = 0
    while lo < n:
        bound = cuts[lo]
        end = lo
        while end < n and cuts[end] == bound:
            end += 1
        if bound != end:
            raise DiscretizationError(
                f"rows {lo}..{end - 1} carry cut {bound}, expected {end}"
            )
        partitions.append(Partition(lo, end - 1))
        lo = end
    return partitions


class Discretizer:
    """
    Label every row of a table with the band its target value falls into.

    - Configuration
      - target_column: Column name or index; resolved against the table
        without the label (or cut) column.
      - cohen, margin, min_bin_size: Threshold overrides; defaults come from
        the runtime configuration and the column itself.
      - label_column: Name of the generated column (default "!klass").
      - best_rest: Label the uppermost band "best" and all others "rest".
      - sort_strategy: Stable sort used before partitioning.
      - trace: Optional sink for the diagnostic trace.
    """

    def __init__(
        self,
        *,
        target_column: Column = -1,
        cohen: Optional[float] = None,
        margin: Optional[float] = None,
        min_bin_size: Optional[int] = None,
        label_column: Optional[str] = None,
        best_rest: bool = False,
        sort_strategy: Optional[str] = None,
        trace: Optional[TraceSink] = None,
    ):
        runtime = get_config()
        self.target_column = target_column
        self.cohen = cohen
        self.margin = margin
        self.min_bin_size = min_bin_size
        self.label_column = label_column or runtime.label_column
        self.best_rest = best_rest
        self.sort_strategy = sort_strategy or runtime.sort_strategy
        self.trace = trace

    @staticmethod
    def _without(table: Table, column: str) -> Table:
        return table.drop_column(column) if column in table.header else table

    def _partition(self, table: Table) -> Tuple[Table, np.ndarray, List[str], PartitionDriver]:
        # 公共步骤：排序、推导阈值、运行驱动器；返回 (排序后的表, 目标值, 目标文本, 驱动器)
        target = table.column_index(self.target_column)
        ordered = sort_table(table, target, self.sort_strategy)
        values = ordered.numeric_column(target)
        texts = ordered.column(target)
        config = PartitionConfig.from_values(
            values,
            target_column=self.target_column,
            cohen=self.cohen,
            margin=self.margin,
            min_bin_size=self.min_bin_size,
        )
        if self.trace is not None:
            self.trace(f"-- {table.header[target]} ----------")
        driver = PartitionDriver(values, config, trace=self.trace, texts=texts)
        return ordered, values, texts, driver

    def label(self, table: Table) -> DiscretizationResult:
        """Sort ``table`` by the target and append (or overwrite) the band label column."""
        base = self._without(table, self.label_column)
        ordered, values, texts, driver = self._partition(base)
        labels = driver.label(texts)
        partitions = driver.cuts()
        if self.best_rest and partitions:
            best_lo = partitions[-1].lo
            labels = [BEST if index >= best_lo else REST for index in range(len(labels))]
        logger.info(
            "labelled %d rows into %d bands (min_bin_size=%d, min_rise=%.6g)",
            len(values), len(partitions), driver.config.min_bin_size, driver.config.min_rise,
        )
        return DiscretizationResult(
            table=ordered.with_column(self.label_column, labels),
            partitions=partitions,
            config=driver.config,
            values=values,
        )

    def annotate_cuts(self, table: Table, cut_column: str = CUT_COLUMN) -> DiscretizationResult:
        """Sort ``table`` and append each row's exclusive partition bound as ``cut_column``."""
        base = self._without(table, cut_column)
        ordered, values, _texts, driver = self._partition(base)
        partitions = driver.cuts()
        bounds = [""] * len(values)
        for partition in partitions:
            for index in partition.indices():
                bounds[index] = str(partition.hi + 1)
        logger.info("annotated %d rows with %d cut bounds", len(values), len(partitions))
        return DiscretizationResult(
            table=ordered.with_column(cut_column, bounds),
            partitions=partitions,
            config=driver.config,
            values=values,
        )

    def label_from_cuts(self, table: Table, cut_column: str = CUT_COLUMN) -> DiscretizationResult:
        """Replace an upstream ``cut_column`` by band labels without re-running the search."""
        raw_cuts = table.column(cut_column)
        try:
            bounds = [int(text) for text in raw_cuts]
        except ValueError as exc:
            raise DiscretizationError(f"cut column '{cut_column}' holds a non-integer value") from exc

        base = self._without(self._without(table, cut_column), self.label_column)
        target = base.column_index(self.target_column)
        values = base.numeric_column(target)
        if np.any(np.diff(values) < 0):
            raise DiscretizationError("rows are not sorted by the target column")
        texts = base.column(target)
        partitions = partitions_from_cuts(bounds)
        labels = [""] * len(values)
        for partition in partitions:
            partition.label = band_label(texts, partition, len(values))
            for index in partition.indices():
                labels[index] = partition.label
        config = PartitionConfig.from_values(
            values,
            target_column=self.target_column,
            cohen=self.cohen,
            margin=self.margin,
            min_bin_size=self.min_bin_size,
        )
        return DiscretizationResult(
            table=base.with_column(self.label_column, labels),
            partitions=partitions,
            config=config,
            values=values,
        )


def discretize_table(table: Table, **options: Any) -> Table:
    # 便捷函数：以默认参数（或给定覆写）对表格打标签并返回输出表
    if not isinstance(table, Table):
        raise TableError("discretize_table expects a Table")
    return Discretizer(**options).label(table).table
