"""
Top-down partitioning of a sorted column into labelled bands.

The driver repeatedly asks the SplitFinder for the best cut of the rows not
yet assigned, ``[lo, n)``. Each accepted cut finalizes ``[lo, cut]`` as one
band and the search continues above it; when no further cut is admissible
the remaining rows form the last (uppermost) band. The resulting partitions
are contiguous, disjoint and cover ``[0, n - 1]`` exactly.
"""
# 说明：自顶向下的切分驱动器，把已排序列划分为若干带标签的区间（band）。
# 职责：
# - PartitionDriver.cuts：循环调用 SplitFinder，每找到一个切分就固定 [lo, cut]，继续处理上半部分
# - band_label：根据区间两端行的原始文本生成标签（"..hi"、"lo.."、"lo..hi"，首尾同时成立时为 ".."）
# - PartitionDriver.label：为每个区间写入标签并展开为逐行标签列表
# - trace：可选的诊断回调，每一步输出嵌套前缀与当前下界的目标值，不参与控制流
# 约定：迭代实现；trace 前缀长度对应嵌套深度

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from bandlib.core.utils.logging import get_logger
from bandlib.core.utils.param_validation import ensure

from .config import PartitionConfig
from .split_finder import SplitFinder

logger = get_logger(__name__)

TraceSink = Callable[[str], None]
# 诊断输出回调：接收一行文本

TRACE_ROOT = "|.. "
TRACE_STEP = "|.."


@dataclass
class Partition:
    """Inclusive row range ``[lo, hi]`` of the sorted table plus its band label."""

    lo: int
    hi: int
    label: Optional[str] = None

    @property
    def size(self) -> int:
        return self.hi - self.lo + 1

    def indices(self) -> range:
        return range(self.lo, self.hi + 1)

    def to_dict(self) -> Dict[str, Any]:
        return {"lo": self.lo, "hi": self.hi, "size": self.size, "label": self.label}


def band_label(texts: Sequence[str], partition: Partition, n: int) -> str:
    """Label a partition from the target text at its two boundary rows."""
    first = partition.lo == 0
    last = partition.hi == n - 1
    if first and last:
        return ".."
    if first:
        return f"..{texts[partition.hi]}"
    if last:
        return f"{texts[partition.lo]}.."
    return f"{texts[partition.lo]}..{texts[partition.hi]}"


class PartitionDriver:
    """
    Drive the split search over the whole sorted column.

    - Configuration
      - values: Target values sorted ascending.
      - config: Thresholds shared by every search step.
      - trace: Optional sink receiving one line per step.
      - texts: Optional display text per row for the trace (defaults to the values).

    - Behavior
      - cuts() returns the partitions in ascending order; n == 0 yields none.
      - label() assigns band labels and returns one label per row.
    """
    # 切分驱动器：状态机 {搜索中, 找到切分 -> 继续上半部分, 无切分 -> 终止}

    def __init__(
        self,
        values: Sequence[float],
        config: PartitionConfig,
        *,
        trace: Optional[TraceSink] = None,
        texts: Optional[Sequence[str]] = None,
    ):
        self.finder = SplitFinder(values, config)
        self.config = config
        self.trace = trace
        self._n = len(self.finder)
        if texts is not None:
            ensure(len(texts) == self._n, "texts must have one entry per value")
        self._texts = texts
        self._partitions: Optional[List[Partition]] = None

    def _display(self, index: int) -> str:
        if self._texts is not None:
            return str(self._texts[index])
        return repr(self.finder.value(index))

    def cuts(self) -> List[Partition]:
        """Partition ``[0, n - 1]`` into bands (cached after the first call)."""
        if self._partitions is not None:
            return self._partitions

        n = self._n
        partitions: List[Partition] = []
        lo, hi = 0, n - 1
        prefix = TRACE_ROOT
        while lo <= hi:
            if self.trace is not None:
                self.trace(prefix + self._display(lo))
            cut = None
            if hi - lo + 1 > self.config.min_bin_size:
                cut = self.finder.argmin(lo, n)
            if cut is None:
                partitions.append(Partition(lo, hi))
                break
            partitions.append(Partition(lo, cut))
            lo = cut + 1
            prefix += TRACE_STEP

        logger.debug("partitioned %d rows into %d bands", n, len(partitions))
        self._partitions = partitions
        return partitions

    def label(self, texts: Sequence[str]) -> List[str]:
        """Assign each partition its band label; return the label of every row."""
        ensure(len(texts) == self._n, "texts must have one entry per row")
        labels: List[str] = [""] * self._n
        for partition in self.cuts():
            partition.label = band_label(texts, partition, self._n)
            for index in partition.indices():
                labels[index] = partition.label
        return labels


def cuts(values: Sequence[float], config: PartitionConfig, *, trace: Optional[TraceSink] = None) -> List[Partition]:
    # 便捷函数：对整列执行一次完整切分
    return PartitionDriver(values, config, trace=trace).cuts()
