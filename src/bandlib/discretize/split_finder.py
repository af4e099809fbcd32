"""
Best single cut of a sorted numeric range by blended standard deviation.

Given the half-open range ``[lo, hi)`` of a column sorted ascending, the
search slides a cut point from ``lo`` to ``hi - 1``. Two accumulators track
the rows below and above the cut: every step moves one value from ``above``
into ``below``. The cost of a cut is the size-weighted average of the two
standard deviations, multiplied by a margin. A cut is only admissible when
both sides hold at least ``min_bin_size`` rows and span more than
``min_rise``; among admissible cuts the cheapest one wins, provided it also
beats the standard deviation of the unsplit range.
"""
# 说明：在已排序数值区间上寻找最佳单次切分点（按加权标准差最小化）。
# 职责：
# - blended_stddev：计算上下两部分按样本量加权的标准差
# - SplitFinder.search / argmin：滑动切分点，检查最小分箱大小与最小跨度约束，返回代价最低的切分
# 约定：
# - 返回的 cut 为“包含式”下标：下半部分为 [lo, cut]，上半部分从 cut + 1 开始；None 表示不切分
# - 代价相同时保留最先（最左）找到的候选（严格小于比较）

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from bandlib.core.data.statistics import RunningStats
from bandlib.core.utils.logging import get_logger

from .config import PartitionConfig

logger = get_logger(__name__)


def blended_stddev(below: RunningStats, above: RunningStats, epsilon: float) -> float:
    """Size-weighted mean of the two sides' standard deviations."""
    total = below.count + above.count + epsilon
    return (below.count / total) * below.stddev + (above.count / total) * above.stddev


@dataclass(frozen=True)
class SplitCandidate:
    """Winning cut of one search: inclusive ``cut`` plus its cost and the unsplit baseline."""

    cut: int
    cost: float
    baseline: float

    @property
    def upper_start(self) -> int:
        return self.cut + 1


class SplitFinder:
    """Searches cut points over a column that is already sorted ascending."""
    # 切分搜索器：持有排序后的目标值与切分配置，可对任意子区间重复调用

    def __init__(self, values: Sequence[float], config: PartitionConfig):
        # 转为 Python float 列表，逐元素访问比 numpy 标量快
        self._values: List[float] = np.asarray(values, dtype=np.float64).tolist()
        self.config = config

    def __len__(self) -> int:
        return len(self._values)

    def value(self, index: int) -> float:
        return self._values[index]

    def admissible(self, below: RunningStats, above: RunningStats) -> bool:
        # 两侧都必须足够大（样本数）且足够宽（跨度）
        cfg = self.config
        if below.count < cfg.min_bin_size or above.count < cfg.min_bin_size:
            return False
        return below.spread > cfg.min_rise and above.spread > cfg.min_rise

    def search(self, lo: int, hi: int) -> Optional[SplitCandidate]:
        """Return the best admissible cut of ``[lo, hi)``, or None when there is none."""
        cfg = self.config
        if hi - lo <= 2 * cfg.min_bin_size:
            logger.debug("range [%d, %d) too small for two bins of %d", lo, hi, cfg.min_bin_size)
            return None

        values = self._values
        above = RunningStats.from_values(values[lo:hi], epsilon=cfg.epsilon)
        below = RunningStats(epsilon=cfg.epsilon)
        baseline = above.stddev
        best_cost = baseline
        best_cut: Optional[int] = None

        # split == hi - 1 would leave the upper side empty; remove() cannot
        # take the last value out, so that step is never evaluated
        for split in range(lo, hi - 1):
            value = values[split]
            below.insert(value)
            above.remove(value)
            if not self.admissible(below, above):
                continue
            cost = blended_stddev(below, above, cfg.epsilon) * cfg.margin
            if cost < best_cost:
                best_cut, best_cost = split, cost

        if best_cut is None:
            logger.debug("no admissible cut in [%d, %d)", lo, hi)
            return None
        logger.debug("cut [%d, %d) at %d (cost %.6g, baseline %.6g)", lo, hi, best_cut, best_cost, baseline)
        return SplitCandidate(cut=best_cut, cost=best_cost, baseline=baseline)

    def argmin(self, lo: int, hi: int) -> Optional[int]:
        """Inclusive index of the best cut of ``[lo, hi)``, or None for "no split"."""
        candidate = self.search(lo, hi)
        return None if candidate is None else candidate.cut


def argmin(values: Sequence[float], lo: int, hi: int, config: PartitionConfig) -> Optional[int]:
    # 便捷函数：一次性构造 SplitFinder 并搜索
    return SplitFinder(values, config).argmin(lo, hi)
