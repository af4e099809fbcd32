"""
Numerical utilities for basic column statistics.

Responsibilities:
    * Batch reference statistics (count, Kahan summation, mean, variance)
    * An online accumulator supporting both insertion and removal, used by
      the split search to slide a cut point across a sorted column
"""
# 说明：用于列统计的数值工具。
# 职责：
# - 提供批量统计：计数、求和（含 Kahan 补偿以提升数值稳定性）、均值、方差，作为在线算法的对照基准
# - RunningStats：支持插入与删除的在线统计（Welford 及其逆运算），供切分搜索滑动切分点时使用

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Iterable, List


Number = float
# 简单别名：当前模块中将数值视为浮点

TINY = 1e-32
# 方差分母中的微小偏移量，避免 count <= 1 时除零


def _extract(values: Iterable[Any]) -> List[Number]:
    # 将任意可迭代 values 规范化为 float 列表
    return [float(value) for value in values]


def count(values: Iterable[Any]) -> int:
    """Return the number of items."""
    return sum(1 for _ in values)


def summation(values: Iterable[Any]) -> float:
    """Return the sum of values with Kahan compensation."""
    # 求和（Kahan 补偿）：降低浮点累加误差
    extracted = _extract(values)
    total = 0.0
    compensation = 0.0
    for value in extracted:
        y = value - compensation
        t = total + y
        compensation = (t - total) - y
        total = t
    return total


def mean(values: Iterable[Any]) -> float:
    # 均值：对抽取后的数组求和/长度；空输入时报错
    extracted = _extract(values)
    if not extracted:
        raise ValueError("mean of empty input")
    return summation(extracted) / len(extracted)


def variance(values: Iterable[Any], *, ddof: int = 1) -> float:
    # 方差：默认无偏估计（ddof=1 样本方差）。当样本数 ≤ ddof 时抛错。
    extracted = _extract(values)
    n = len(extracted)
    if n <= ddof:
        raise ValueError("not enough values to compute variance")
    mu = mean(extracted)
    accum = sum((x - mu) ** 2 for x in extracted)
    return accum / (n - ddof)


@dataclass
class RunningStats:
    """
    Online mean/variance accumulator using Welford's method, with removal.

    - Behavior
      - insert() applies the Welford update and widens min/max.
      - remove() applies the inverse update; it is a no-op once count <= 1.
      - variance is M2 / (count - 1 + epsilon) and 0.0 below two samples.

    - Usage Notes
      - min/max only ever widen. remove() does not re-tighten them, so after
        removing the current extreme they describe the values ever held,
        not the values still held. The split search relies on this as an
        accepted approximation of each side's range.
    """
    # 在线均值/方差（Welford）：单次遍历、数值稳定；额外支持逆向删除，用于滑动窗口式的切分搜索

    count: int = 0
    mean: float = 0.0
    _m2: float = 0.0  # 累积二阶矩（用于计算方差）
    min: float = math.inf
    max: float = -math.inf
    epsilon: float = TINY

    def insert(self, value: float) -> None:
        # 逐点插入：Welford 递推公式，并更新上下界
        self.count += 1
        delta = value - self.mean
        self.mean += delta / self.count
        self._m2 += delta * (value - self.mean)
        if value > self.max:
            self.max = value
        if value < self.min:
            self.min = value

    update = insert

    def remove(self, value: float) -> None:
        # 逐点删除：Welford 逆推；count <= 1 时不再缩减（空累积器无定义）
        # 注意：min/max 不回收，见类文档
        if self.count <= 1:
            return
        self.count -= 1
        delta = value - self.mean
        self.mean -= delta / self.count
        self._m2 -= delta * (value - self.mean)

    @property
    def m2(self) -> float:
        return self._m2

    @property
    def variance(self) -> float:
        # 样本方差（带 epsilon 的 ddof=1）；当样本不足 2 个返回 0.0
        if self.count < 2:
            return 0.0
        return self._m2 / (self.count - 1 + self.epsilon)

    @property
    def stddev(self) -> float:
        # 标准差：方差开平方；删除操作的舍入误差可能让 M2 略小于 0，这里截断
        return math.sqrt(max(self.variance, 0.0))

    std = stddev

    @property
    def spread(self) -> float:
        """Observed range ``max - min`` (0.0 when nothing was inserted)."""
        if self.count == 0:
            return 0.0
        return self.max - self.min

    def copy(self) -> "RunningStats":
        return replace(self)

    @classmethod
    def from_values(cls, values: Iterable[float], *, epsilon: float = TINY) -> "RunningStats":
        stats = cls(epsilon=epsilon)
        for value in values:
            stats.insert(float(value))
        return stats

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "mean": self.mean,
            "stddev": self.stddev,
            "min": self.min if self.count else None,
            "max": self.max if self.count else None,
        }
