"""
Configuration object for the variance-minimising partitioner.

Responsibilities
  - Hold the thresholds one partitioning run is evaluated against.
  - Derive the data-dependent thresholds (minimum bin size, minimum rise)
    once, globally, from the whole target column.

Usage Context
  - Built by the Discretizer and passed to SplitFinder and PartitionDriver.
"""
# 说明：方差最小化切分器的配置对象。
# 职责：
# - PartitionConfig：封装一次切分运行所需的全部阈值（目标列、最小分箱大小、最小跨度、惩罚系数、epsilon）
# - from_values：在任何搜索开始前，基于整列目标值一次性推导 min_bin_size = floor(sqrt(n)) 与 min_rise = cohen * sd
# - validate/to_dict：规范配置校验与 JSON 友好转换流程

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from bandlib.core.data.statistics import TINY, RunningStats
from bandlib.core.data.table import Column
from bandlib.core.utils.config import get_config
from bandlib.core.utils.param_validation import ensure, ensure_type


@dataclass(frozen=True)
class PartitionConfig:
    """
    Thresholds for one partitioning run.

    - Configuration
      - target_column: Column holding the values being discretized.
      - min_bin_size: Minimum number of rows on each side of an accepted cut.
      - min_rise: Each side of an accepted cut must span strictly more than this.
      - margin: Multiplier applied to every candidate cost before comparing it
        with the unsplit baseline.
      - epsilon: Tiny offset used in variance and weighting denominators.
    """
    # 切分阈值配置（不可变），替代全局可变状态，显式传入搜索与驱动组件

    target_column: Column
    min_bin_size: int
    min_rise: float
    margin: float = 1.05
    epsilon: float = TINY

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> "PartitionConfig":
        # 校验各阈值类型与取值范围
        ensure_type(self.target_column, (int, str), label="target_column")
        ensure_type(self.min_bin_size, (int,), label="min_bin_size")
        ensure(self.min_bin_size >= 0, "min_bin_size must be non-negative")
        ensure_type(self.min_rise, (int, float), label="min_rise")
        ensure(self.min_rise >= 0, "min_rise must be non-negative")
        ensure_type(self.margin, (int, float), label="margin")
        ensure(self.margin > 0, "margin must be positive")
        ensure(self.epsilon >= 0, "epsilon must be non-negative")
        return self

    @classmethod
    def from_values(
        cls,
        values: Sequence[float],
        *,
        target_column: Column = -1,
        cohen: Optional[float] = None,
        margin: Optional[float] = None,
        min_bin_size: Optional[int] = None,
        epsilon: Optional[float] = None,
    ) -> "PartitionConfig":
        """Derive ``min_bin_size`` and ``min_rise`` from the whole target column."""
        # 未显式给出的参数回退到运行时配置中的库级默认值
        runtime = get_config()
        cohen = runtime.cohen if cohen is None else cohen
        margin = runtime.margin if margin is None else margin
        epsilon = runtime.epsilon if epsilon is None else epsilon
        ensure(cohen >= 0, "cohen must be non-negative")

        if min_bin_size is None:
            min_bin_size = int(math.floor(math.sqrt(len(values))))
        total = RunningStats.from_values(values, epsilon=epsilon)
        return cls(
            target_column=target_column,
            min_bin_size=min_bin_size,
            min_rise=cohen * total.stddev,
            margin=margin,
            epsilon=epsilon,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export to a JSON-friendly dictionary."""
        return {
            "target_column": self.target_column,
            "min_bin_size": self.min_bin_size,
            "min_rise": self.min_rise,
            "margin": self.margin,
            "epsilon": self.epsilon,
        }
