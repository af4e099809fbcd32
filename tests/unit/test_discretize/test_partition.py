"""
Unit tests for the partition driver and band labels.
"""
# 说明：PartitionDriver（自顶向下切分驱动器）与 band_label 的单元测试。
# 覆盖：
# - 1..10：两个区间 [0,4] / [5,9]，标签 "..5" / "6.."
# - 两簇数据：在簇间空隙切分
# - 常数列与过小数据集：单一区间，标签为两端开放的 ".."
# - 空输入、诊断 trace 输出、结果缓存、参数校验与 PartitionConfig 校验

import pytest

from bandlib.core.utils import ParamValidationError
from bandlib.discretize import Partition, PartitionConfig, PartitionDriver, band_label, cuts

ONE_TO_TEN = [float(v) for v in range(1, 11)]
TEXTS = [str(v) for v in range(1, 11)]


def _spans(partitions):
    return [(p.lo, p.hi) for p in partitions]


def test_one_to_ten_splits_into_two_bands() -> None:
    config = PartitionConfig.from_values(ONE_TO_TEN)
    driver = PartitionDriver(ONE_TO_TEN, config)
    partitions = driver.cuts()
    assert _spans(partitions) == [(0, 4), (5, 9)]
    assert sum(p.size for p in partitions) == 10

    labels = driver.label(TEXTS)
    assert labels == ["..5"] * 5 + ["6.."] * 5
    assert [p.label for p in partitions] == ["..5", "6.."]


def test_two_clusters_are_separated_at_the_gap() -> None:
    values = [1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 50.0, 51.0, 52.0, 53.0]
    texts = ["1", "1", "1", "1", "2", "2", "50", "51", "52", "53"]
    config = PartitionConfig.from_values(values, cohen=0.0)
    driver = PartitionDriver(values, config)
    assert _spans(driver.cuts()) == [(0, 5), (6, 9)]
    assert driver.label(texts) == ["..2"] * 6 + ["50.."] * 4


def test_near_constant_column_yields_one_band() -> None:
    values = [7.0] * 24 + [7.000001]
    config = PartitionConfig.from_values(values)
    partitions = cuts(values, config)
    assert _spans(partitions) == [(0, 24)]


def test_tiny_dataset_yields_one_open_band() -> None:
    values = [1.0, 2.0, 3.0, 4.0]
    config = PartitionConfig.from_values(values)
    assert config.min_bin_size == 2
    driver = PartitionDriver(values, config)
    assert driver.label(["1", "2", "3", "4"]) == [".."] * 4


def test_empty_input_has_no_partitions() -> None:
    config = PartitionConfig.from_values([])
    driver = PartitionDriver([], config)
    assert driver.cuts() == []
    assert driver.label([]) == []


def test_single_row_is_one_band() -> None:
    config = PartitionConfig.from_values([3.0])
    assert _spans(cuts([3.0], config)) == [(0, 0)]


def test_interior_bands_use_both_boundaries() -> None:
    values = [float(v) for v in range(1, 31)] + [float(v) for v in range(100, 131)] + [float(v) for v in range(500, 531)]
    config = PartitionConfig(target_column=-1, min_bin_size=5, min_rise=1.0)
    driver = PartitionDriver(values, config)
    partitions = driver.cuts()
    assert len(partitions) >= 3
    labels = driver.label([str(int(v)) for v in values])
    assert labels[0].startswith("..")
    assert labels[-1].endswith("..")
    interior = partitions[1]
    assert interior.label == f"{int(values[interior.lo])}..{int(values[interior.hi])}"


def test_trace_reports_each_step_with_nesting_prefix() -> None:
    lines = []
    config = PartitionConfig.from_values(ONE_TO_TEN)
    PartitionDriver(ONE_TO_TEN, config, trace=lines.append, texts=TEXTS).cuts()
    assert lines == ["|.. 1", "|.. |..6"]


def test_trace_defaults_to_value_repr() -> None:
    lines = []
    config = PartitionConfig.from_values(ONE_TO_TEN)
    cuts(ONE_TO_TEN, config, trace=lines.append)
    assert lines[0] == "|.. 1.0"


def test_cuts_are_cached() -> None:
    driver = PartitionDriver(ONE_TO_TEN, PartitionConfig.from_values(ONE_TO_TEN))
    assert driver.cuts() is driver.cuts()


def test_label_requires_one_text_per_row() -> None:
    driver = PartitionDriver(ONE_TO_TEN, PartitionConfig.from_values(ONE_TO_TEN))
    with pytest.raises(ParamValidationError):
        driver.label(TEXTS[:-1])


@pytest.mark.parametrize(
    "partition, expected",
    [
        (Partition(0, 9), ".."),
        (Partition(0, 4), "..e"),
        (Partition(5, 9), "f.."),
        (Partition(2, 6), "c..g"),
    ],
)
def test_band_label_forms(partition: Partition, expected: str) -> None:
    texts = list("abcdefghij")
    assert band_label(texts, partition, 10) == expected


def test_partition_config_validation() -> None:
    with pytest.raises(ParamValidationError):
        PartitionConfig(target_column=-1, min_bin_size=-1, min_rise=0.0)
    with pytest.raises(ParamValidationError):
        PartitionConfig(target_column=-1, min_bin_size=2, min_rise=0.0, margin=0.0)
    with pytest.raises(ParamValidationError):
        PartitionConfig(target_column=1.5, min_bin_size=2, min_rise=0.0)


def test_partition_config_from_values_overrides() -> None:
    config = PartitionConfig.from_values(ONE_TO_TEN, min_bin_size=2, cohen=0.0, margin=1.0)
    assert config.min_bin_size == 2
    assert config.min_rise == 0.0
    assert config.margin == 1.0
    assert config.to_dict()["target_column"] == -1
