"""
Unit tests for serialization helpers.
"""
# 说明：JSON 序列化与版本封装的单元测试。

import json
from dataclasses import dataclass

import numpy as np

from bandlib.core.utils import serialize_to_json


@dataclass
class _Point:
    x: float
    y: float


class _Report:
    def to_dict(self):
        return {"bands": [{"mean": np.float64(1.5)}]}


def test_serialize_dataclass_with_version() -> None:
    data = json.loads(serialize_to_json(_Point(1.0, 2.0), version="1"))
    assert data == {"version": "1", "payload": {"x": 1.0, "y": 2.0}}


def test_serialize_numpy_scalars() -> None:
    text = serialize_to_json({"mean": np.float64(2.5), "count": np.int64(3)})
    assert json.loads(text) == {"mean": 2.5, "count": 3}


def test_to_dict_takes_precedence_and_nested_scalars_convert() -> None:
    data = json.loads(serialize_to_json(_Report(), indent=2))
    assert data == {"bands": [{"mean": 1.5}]}
