"""
Serialization helpers for band reports and configuration.

Provides JSON output with an optional version wrapper to ease backwards
compatibility of written reports.
"""
# 说明：序列化辅助工具，统一 JSON 编码行为并内置简单的版本封装。
# 职责：
# - serialize_to_json：提供带可选版本包装（{"version", "payload"}）的 JSON 序列化接口
# - 内部 _prepare：支持 dataclass、实现 to_dict 的对象以及 numpy 标量的统一前处理

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Optional

import numpy as np


def _prepare(obj: Any) -> Any:
    # 将实现了 to_dict 的对象或 dataclass 转换为可 JSON 序列化的基础结构（to_dict 优先）
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, np.generic):
        return obj.item()   # numpy 标量 -> Python 原生数值
    return obj


def serialize_to_json(obj: Any, *, version: Optional[str] = None, indent: Optional[int] = None) -> str:
    # 将对象序列化为 JSON 字符串，支持可选 version 包装
    payload = _prepare(obj)
    if version is not None:
        payload = {"version": version, "payload": payload}
    return json.dumps(payload, default=_prepare, ensure_ascii=False, indent=indent)
