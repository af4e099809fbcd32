"""
Runtime configuration utilities.

Centralises the library's tunable defaults (effect size, split margin,
label column name, ...) and exposes helpers to read them from environment
variables or update them at runtime.
"""
# 说明：运行时配置管理工具，集中管理库内可调的默认参数，并支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：封装日志等级、Cohen 效应量阈值、切分惩罚系数、数值 epsilon、标签列名、排序策略等配置项
# - load_from_env(...)：按统一前缀（如 BANDLIB_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 单例，作为库级默认配置入口
# - configure(...)：通过关键字参数便捷更新全局配置并返回更新后的实例
# 约定：
# - COHEN / MARGIN / EPSILON 环境变量会被解析为浮点数，无法解析时抛出 ParamValidationError
# - 未知配置键在 update(...) 中会触发 AttributeError

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict

from .param_validation import ParamValidationError


@dataclass
class RuntimeConfig:
    log_level: str = field(default_factory=lambda: os.environ.get("BANDLIB_LOG_LEVEL", "INFO"))
    cohen: float = 0.3
    margin: float = 1.05
    epsilon: float = 1e-32
    label_column: str = "!klass"
    sort_strategy: str = "merge"
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "BANDLIB_") -> None:
        # 从带有指定前缀的环境变量中加载配置，并进行类型转换后写回实例字段
        for key in ("LOG_LEVEL", "COHEN", "MARGIN", "EPSILON", "LABEL_COLUMN", "SORT_STRATEGY"):
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue    # 未设置对应环境变量时保持当前配置值不变
            value: Any = os.environ[env_key]
            if key in ("COHEN", "MARGIN", "EPSILON"):
                try:
                    value = float(value)    # 数值型阈值统一使用浮点
                except ValueError as exc:
                    raise ParamValidationError(f"{env_key} must be a number, got {value!r}") from exc
            setattr(self, key.lower(), value)


# 全局配置单例，用作库内默认的运行时配置
_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    # 返回全局 RuntimeConfig 实例，供调用方读取或在本进程内共享配置
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例（便于链式调用或调试）
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
