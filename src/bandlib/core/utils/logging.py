"""
Lightweight logging helpers shared by the library and the command line tools.
"""
# 说明：轻量级日志工具，提供统一的 logger 获取入口与默认格式。
# 职责：
# - configure_logging(...)：初始化 logging 基本配置（输出到 stderr，避免污染 stdout 上的表格数据）
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 日志级别优先级：显式参数 level > 环境变量 BANDLIB_LOG_LEVEL > 运行时配置的 log_level
# - 无法识别的级别名回退到 INFO 并记录一条 warning（模块导入时即会调用，不能抛错）

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .config import get_config

LOG_FORMAT = "[%(levelname)s] %(name)s %(asctime)s | %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LEVEL = "INFO"


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别并设置格式；stdout 保留给数据输出
    requested = str(level or os.environ.get("BANDLIB_LOG_LEVEL") or get_config().log_level or DEFAULT_LEVEL).upper()
    log_level = requested if requested in LOG_LEVELS else DEFAULT_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    logging.getLogger("bandlib").setLevel(log_level)
    if log_level != requested:
        logging.getLogger("bandlib").warning(
            "unknown log level %r, falling back to %s", requested, DEFAULT_LEVEL
        )


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若根 logger 尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        configure_logging()
    return logger
