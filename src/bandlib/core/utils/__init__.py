"""Shared utility helpers used across the library."""

from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .serialization import (
    serialize_to_json,
)
from .logging import (
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    ParamValidationError,
)

__all__ = [
    "RuntimeConfig",
    "get_config",
    "configure",
    "serialize_to_json",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "ParamValidationError",
]
