"""Core building blocks shared by every layer."""

from .exceptions import (
    ConfigError,
    InvalidArgumentError,
    ModelError,
    StructureMetricsError,
    require,
)

__all__ = [
    "StructureMetricsError",
    "InvalidArgumentError",
    "ConfigError",
    "ModelError",
    "require",
]
