"""Typed exception hierarchy for structure-metrics.

Hierarchy
---------
StructureMetricsError (base)
├── InvalidArgumentError   - a required input (model, collection) is None
├── ConfigError            - engine settings are invalid or unreadable
└── ModelError             - the IR itself is structurally invalid

Malformed edges inside an otherwise valid model (unknown targets, self loops,
duplicates) are never an error: calculators filter them out.
"""

from typing import Any


class StructureMetricsError(Exception):
    """Base exception for structure-metrics."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class InvalidArgumentError(StructureMetricsError, ValueError):
    """A required argument was None.

    Also a ``ValueError`` so generic callers can catch it without importing
    this module.
    """

    pass


class ConfigError(StructureMetricsError):
    """Configuration / validation errors."""

    pass


class ModelError(StructureMetricsError):
    """The code model violates a structural invariant."""

    pass


def require(value: Any, name: str) -> Any:
    """Return ``value`` unchanged, raising if it is None.

    Args:
        value: Argument to check
        name: Parameter name reported in the error

    Returns:
        The same value

    Raises:
        InvalidArgumentError: If ``value`` is None
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None", {"argument": name})
    return value
