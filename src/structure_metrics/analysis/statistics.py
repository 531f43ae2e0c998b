"""Descriptive statistics over metric distributions.

Thin wrappers around :mod:`statistics` that return ``0.0`` instead of raising
on inputs too small to describe, and reject ``None`` outright.

Examples:
    >>> mean([])
    0.0
    >>> median([3, 1, 2, 4])
    2.5
    >>> stdev_sample([7])
    0.0
"""

from __future__ import annotations

import statistics
from collections.abc import Iterable

from ..core.exceptions import require

Number = int | float


def _values(values: Iterable[Number] | None) -> list[float]:
    return [float(v) for v in require(values, "values")]


def mean(values: Iterable[Number]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    data = _values(values)
    if not data:
        return 0.0
    return float(statistics.fmean(data))


def median(values: Iterable[Number]) -> float:
    """Median of a sorted copy; even lengths average the two middle values."""
    data = _values(values)
    if not data:
        return 0.0
    return float(statistics.median(data))


def stdev_population(values: Iterable[Number]) -> float:
    """Population standard deviation, sqrt(sum((x - mean)^2) / n)."""
    data = _values(values)
    if not data:
        return 0.0
    return float(statistics.pstdev(data))


def stdev_sample(values: Iterable[Number]) -> float:
    """Sample standard deviation, sqrt(sum((x - mean)^2) / (n - 1)).

    Returns 0.0 for fewer than two values.
    """
    data = _values(values)
    if len(data) < 2:
        return 0.0
    return float(statistics.stdev(data))
