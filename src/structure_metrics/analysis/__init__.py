"""Structural code analysis module.

This module computes software-structure metrics from the language-agnostic
IR in :mod:`structure_metrics.ir`.

Key Components:
    - MetricsEngine: Orchestrates every calculator and returns a MetricsResult
    - MethodMetrics / TypeMetrics / NamespaceMetrics: Per-entity metrics
    - NamespaceCouplingMetrics / TypeCouplingMetrics: Coupling ratios
    - DependencyMetrics: DEP, I-DEP and dependency cycles
    - SummaryMetrics: Solution-wide distributions
    - NamedDigraph: Directed graph over named nodes (degrees, SCCs)

Example:
    engine = MetricsEngine()
    result = engine.compute(model)

    for cycle in result.dependencies.cycles:
        print(cycle.scope.value, " -> ".join(cycle.nodes))

    worst = max(result.types, key=lambda t: t.wmc)
    print(worst.type_full_name, worst.wmc)
"""

from .collectors import (
    CouplingMetricsCalculator,
    DependencyMetricsCalculator,
    MethodMetricsCalculator,
    NamespaceMetricsCalculator,
    SummaryMetricsAggregator,
    TypeMetricsCalculator,
)
from .engine import MetricsEngine
from .graph import NamedDigraph
from .metrics import (
    CycleScope,
    DependencyCycle,
    DependencyMetrics,
    MethodMetrics,
    MetricsResult,
    NamespaceCouplingMetrics,
    NamespaceMetrics,
    SummaryMetrics,
    TypeCouplingMetrics,
    TypeMetrics,
)

__all__ = [
    "MetricsEngine",
    "MethodMetricsCalculator",
    "TypeMetricsCalculator",
    "NamespaceMetricsCalculator",
    "CouplingMetricsCalculator",
    "DependencyMetricsCalculator",
    "SummaryMetricsAggregator",
    "NamedDigraph",
    "MethodMetrics",
    "TypeMetrics",
    "NamespaceMetrics",
    "NamespaceCouplingMetrics",
    "TypeCouplingMetrics",
    "CycleScope",
    "DependencyCycle",
    "DependencyMetrics",
    "SummaryMetrics",
    "MetricsResult",
]
