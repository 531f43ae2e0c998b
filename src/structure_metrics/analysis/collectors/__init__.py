"""Metric calculators.

Each calculator reads the IR (and, for the summary, the outputs of other
calculators) and returns immutable metric snapshots.

Example:
    from structure_metrics.analysis.collectors import TypeMetricsCalculator

    for metrics in TypeMetricsCalculator().compute_all(model):
        print(metrics.type_full_name, metrics.wmc, metrics.lcom3)
"""

from .coupling import (
    CouplingMetricsCalculator,
    compute_abstractness,
    compute_instability,
    normalized_distance,
)
from .dependencies import (
    DependencyMetricsCalculator,
    count_distinct_dependencies,
    count_internal_dependencies,
)
from .method_metrics import (
    MethodMetricsCalculator,
    clamp_non_negative,
    cyclomatic_complexity,
)
from .namespace_metrics import NamespaceMetricsCalculator, count_abstract_classes
from .summary import SummaryMetricsAggregator
from .type_metrics import TypeMetricsCalculator, build_type_graph, lcom3

__all__ = [
    "MethodMetricsCalculator",
    "TypeMetricsCalculator",
    "NamespaceMetricsCalculator",
    "CouplingMetricsCalculator",
    "DependencyMetricsCalculator",
    "SummaryMetricsAggregator",
    "build_type_graph",
    "clamp_non_negative",
    "compute_abstractness",
    "compute_instability",
    "count_abstract_classes",
    "count_distinct_dependencies",
    "count_internal_dependencies",
    "cyclomatic_complexity",
    "lcom3",
    "normalized_distance",
]
