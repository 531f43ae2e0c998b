"""Solution-wide summary built from already computed type and method metrics."""

from __future__ import annotations

from collections.abc import Sequence

from ...core.exceptions import require
from ...ir.models import CodeModel
from ..metrics import MethodMetrics, SummaryMetrics, TypeMetrics
from ..statistics import mean, median, stdev_population


class SummaryMetricsAggregator:
    """Aggregates :class:`SummaryMetrics`.

    Only namespace names are read from the model; every other figure comes
    from the type and method metrics, so the aggregator must run after those
    calculators.
    """

    def compute(
        self,
        model: CodeModel,
        types: Sequence[TypeMetrics],
        methods: Sequence[MethodMetrics],
    ) -> SummaryMetrics:
        """Compute the summary.

        Args:
            model: Code model the metrics were computed from
            types: Per-type metrics
            methods: Per-method metrics; its length is the authoritative
                method count, with the sum of per-type NOM as fallback when
                it is empty

        Returns:
            SummaryMetrics

        Raises:
            InvalidArgumentError: If any argument is None
        """
        require(model, "model")
        require(types, "types")
        require(methods, "methods")

        total_namespaces = len(model.codebase.namespace_names())
        total_types = len(types)

        sloc = [t.sloc for t in types]
        nom = [t.nom for t in types]
        wmc = [t.wmc for t in types]

        total_methods = len(methods) or sum(nom)

        return SummaryMetrics(
            total_namespaces=total_namespaces,
            total_types=total_types,
            mean_types_per_namespace=(
                total_types / total_namespaces if total_namespaces > 0 else 0.0
            ),
            total_sloc=sum(sloc),
            avg_sloc_per_type=mean(sloc),
            median_sloc_per_type=median(sloc),
            stdev_sloc_per_type=stdev_population(sloc),
            total_methods=total_methods,
            avg_methods_per_type=mean(nom),
            median_methods_per_type=median(nom),
            stdev_methods_per_type=stdev_population(nom),
            total_complexity=sum(wmc),
            avg_complexity_per_type=mean(wmc),
            median_complexity_per_type=median(wmc),
            stdev_complexity_per_type=stdev_population(wmc),
        )
