"""Coupling metric calculators for dependency analysis.

Namespace coupling follows Robert C. Martin's package metrics:

- Efferent coupling (Ce): other namespaces this namespace depends on.
  Higher Ce indicates fragility - changes elsewhere can break it.
- Afferent coupling (Ca): namespaces that depend on this one. Higher Ca
  indicates responsibility - changes here ripple outwards.
- Instability I = Ce / (Ca + Ce), abstractness A and the normalized distance
  from the main sequence D = |A + I - 1|.

Type coupling reports DEP (all distinct targets), I-DEP / FAN-OUT (distinct
targets that are model types) and FAN-IN (model types depending on it).
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ...core.exceptions import require
from ...ir.models import CodeModel, Type, TypeKind
from ..graph import NamedDigraph
from ..metrics import NamespaceCouplingMetrics, TypeCouplingMetrics
from .type_metrics import distinct_targets


def compute_instability(ca: int, ce: int) -> float:
    """Calculate instability I = Ce / (Ca + Ce).

    Args:
        ca: Afferent coupling
        ce: Efferent coupling

    Returns:
        Instability in [0, 1]; 0.0 for an isolated namespace

    Examples:
        >>> compute_instability(0, 3)
        1.0
        >>> compute_instability(3, 0)
        0.0
        >>> compute_instability(0, 0)
        0.0
    """
    total = ca + ce
    return ce / total if total > 0 else 0.0


def compute_abstractness(types: Iterable[Type]) -> float:
    """Ratio of abstract or interface types; 0.0 without types.

    Examples:
        >>> compute_abstractness([])
        0.0
    """
    types = list(types)
    if not types:
        return 0.0
    abstract = sum(
        1 for t in types if t.is_abstract or t.kind == TypeKind.INTERFACE
    )
    return abstract / len(types)


def normalized_distance(abstractness: float, instability: float) -> float:
    """Distance from the main sequence, D = |A + I - 1|.

    Examples:
        >>> normalized_distance(0.0, 1.0)
        0.0
        >>> normalized_distance(0.0, 0.0)
        1.0
    """
    return abs(abstractness + instability - 1.0)


class CouplingMetricsCalculator:
    """Computes namespace and type coupling.

    Each call derives its own graphs from the model; nothing is shared with
    other calculators or kept between calls.
    """

    def compute_namespace_coupling(
        self, model: CodeModel
    ) -> list[NamespaceCouplingMetrics]:
        """Compute Ca, Ce, I, A and D for every logical namespace.

        Args:
            model: Code model

        Returns:
            One entry per distinct namespace name, in first-appearance order
        """
        require(model, "model")

        types_by_namespace = model.codebase.types_by_namespace()
        graph = NamedDigraph.from_adjacency(
            types_by_namespace, model.dependency_graph.namespace_edges
        )
        if graph.dropped_edges:
            logger.debug(
                f"Namespace graph: ignored {graph.dropped_edges} "
                "self or unknown namespace edges"
            )

        result: list[NamespaceCouplingMetrics] = []
        for name, types in types_by_namespace.items():
            ca = graph.in_degree(name)
            ce = graph.out_degree(name)
            instability = compute_instability(ca, ce)
            abstractness = compute_abstractness(types)
            result.append(
                NamespaceCouplingMetrics(
                    namespace=name,
                    ca=ca,
                    ce=ce,
                    instability=instability,
                    abstractness=abstractness,
                    normalized_distance=normalized_distance(
                        abstractness, instability
                    ),
                )
            )
        return result

    def compute_type_coupling(self, model: CodeModel) -> list[TypeCouplingMetrics]:
        """Compute DEP, I-DEP, FAN-IN and FAN-OUT for every type."""
        require(model, "model")

        types = list(model.codebase.iter_types())
        graph = NamedDigraph(t.full_name for t in types)
        for type_ in types:
            graph.add_edges(type_.full_name, type_.depends_on_types)

        result: list[TypeCouplingMetrics] = []
        for type_ in types:
            fan_out = graph.out_degree(type_.full_name)
            result.append(
                TypeCouplingMetrics(
                    type_full_name=type_.full_name,
                    dependencies=len(distinct_targets(type_.depends_on_types)),
                    internal_dependencies=fan_out,
                    fan_in=graph.in_degree(type_.full_name),
                    fan_out=fan_out,
                )
            )
        return result
