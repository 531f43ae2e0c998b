"""Per-type metrics: SLOC, NOM, NPM, WMC, DEP, I-DEP, FAN-IN/OUT, NOA, LCOM3."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ...core.exceptions import require
from ...ir.models import CodeModel, Type
from ..graph import NamedDigraph
from ..metrics import TypeMetrics
from .method_metrics import clamp_non_negative, cyclomatic_complexity


def distinct_targets(targets: Iterable[str] | None) -> set[str]:
    """Distinct non-blank dependency targets of a raw dependency list."""
    return {t for t in targets or () if t and t.strip()}


def build_type_graph(model: CodeModel) -> NamedDigraph:
    """Internal type graph derived from ``Type.depends_on_types``.

    Universe is every type full name in the model; edges to external names
    and self references are dropped.
    """
    types = list(model.codebase.iter_types())
    graph = NamedDigraph(t.full_name for t in types)
    for type_ in types:
        graph.add_edges(type_.full_name, type_.depends_on_types)
    if graph.dropped_edges:
        logger.debug(
            f"Type graph: ignored {graph.dropped_edges} external or self references"
        )
    return graph


def lcom3(type_: Type) -> float:
    """Bounded LCOM3: ``1 - sum(mu(a)) / (m * n)`` clamped to [0, 1].

    ``m`` is the method count, ``n`` the field count and ``mu(a)`` the number
    of methods accessing field ``a``. Types with at most one method or at
    most one field are cohesive by definition (0.0). Accessed names that are
    not fields of this type are ignored.
    """
    m = len(type_.methods)
    n = len(type_.fields)
    if m <= 1 or n <= 1:
        return 0.0

    field_names = {f.name for f in type_.fields}
    mu_sum = sum(
        len(field_names.intersection(method.accessed_fields))
        for method in type_.methods
    )

    raw = 1.0 - mu_sum / (m * n)
    return min(1.0, max(0.0, raw))


class TypeMetricsCalculator:
    """Computes :class:`TypeMetrics` for the types of a model.

    ``compute_all`` builds the internal type graph once and reuses it for
    every type; ``compute_for`` builds it for a single lookup.
    """

    def compute_for(self, type_: Type, model: CodeModel) -> TypeMetrics:
        """Compute metrics for one type, resolving coupling against ``model``.

        Raises:
            InvalidArgumentError: If ``type_`` or ``model`` is None
        """
        require(type_, "type_")
        require(model, "model")
        return self._compute(type_, build_type_graph(model))

    def compute_all(self, model: CodeModel) -> list[TypeMetrics]:
        """Compute metrics for every type of the model, in model order."""
        require(model, "model")
        graph = build_type_graph(model)
        return [self._compute(t, graph) for t in model.codebase.iter_types()]

    def _compute(self, type_: Type, graph: NamedDigraph) -> TypeMetrics:
        fan_out = graph.out_degree(type_.full_name)

        return TypeMetrics(
            type_full_name=type_.full_name,
            sloc=sum(clamp_non_negative(m.sloc) for m in type_.methods),
            nom=len(type_.methods),
            npm=sum(1 for m in type_.methods if m.is_public),
            wmc=sum(cyclomatic_complexity(m.decision_points) for m in type_.methods),
            dep=len(distinct_targets(type_.depends_on_types)),
            i_dep=fan_out,
            fan_in=graph.in_degree(type_.full_name),
            fan_out=fan_out,
            noa=len(type_.fields),
            lcom3=lcom3(type_),
        )
