"""Solution-level dependency metrics: DEP, I-DEP and dependency cycles."""

from __future__ import annotations

from loguru import logger

from ...core.exceptions import require
from ...ir.models import CodeModel
from ..graph import NamedDigraph
from ..metrics import CycleScope, DependencyCycle, DependencyMetrics


def count_distinct_dependencies(model: CodeModel) -> int:
    """DEP: distinct ``(type, target)`` pairs over all raw dependency lists.

    External targets count; blank target names do not.
    """
    edges = {
        (type_.full_name, target)
        for type_ in model.codebase.iter_types()
        for target in type_.depends_on_types
        if target and target.strip()
    }
    return len(edges)


def count_internal_dependencies(model: CodeModel) -> int:
    """I-DEP: distinct ``(source, target)`` pairs of the type-edge mapping.

    Only self loops and blank targets are skipped; endpoints are not checked
    against the model's types.
    """
    edges = {
        (source, target)
        for source, targets in model.dependency_graph.type_edges.items()
        for target in targets
        if target and target.strip() and target != source
    }
    return len(edges)


class DependencyMetricsCalculator:
    """Computes :class:`DependencyMetrics` for a whole model.

    Cycles are strongly connected components of two or more nodes, found
    separately in the type graph and in the namespace graph. Type-scope
    cycles are listed first.
    """

    def compute(self, model: CodeModel) -> DependencyMetrics:
        """Compute DEP, I-DEP and cycles.

        Args:
            model: Code model

        Returns:
            DependencyMetrics for the model

        Raises:
            InvalidArgumentError: If ``model`` is None
        """
        require(model, "model")

        type_graph = NamedDigraph.from_adjacency(
            model.codebase.type_names(), model.dependency_graph.type_edges
        )
        namespace_graph = NamedDigraph.from_adjacency(
            model.codebase.namespace_names(),
            model.dependency_graph.namespace_edges,
        )

        cycles = [
            DependencyCycle(nodes, CycleScope.TYPE) for nodes in type_graph.cycles()
        ]
        cycles.extend(
            DependencyCycle(nodes, CycleScope.NAMESPACE)
            for nodes in namespace_graph.cycles()
        )
        if cycles:
            logger.debug(
                f"Found {len(cycles)} dependency cycles "
                f"(largest has {max(len(c.nodes) for c in cycles)} nodes)"
            )

        return DependencyMetrics(
            total_dependencies=count_distinct_dependencies(model),
            internal_dependencies=count_internal_dependencies(model),
            cycles=tuple(cycles),
        )
