"""Namespace metrics: NOC (number of types) and NAC (abstract classes)."""

from __future__ import annotations

from collections.abc import Iterable

from ...core.exceptions import require
from ...ir.models import CodeModel, Namespace, Type, TypeKind
from ..metrics import NamespaceMetrics

# Interfaces are abstract by nature but are not "abstract classes"
ABSTRACT_CLASS_KINDS = frozenset({TypeKind.CLASS, TypeKind.RECORD})


def count_abstract_classes(types: Iterable[Type]) -> int:
    return sum(
        1 for t in types if t.is_abstract and t.kind in ABSTRACT_CLASS_KINDS
    )


class NamespaceMetricsCalculator:
    """Computes :class:`NamespaceMetrics` per logical namespace."""

    def compute_for(self, namespace: Namespace) -> NamespaceMetrics:
        """Compute metrics for a single namespace node."""
        require(namespace, "namespace")
        return NamespaceMetrics(
            namespace=namespace.name,
            noc=len(namespace.types),
            nac=count_abstract_classes(namespace.types),
        )

    def compute_all(self, model: CodeModel) -> list[NamespaceMetrics]:
        """Compute metrics for every namespace of the model.

        Namespace nodes sharing a name across modules are merged into one
        entry, ordered by first appearance.
        """
        require(model, "model")
        return [
            self.compute_for(Namespace(name, types))
            for name, types in model.codebase.types_by_namespace().items()
        ]
