"""Shared fixtures: small in-memory code models."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest

from structure_metrics.ir import (
    Codebase,
    CodeModel,
    DependencyGraph,
    Field,
    Method,
    Module,
    Namespace,
    Type,
    TypeKind,
)

ModelBuilder = Callable[..., CodeModel]


@pytest.fixture
def build_model() -> ModelBuilder:
    """Return a helper that wraps namespaces of types into a one-module model."""

    def _build(
        namespaces: Mapping[str, list[Type]],
        type_edges: Mapping[str, set[str]] | None = None,
        namespace_edges: Mapping[str, set[str]] | None = None,
        module: str = "M",
    ) -> CodeModel:
        return CodeModel(
            Codebase(
                [Module(module, [Namespace(n, ts) for n, ts in namespaces.items()])]
            ),
            DependencyGraph(type_edges or {}, namespace_edges or {}),
        )

    return _build


@pytest.fixture
def layered_model() -> CodeModel:
    """Three types over two namespaces, no cycles.

    N1.A -> N1.B, System.String (external)
    N1.B -> N2.C
    N2.C -> (nothing)
    Namespace edges: N1 -> N2
    """
    a = Type(
        "N1.A",
        TypeKind.CLASS,
        methods=[
            Method("N1.A.Run", sloc=5, decision_points=1, is_public=True, accessed_fields=["f"]),
            Method("N1.A.Stop", sloc=3),
        ],
        fields=[Field("f", "int")],
        depends_on_types=["N1.B", "System.String"],
    )
    b = Type(
        "N1.B",
        TypeKind.CLASS,
        methods=[Method("N1.B.Go", sloc=4, is_public=True)],
        depends_on_types=["N2.C"],
    )
    c = Type(
        "N2.C",
        TypeKind.CLASS,
        methods=[Method("N2.C.Get", sloc=3, is_public=True, accessed_fields=["g"])],
        fields=[Field("g", "int", is_public=True)],
    )
    return CodeModel(
        Codebase([Module("M", [Namespace("N1", [a, b]), Namespace("N2", [c])])]),
        DependencyGraph(
            type_edges={"N1.A": {"N1.B"}, "N1.B": {"N2.C"}, "N2.C": set()},
            namespace_edges={"N1": {"N2"}, "N2": set()},
        ),
    )


@pytest.fixture
def cyclic_model() -> CodeModel:
    """Types A <-> B in namespace X, C alone in Y; namespaces X <-> Y."""
    a = Type("X.A", depends_on_types=["X.B"])
    b = Type("X.B", depends_on_types=["X.A", "Y.C"])
    c = Type("Y.C", depends_on_types=["X.A"])
    return CodeModel(
        Codebase([Module("M", [Namespace("X", [a, b]), Namespace("Y", [c])])]),
        DependencyGraph(
            type_edges={"X.A": {"X.B"}, "X.B": {"X.A"}, "Y.C": set()},
            namespace_edges={"X": {"Y"}, "Y": {"X"}},
        ),
    )
