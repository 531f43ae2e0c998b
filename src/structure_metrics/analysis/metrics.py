"""Metric dataclasses produced by the metrics engine.

Every class is an immutable snapshot with no reference back to the IR.
``to_dict()`` lists its fields explicitly so report writers never need
runtime introspection.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class MethodMetrics:
    """Metrics for a single method (MLOC, CYCLO, CALLS, NBD, PARAM).

    Attributes:
        method_full_name: Fully-qualified method name
        mloc: Method lines of code (clamped to >= 0)
        cyclo: Cyclomatic complexity, 1 + decision points (never below 1)
        calls: Number of call sites
        nbd: Nested block depth
        parameters: Parameter count
    """

    method_full_name: str
    mloc: int = 0
    cyclo: int = 1
    calls: int = 0
    nbd: int = 0
    parameters: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "method_full_name": self.method_full_name,
            "mloc": self.mloc,
            "cyclo": self.cyclo,
            "calls": self.calls,
            "nbd": self.nbd,
            "parameters": self.parameters,
        }


@dataclass(frozen=True)
class TypeMetrics:
    """Metrics for a single type.

    Attributes:
        type_full_name: Fully-qualified type name
        sloc: Sum of method lines of code
        nom: Number of methods
        npm: Number of public methods
        wmc: Weighted methods per class (sum of method cyclomatic complexity)
        dep: Distinct dependency targets, internal and external
        i_dep: Distinct internal dependency targets (same as fan_out)
        fan_in: Number of model types depending on this type
        fan_out: Number of model types this type depends on
        noa: Number of attributes (fields)
        lcom3: Bounded lack of cohesion of methods, in [0, 1]
    """

    type_full_name: str
    sloc: int = 0
    nom: int = 0
    npm: int = 0
    wmc: int = 0
    dep: int = 0
    i_dep: int = 0
    fan_in: int = 0
    fan_out: int = 0
    noa: int = 0
    lcom3: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type_full_name": self.type_full_name,
            "sloc": self.sloc,
            "nom": self.nom,
            "npm": self.npm,
            "wmc": self.wmc,
            "dep": self.dep,
            "i_dep": self.i_dep,
            "fan_in": self.fan_in,
            "fan_out": self.fan_out,
            "noa": self.noa,
            "lcom3": self.lcom3,
        }


@dataclass(frozen=True)
class NamespaceMetrics:
    """Basic namespace metrics: NOC (types) and NAC (abstract classes)."""

    namespace: str
    noc: int = 0
    nac: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"namespace": self.namespace, "noc": self.noc, "nac": self.nac}


@dataclass(frozen=True)
class NamespaceCouplingMetrics:
    """Namespace coupling in the Robert C. Martin sense.

    Attributes:
        namespace: Namespace name
        ca: Afferent coupling, namespaces that depend on this one
        ce: Efferent coupling, namespaces this one depends on
        instability: I = Ce / (Ca + Ce), 0.0 when isolated
        abstractness: A = abstract-or-interface types / types
        normalized_distance: D = |A + I - 1|, distance from the main sequence
    """

    namespace: str
    ca: int = 0
    ce: int = 0
    instability: float = 0.0
    abstractness: float = 0.0
    normalized_distance: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "ca": self.ca,
            "ce": self.ce,
            "instability": self.instability,
            "abstractness": self.abstractness,
            "normalized_distance": self.normalized_distance,
        }


@dataclass(frozen=True)
class TypeCouplingMetrics:
    """Type coupling: DEP, I-DEP, FAN-IN, FAN-OUT."""

    type_full_name: str
    dependencies: int = 0
    internal_dependencies: int = 0
    fan_in: int = 0
    fan_out: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type_full_name": self.type_full_name,
            "dependencies": self.dependencies,
            "internal_dependencies": self.internal_dependencies,
            "fan_in": self.fan_in,
            "fan_out": self.fan_out,
        }


class CycleScope(str, Enum):
    """Graph a dependency cycle was found in."""

    TYPE = "Type"
    NAMESPACE = "Namespace"


@dataclass(frozen=True)
class DependencyCycle:
    """A strongly connected component of two or more nodes."""

    nodes: tuple[str, ...]
    scope: CycleScope

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))

    def to_dict(self) -> dict[str, Any]:
        return {"nodes": list(self.nodes), "scope": self.scope.value}


@dataclass(frozen=True)
class DependencyMetrics:
    """Solution-wide dependency rollup.

    Attributes:
        total_dependencies: DEP, distinct (type, target) pairs incl. external
        internal_dependencies: I-DEP, distinct type-edge pairs, self loops excluded
        cycles: Type-scope cycles followed by namespace-scope cycles
    """

    total_dependencies: int = 0
    internal_dependencies: int = 0
    cycles: tuple[DependencyCycle, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "cycles", tuple(self.cycles))

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_dependencies": self.total_dependencies,
            "internal_dependencies": self.internal_dependencies,
            "cycles": [cycle.to_dict() for cycle in self.cycles],
        }


@dataclass(frozen=True)
class SummaryMetrics:
    """Solution-wide summary: counts plus per-type distributions.

    Averages, medians and standard deviations are taken over the per-type
    values (SLOC, NOM, WMC). Standard deviations are population deviations.
    """

    total_namespaces: int = 0
    total_types: int = 0
    mean_types_per_namespace: float = 0.0

    total_sloc: int = 0
    avg_sloc_per_type: float = 0.0
    median_sloc_per_type: float = 0.0
    stdev_sloc_per_type: float = 0.0

    total_methods: int = 0
    avg_methods_per_type: float = 0.0
    median_methods_per_type: float = 0.0
    stdev_methods_per_type: float = 0.0

    total_complexity: int = 0
    avg_complexity_per_type: float = 0.0
    median_complexity_per_type: float = 0.0
    stdev_complexity_per_type: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_namespaces": self.total_namespaces,
            "total_types": self.total_types,
            "mean_types_per_namespace": self.mean_types_per_namespace,
            "total_sloc": self.total_sloc,
            "avg_sloc_per_type": self.avg_sloc_per_type,
            "median_sloc_per_type": self.median_sloc_per_type,
            "stdev_sloc_per_type": self.stdev_sloc_per_type,
            "total_methods": self.total_methods,
            "avg_methods_per_type": self.avg_methods_per_type,
            "median_methods_per_type": self.median_methods_per_type,
            "stdev_methods_per_type": self.stdev_methods_per_type,
            "total_complexity": self.total_complexity,
            "avg_complexity_per_type": self.avg_complexity_per_type,
            "median_complexity_per_type": self.median_complexity_per_type,
            "stdev_complexity_per_type": self.stdev_complexity_per_type,
        }


@dataclass(frozen=True)
class MetricsResult:
    """Complete result of one engine run."""

    summary: SummaryMetrics
    namespaces: tuple[NamespaceMetrics, ...]
    types: tuple[TypeMetrics, ...]
    methods: tuple[MethodMetrics, ...]
    namespace_coupling: tuple[NamespaceCouplingMetrics, ...]
    type_coupling: tuple[TypeCouplingMetrics, ...]
    dependencies: DependencyMetrics

    def __post_init__(self) -> None:
        for name in (
            "namespaces",
            "types",
            "methods",
            "namespace_coupling",
            "type_coupling",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def to_dict(self) -> dict[str, Any]:
        """Nested plain-data form for serializers.

        Returns:
            Dictionary with one key per result section
        """
        return {
            "summary": self.summary.to_dict(),
            "namespaces": [m.to_dict() for m in self.namespaces],
            "types": [m.to_dict() for m in self.types],
            "methods": [m.to_dict() for m in self.methods],
            "namespace_coupling": [m.to_dict() for m in self.namespace_coupling],
            "type_coupling": [m.to_dict() for m in self.type_coupling],
            "dependencies": self.dependencies.to_dict(),
        }
