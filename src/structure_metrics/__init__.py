"""Structure Metrics - software-structure metrics over a language-agnostic IR."""

__version__ = "0.3.0"

from .analysis import (
    CycleScope,
    DependencyCycle,
    DependencyMetrics,
    MethodMetrics,
    MetricsEngine,
    MetricsResult,
    NamespaceCouplingMetrics,
    NamespaceMetrics,
    SummaryMetrics,
    TypeCouplingMetrics,
    TypeMetrics,
)
from .config import EngineSettings
from .core.exceptions import (
    ConfigError,
    InvalidArgumentError,
    ModelError,
    StructureMetricsError,
)
from .ir import (
    Codebase,
    CodeModel,
    DependencyGraph,
    Field,
    Method,
    Module,
    Namespace,
    Type,
    TypeKind,
    merge_models,
)

__all__ = [
    "__version__",
    "MetricsEngine",
    "EngineSettings",
    "CodeModel",
    "Codebase",
    "Module",
    "Namespace",
    "Type",
    "TypeKind",
    "Field",
    "Method",
    "DependencyGraph",
    "merge_models",
    "MetricsResult",
    "SummaryMetrics",
    "MethodMetrics",
    "TypeMetrics",
    "NamespaceMetrics",
    "NamespaceCouplingMetrics",
    "TypeCouplingMetrics",
    "DependencyMetrics",
    "DependencyCycle",
    "CycleScope",
    "StructureMetricsError",
    "InvalidArgumentError",
    "ConfigError",
    "ModelError",
]
