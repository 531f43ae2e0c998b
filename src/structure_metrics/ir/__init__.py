"""Intermediate representation consumed by the metrics engine."""

from .merge import merge_models
from .models import (
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

__all__ = [
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
]
