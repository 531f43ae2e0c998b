"""Combine code models produced by several language adapters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from loguru import logger

from ..core.exceptions import ModelError, require
from .models import Codebase, CodeModel, DependencyGraph, Module


def _union_edges(
    graphs: Iterable[Mapping[str, frozenset[str]]],
) -> dict[str, set[str]]:
    merged: dict[str, set[str]] = {}
    for edges in graphs:
        for source, targets in edges.items():
            merged.setdefault(source, set()).update(targets)
    return merged


def merge_models(models: Iterable[CodeModel]) -> CodeModel:
    """Merge several code models into one.

    Modules are concatenated in input order and edge mappings are unioned per
    source node. A single model is returned as is.

    Args:
        models: Models to merge (typically one per detected language)

    Returns:
        The merged model; ``CodeModel.empty()`` when no models are given

    Raises:
        InvalidArgumentError: If ``models`` or one of its items is None
        ModelError: If two models declare the same type full name
    """
    models = list(require(models, "models"))
    for index, model in enumerate(models):
        require(model, f"models[{index}]")

    if not models:
        return CodeModel.empty()
    if len(models) == 1:
        return models[0]

    modules: list[Module] = []
    seen_types: set[str] = set()
    for model in models:
        for type_ in model.codebase.iter_types():
            if type_.full_name in seen_types:
                raise ModelError(
                    f"Duplicate type full name across models: {type_.full_name}",
                    {"type": type_.full_name},
                )
            seen_types.add(type_.full_name)
        modules.extend(model.codebase.modules)

    graph = DependencyGraph(
        type_edges=_union_edges(m.dependency_graph.type_edges for m in models),
        namespace_edges=_union_edges(
            m.dependency_graph.namespace_edges for m in models
        ),
    )
    logger.debug(
        f"Merged {len(models)} code models into {len(modules)} modules "
        f"({len(seen_types)} types)"
    )
    return CodeModel(Codebase(modules), graph)
