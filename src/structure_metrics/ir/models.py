"""Language-agnostic intermediate representation (IR) of a codebase.

Language adapters build a :class:`CodeModel` once per run; every calculator
reads it and none mutates it. All entities are frozen dataclasses whose
sequence fields are normalized to tuples, so a model can be shared freely
between threads.

Example:
    method = Method(full_name="Shop.Cart.Total", sloc=12, decision_points=2)
    cart = Type(
        full_name="Shop.Cart",
        kind=TypeKind.CLASS,
        methods=[method],
        depends_on_types=["Shop.Item", "System.String"],
    )
    model = CodeModel(
        codebase=Codebase([Module("Shop", [Namespace("Shop", [cart])])]),
        dependency_graph=DependencyGraph(type_edges={"Shop.Cart": {"Shop.Item"}}),
    )
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from ..core.exceptions import InvalidArgumentError


class TypeKind(str, Enum):
    """Kinds of declared types the IR can describe."""

    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    DELEGATE = "delegate"


def _freeze(instance: object, name: str) -> None:
    """Replace a sequence attribute of a frozen dataclass with a tuple.

    Raises:
        InvalidArgumentError: If the attribute is a bare string, which would
            otherwise be split into one entry per character
    """
    value = getattr(instance, name)
    if isinstance(value, str):
        raise InvalidArgumentError(
            f"{type(instance).__name__}.{name} must be a sequence of names, "
            f"not a string: {value!r}",
            {"argument": name},
        )
    object.__setattr__(instance, name, tuple(value) if value is not None else ())


def _freeze_edges(
    edges: Mapping[str, Iterable[str] | None] | None,
) -> Mapping[str, frozenset[str]]:
    if not edges:
        return MappingProxyType({})
    for source, targets in edges.items():
        if isinstance(targets, str):
            raise InvalidArgumentError(
                f"Edge targets of {source!r} must be a collection of names, "
                f"not a string: {targets!r}",
                {"source": source},
            )
    return MappingProxyType(
        {
            source: frozenset(t for t in (targets or ()) if t is not None)
            for source, targets in edges.items()
        }
    )


@dataclass(frozen=True)
class Field:
    """Field/attribute declared by a type."""

    name: str
    type_name: str = ""
    is_public: bool = False


@dataclass(frozen=True)
class Method:
    """Raw facts about one method, as reported by a language adapter.

    Attributes:
        full_name: ``<TypeFullName>.<Member>``; unique within its type but not
            necessarily across overloads
        parameters: Number of declared parameters
        sloc: Source lines of code
        decision_points: Branch count; cyclomatic complexity is 1 + this
        max_nesting_depth: Deepest block nesting
        calls: Number of call sites in the body
        is_public: Whether the method is publicly visible
        accessed_fields: Names of the owning type's fields the body touches
    """

    full_name: str
    parameters: int = 0
    sloc: int = 0
    decision_points: int = 0
    max_nesting_depth: int = 0
    calls: int = 0
    is_public: bool = False
    accessed_fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "accessed_fields")


@dataclass(frozen=True)
class Type:
    """A declared type (class, struct, interface, enum, record or delegate).

    ``depends_on_types`` is raw adapter output: it may name external types,
    repeat entries or even point at the type itself.
    """

    full_name: str
    kind: TypeKind = TypeKind.CLASS
    is_abstract: bool = False
    fields: tuple[Field, ...] = ()
    methods: tuple[Method, ...] = ()
    depends_on_types: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "fields")
        _freeze(self, "methods")
        _freeze(self, "depends_on_types")


@dataclass(frozen=True)
class Namespace:
    """A dotted namespace and the types declared in it."""

    name: str
    types: tuple[Type, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "types")


@dataclass(frozen=True)
class Module:
    """A module (project, assembly, package) of the analyzed solution."""

    name: str
    namespaces: tuple[Namespace, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "namespaces")


@dataclass(frozen=True)
class Codebase:
    """Ordered collection of modules, with traversal helpers."""

    modules: tuple[Module, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "modules")

    def iter_namespaces(self) -> Iterator[Namespace]:
        """Yield every namespace node in model order (same names may repeat)."""
        for module in self.modules:
            yield from module.namespaces

    def iter_types(self) -> Iterator[Type]:
        """Yield every type in model order."""
        for namespace in self.iter_namespaces():
            yield from namespace.types

    def iter_methods(self) -> Iterator[Method]:
        """Yield every method in model order."""
        for type_ in self.iter_types():
            yield from type_.methods

    def type_names(self) -> list[str]:
        """Distinct type full names in first-appearance order."""
        return list(dict.fromkeys(t.full_name for t in self.iter_types()))

    def namespace_names(self) -> list[str]:
        """Distinct namespace names in first-appearance order."""
        return list(dict.fromkeys(ns.name for ns in self.iter_namespaces()))

    def types_by_namespace(self) -> dict[str, list[Type]]:
        """Group types under their logical (name-identified) namespace.

        Namespaces sharing a name across modules are merged; keys keep the
        order in which each name first appears.
        """
        grouped: dict[str, list[Type]] = {}
        for namespace in self.iter_namespaces():
            grouped.setdefault(namespace.name, []).extend(namespace.types)
        return grouped


@dataclass(frozen=True)
class DependencyGraph:
    """Internal dependency edges between types and between namespaces.

    Both mappings go from a node name to the set of target names. Producers
    promise that every target is a node of the model, but consumers still
    re-filter against the model's universe.
    """

    type_edges: Mapping[str, frozenset[str]] = field(
        default_factory=dict, hash=False
    )
    namespace_edges: Mapping[str, frozenset[str]] = field(
        default_factory=dict, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "type_edges", _freeze_edges(self.type_edges))
        object.__setattr__(
            self, "namespace_edges", _freeze_edges(self.namespace_edges)
        )


@dataclass(frozen=True)
class CodeModel:
    """Complete IR: codebase plus dependency graph."""

    codebase: Codebase = field(default_factory=Codebase)
    dependency_graph: DependencyGraph = field(default_factory=DependencyGraph)

    @classmethod
    def empty(cls) -> CodeModel:
        """Model with no modules and no edges."""
        return cls(Codebase(), DependencyGraph())
