"""Directed graph over a fixed universe of named nodes.

Every coupling and dependency metric follows the same recipe: take the set
of known node names, keep only the edges whose endpoints are both known (and
distinct), then read out-degrees, in-degrees or strongly connected
components. :class:`NamedDigraph` packages that recipe on top of a networkx
``DiGraph``.

Instances are cheap, call-scoped scratch structures: each calculator builds
its own and nothing is cached between runs.

Example:
    graph = NamedDigraph(["A", "B", "C"])
    graph.add_edges("A", ["B", "System.String", "A"])  # keeps only A -> B
    graph.out_degree("A")  # 1
    graph.in_degree("B")   # 1
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

import networkx as nx


def ordered_targets(targets: Iterable[str] | None) -> list[str]:
    """Return edge targets in a deterministic order.

    Unordered collections (``set``/``frozenset``) are sorted so that graph
    insertion order, and therefore cycle enumeration, does not depend on
    string hashing. Sequences keep their own order.
    """
    if not targets:
        return []
    if isinstance(targets, (set, frozenset)):
        return sorted(t for t in targets if t is not None)
    return [t for t in targets if t is not None]


class NamedDigraph:
    """Simple directed graph restricted to a known node universe.

    Nodes are added once, in the order given; edges to or from unknown
    names, self loops and duplicates are dropped silently.
    """

    def __init__(self, universe: Iterable[str]) -> None:
        self._graph: nx.DiGraph = nx.DiGraph()
        self._graph.add_nodes_from(universe)
        self._order: dict[str, int] = {
            node: index for index, node in enumerate(self._graph.nodes)
        }
        self.dropped_edges = 0

    @classmethod
    def from_adjacency(
        cls,
        universe: Iterable[str],
        adjacency: Mapping[str, Iterable[str] | None],
    ) -> NamedDigraph:
        """Build a graph from a ``source -> targets`` mapping.

        Args:
            universe: Known node names, in the order they should be visited
            adjacency: Edges to add; filtered against ``universe``

        Returns:
            New graph
        """
        graph = cls(universe)
        for source, targets in adjacency.items():
            graph.add_edges(source, targets)
        return graph

    def __contains__(self, node: object) -> bool:
        return node in self._order

    def __len__(self) -> int:
        return len(self._order)

    @property
    def nodes(self) -> list[str]:
        """Node names in insertion order."""
        return list(self._graph.nodes)

    def add_edge(self, source: str, target: str) -> bool:
        """Add ``source -> target`` if both are known and distinct.

        Returns:
            True if the edge is part of the graph afterwards
        """
        if source == target or source not in self._order or target not in self._order:
            self.dropped_edges += 1
            return False
        self._graph.add_edge(source, target)
        return True

    def add_edges(self, source: str, targets: Iterable[str] | None) -> int:
        """Add one edge per target; returns how many were kept."""
        return sum(self.add_edge(source, t) for t in ordered_targets(targets))

    def successors(self, node: str) -> list[str]:
        """Out-neighbours of ``node``; empty for unknown nodes."""
        if node not in self._order:
            return []
        return list(self._graph.successors(node))

    def predecessors(self, node: str) -> list[str]:
        """In-neighbours of ``node``; empty for unknown nodes."""
        if node not in self._order:
            return []
        return list(self._graph.predecessors(node))

    def out_degree(self, node: str) -> int:
        if node not in self._order:
            return 0
        return self._graph.out_degree(node)

    def in_degree(self, node: str) -> int:
        if node not in self._order:
            return 0
        return self._graph.in_degree(node)

    @property
    def edge_count(self) -> int:
        """Number of distinct edges."""
        return self._graph.number_of_edges()

    def edges(self) -> Iterator[tuple[str, str]]:
        yield from self._graph.edges()

    def strongly_connected_components(self) -> list[list[str]]:
        """All SCCs, each listed in node insertion order.

        networkx implements Tarjan's algorithm (non-recursive, with
        Nuutila's refinement), so this is a single O(V + E) pass that is
        safe on deep graphs. Components come out in the order networkx
        completes them, which is fixed for a fixed insertion order.
        """
        return [
            sorted(component, key=self._order.__getitem__)
            for component in nx.strongly_connected_components(self._graph)
        ]

    def cycles(self) -> list[list[str]]:
        """SCCs with two or more nodes.

        Self loops are never stored, so a single node can not form a cycle.
        """
        return [c for c in self.strongly_connected_components() if len(c) > 1]
