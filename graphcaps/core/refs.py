"""Reference-style capabilities.

Graphs in this family return ordinary Python iterators: each traversal keeps
the graph referenced for as long as it is alive. Views over foreign
structures (for example :class:`graphcaps.adapters.networkx.NetworkXDigraph`)
implement only this family. The context-passing family in
:mod:`graphcaps.core.traits` derives from it, so every context-passing graph
is usable through these methods as well.

All iterator-returning methods start a fresh traversal on each call.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator

from ._base import DirectedEdge, GraphType, IndexGraph

__all__ = [
    "FiniteGraphRef",
    "FiniteDigraphRef",
    "UndirectedRef",
    "DirectedRef",
    "IndexGraph",
]


class FiniteGraphRef(GraphType):
    """A graph with finitely many nodes and edges."""

    __slots__ = ()

    @abstractmethod
    def num_nodes(self) -> int:
        """Return the number of nodes."""

    @abstractmethod
    def num_edges(self) -> int:
        """Return the number of edges."""

    @abstractmethod
    def nodes(self) -> Iterator:
        """Iterate over all nodes, in a stable order."""

    @abstractmethod
    def edges(self) -> Iterator:
        """Iterate over all edges, in a stable order."""

    @abstractmethod
    def enodes(self, e) -> tuple:
        """Return the two endpoints of edge ``e``."""


class FiniteDigraphRef(FiniteGraphRef):
    """A finite graph whose edges have a source and a sink."""

    __slots__ = ()

    @abstractmethod
    def src(self, e):
        """Return the source node of edge ``e``."""

    @abstractmethod
    def snk(self, e):
        """Return the sink node of edge ``e``."""

    def enodes(self, e) -> tuple:
        return (self.src(e), self.snk(e))


class UndirectedRef(GraphType):
    """Neighbor access ignoring edge orientation."""

    __slots__ = ()

    @abstractmethod
    def neighs(self, u) -> Iterator[tuple]:
        """Iterate over ``(edge, neighbor)`` for all edges incident to ``u``.

        A self-loop at ``u`` is yielded once, with ``u`` as the neighbor.
        """

    def neighbors(self, u) -> Iterator:
        """Iterate over the neighbors of ``u`` (with multiplicity)."""
        return (v for _, v in self.neighs(u))

    def degree(self, u) -> int:
        """Number of ``(edge, neighbor)`` pairs at ``u``."""
        return sum(1 for _ in self.neighs(u))


class DirectedRef(GraphType):
    """Oriented neighbor access."""

    __slots__ = ()

    @abstractmethod
    def outedges(self, u) -> Iterator[tuple]:
        """Iterate over ``(edge, sink)`` for edges with source ``u``."""

    @abstractmethod
    def inedges(self, u) -> Iterator[tuple]:
        """Iterate over ``(edge, source)`` for edges with sink ``u``."""

    @abstractmethod
    def incident_edges(self, u) -> Iterator[tuple[DirectedEdge, object]]:
        """Iterate over ``(half_edge, neighbor)`` for both orientations.

        ``half_edge.is_outgoing()`` tells whether ``u`` is the source of that
        occurrence. A self-loop appears twice, once in each orientation.
        """

    def outgoing(self, u) -> Iterator:
        """Iterate over the sinks of the outgoing edges of ``u``."""
        return (v for _, v in self.outedges(u))

    def incoming(self, u) -> Iterator:
        """Iterate over the sources of the incoming edges of ``u``."""
        return (v for _, v in self.inedges(u))

    def out_degree(self, u) -> int:
        return sum(1 for _ in self.outedges(u))

    def in_degree(self, u) -> int:
        return sum(1 for _ in self.inedges(u))
