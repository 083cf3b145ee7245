"""Context-passing capabilities.

Each capability is an independent abstract class; a graph implements the
subset it supports and algorithms require exactly the capabilities they use,
checked with ``isinstance``.

Traversal methods here (``nodes_iter``, ``out_iter``, ...) return
:class:`~graphcaps.core.iterators.GraphIterator` objects that receive the
graph on every step. Each context-passing capability extends its
reference-style counterpart from :mod:`graphcaps.core.refs` and provides the
plain-iterator methods (``nodes()``, ``outedges(u)``, ...) by binding its own
iterators through :class:`~graphcaps.core.iterators.GraphIter`.

Examples
--------
>>> from graphcaps.generators import star
>>> g = star(3)
>>> it = g.out_iter(g.id2node(0))
>>> it.size_hint(g)
(3, 3)
>>> [g.node_id(v) for _, v in it.iter(g)]
[1, 2, 3]

"""

from __future__ import annotations

from abc import abstractmethod

from ._base import DirectedEdge, GraphType, IndexGraph
from .iterators import GraphIter, GraphIterator
from .refs import DirectedRef, FiniteDigraphRef, FiniteGraphRef, UndirectedRef

__all__ = [
    "GraphType",
    "FiniteGraph",
    "FiniteDigraph",
    "Undirected",
    "Directed",
    "DirectedEdge",
    "IndexGraph",
]


class FiniteGraph(FiniteGraphRef):
    """A finite graph with context-passing node and edge enumeration."""

    __slots__ = ()

    @abstractmethod
    def nodes_iter(self) -> GraphIterator:
        """Return a fresh iterator over all nodes."""

    @abstractmethod
    def edges_iter(self) -> GraphIterator:
        """Return a fresh iterator over all edges."""

    def nodes(self) -> GraphIter:
        return GraphIter(self.nodes_iter(), self)

    def edges(self) -> GraphIter:
        return GraphIter(self.edges_iter(), self)


class FiniteDigraph(FiniteDigraphRef, FiniteGraph):
    """A finite graph whose edges have a source and a sink.

    ``enodes(e) == (src(e), snk(e))``.
    """

    __slots__ = ()


class Undirected(UndirectedRef):
    """Context-passing neighbor enumeration."""

    __slots__ = ()

    @abstractmethod
    def neigh_iter(self, u) -> GraphIterator:
        """Return an iterator over ``(edge, neighbor)`` incident to ``u``."""

    def neighs(self, u) -> GraphIter:
        return GraphIter(self.neigh_iter(u), self)


class Directed(DirectedRef):
    """Context-passing oriented neighbor enumeration."""

    __slots__ = ()

    @abstractmethod
    def out_iter(self, u) -> GraphIterator:
        """Return an iterator over ``(edge, sink)`` with source ``u``."""

    @abstractmethod
    def in_iter(self, u) -> GraphIterator:
        """Return an iterator over ``(edge, source)`` with sink ``u``."""

    @abstractmethod
    def incident_iter(self, u) -> GraphIterator:
        """Return an iterator over ``(DirectedEdge, neighbor)`` at ``u``."""

    def outedges(self, u) -> GraphIter:
        return GraphIter(self.out_iter(u), self)

    def inedges(self, u) -> GraphIter:
        return GraphIter(self.in_iter(u), self)

    def incident_edges(self, u) -> GraphIter:
        return GraphIter(self.incident_iter(u), self)

    def out_degree(self, u) -> int:
        return self.out_iter(u).count(self)

    def in_degree(self, u) -> int:
        return self.in_iter(u).count(self)
