"""Dense, immutable digraph stored as incidence arrays.

Nodes and edges are numbered ``0..n-1`` and ``0..m-1`` in insertion order.
Endpoints are kept in two numpy arrays; the outgoing and incoming edge lists
of every node are the rows of the node-edge incidence pattern in CSR layout
(``indptr``/``indices``), one matrix for sources and one for sinks, so each
list is ordered by increasing edge id.

Graphs are built with :class:`IncidenceGraphBuilder` and never change
afterwards, so handles stay valid for the lifetime of the graph.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import scipy.sparse as sp

from ..core.errors import InvalidHandleError, InvalidIdError
from ..core.iterators import GraphIterator, RangeIt
from ..core.traits import Directed, DirectedEdge, FiniteDigraph, IndexGraph, Undirected

logger = logging.getLogger(__name__)

__all__ = [
    "Node",
    "Edge",
    "DirEdge",
    "IncidenceGraph",
    "IncidenceGraphBuilder",
]


@dataclass(frozen=True, slots=True)
class Node:
    index: int


@dataclass(frozen=True, slots=True)
class Edge:
    index: int


@dataclass(frozen=True, slots=True)
class DirEdge(DirectedEdge):
    """Half-edge of an :class:`IncidenceGraph`."""

    index: int
    outgoing: bool

    def is_outgoing(self) -> bool:
        return self.outgoing

    def is_incoming(self) -> bool:
        return not self.outgoing

    def edge(self) -> Edge:
        return Edge(self.index)


def _node_at(g: IncidenceGraph, i: int) -> Node:
    return Node(i)


def _edge_at(g: IncidenceGraph, i: int) -> Edge:
    return Edge(i)


def _rows(heads: np.ndarray, n: int) -> tuple[np.ndarray, np.ndarray]:
    """CSR ``(indptr, indices)`` of the node x edge pattern ``heads[j] -> j``."""
    m = len(heads)
    pattern = sp.csr_matrix(
        (np.ones(m, dtype=np.int8), (heads, np.arange(m, dtype=np.intp))),
        shape=(n, m),
    )
    pattern.sort_indices()
    return pattern.indptr.astype(np.intp), pattern.indices.astype(np.intp)


def _endpoints(name: str, values) -> np.ndarray:
    arr = np.asarray(values if isinstance(values, np.ndarray) else list(values))
    if arr.size and arr.dtype.kind not in "iu":
        raise ValueError(f"{name} must hold integer node numbers, got dtype {arr.dtype}")
    return arr.astype(np.intp)


class _AdjIt(GraphIterator):
    """Cursor over one node's outgoing (or incoming) edge list."""

    __slots__ = ("_pos", "_end", "_out")

    def __init__(self, start: int, end: int, out: bool) -> None:
        self._pos = start
        self._end = end
        self._out = out

    def next(self, g: IncidenceGraph):
        if self._pos >= self._end:
            return None
        if self._out:
            eid = int(g._out_edges[self._pos])
            v = g._snk[eid]
        else:
            eid = int(g._in_edges[self._pos])
            v = g._src[eid]
        self._pos += 1
        return (Edge(eid), Node(int(v)))

    def size_hint(self, g) -> tuple[int, int | None]:
        n = self._end - self._pos
        return (n, n)

    def count(self, g) -> int:
        n = self._end - self._pos
        self._pos = self._end
        return n


class _IncidentIt(GraphIterator):
    """Outgoing half-edges of a node, then its incoming ones."""

    __slots__ = ("_out", "_in")

    def __init__(self, out: _AdjIt, in_: _AdjIt) -> None:
        self._out = out
        self._in = in_

    def next(self, g: IncidenceGraph):
        item = self._out.next(g)
        if item is not None:
            return (DirEdge(item[0].index, True), item[1])
        item = self._in.next(g)
        if item is not None:
            return (DirEdge(item[0].index, False), item[1])
        return None

    def size_hint(self, g) -> tuple[int, int | None]:
        n = self._out.size_hint(g)[0] + self._in.size_hint(g)[0]
        return (n, n)

    def count(self, g) -> int:
        return self._out.count(g) + self._in.count(g)


class _NeighIt(GraphIterator):
    """Like :class:`_IncidentIt` without orientation; self-loops once."""

    __slots__ = ("_out", "_in")

    def __init__(self, out: _AdjIt, in_: _AdjIt) -> None:
        self._out = out
        self._in = in_

    def next(self, g: IncidenceGraph):
        item = self._out.next(g)
        if item is not None:
            return item
        while (item := self._in.next(g)) is not None:
            e, v = item
            # already reported as an outgoing edge
            if g._src[e.index] != g._snk[e.index]:
                return item
        return None

    def size_hint(self, g) -> tuple[int, int | None]:
        n_out = self._out.size_hint(g)[0]
        n_in = self._in.size_hint(g)[0]
        return (n_out, n_out + n_in)


class IncidenceGraph(FiniteDigraph, Directed, Undirected, IndexGraph):
    """Immutable digraph on dense node and edge numbers.

    Parameters
    ----------
    num_nodes : int
        Number of nodes.
    src, snk : array-like of int
        Source and sink node number of every edge, by edge number.

    Raises
    ------
    ValueError
        If the endpoint arrays differ in length or reference missing nodes.

    Notes
    -----
    The graph implements :class:`FiniteDigraph`, :class:`Directed`,
    :class:`Undirected` and :class:`IndexGraph`. Its undirected neighbor
    iteration lists the outgoing edges of a node followed by its incoming
    edges, reporting a self-loop only once.

    """

    def __init__(self, num_nodes: int, src: Iterable[int], snk: Iterable[int]) -> None:
        n = operator.index(num_nodes)
        if n < 0:
            raise ValueError(f"num_nodes must be non-negative, got {n}")
        src = _endpoints("src", src)
        snk = _endpoints("snk", snk)
        if src.shape != snk.shape or src.ndim != 1:
            raise ValueError(f"src and snk must be 1-d of equal length, got {src.shape} and {snk.shape}")
        if len(src) and (min(src.min(), snk.min()) < 0 or max(src.max(), snk.max()) >= n):
            raise ValueError(f"edge endpoints must lie in [0, {n})")

        self._n = n
        self._src = src
        self._snk = snk
        self._out_ptr, self._out_edges = _rows(src, n)
        self._in_ptr, self._in_edges = _rows(snk, n)
        logger.debug("Built IncidenceGraph with %d nodes and %d edges", n, len(src))

    @classmethod
    def new_builder(cls) -> IncidenceGraphBuilder:
        return IncidenceGraphBuilder(cls)

    @classmethod
    def from_edges(cls, num_nodes: int, edges: Iterable[tuple[int, int]]) -> IncidenceGraph:
        """Build a graph from ``(source, sink)`` node numbers."""
        pairs = list(edges)
        return cls(num_nodes, [u for u, _ in pairs], [v for _, v in pairs])

    def __repr__(self) -> str:
        return f"<IncidenceGraph | V={self._n} · E={len(self._src)}>"

    # ==================== Handle checks ====================

    def _check_node(self, u) -> int:
        if not isinstance(u, Node) or not 0 <= u.index < self._n:
            raise InvalidHandleError("node", u)
        return u.index

    def _check_edge(self, e) -> int:
        if not isinstance(e, Edge) or not 0 <= e.index < len(self._src):
            raise InvalidHandleError("edge", e)
        return e.index

    # ==================== FiniteDigraph ====================

    def num_nodes(self) -> int:
        return self._n

    def num_edges(self) -> int:
        return len(self._src)

    def nodes_iter(self) -> RangeIt:
        return RangeIt(0, self._n, _node_at)

    def edges_iter(self) -> RangeIt:
        return RangeIt(0, len(self._src), _edge_at)

    def src(self, e) -> Node:
        return Node(int(self._src[self._check_edge(e)]))

    def snk(self, e) -> Node:
        return Node(int(self._snk[self._check_edge(e)]))

    # ==================== Directed / Undirected ====================

    def _out(self, i: int) -> _AdjIt:
        return _AdjIt(int(self._out_ptr[i]), int(self._out_ptr[i + 1]), True)

    def _in(self, i: int) -> _AdjIt:
        return _AdjIt(int(self._in_ptr[i]), int(self._in_ptr[i + 1]), False)

    def out_iter(self, u) -> _AdjIt:
        return self._out(self._check_node(u))

    def in_iter(self, u) -> _AdjIt:
        return self._in(self._check_node(u))

    def incident_iter(self, u) -> _IncidentIt:
        i = self._check_node(u)
        return _IncidentIt(self._out(i), self._in(i))

    def neigh_iter(self, u) -> _NeighIt:
        i = self._check_node(u)
        return _NeighIt(self._out(i), self._in(i))

    # ==================== IndexGraph ====================

    def node_id(self, u) -> int:
        return self._check_node(u)

    def id2node(self, id: int) -> Node:
        i = operator.index(id)
        if not 0 <= i < self._n:
            raise InvalidIdError("node", i, self._n)
        return Node(i)

    def edge_id(self, e) -> int:
        return self._check_edge(e)

    def id2edge(self, id: int) -> Edge:
        i = operator.index(id)
        if not 0 <= i < len(self._src):
            raise InvalidIdError("edge", i, len(self._src))
        return Edge(i)


class IncidenceGraphBuilder:
    """Collects nodes and edges for an :class:`IncidenceGraph`.

    Handles returned by the builder equal the handles of the finished graph.

    Examples
    --------
    >>> b = IncidenceGraph.new_builder()
    >>> u, v = b.add_nodes(2)
    >>> e = b.add_edge(u, v)
    >>> g = b.into_graph()
    >>> g.src(e) == u and g.snk(e) == v
    True

    """

    def __init__(self, graph_class: type[IncidenceGraph] = IncidenceGraph) -> None:
        self._graph_class = graph_class
        self._n = 0
        self._src: list[int] = []
        self._snk: list[int] = []

    def num_nodes(self) -> int:
        return self._n

    def num_edges(self) -> int:
        return len(self._src)

    def add_node(self) -> Node:
        u = Node(self._n)
        self._n += 1
        return u

    def add_nodes(self, n: int) -> list[Node]:
        if n < 0:
            raise ValueError(f"Cannot add a negative number of nodes ({n})")
        start = self._n
        self._n += n
        return [Node(i) for i in range(start, self._n)]

    def add_edge(self, u: Node, v: Node) -> Edge:
        for x in (u, v):
            if not isinstance(x, Node) or not 0 <= x.index < self._n:
                raise InvalidHandleError("node", x)
        e = Edge(len(self._src))
        self._src.append(u.index)
        self._snk.append(v.index)
        return e

    def into_graph(self) -> IncidenceGraph:
        return self._graph_class(self._n, self._src, self._snk)
