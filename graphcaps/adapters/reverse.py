"""Reverse the direction of the edges of a digraph.

:func:`reverse` wraps an existing graph in a view whose edges point the
other way. Nothing is copied: every call is forwarded to the wrapped graph,
with sources and sinks, outgoing and incoming edges, and the orientation of
half-edges swapped on the way. Nodes, edges and identifiers are the wrapped
graph's own, so handles and attribute vectors work on both.

The view supports exactly the capabilities of the wrapped graph. Its class is
composed from one mixin per capability the graph implements (context-passing
or reference-style), and the composition is cached per capability set.

Examples
--------
>>> from graphcaps.generators import star
>>> g = star(42)
>>> center = g.id2node(0)
>>> g.out_iter(center).count(g), g.in_iter(center).count(g)
(42, 0)
>>> r = reverse(g)
>>> r.num_nodes(), r.num_edges()
(43, 42)
>>> r.out_iter(center).count(r), r.in_iter(center).count(r)
(0, 42)
>>> all(r.node_id(r.snk(e)) == 0 and r.node_id(r.src(e)) > 0 for e in r.edges())
True

"""

from __future__ import annotations

from functools import lru_cache

from ..core._base import DirectedEdge, GraphType, IndexGraph
from ..core.iterators import GraphIterator
from ..core.refs import DirectedRef, FiniteDigraphRef, FiniteGraphRef, UndirectedRef
from ..core.traits import Directed, FiniteDigraph, FiniteGraph, Undirected

__all__ = [
    "ReverseDigraph",
    "ReverseDirectedEdge",
    "ReverseWrapIt",
    "ReverseIncidentIt",
    "reverse",
]


class ReverseDirectedEdge(DirectedEdge):
    """Half-edge of a reversed graph: the wrapped half-edge, flags swapped."""

    __slots__ = ("_inner",)

    def __init__(self, inner: DirectedEdge) -> None:
        self._inner = inner

    @property
    def inner(self) -> DirectedEdge:
        return self._inner

    def is_outgoing(self) -> bool:
        return self._inner.is_incoming()

    def is_incoming(self) -> bool:
        return self._inner.is_outgoing()

    def edge(self):
        return self._inner.edge()

    def __eq__(self, other) -> bool:
        if not isinstance(other, ReverseDirectedEdge):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self) -> int:
        return hash((ReverseDirectedEdge, self._inner))

    def __repr__(self) -> str:
        return f"ReverseDirectedEdge({self._inner!r})"


class ReverseWrapIt(GraphIterator):
    """Runs a wrapped graph's iterator against the graph inside the view."""

    __slots__ = ("_it",)

    def __init__(self, it: GraphIterator) -> None:
        self._it = it

    def next(self, g: ReverseDigraph):
        return self._it.next(g._graph)

    def size_hint(self, g: ReverseDigraph) -> tuple[int, int | None]:
        return self._it.size_hint(g._graph)

    def count(self, g: ReverseDigraph) -> int:
        return self._it.count(g._graph)


class ReverseIncidentIt(GraphIterator):
    """Like :class:`ReverseWrapIt`, wrapping each half-edge in :class:`ReverseDirectedEdge`."""

    __slots__ = ("_it",)

    def __init__(self, it: GraphIterator) -> None:
        self._it = it

    def next(self, g: ReverseDigraph):
        item = self._it.next(g._graph)
        if item is None:
            return None
        d, v = item
        return (ReverseDirectedEdge(d), v)

    def size_hint(self, g: ReverseDigraph) -> tuple[int, int | None]:
        return self._it.size_hint(g._graph)

    def count(self, g: ReverseDigraph) -> int:
        return self._it.count(g._graph)


class ReverseDigraph(GraphType):
    """A digraph wrapping an existing graph with edges in opposite directions.

    Outgoing and incoming edges trade places, ``src`` and ``snk`` are
    swapped, and half-edges from ``incident_iter`` have their orientation
    inverted. Undirected neighbor iteration, counts, handles and identifiers
    are the wrapped graph's.

    Instantiating ``ReverseDigraph(g)`` (or calling :func:`reverse`) returns
    an instance of a subclass that implements the capabilities of ``g``.

    Parameters
    ----------
    graph : DirectedRef
        The graph to wrap. It must stay unchanged while the view is used.

    """

    __slots__ = ("_graph",)

    def __new__(cls, graph):
        if cls is ReverseDigraph:
            cls = _view_class(type(graph))
        return super().__new__(cls)

    def __init__(self, graph) -> None:
        self._graph = graph

    @property
    def inner(self):
        """The wrapped graph."""
        return self._graph

    def __repr__(self) -> str:
        return f"<ReverseDigraph of {self._graph!r}>"


# ==================== Reference-style capabilities ====================


class _FiniteGraphRef(ReverseDigraph, FiniteGraphRef):
    __slots__ = ()

    def num_nodes(self) -> int:
        return self._graph.num_nodes()

    def num_edges(self) -> int:
        return self._graph.num_edges()

    def nodes(self):
        return self._graph.nodes()

    def edges(self):
        return self._graph.edges()

    def enodes(self, e) -> tuple:
        return self._graph.enodes(e)


class _FiniteDigraphRef(_FiniteGraphRef, FiniteDigraphRef):
    __slots__ = ()

    def src(self, e):
        return self._graph.snk(e)

    def snk(self, e):
        return self._graph.src(e)


class _UndirectedRef(ReverseDigraph, UndirectedRef):
    __slots__ = ()

    def neighs(self, u):
        return self._graph.neighs(u)


class _DirectedRef(ReverseDigraph, DirectedRef):
    __slots__ = ()

    def outedges(self, u):
        return self._graph.inedges(u)

    def inedges(self, u):
        return self._graph.outedges(u)

    def incident_edges(self, u):
        return ((ReverseDirectedEdge(d), v) for d, v in self._graph.incident_edges(u))

    def out_degree(self, u) -> int:
        return self._graph.in_degree(u)

    def in_degree(self, u) -> int:
        return self._graph.out_degree(u)


class _IndexGraph(ReverseDigraph, IndexGraph):
    __slots__ = ()

    def node_id(self, u) -> int:
        return self._graph.node_id(u)

    def id2node(self, id: int):
        return self._graph.id2node(id)

    def edge_id(self, e) -> int:
        return self._graph.edge_id(e)

    def id2edge(self, id: int):
        return self._graph.id2edge(id)


# ==================== Context-passing capabilities ====================


class _FiniteGraph(_FiniteGraphRef, FiniteGraph):
    __slots__ = ()

    def nodes_iter(self) -> ReverseWrapIt:
        return ReverseWrapIt(self._graph.nodes_iter())

    def edges_iter(self) -> ReverseWrapIt:
        return ReverseWrapIt(self._graph.edges_iter())


class _FiniteDigraph(_FiniteDigraphRef, _FiniteGraph, FiniteDigraph):
    __slots__ = ()


class _Undirected(_UndirectedRef, Undirected):
    __slots__ = ()

    def neigh_iter(self, u) -> ReverseWrapIt:
        return ReverseWrapIt(self._graph.neigh_iter(u))


class _Directed(_DirectedRef, Directed):
    __slots__ = ()

    def out_iter(self, u) -> ReverseWrapIt:
        return ReverseWrapIt(self._graph.in_iter(u))

    def in_iter(self, u) -> ReverseWrapIt:
        return ReverseWrapIt(self._graph.out_iter(u))

    def incident_iter(self, u) -> ReverseIncidentIt:
        return ReverseIncidentIt(self._graph.incident_iter(u))


# capability -> mixin, most derived first within each family
_MIXINS = (
    (FiniteDigraph, _FiniteDigraph),
    (FiniteGraph, _FiniteGraph),
    (FiniteDigraphRef, _FiniteDigraphRef),
    (FiniteGraphRef, _FiniteGraphRef),
    (Directed, _Directed),
    (DirectedRef, _DirectedRef),
    (Undirected, _Undirected),
    (UndirectedRef, _UndirectedRef),
    (IndexGraph, _IndexGraph),
)


def _view_class(graph_type: type) -> type:
    if not issubclass(graph_type, DirectedRef):
        raise TypeError(f"Cannot reverse {graph_type.__name__}: it is not a directed graph")
    chosen = [mixin for cap, mixin in _MIXINS if issubclass(graph_type, cap)]
    # a mixin already inherited through a more specific one is redundant
    bases = tuple(m for m in chosen if not any(o is not m and issubclass(o, m) for o in chosen))
    return _compose(bases)


@lru_cache(maxsize=None)
def _compose(bases: tuple[type, ...]) -> type:
    return type(
        "ReverseDigraph",
        bases,
        {"__slots__": (), "__module__": __name__, "__doc__": ReverseDigraph.__doc__},
    )


def reverse(graph) -> ReverseDigraph:
    """Return a view of ``graph`` with all edges reversed.

    Parameters
    ----------
    graph : DirectedRef
        Any graph with oriented neighbor access (context-passing or
        reference-style).

    Returns
    -------
    ReverseDigraph
        A view satisfying the same capabilities as ``graph``.

    Raises
    ------
    TypeError
        If ``graph`` is not a :class:`~graphcaps.core.refs.DirectedRef`.

    """
    return ReverseDigraph(graph)
