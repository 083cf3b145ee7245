"""NetworkX adapter.

Provides:
    NetworkXDigraph(nxG)   -> capability view over a networkx digraph
    from_nx(nxG)           -> same, as a function
    to_nx(g, use_ids=False) -> networkx.MultiDiGraph

The view implements the reference-style capabilities
(:class:`FiniteDigraphRef`, :class:`DirectedRef`, :class:`UndirectedRef`)
and :class:`IndexGraph`. It copies no topology: node handles are networkx
node keys and edge handles are ``(u, v, key)`` triples, ``key`` being
``None`` for simple digraphs. Dense identifiers follow networkx insertion
order and are snapshotted when the view is created; mutating the networkx
graph afterwards invalidates the view.
"""

from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install graphcaps[networkx]"
    ) from e

import logging
import operator
from collections.abc import Iterator
from dataclasses import dataclass

from ..core._base import DirectedEdge, IndexGraph
from ..core.errors import InvalidHandleError, InvalidIdError
from ..core.refs import DirectedRef, FiniteDigraphRef, UndirectedRef

logger = logging.getLogger(__name__)

__all__ = ["NetworkXDigraph", "NxHalfEdge", "from_nx", "to_nx"]


@dataclass(frozen=True, slots=True)
class NxHalfEdge(DirectedEdge):
    """Half-edge of a :class:`NetworkXDigraph`."""

    triple: tuple
    outgoing: bool

    def is_outgoing(self) -> bool:
        return self.outgoing

    def edge(self) -> tuple:
        return self.triple


class NetworkXDigraph(FiniteDigraphRef, DirectedRef, UndirectedRef, IndexGraph):
    """View of a networkx ``DiGraph`` or ``MultiDiGraph``.

    Parameters
    ----------
    nxG : networkx.DiGraph | networkx.MultiDiGraph
        Graph to wrap. It must not be modified while the view is in use.

    Raises
    ------
    TypeError
        If ``nxG`` is undirected.

    """

    def __init__(self, nxG) -> None:
        if not nxG.is_directed():
            raise TypeError(f"Expected a directed networkx graph, got {type(nxG).__name__}")
        self._nx = nxG
        self._multi = nxG.is_multigraph()
        self._nodes = list(nxG.nodes)
        self._node_ids = {u: i for i, u in enumerate(self._nodes)}
        if self._multi:
            self._edges = list(nxG.edges(keys=True))
        else:
            self._edges = [(u, v, None) for u, v in nxG.edges()]
        self._edge_ids = {e: i for i, e in enumerate(self._edges)}
        logger.debug(
            "Wrapped networkx %s with %d nodes and %d edges",
            type(nxG).__name__,
            len(self._nodes),
            len(self._edges),
        )

    @property
    def nx_graph(self):
        """The wrapped networkx graph."""
        return self._nx

    def __repr__(self) -> str:
        return f"<NetworkXDigraph | V={len(self._nodes)} · E={len(self._edges)}>"

    def _check_node(self, u) -> None:
        try:
            known = u in self._node_ids
        except TypeError:
            known = False
        if not known:
            raise InvalidHandleError("node", u)

    def _check_edge(self, e) -> tuple:
        try:
            known = e in self._edge_ids
        except TypeError:
            known = False
        if not known:
            raise InvalidHandleError("edge", e)
        return e

    # ==================== FiniteDigraphRef ====================

    def num_nodes(self) -> int:
        return len(self._nodes)

    def num_edges(self) -> int:
        return len(self._edges)

    def nodes(self) -> Iterator:
        return iter(self._nodes)

    def edges(self) -> Iterator[tuple]:
        return iter(self._edges)

    def src(self, e):
        return self._check_edge(e)[0]

    def snk(self, e):
        return self._check_edge(e)[1]

    # ==================== DirectedRef / UndirectedRef ====================

    def _out(self, u) -> Iterator[tuple]:
        if self._multi:
            for _, v, k in self._nx.out_edges(u, keys=True):
                yield (u, v, k), v
        else:
            for _, v in self._nx.out_edges(u):
                yield (u, v, None), v

    def _in(self, u) -> Iterator[tuple]:
        if self._multi:
            for w, _, k in self._nx.in_edges(u, keys=True):
                yield (w, u, k), w
        else:
            for w, _ in self._nx.in_edges(u):
                yield (w, u, None), w

    def outedges(self, u) -> Iterator[tuple]:
        self._check_node(u)
        return self._out(u)

    def inedges(self, u) -> Iterator[tuple]:
        self._check_node(u)
        return self._in(u)

    def incident_edges(self, u) -> Iterator[tuple[NxHalfEdge, object]]:
        self._check_node(u)
        return self._incident(u)

    def _incident(self, u):
        for e, v in self._out(u):
            yield NxHalfEdge(e, True), v
        for e, v in self._in(u):
            yield NxHalfEdge(e, False), v

    def neighs(self, u) -> Iterator[tuple]:
        self._check_node(u)
        return self._neighs(u)

    def _neighs(self, u):
        yield from self._out(u)
        for e, v in self._in(u):
            # self-loops were reported as outgoing
            if v != u:
                yield e, v

    def out_degree(self, u) -> int:
        self._check_node(u)
        return self._nx.out_degree(u)

    def in_degree(self, u) -> int:
        self._check_node(u)
        return self._nx.in_degree(u)

    # ==================== IndexGraph ====================

    def node_id(self, u) -> int:
        try:
            return self._node_ids[u]
        except (KeyError, TypeError):
            raise InvalidHandleError("node", u) from None

    def id2node(self, id: int):
        i = operator.index(id)
        if not 0 <= i < len(self._nodes):
            raise InvalidIdError("node", i, len(self._nodes))
        return self._nodes[i]

    def edge_id(self, e) -> int:
        try:
            return self._edge_ids[e]
        except (KeyError, TypeError):
            raise InvalidHandleError("edge", e) from None

    def id2edge(self, id: int) -> tuple:
        i = operator.index(id)
        if not 0 <= i < len(self._edges):
            raise InvalidIdError("edge", i, len(self._edges))
        return self._edges[i]


def from_nx(nxG) -> NetworkXDigraph:
    """Wrap a directed networkx graph; see :class:`NetworkXDigraph`."""
    return NetworkXDigraph(nxG)


def to_nx(g, *, use_ids: bool = False):
    """Export a finite digraph to a ``networkx.MultiDiGraph``.

    Parameters
    ----------
    g : FiniteDigraphRef
        Source graph; reversed views export their reversed orientation.
    use_ids : bool
        If True, nodes are ``node_id`` values and edge keys are ``edge_id``
        values (requires an :class:`IndexGraph`). Otherwise the handles
        themselves are used.

    Returns
    -------
    networkx.MultiDiGraph

    """
    if not isinstance(g, FiniteDigraphRef):
        raise TypeError(f"to_nx requires a finite digraph, got {type(g).__name__}")
    if use_ids and not isinstance(g, IndexGraph):
        raise TypeError("use_ids=True requires an IndexGraph")

    if use_ids:
        node_key, edge_key = g.node_id, g.edge_id
    else:
        node_key = edge_key = lambda x: x

    G = nx.MultiDiGraph()
    G.add_nodes_from(node_key(u) for u in g.nodes())
    for e in g.edges():
        G.add_edge(node_key(g.src(e)), node_key(g.snk(e)), key=edge_key(e))
    return G
