from __future__ import annotations

from typing import Any

from ..core._base import IndexGraph
from ..core.attributes import AttributedGraph, EdgeAttributes, NodeAttributes
from .vec import EdgeVec, NodeVec

__all__ = ["Attributed", "AttributeView"]


class AttributeView(NodeAttributes, EdgeAttributes):
    """Live node and edge attribute access over shared vectors."""

    __slots__ = ("_nodes", "_edges")

    def __init__(self, nodes: NodeVec, edges: EdgeVec) -> None:
        self._nodes = nodes
        self._edges = edges

    def node(self, u) -> Any:
        return self._nodes.node(u)

    def set_node(self, u, value) -> None:
        self._nodes.set_node(u, value)

    def edge(self, e) -> Any:
        return self._edges.edge(e)

    def set_edge(self, e, value) -> None:
        self._edges.set_edge(e, value)


class Attributed(AttributedGraph):
    """A graph together with one payload per node and per edge.

    Parameters
    ----------
    graph : IndexGraph
        Topology. It is never modified.
    node_attrs : NodeVec, optional
        Node payloads; a vector filled with ``None`` when omitted.
    edge_attrs : EdgeVec, optional
        Edge payloads; a vector filled with ``None`` when omitted.

    Raises
    ------
    ValueError
        If a given vector was built for a different graph.

    Examples
    --------
    >>> from graphcaps.generators import path
    >>> ag = Attributed(path(3))
    >>> g, attrs = ag.split()
    >>> for e in g.edges():
    ...     attrs.set_edge(e, g.edge_id(e) * 10)
    >>> ag.edge_attrs.to_numpy().tolist()
    [0, 10]

    """

    def __init__(
        self,
        graph: IndexGraph,
        node_attrs: NodeVec | None = None,
        edge_attrs: EdgeVec | None = None,
    ) -> None:
        for vec in (node_attrs, edge_attrs):
            if vec is not None and vec.graph is not graph:
                raise ValueError(f"{type(vec).__name__} belongs to a different graph")
        self._graph = graph
        self.node_attrs = node_attrs if node_attrs is not None else NodeVec(graph)
        self.edge_attrs = edge_attrs if edge_attrs is not None else EdgeVec(graph)

    @property
    def graph(self) -> IndexGraph:
        return self._graph

    def split(self) -> tuple[IndexGraph, AttributeView]:
        return self._graph, AttributeView(self.node_attrs, self.edge_attrs)

    def __repr__(self) -> str:
        return f"<Attributed | {self._graph!r}>"
