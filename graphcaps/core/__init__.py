from .attributes import AttributedGraph, EdgeAttributes, NodeAttributes
from .errors import GraphError, InvalidHandleError, InvalidIdError
from .iterators import GraphIter, GraphIterator, RangeIt
from .refs import DirectedRef, FiniteDigraphRef, FiniteGraphRef, UndirectedRef
from .traits import (
    Directed,
    DirectedEdge,
    FiniteDigraph,
    FiniteGraph,
    GraphType,
    IndexGraph,
    Undirected,
)

__all__ = [
    "AttributedGraph",
    "Directed",
    "DirectedEdge",
    "DirectedRef",
    "EdgeAttributes",
    "FiniteDigraph",
    "FiniteDigraphRef",
    "FiniteGraph",
    "FiniteGraphRef",
    "GraphError",
    "GraphIter",
    "GraphIterator",
    "GraphType",
    "IndexGraph",
    "InvalidHandleError",
    "InvalidIdError",
    "NodeAttributes",
    "RangeIt",
    "Undirected",
    "UndirectedRef",
]
