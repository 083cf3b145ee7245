from .attributed import Attributed, AttributeView
from .incidence import DirEdge, Edge, IncidenceGraph, IncidenceGraphBuilder, Node
from .vec import EdgeVec, NodeVec

__all__ = [
    "Attributed",
    "AttributeView",
    "DirEdge",
    "Edge",
    "EdgeVec",
    "IncidenceGraph",
    "IncidenceGraphBuilder",
    "Node",
    "NodeVec",
]
