from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["GraphType", "DirectedEdge", "IndexGraph"]


class GraphType(ABC):
    """Root of every capability.

    A graph type declares its node and edge handles only implicitly: handles
    are whatever its methods return. They must be hashable, comparable for
    equality, and carry no data of their own. A handle is valid for the graph
    that produced it and for views wrapping that graph.
    """

    __slots__ = ()


class DirectedEdge(ABC):
    """An edge seen from one of its endpoints (a half-edge).

    Exactly one of :meth:`is_outgoing` and :meth:`is_incoming` is true.
    """

    __slots__ = ()

    @abstractmethod
    def is_outgoing(self) -> bool:
        """True if the endpoint this half-edge was produced at is the source."""

    def is_incoming(self) -> bool:
        """True if the endpoint this half-edge was produced at is the sink."""
        return not self.is_outgoing()

    @abstractmethod
    def edge(self) -> Any:
        """Return the underlying (undirected) edge handle."""


class IndexGraph(GraphType):
    """Bijection between handles and dense identifiers.

    ``node_id`` ranges over ``[0, num_nodes())`` and ``edge_id`` over
    ``[0, num_edges())``; ``id2node(node_id(u)) == u`` and
    ``id2edge(edge_id(e)) == e`` for every valid handle. Identifiers can index
    dense auxiliary storage (see :mod:`graphcaps.storage.vec`).

    Passing a foreign handle or an out-of-range identifier is a caller error.
    """

    __slots__ = ()

    @abstractmethod
    def node_id(self, u) -> int:
        """Return the identifier of node ``u``."""

    @abstractmethod
    def id2node(self, id: int):
        """Return the node with identifier ``id``."""

    @abstractmethod
    def edge_id(self, e) -> int:
        """Return the identifier of edge ``e``."""

    @abstractmethod
    def id2edge(self, id: int):
        """Return the edge with identifier ``id``."""
