"""Access to data associated with the nodes or edges of a graph.

The interfaces here describe access only; storage and initialization belong
to the implementing container (see :mod:`graphcaps.storage.vec`). The graph
serves as the source of keys.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["NodeAttributes", "EdgeAttributes", "AttributedGraph"]


class NodeAttributes(ABC):
    """Object with attributes associated to the nodes of a graph."""

    __slots__ = ()

    @abstractmethod
    def node(self, u) -> Any:
        """Return the attribute of node ``u``.

        Mutable attributes are returned live; changing them in place changes
        the stored value.
        """

    @abstractmethod
    def set_node(self, u, value) -> None:
        """Replace the attribute of node ``u``."""


class EdgeAttributes(ABC):
    """Object with attributes associated to the edges of a graph."""

    __slots__ = ()

    @abstractmethod
    def edge(self, e) -> Any:
        """Return the attribute of edge ``e``."""

    @abstractmethod
    def set_edge(self, e, value) -> None:
        """Replace the attribute of edge ``e``."""


class AttributedGraph(ABC):
    """A graph bundled with its attributes."""

    __slots__ = ()

    @abstractmethod
    def split(self) -> tuple[Any, Any]:
        """Separate the topology from the attributes.

        Returns
        -------
        tuple
            ``(graph, attributes)`` where ``graph`` is the read-only topology
            and ``attributes`` a live view implementing
            :class:`NodeAttributes` and/or :class:`EdgeAttributes`. Writes
            through the view are visible in this object.

        """
