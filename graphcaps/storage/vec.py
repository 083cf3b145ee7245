"""Dense attribute vectors indexed by node or edge identifier.

A :class:`NodeVec` (:class:`EdgeVec`) stores one value per node (edge) of an
:class:`~graphcaps.core.traits.IndexGraph` in a numpy array, at the position
given by ``node_id`` (``edge_id``). It works with any index graph, including
views such as :func:`~graphcaps.adapters.reverse.reverse` that pass
identifiers through unchanged, so a vector built for a graph also serves its
reverse view.

Examples
--------
>>> from graphcaps.generators import path
>>> g = path(3)
>>> dist = NodeVec(g, 0.0)
>>> dist[g.id2node(2)] = 1.5
>>> dist.to_numpy().tolist()
[0.0, 0.0, 1.5]

"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Sequence
from typing import Any

import numpy as np
import polars as pl

from ..core._base import IndexGraph
from ..core.attributes import EdgeAttributes, NodeAttributes

__all__ = ["NodeVec", "EdgeVec"]


_INEXACT = (float, complex, np.floating, np.complexfloating)


def _infer(values) -> type | None:
    # ints and bools stay Python objects; a numeric array would coerce later writes
    if all(isinstance(v, _INEXACT) for v in values):
        return None
    return object


def _filled(n: int, value, dtype) -> np.ndarray:
    if dtype is None:
        dtype = _infer([value])
    data = np.empty(n, dtype=dtype if dtype is not None else np.asarray(value).dtype)
    if data.dtype == object:
        # every slot gets its own copy of a mutable fill value
        for i in range(n):
            data[i] = copy.deepcopy(value)
    else:
        data.fill(value)
    return data


class _IdVec:
    """Shared machinery of :class:`NodeVec` and :class:`EdgeVec`."""

    _kind = ""

    def __init__(self, graph: IndexGraph, value: Any = None, *, dtype=None) -> None:
        self._graph = self._check_graph(graph)
        self._data = _filled(self._size(graph), value, dtype)

    @classmethod
    def from_fn(cls, graph: IndexGraph, fn: Callable[[Any], Any], *, dtype=None):
        """Initialize every entry with ``fn(handle)``."""
        vec = cls.__new__(cls)
        vec._graph = cls._check_graph(graph)
        values = [fn(x) for x in cls._handles(graph)]
        vec._data = cls._array(values, dtype)
        return vec

    @classmethod
    def from_values(cls, graph: IndexGraph, values: Sequence[Any], *, dtype=None):
        """Wrap ``values`` given in identifier order.

        Raises
        ------
        ValueError
            If ``len(values)`` differs from the number of nodes (edges).

        """
        expected = cls._size(cls._check_graph(graph))
        if len(values) != expected:
            raise ValueError(f"Expected {expected} {cls._kind} values, got {len(values)}")
        vec = cls.__new__(cls)
        vec._graph = graph
        vec._data = cls._array(values, dtype)
        return vec

    @classmethod
    def _check_graph(cls, graph) -> IndexGraph:
        if not isinstance(graph, IndexGraph):
            raise TypeError(f"{cls.__name__} requires an IndexGraph, got {type(graph).__name__}")
        return graph

    @staticmethod
    def _array(values, dtype) -> np.ndarray:
        if dtype is None and len(values):
            dtype = _infer(values)
        if dtype == object:
            data = np.empty(len(values), dtype=object)
            for i, v in enumerate(values):
                data[i] = v
            return data
        return np.asarray(values, dtype=dtype)

    @property
    def graph(self) -> IndexGraph:
        return self._graph

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.tolist() if self._data.dtype != object else self._data)

    def __getitem__(self, key):
        return self._data[self._id(key)]

    def __setitem__(self, key, value) -> None:
        self._write(self._id(key), value)

    def _write(self, i: int, value) -> None:
        data = self._data
        if data.dtype == object:
            data[i] = value
            return
        try:
            stored = data.dtype.type(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise TypeError(f"Cannot store {value!r} in a {data.dtype} {self._kind} vector") from e
        if stored != value and not (stored != stored and value != value):
            raise TypeError(f"Storing {value!r} in a {data.dtype} {self._kind} vector would change it to {stored!r}")
        data[i] = stored

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over ``(handle, value)`` in identifier order."""
        for i, x in enumerate(self._handles(self._graph)):
            yield x, self._data[i]

    def to_numpy(self) -> np.ndarray:
        """Return the backing array (not a copy)."""
        return self._data

    def to_polars(self, name: str = "value") -> pl.DataFrame:
        """Return a two-column table ``(<kind>_id, name)`` in identifier order."""
        values = self._data.tolist()
        return pl.DataFrame(
            {f"{self._kind}_id": list(range(len(values))), name: values},
            strict=False,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class NodeVec(_IdVec, NodeAttributes):
    """One value per node of an :class:`IndexGraph`.

    Parameters
    ----------
    graph : IndexGraph
        Graph whose ``node_id`` positions the values.
    value : Any, default None
        Initial value of every entry. Mutable objects are stored per entry,
        not shared.
    dtype : numpy dtype, optional
        Storage type. When omitted, a float or complex ``value`` gets a numeric
        array and anything else (including ints and bools) is stored as
        ``object``, so later writes are kept as given.

    Raises
    ------
    TypeError
        On writes to a numeric vector that would change the written value.


    """

    _kind = "node"

    @staticmethod
    def _size(graph) -> int:
        return graph.num_nodes()

    @staticmethod
    def _handles(graph) -> Iterator:
        return (graph.id2node(i) for i in range(graph.num_nodes()))

    def _id(self, u) -> int:
        return self._graph.node_id(u)

    def node(self, u) -> Any:
        return self._data[self._graph.node_id(u)]

    def set_node(self, u, value) -> None:
        self._write(self._graph.node_id(u), value)


class EdgeVec(_IdVec, EdgeAttributes):
    """One value per edge of an :class:`IndexGraph`.

    Same parameters as :class:`NodeVec`, indexed by ``edge_id``.
    """

    _kind = "edge"

    @staticmethod
    def _size(graph) -> int:
        return graph.num_edges()

    @staticmethod
    def _handles(graph) -> Iterator:
        return (graph.id2edge(i) for i in range(graph.num_edges()))

    def _id(self, e) -> int:
        return self._graph.edge_id(e)

    def edge(self, e) -> Any:
        return self._data[self._graph.edge_id(e)]

    def set_edge(self, e, value) -> None:
        self._write(self._graph.edge_id(e), value)
