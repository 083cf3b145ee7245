"""Builders for small graph classes.

Every generator takes the graph class through ``builder`` (anything with a
``new_builder()`` returning an object with ``add_nodes``, ``add_edge`` and
``into_graph``) and defaults to
:class:`~graphcaps.storage.incidence.IncidenceGraph`. Node ``i`` of the
result is the ``i``-th node added, so on index graphs ``id2node(i)`` is the
node described below.

Examples
--------
>>> g = star(42)
>>> g.num_nodes(), g.num_edges()
(43, 42)
>>> center = g.id2node(0)
>>> g.out_degree(center), g.in_degree(center)
(42, 0)

"""

from __future__ import annotations

from .storage.incidence import IncidenceGraph

__all__ = ["star", "path", "cycle", "complete_graph", "complete_bipartite"]


def _check_size(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")


def star(n: int, builder=IncidenceGraph):
    """Star with center 0 and edges ``0 -> i`` for the ``n`` leaves ``1..n``."""
    _check_size("n", n)
    b = builder.new_builder()
    center, *leaves = b.add_nodes(n + 1)
    for v in leaves:
        b.add_edge(center, v)
    return b.into_graph()


def path(n: int, builder=IncidenceGraph):
    """Path ``0 -> 1 -> ... -> n-1`` on ``n`` nodes."""
    _check_size("n", n)
    b = builder.new_builder()
    nodes = b.add_nodes(n)
    for u, v in zip(nodes, nodes[1:]):
        b.add_edge(u, v)
    return b.into_graph()


def cycle(n: int, builder=IncidenceGraph):
    """Cycle ``0 -> 1 -> ... -> n-1 -> 0``.

    ``cycle(1)`` is a single self-loop; ``cycle(0)`` is empty.
    """
    _check_size("n", n)
    b = builder.new_builder()
    nodes = b.add_nodes(n)
    for i, u in enumerate(nodes):
        b.add_edge(u, nodes[(i + 1) % n])
    return b.into_graph()


def complete_graph(n: int, builder=IncidenceGraph):
    """One edge ``i -> j`` for every pair ``i < j``."""
    _check_size("n", n)
    b = builder.new_builder()
    nodes = b.add_nodes(n)
    for i, u in enumerate(nodes):
        for v in nodes[i + 1 :]:
            b.add_edge(u, v)
    return b.into_graph()


def complete_bipartite(n: int, m: int, builder=IncidenceGraph):
    """Edges from each of the nodes ``0..n-1`` to each of ``n..n+m-1``."""
    _check_size("n", n)
    _check_size("m", m)
    b = builder.new_builder()
    left = b.add_nodes(n)
    right = b.add_nodes(m)
    for u in left:
        for v in right:
            b.add_edge(u, v)
    return b.into_graph()
