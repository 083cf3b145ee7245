# graphcaps/__init__.py
"""graphcaps: capability interfaces for finite graphs, single import."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "graphcaps.adapters",
    "core": "graphcaps.core",
    "storage": "graphcaps.storage",
    "generators": "graphcaps.generators",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Capabilities
    "GraphType": ("graphcaps.core.traits", "GraphType"),
    "FiniteGraph": ("graphcaps.core.traits", "FiniteGraph"),
    "FiniteDigraph": ("graphcaps.core.traits", "FiniteDigraph"),
    "Undirected": ("graphcaps.core.traits", "Undirected"),
    "Directed": ("graphcaps.core.traits", "Directed"),
    "DirectedEdge": ("graphcaps.core.traits", "DirectedEdge"),
    "IndexGraph": ("graphcaps.core.traits", "IndexGraph"),
    "FiniteGraphRef": ("graphcaps.core.refs", "FiniteGraphRef"),
    "FiniteDigraphRef": ("graphcaps.core.refs", "FiniteDigraphRef"),
    "UndirectedRef": ("graphcaps.core.refs", "UndirectedRef"),
    "DirectedRef": ("graphcaps.core.refs", "DirectedRef"),
    "GraphIterator": ("graphcaps.core.iterators", "GraphIterator"),
    "GraphIter": ("graphcaps.core.iterators", "GraphIter"),

    # Attributes
    "NodeAttributes": ("graphcaps.core.attributes", "NodeAttributes"),
    "EdgeAttributes": ("graphcaps.core.attributes", "EdgeAttributes"),
    "AttributedGraph": ("graphcaps.core.attributes", "AttributedGraph"),

    # Errors
    "GraphError": ("graphcaps.core.errors", "GraphError"),
    "InvalidHandleError": ("graphcaps.core.errors", "InvalidHandleError"),
    "InvalidIdError": ("graphcaps.core.errors", "InvalidIdError"),

    # Views
    "reverse": ("graphcaps.adapters.reverse", "reverse"),
    "ReverseDigraph": ("graphcaps.adapters.reverse", "ReverseDigraph"),

    # NetworkX adapter (optional dependency)
    "from_nx": ("graphcaps.adapters.networkx", "from_nx"),
    "to_nx": ("graphcaps.adapters.networkx", "to_nx"),

    # Storage
    "IncidenceGraph": ("graphcaps.storage.incidence", "IncidenceGraph"),
    "NodeVec": ("graphcaps.storage.vec", "NodeVec"),
    "EdgeVec": ("graphcaps.storage.vec", "EdgeVec"),
    "Attributed": ("graphcaps.storage.attributed", "Attributed"),

    # Generators
    "star": ("graphcaps.generators", "star"),
    "path": ("graphcaps.generators", "path"),
    "cycle": ("graphcaps.generators", "cycle"),
    "complete_graph": ("graphcaps.generators", "complete_graph"),
    "complete_bipartite": ("graphcaps.generators", "complete_bipartite"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("graphcaps")
except PackageNotFoundError:
    __version__ = "0.0.0"
