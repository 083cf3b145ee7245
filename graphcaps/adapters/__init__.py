from importlib import import_module, util

from .reverse import ReverseDigraph, ReverseDirectedEdge, ReverseIncidentIt, ReverseWrapIt, reverse

__all__ = [
    "ReverseDigraph",
    "ReverseDirectedEdge",
    "ReverseIncidentIt",
    "ReverseWrapIt",
    "available_backends",
    "load_adapter",
    "reverse",
]

# name -> (import_name, submodule, class_name)
_BACKENDS = {
    "networkx": ("networkx", ".networkx", "NetworkXDigraph"),
}


def _is_installed(modname: str) -> bool:
    return util.find_spec(modname) is not None


def available_backends() -> dict:
    return {name: _is_installed(mod) for name, (mod, _, _) in _BACKENDS.items()}


def load_adapter(name: str, *args, **kwargs):
    """Wrap a foreign graph with the adapter registered under ``name``.

    >>> view = load_adapter("networkx", nx_graph)  # doctest: +SKIP
    """
    if name not in _BACKENDS:
        raise ValueError(f"Unknown adapter '{name}'")
    modname, submod, cls = _BACKENDS[name]
    if not _is_installed(modname):
        raise ModuleNotFoundError(
            f"Optional backend '{name}' is not installed. "
            f"Install with `pip install graphcaps[{name}]`."
        )
    mod = import_module(__name__ + submod)
    return getattr(mod, cls)(*args, **kwargs)
