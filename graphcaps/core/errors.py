"""Exceptions raised on precondition violations.

No operation in graphcaps reports a recoverable error. Passing a handle that
does not belong to a graph, or an identifier outside its range, is a caller
error; the reference storage raises the types below instead of returning
unspecified results. Adapters let them propagate unchanged.
"""

from __future__ import annotations

__all__ = ["GraphError", "InvalidHandleError", "InvalidIdError"]


class GraphError(Exception):
    """Base class for graphcaps precondition violations."""


class InvalidHandleError(GraphError, KeyError):
    """A node or edge handle that does not belong to the graph."""

    def __init__(self, kind: str, handle) -> None:
        self.kind = kind
        self.handle = handle
        super().__init__(f"{kind} handle {handle!r} does not belong to this graph")

    def __str__(self) -> str:
        # KeyError quotes its argument
        return self.args[0]


class InvalidIdError(GraphError, IndexError):
    """An identifier outside ``[0, count)``."""

    def __init__(self, kind: str, ident: int, count: int) -> None:
        self.kind = kind
        self.ident = ident
        self.count = count
        super().__init__(f"{kind} id {ident!r} out of range [0, {count})")
