"""Context-passing iteration over graphs.

A :class:`GraphIterator` holds positional state only (typically a cursor).
The graph it walks is handed to every step, so an iterator never keeps the
graph referenced between calls and wrappers such as the reverse view can
substitute the graph they wrap at each step.

Items are never ``None``: ``next`` returns ``None`` exactly when the
iterator is exhausted, and keeps doing so on every later call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

__all__ = ["GraphIterator", "GraphIter", "RangeIt"]


class GraphIterator(ABC):
    """Traversal state whose steps take the graph as an explicit argument."""

    __slots__ = ()

    @abstractmethod
    def next(self, g) -> Any | None:
        """Return the next item, or ``None`` once the iterator is exhausted."""

    def size_hint(self, g) -> tuple[int, int | None]:
        """Return ``(lower, upper)`` bounds on the remaining items.

        ``upper`` is ``None`` when no bound is known.
        """
        return (0, None)

    def count(self, g) -> int:
        """Consume the iterator and return the number of remaining items."""
        n = 0
        while self.next(g) is not None:
            n += 1
        return n

    def iter(self, g) -> GraphIter:
        """Bind this iterator to ``g`` as a standard Python iterator."""
        return GraphIter(self, g)


class GraphIter(Iterator):
    """A :class:`GraphIterator` paired with its graph.

    This is the bridge from context-passing traversals to ordinary Python
    iteration; the reference-style capability methods (``nodes()``,
    ``outedges(u)``, ...) of context-passing graphs return these.

    Parameters
    ----------
    it : GraphIterator
        Iterator holding the traversal state.
    g : object
        Graph passed to every step of ``it``.

    """

    __slots__ = ("_it", "_g")

    def __init__(self, it: GraphIterator, g) -> None:
        self._it = it
        self._g = g

    def __iter__(self) -> GraphIter:
        return self

    def __next__(self):
        item = self._it.next(self._g)
        if item is None:
            raise StopIteration
        return item

    def __length_hint__(self) -> int:
        lower, upper = self._it.size_hint(self._g)
        return upper if upper is not None else lower

    def count(self) -> int:
        """Consume the remaining items and return how many there were."""
        return self._it.count(self._g)


class RangeIt(GraphIterator):
    """Cursor over ``[start, end)`` mapping each position through ``fn(g, pos)``.

    ``fn`` must be a plain function of the graph and the position; the cursor
    itself stores nothing else.
    """

    __slots__ = ("_pos", "_end", "_fn")

    def __init__(self, start: int, end: int, fn: Callable[[Any, int], Any]) -> None:
        self._pos = start
        self._end = max(start, end)
        self._fn = fn

    def next(self, g):
        if self._pos >= self._end:
            return None
        item = self._fn(g, self._pos)
        self._pos += 1
        return item

    def size_hint(self, g) -> tuple[int, int | None]:
        n = self._end - self._pos
        return (n, n)

    def count(self, g) -> int:
        n = self._end - self._pos
        self._pos = self._end
        return n

    def __repr__(self) -> str:
        return f"RangeIt(pos={self._pos}, end={self._end})"
