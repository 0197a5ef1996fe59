"""
Neighbor views over incidence lists.

Each view wraps a live incidence list and maps every edge to its other
endpoint on demand. Views can be iterated any number of times and always
reflect the list's current contents.
"""

from typing import Any, Iterator, Sequence


class _EndpointIterator:
    """Base class for lazy endpoint views over a sequence of edges."""

    def __init__(self, graph: Any, aEdge: Sequence):
        """
        Args:
            graph: Graph whose interface resolves edge endpoints
            aEdge: Live incidence list to walk
        """
        self.graph = graph
        self.aEdge = aEdge

    def _endpoint(self, e):
        raise NotImplementedError

    def __iter__(self) -> Iterator:
        for e in self.aEdge:
            yield self._endpoint(e)

    def __len__(self) -> int:
        return len(self.aEdge)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class TargetIterator(_EndpointIterator):
    """Yields the target of each edge, i.e. the out-neighbors of a vertex."""

    def _endpoint(self, e):
        return self.graph.interface.target(e)


class SourceIterator(_EndpointIterator):
    """Yields the source of each edge, i.e. the in-neighbors of a vertex."""

    def _endpoint(self, e):
        return self.graph.interface.source(e)
