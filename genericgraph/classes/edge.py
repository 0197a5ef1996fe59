"""
Default edge type for the generic graph container.

An edge knows its source and target vertices and its own 1-based edge index.
Undirected graphs mirror every stored edge with a reverse token produced by
``revedge``; the token is the same conceptual edge walked the other way.
"""

from typing import Any, Dict, Optional

from .vertex import pyvertex


class pyedge:
    """
    A directed edge between two vertices.

    Equality is by (canonical edge, direction), never by endpoints: an edge
    built independently with the same endpoints as a stored edge is a
    different edge. A reverse token shares the index and the attribute
    dictionary of its canonical edge.
    """

    def __init__(self, lEdgeIndex: int, pVertex_source: pyvertex, pVertex_target: pyvertex,
                 aAttribute: Optional[Dict[str, Any]] = None):
        """
        Initialize a canonical edge.

        Args:
            lEdgeIndex: 1-based index of the edge in its graph
            pVertex_source: Source vertex
            pVertex_target: Target vertex
            aAttribute: Optional dictionary of extra attributes
        """
        self._lEdgeIndex = lEdgeIndex
        self.pVertex_source = pVertex_source
        self.pVertex_target = pVertex_target
        self.aAttribute: Dict[str, Any] = dict(aAttribute) if aAttribute else {}
        self.pEdge_canonical = self
        self.iFlag_reverse = 0

    @property
    def lEdgeIndex(self) -> int:
        return self.pEdge_canonical._lEdgeIndex

    @lEdgeIndex.setter
    def lEdgeIndex(self, lEdgeIndex: int):
        self.pEdge_canonical._lEdgeIndex = lEdgeIndex

    def revedge(self) -> "pyedge":
        """
        Build the direction-swapped token of this edge.

        Returns:
            A new token with source and target exchanged. Reversing a token
            yields a value equal to the canonical edge.
        """
        pEdge_reverse = type(self).__new__(type(self))
        pEdge_reverse.pVertex_source = self.pVertex_target
        pEdge_reverse.pVertex_target = self.pVertex_source
        pEdge_reverse.pEdge_canonical = self.pEdge_canonical
        pEdge_reverse.aAttribute = self.pEdge_canonical.aAttribute
        pEdge_reverse.iFlag_reverse = 1 - self.iFlag_reverse
        return pEdge_reverse

    def is_reverse(self) -> bool:
        return self.iFlag_reverse == 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, pyedge):
            return NotImplemented
        return (self.pEdge_canonical is other.pEdge_canonical
                and self.iFlag_reverse == other.iFlag_reverse)

    def __hash__(self) -> int:
        return hash((id(self.pEdge_canonical), self.iFlag_reverse))

    def __repr__(self) -> str:
        sSuffix = ", reverse" if self.iFlag_reverse else ""
        return f"pyedge({self.lEdgeIndex}: {self.pVertex_source!r} -> {self.pVertex_target!r}{sSuffix})"
