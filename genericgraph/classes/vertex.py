"""
Default vertex type for the generic graph container.
"""

from typing import Any, Dict, Optional


class pyvertex:
    """
    A vertex carrying its own 1-based vertex index.

    The index is assigned by the graph's vertex factory and is rewritten by the
    graph when an earlier vertex is removed. Vertices compare by identity, so
    two vertices built from the same label are distinct.
    """

    def __init__(self, lVertexIndex: int, sLabel: Any = None, aAttribute: Optional[Dict[str, Any]] = None):
        """
        Initialize a vertex.

        Args:
            lVertexIndex: 1-based index of the vertex in its graph
            sLabel: Opaque user payload identifying the vertex
            aAttribute: Optional dictionary of extra attributes
        """
        self.lVertexIndex = lVertexIndex
        self.sLabel = sLabel
        self.aAttribute: Dict[str, Any] = dict(aAttribute) if aAttribute else {}

    def __repr__(self) -> str:
        return f"pyvertex({self.lVertexIndex}, {self.sLabel!r})"
