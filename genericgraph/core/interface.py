"""
Capability descriptor linking the graph container to its vertex and edge types.

The container never inspects vertices or edges directly. Every read of an index
or an endpoint, every reverse-token synthesis and every factory call goes
through a ``GraphInterface``, so the same container logic serves any vertex
and edge types for which such a descriptor exists.
"""

import logging
from typing import Any, TYPE_CHECKING

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge

if TYPE_CHECKING:
    from .graph import GenericGraph

logger = logging.getLogger(__name__)


class GraphInterface:
    """
    Descriptor for the default ``pyvertex``/``pyedge`` types.

    Subclass and override the accessors to adapt other vertex and edge types.
    The factories pre-assign the next sequential index of the target graph.
    """

    vertex_type = pyvertex
    edge_type = pyedge

    def is_vertex(self, obj: Any) -> bool:
        return isinstance(obj, self.vertex_type)

    def is_edge(self, obj: Any) -> bool:
        return isinstance(obj, self.edge_type)

    def vertex_index(self, v) -> int:
        return v.lVertexIndex

    def edge_index(self, e) -> int:
        return e.lEdgeIndex

    def set_vertex_index(self, v, lVertexIndex: int):
        v.lVertexIndex = lVertexIndex

    def set_edge_index(self, e, lEdgeIndex: int):
        e.lEdgeIndex = lEdgeIndex

    def source(self, e):
        return e.pVertex_source

    def target(self, e):
        return e.pVertex_target

    def revedge(self, e):
        return e.revedge()

    def make_vertex(self, graph: "GenericGraph", sLabel: Any = None, **kwargs):
        """
        Create a vertex holding the next sequential index of ``graph``.

        Args:
            graph: Graph the vertex is intended for
            sLabel: Opaque payload stored on the vertex
            **kwargs: Extra attributes

        Returns:
            A new vertex, not yet added to the graph
        """
        lVertexIndex = graph.num_vertices() + 1
        logger.debug(f"Making vertex {lVertexIndex} for label {sLabel!r}")
        return self.vertex_type(lVertexIndex, sLabel, kwargs)

    def make_edge(self, graph: "GenericGraph", u, v, **kwargs):
        """
        Create an edge from ``u`` to ``v`` holding the next sequential index of ``graph``.

        Args:
            graph: Graph the edge is intended for
            u: Source vertex
            v: Target vertex
            **kwargs: Extra attributes

        Returns:
            A new edge, not yet added to the graph
        """
        lEdgeIndex = graph.num_edges() + 1
        logger.debug(f"Making edge {lEdgeIndex} from {u!r} to {v!r}")
        return self.edge_type(lEdgeIndex, u, v, kwargs)


default_interface = GraphInterface()
