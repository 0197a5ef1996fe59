"""
Core graph data structure for generic graph representation.

This module provides the incidence-list based container behind every view the
library offers: vertex list, edge list, adjacency list and incidence list.
"""

import logging
from typing import Any, Callable, Generic, Iterable, List, MutableSequence, Optional, TypeVar

from .exceptions import (
    GraphCorruptionError,
    IndexAlignmentError,
    InvalidArgumentError,
    MissingEntityError,
)
from .interface import GraphInterface, default_interface
from ..analysis.neighbors import SourceIterator, TargetIterator

logger = logging.getLogger(__name__)

V = TypeVar('V')
E = TypeVar('E')


def _locate(aSequence: MutableSequence, item: Any) -> Optional[int]:
    """Return the position of the first element equal to ``item``, or None."""
    for i, element in enumerate(aSequence):
        if element == item:
            return i
    return None


class GenericGraph(Generic[V, E]):
    """
    Mutable graph holding four aligned containers.

    This class keeps the following in agreement across every mutation:
    - The vertex list, where vertex index ``i`` lives at position ``i - 1``
    - The edge list, where edge index ``i`` lives at position ``i - 1``
    - The forward incidence list (outgoing edges per vertex)
    - The backward incidence list (incoming edges per vertex)

    Undirected graphs store each edge once in the edge list and mirror it with
    a reverse token in the opposite endpoint's incidence lists.
    """

    def __init__(self, is_directed: bool = True, interface: Optional[GraphInterface] = None,
                 sequence_factory: Callable[[], MutableSequence] = list):
        """
        Initialize an empty graph.

        Args:
            is_directed: Whether edges are one-way
            interface: Descriptor for the vertex and edge types; defaults to
                the pyvertex/pyedge descriptor
            sequence_factory: Callable returning an empty mutable sequence,
                used for every internal container
        """
        self.is_directed = is_directed
        self.interface = interface if interface is not None else default_interface
        self.sequence_factory = sequence_factory

        self.aVertex: MutableSequence[V] = sequence_factory()
        self.aEdge: MutableSequence[E] = sequence_factory()
        self.aIncidence_forward: MutableSequence[MutableSequence[E]] = sequence_factory()
        self.aIncidence_backward: MutableSequence[MutableSequence[E]] = sequence_factory()

    def __repr__(self) -> str:
        sKind = "directed" if self.is_directed else "undirected"
        return f"GenericGraph({sKind}, {self.num_vertices()} vertices, {self.num_edges()} edges)"

    # ========================================================================
    # VERTEX AND EDGE LISTS
    # ========================================================================

    def num_vertices(self) -> int:
        return len(self.aVertex)

    def vertices(self) -> MutableSequence[V]:
        """Live vertex list, ordered by vertex index. Do not modify."""
        return self.aVertex

    def num_edges(self) -> int:
        return len(self.aEdge)

    def edges(self) -> MutableSequence[E]:
        """Live list of canonical edges, ordered by edge index. Do not modify."""
        return self.aEdge

    def vertex_index(self, v: V) -> int:
        return self.interface.vertex_index(v)

    def edge_index(self, e: E) -> int:
        return self.interface.edge_index(e)

    def has_vertex(self, v: Any) -> bool:
        if not self.interface.is_vertex(v):
            return False
        lVertexIndex = self.interface.vertex_index(v)
        return 1 <= lVertexIndex <= len(self.aVertex) and self.aVertex[lVertexIndex - 1] == v

    def has_edge(self, e: Any) -> bool:
        """Whether ``e`` is a canonical edge of this graph. Reverse tokens are not."""
        if not self.interface.is_edge(e):
            return False
        lEdgeIndex = self.interface.edge_index(e)
        return 1 <= lEdgeIndex <= len(self.aEdge) and self.aEdge[lEdgeIndex - 1] == e

    def find_edge(self, u: V, v: V) -> Optional[E]:
        """
        Find the first edge from ``u`` to ``v`` in edge-list order.

        This is a linear scan; parallel edges are resolved by insertion order.

        Returns:
            The matching canonical edge, or None
        """
        for e in self.aEdge:
            if self.interface.source(e) == u and self.interface.target(e) == v:
                return e
        return None

    # ========================================================================
    # INCIDENCE AND ADJACENCY LISTS
    # ========================================================================

    def out_edges(self, v: V) -> MutableSequence[E]:
        return self.aIncidence_forward[self._require_vertex(v) - 1]

    def in_edges(self, v: V) -> MutableSequence[E]:
        return self.aIncidence_backward[self._require_vertex(v) - 1]

    def out_degree(self, v: V) -> int:
        return len(self.out_edges(v))

    def in_degree(self, v: V) -> int:
        return len(self.in_edges(v))

    def out_neighbors(self, v: V) -> TargetIterator:
        """Lazy, restartable view of the targets of ``v``'s outgoing edges."""
        return TargetIterator(self, self.out_edges(v))

    def in_neighbors(self, v: V) -> SourceIterator:
        """Lazy, restartable view of the sources of ``v``'s incoming edges."""
        return SourceIterator(self, self.in_edges(v))

    def get_sources(self) -> List[V]:
        """Get vertices with no incoming edges."""
        return [v for i, v in enumerate(self.aVertex) if len(self.aIncidence_backward[i]) == 0]

    def get_sinks(self) -> List[V]:
        """Get vertices with no outgoing edges."""
        return [v for i, v in enumerate(self.aVertex) if len(self.aIncidence_forward[i]) == 0]

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, v: Any) -> V:
        """
        Append a vertex to the graph.

        Args:
            v: A vertex whose index is ``num_vertices() + 1``. Anything that is
                not a vertex is treated as a label and turned into one with the
                interface's vertex factory.

        Returns:
            The added vertex

        Raises:
            IndexAlignmentError: If the vertex index is not the next slot
        """
        if not self.interface.is_vertex(v):
            v = self.interface.make_vertex(self, v)

        lIndex_expected = self.num_vertices() + 1
        lVertexIndex = self.interface.vertex_index(v)
        if lVertexIndex != lIndex_expected:
            raise IndexAlignmentError('vertex', lVertexIndex, lIndex_expected)

        self.aVertex.append(v)
        self.aIncidence_forward.append(self.sequence_factory())
        self.aIncidence_backward.append(self.sequence_factory())
        logger.debug(f"Added vertex {lVertexIndex}")
        return v

    def add_edge(self, *args) -> E:
        """
        Append an edge to the graph.

        Accepted forms:
            add_edge(u, v, e): add ``e`` from ``u`` to ``v``
            add_edge(e): endpoints are read from ``e``
            add_edge(u, v): a fresh edge is made with the interface's edge factory

        Returns:
            The added canonical edge

        Raises:
            IndexAlignmentError: If the edge index is not the next slot
            MissingEntityError: If an endpoint is not in the graph
            InvalidArgumentError: If ``e`` does not join ``u`` to ``v``
        """
        if len(args) == 3:
            u, v, e = args
        elif len(args) == 1:
            e = args[0]
            self._require_edge_type(e)
            u, v = self.interface.source(e), self.interface.target(e)
        elif len(args) == 2:
            u, v = args
            e = self.interface.make_edge(self, u, v)
        else:
            raise TypeError(f"add_edge() takes 1, 2 or 3 arguments ({len(args)} given)")
        return self._add_edge(u, v, e)

    def _add_edge(self, u: V, v: V, e: E) -> E:
        self._require_edge_type(e)
        lIndex_expected = self.num_edges() + 1
        lEdgeIndex = self.interface.edge_index(e)
        if lEdgeIndex != lIndex_expected:
            raise IndexAlignmentError('edge', lEdgeIndex, lIndex_expected)

        ui = self._require_vertex(u)
        vi = self._require_vertex(v)
        if self.interface.source(e) != u or self.interface.target(e) != v:
            raise InvalidArgumentError(f"Edge {e!r} does not join {u!r} to {v!r}")

        self.aEdge.append(e)
        self.aIncidence_forward[ui - 1].append(e)
        self.aIncidence_backward[vi - 1].append(e)

        if not self.is_directed:
            pEdge_reverse = self.interface.revedge(e)
            self.aIncidence_forward[vi - 1].append(pEdge_reverse)
            self.aIncidence_backward[ui - 1].append(pEdge_reverse)

        logger.debug(f"Added edge {lEdgeIndex} from vertex {ui} to vertex {vi}")
        return e

    def remove_edge(self, *args) -> E:
        """
        Remove an edge from the edge list and from every incidence list holding it.

        Accepted forms:
            remove_edge(u, v, e): remove ``e``, which must join ``u`` to ``v``
            remove_edge(u, v): remove the first edge from ``u`` to ``v`` in
                edge-list order
            remove_edge(e): remove ``e``

        Every later edge has its index decremented so that indices stay equal
        to positions. Cost is linear in the edge list and the incidence lists.

        Returns:
            The removed canonical edge

        Raises:
            MissingEntityError: If the edge or the endpoint pair is not in the graph
            GraphCorruptionError: If an incidence list lost track of the edge
        """
        if len(args) == 3:
            u, v, e = args
        elif len(args) == 2:
            u, v = args
            e = self.find_edge(u, v)
            if e is None:
                raise MissingEntityError(f"No edge from {u!r} to {v!r}")
        elif len(args) == 1:
            e = args[0]
            self._require_edge_type(e)
            u, v = self.interface.source(e), self.interface.target(e)
        else:
            raise TypeError(f"remove_edge() takes 1, 2 or 3 arguments ({len(args)} given)")
        return self._remove_edge(u, v, e)

    def _remove_edge(self, u: V, v: V, e: E) -> E:
        self._require_edge_type(e)
        if not self.has_edge(e):
            if e in self.aEdge:
                raise GraphCorruptionError(f"Edge {e!r} is stored away from its index")
            raise MissingEntityError(f"Edge {e!r} is not in the graph")
        if self.interface.source(e) != u or self.interface.target(e) != v:
            raise MissingEntityError(f"Edge {e!r} does not join {u!r} to {v!r}")

        ei = self.interface.edge_index(e)
        ui = self._require_vertex(u)
        vi = self._require_vertex(v)

        aSlot = [(self.aIncidence_forward[ui - 1], e), (self.aIncidence_backward[vi - 1], e)]
        if not self.is_directed:
            pEdge_reverse = self.interface.revedge(e)
            aSlot.append((self.aIncidence_forward[vi - 1], pEdge_reverse))
            aSlot.append((self.aIncidence_backward[ui - 1], pEdge_reverse))

        # look everything up before touching anything
        for aIncidence, pEdge in aSlot:
            if _locate(aIncidence, pEdge) is None:
                raise GraphCorruptionError(f"Incidence list is missing {pEdge!r}")

        del self.aEdge[ei - 1]
        for aIncidence, pEdge in aSlot:
            del aIncidence[_locate(aIncidence, pEdge)]

        for i in range(ei - 1, len(self.aEdge)):
            self.interface.set_edge_index(self.aEdge[i], i + 1)

        logger.debug(f"Removed edge {ei} from vertex {ui} to vertex {vi}")
        return e

    def remove_vertex(self, v: V) -> V:
        """
        Remove a vertex and every edge incident to it.

        Every later vertex has its index decremented so that indices stay
        equal to positions.

        Returns:
            The removed vertex

        Raises:
            MissingEntityError: If the vertex is not in the graph
        """
        vi = self._require_vertex(v)

        aEdge_incident = [e for e in list(self.aEdge)
                          if self.interface.source(e) == v or self.interface.target(e) == v]
        for e in aEdge_incident:
            self._remove_edge(self.interface.source(e), self.interface.target(e), e)

        if len(self.aIncidence_forward[vi - 1]) or len(self.aIncidence_backward[vi - 1]):
            raise GraphCorruptionError(f"Vertex {v!r} still has incident edges after removal")

        del self.aVertex[vi - 1]
        del self.aIncidence_forward[vi - 1]
        del self.aIncidence_backward[vi - 1]

        for i in range(vi - 1, len(self.aVertex)):
            self.interface.set_vertex_index(self.aVertex[i], i + 1)

        logger.debug(f"Removed vertex {vi} and {len(aEdge_incident)} incident edges")
        return v

    # ========================================================================
    # PRECONDITIONS
    # ========================================================================

    def _require_vertex(self, v: Any) -> int:
        """Return the index of ``v``, raising if it is not a vertex of this graph."""
        if not self.has_vertex(v):
            raise MissingEntityError(f"Vertex {v!r} is not in the graph")
        return self.interface.vertex_index(v)

    def _require_edge_type(self, e: Any):
        if not self.interface.is_edge(e):
            raise InvalidArgumentError(f"{e!r} is not an edge")


def empty_graph(is_directed: bool = True, interface: Optional[GraphInterface] = None,
                sequence_factory: Callable[[], MutableSequence] = list) -> GenericGraph:
    """Create a graph with no vertices and no edges."""
    return GenericGraph(is_directed=is_directed, interface=interface, sequence_factory=sequence_factory)


def build_graph(vertices: Iterable, edges: Iterable, is_directed: bool = True,
                interface: Optional[GraphInterface] = None,
                sequence_factory: Callable[[], MutableSequence] = list) -> GenericGraph:
    """
    Create a graph from prebuilt vertices and edges.

    Vertices are added first, in order, then each edge through ``add_edge``, so
    incidence lists follow edge order.

    Args:
        vertices: Vertices with indices 1..n in order
        edges: Edges with indices 1..m in order
        is_directed: Whether edges are one-way
        interface: Descriptor for the vertex and edge types
        sequence_factory: Callable returning an empty mutable sequence,
            used for every internal container

    Returns:
        The populated graph
    """
    graph = GenericGraph(is_directed=is_directed, interface=interface, sequence_factory=sequence_factory)
    for v in vertices:
        graph.add_vertex(v)
    for e in edges:
        graph.add_edge(e)
    logger.debug(f"Built graph with {graph.num_vertices()} vertices and {graph.num_edges()} edges")
    return graph
