"""
Dense matrix views of a generic graph.

Rows and columns follow vertex index order (row ``i - 1`` is vertex ``i``),
and incidence-matrix columns follow edge index order.
"""

import logging
from typing import Any

import numpy as np

from ..core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def adjacency_matrix(graph: Any, dtype=int) -> np.ndarray:
    """
    Build the adjacency matrix from the forward incidence lists.

    Entry ``[i, j]`` counts the edges leaving vertex ``i + 1`` towards vertex
    ``j + 1``. In an undirected graph the reverse tokens make the matrix
    symmetric, and a self loop contributes 2 on the diagonal.

    Args:
        graph: GenericGraph to convert
        dtype: numpy dtype of the result

    Returns:
        Array of shape (num_vertices, num_vertices)
    """
    nVertex = graph.num_vertices()
    aAdjacency = np.zeros((nVertex, nVertex), dtype=dtype)
    for i, aIncidence in enumerate(graph.aIncidence_forward):
        for e in aIncidence:
            j = graph.interface.vertex_index(graph.interface.target(e)) - 1
            aAdjacency[i, j] += 1
    return aAdjacency


def incidence_matrix(graph: Any, dtype=int) -> np.ndarray:
    """
    Build the vertex-edge incidence matrix over canonical edges.

    Directed graphs get -1 at the source row and +1 at the target row, so a
    self loop column is all zeros. Undirected graphs get 1 at both endpoint
    rows, and 2 for a self loop.

    Returns:
        Array of shape (num_vertices, num_edges)
    """
    aIncidence = np.zeros((graph.num_vertices(), graph.num_edges()), dtype=dtype)
    iSign_source = -1 if graph.is_directed else 1
    for k, e in enumerate(graph.aEdge):
        lSource = graph.interface.vertex_index(graph.interface.source(e)) - 1
        lTarget = graph.interface.vertex_index(graph.interface.target(e)) - 1
        aIncidence[lSource, k] += iSign_source
        aIncidence[lTarget, k] += 1
    return aIncidence


def degree_vector(graph: Any, direction: str = "out") -> np.ndarray:
    """
    Degrees of all vertices in index order.

    Args:
        graph: GenericGraph to inspect
        direction: "out", "in" or "all". For undirected graphs "all" equals
            "out", since each edge already appears in both endpoints' lists.

    Returns:
        Integer array of length num_vertices

    Raises:
        ValueError: If direction is not one of the accepted values
    """
    aOut = np.array([len(a) for a in graph.aIncidence_forward], dtype=int)
    aIn = np.array([len(a) for a in graph.aIncidence_backward], dtype=int)
    if direction == "out":
        return aOut
    if direction == "in":
        return aIn
    if direction == "all":
        return aOut + aIn if graph.is_directed else aOut
    raise ValueError(f"Unknown degree direction: {direction}")


def laplacian_matrix(graph: Any, dtype=int) -> np.ndarray:
    """
    Graph Laplacian ``D - A`` of an undirected graph.

    Raises:
        InvalidArgumentError: If the graph is directed
    """
    if graph.is_directed:
        raise InvalidArgumentError("Laplacian matrix is only defined here for undirected graphs")
    aAdjacency = adjacency_matrix(graph, dtype=dtype)
    aLaplacian = np.diag(degree_vector(graph, "out")).astype(dtype) - aAdjacency
    logger.debug(f"Built {aLaplacian.shape[0]}x{aLaplacian.shape[1]} Laplacian matrix")
    return aLaplacian
