"""
genericgraph - Generic Incidence-List Graph Container

A Python library providing one mutable, in-memory graph container that serves
vertex-list, edge-list, adjacency-list and incidence-list views over a single
representation. Both outgoing and incoming edges of a vertex are available
without rebuilding adjacency, and undirected graphs are handled by mirroring
every edge with a reverse token.

Main Classes:
    GenericGraph: The graph container
    GraphInterface: Capability descriptor for vertex and edge types
    pyvertex: Default vertex type
    pyedge: Default edge type
    GraphInspector: Consistency checks and statistics

Example:
    >>> from genericgraph import empty_graph
    >>> graph = empty_graph(is_directed=False)
    >>> a = graph.add_vertex("a")
    >>> b = graph.add_vertex("b")
    >>> e = graph.add_edge(a, b)
    >>> graph.out_degree(b)
    1
"""

__version__ = "0.1.0"
__author__ = "Chang Liao"

from genericgraph.classes.vertex import pyvertex
from genericgraph.classes.edge import pyedge
from genericgraph.core.exceptions import (
    GraphError,
    InvalidArgumentError,
    IndexAlignmentError,
    MissingEntityError,
    GraphCorruptionError,
)
from genericgraph.core.interface import GraphInterface, default_interface
from genericgraph.core.graph import GenericGraph, empty_graph, build_graph
from genericgraph.analysis.inspection import GraphInspector

__all__ = [
    'GenericGraph',
    'empty_graph',
    'build_graph',
    'GraphInterface',
    'default_interface',
    'pyvertex',
    'pyedge',
    'GraphInspector',
    'GraphError',
    'InvalidArgumentError',
    'IndexAlignmentError',
    'MissingEntityError',
    'GraphCorruptionError',
]
