"""
Read-only views and inspection built on top of the graph container.
"""

from .neighbors import TargetIterator, SourceIterator
from .matrix import adjacency_matrix, incidence_matrix, degree_vector, laplacian_matrix
from .inspection import GraphInspector

__all__ = [
    'TargetIterator',
    'SourceIterator',
    'adjacency_matrix',
    'incidence_matrix',
    'degree_vector',
    'laplacian_matrix',
    'GraphInspector',
]
