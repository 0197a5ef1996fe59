"""
Core graph data structures and management.

This module contains the graph container, the capability descriptor for its
vertex and edge types, and the error taxonomy.
"""

from .exceptions import (
    GraphError,
    InvalidArgumentError,
    IndexAlignmentError,
    MissingEntityError,
    GraphCorruptionError,
)
from .interface import GraphInterface, default_interface

__all__ = [
    'GraphError',
    'InvalidArgumentError',
    'IndexAlignmentError',
    'MissingEntityError',
    'GraphCorruptionError',
    'GraphInterface',
    'default_interface',
]
