"""
Core data classes for generic graph representation.

This module contains the default vertex and edge types used throughout
the genericgraph library.
"""

from .vertex import pyvertex
from .edge import pyedge

__all__ = [
    'pyvertex',
    'pyedge',
]
