from __future__ import annotations

import pathlib
import sys

import pytest

from genericgraph import GenericGraph

# Add tests directory to sys.path so helpers.py can be imported
_tests_dir = pathlib.Path(__file__).parent
if str(_tests_dir) not in sys.path:
    sys.path.insert(0, str(_tests_dir))

from helpers import make_graph  # noqa: E402


@pytest.fixture
def directed_chain() -> GenericGraph:
    """Directed graph 1 -> 2 -> 3."""
    return make_graph(3, [(1, 2), (2, 3)])


@pytest.fixture
def undirected_pair() -> GenericGraph:
    """Undirected graph with a single edge between 1 and 2."""
    return make_graph(2, [(1, 2)], is_directed=False)
