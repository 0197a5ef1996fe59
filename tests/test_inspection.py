"""Tests for GraphInspector validation and statistics."""

from __future__ import annotations

import logging

import pytest

from genericgraph import GenericGraph, GraphCorruptionError, GraphInspector, pyedge, pyvertex
from helpers import make_graph


@pytest.mark.parametrize("is_directed", [True, False])
def test_freshly_built_graph_is_valid(is_directed: bool) -> None:
    graph = make_graph(4, [(1, 2), (2, 3), (3, 3), (1, 2), (4, 1)], is_directed=is_directed)
    results = GraphInspector(graph).validate_graph_structure()
    assert results['is_valid'], results['issues']
    assert results['issues'] == []
    assert results['statistics']['edges']['total'] == 5


@pytest.mark.parametrize("is_directed", [True, False])
def test_graph_stays_valid_through_mutations(is_directed: bool) -> None:
    graph = make_graph(5, [(1, 2), (2, 3), (3, 4), (4, 5), (5, 1), (2, 4)], is_directed=is_directed)
    inspector = GraphInspector(graph)
    v1, v2, v3, v4, v5 = graph.vertices()

    graph.remove_edge(v2, v3)
    inspector.assert_consistent()
    graph.remove_vertex(v1)
    inspector.assert_consistent()
    graph.add_edge(v5, v3)
    inspector.assert_consistent()
    graph.remove_vertex(v4)
    inspector.assert_consistent()
    assert graph.num_vertices() == 3


def test_detects_edge_missing_from_incidence_list(directed_chain: GenericGraph, caplog) -> None:
    directed_chain.aIncidence_backward[1].clear()
    with caplog.at_level(logging.WARNING):
        results = GraphInspector(directed_chain).validate_graph_structure()
    assert not results['is_valid']
    assert any("backward" in sIssue for sIssue in results['issues'])
    assert "backward" in caplog.text


def test_detects_stray_incidence_entry(directed_chain: GenericGraph) -> None:
    v1, _, v3 = directed_chain.vertices()
    directed_chain.aIncidence_forward[0].append(pyedge(3, v1, v3))
    with pytest.raises(GraphCorruptionError, match="not in the edge list"):
        GraphInspector(directed_chain).assert_consistent()


def test_detects_reverse_token_in_directed_graph(directed_chain: GenericGraph) -> None:
    e = directed_chain.edges()[0]
    directed_chain.aIncidence_forward[1].append(e.revedge())
    assert not GraphInspector(directed_chain).validate_graph_structure()['is_valid']


def test_detects_stale_vertex_index(directed_chain: GenericGraph) -> None:
    directed_chain.vertices()[2].lVertexIndex = 7
    results = GraphInspector(directed_chain).validate_graph_structure()
    assert not results['is_valid']
    assert "Vertex at position 3 has index 7" in results['issues']


def test_detects_misaligned_incidence_lists(directed_chain: GenericGraph) -> None:
    directed_chain.aIncidence_forward.append([])
    results = GraphInspector(directed_chain).validate_graph_structure()
    assert not results['is_valid']
    assert results['statistics'] == {}


def test_statistics() -> None:
    graph = make_graph(5, [(1, 2), (1, 2), (2, 3), (3, 3)])
    stats = GraphInspector(graph).get_graph_statistics()
    assert stats['vertices'] == {'total': 5, 'sources': 3, 'sinks': 2, 'isolated': 2}
    assert stats['edges'] == {'total': 4, 'self_loops': 1, 'parallel_groups': 1}
    assert stats['degree'] == {'max_out': 2, 'max_in': 2}
    assert stats['is_directed'] is True


def test_statistics_undirected_parallel_groups_ignore_direction() -> None:
    graph = make_graph(2, [(1, 2), (2, 1)], is_directed=False)
    stats = GraphInspector(graph).get_graph_statistics()
    assert stats['edges']['parallel_groups'] == 1
    assert stats['vertices']['sources'] == 0


def test_statistics_empty_graph() -> None:
    stats = GraphInspector(make_graph(0, [])).get_graph_statistics()
    assert stats['degree'] == {'max_out': 0, 'max_in': 0}


def test_detects_edge_endpoint_outside_graph(directed_chain: GenericGraph) -> None:
    """A stand-in vertex carrying a live index is not accepted as an endpoint."""
    e = directed_chain.edges()[0]
    e.pVertex_source = pyvertex(1, "ghost")
    results = GraphInspector(directed_chain).validate_graph_structure()
    assert not results['is_valid']
    assert any("source" in sIssue and "not in the graph" in sIssue for sIssue in results['issues'])
    assert any("belongs to another vertex" in sIssue for sIssue in results['issues'])
