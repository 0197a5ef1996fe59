"""Tests for the default vertex and edge types."""

from __future__ import annotations

from genericgraph import pyedge, pyvertex


def test_vertex_identity_is_by_object() -> None:
    """Two vertices with the same label and index are distinct."""
    a = pyvertex(1, "a")
    b = pyvertex(1, "a")
    assert a == a
    assert a != b


def test_vertex_copies_attributes() -> None:
    """Attribute dict is copied, not aliased."""
    attrs = {"color": "red"}
    v = pyvertex(1, "a", attrs)
    attrs["color"] = "blue"
    assert v.aAttribute == {"color": "red"}


def test_independent_edges_with_same_endpoints_differ() -> None:
    """Edges are not equal just because their endpoints are."""
    u, v = pyvertex(1), pyvertex(2)
    e1 = pyedge(1, u, v)
    e2 = pyedge(1, u, v)
    assert e1 != e2
    assert len({e1, e2}) == 2


def test_revedge_swaps_endpoints() -> None:
    u, v = pyvertex(1), pyvertex(2)
    e = pyedge(1, u, v)
    r = e.revedge()
    assert r.pVertex_source is v
    assert r.pVertex_target is u
    assert r.is_reverse()
    assert not e.is_reverse()


def test_revedge_tokens_compare_equal_to_each_other_not_to_canonical() -> None:
    """Fresh reverse tokens of one edge are equal; a token never equals its canonical edge."""
    e = pyedge(1, pyvertex(1), pyvertex(2))
    assert e.revedge() == e.revedge()
    assert hash(e.revedge()) == hash(e.revedge())
    assert e.revedge() != e


def test_double_reverse_is_canonical() -> None:
    e = pyedge(1, pyvertex(1), pyvertex(2))
    assert e.revedge().revedge() == e
    assert hash(e.revedge().revedge()) == hash(e)


def test_reverse_token_follows_canonical_index() -> None:
    """Renumbering the canonical edge renumbers its tokens, and vice versa."""
    e = pyedge(3, pyvertex(1), pyvertex(2))
    r = e.revedge()
    e.lEdgeIndex = 2
    assert r.lEdgeIndex == 2
    r.lEdgeIndex = 1
    assert e.lEdgeIndex == 1


def test_reverse_token_shares_attributes() -> None:
    e = pyedge(1, pyvertex(1), pyvertex(2), {"weight": 4})
    r = e.revedge()
    r.aAttribute["weight"] = 7
    assert e.aAttribute["weight"] == 7


def test_edge_not_equal_to_other_types() -> None:
    e = pyedge(1, pyvertex(1), pyvertex(2))
    assert e != (1, 2)


class _WeightedEdge(pyedge):
    pass


def test_revedge_keeps_subclass() -> None:
    e = _WeightedEdge(1, pyvertex(1), pyvertex(2))
    r = e.revedge()
    assert type(r) is _WeightedEdge
    assert r.revedge() == e
