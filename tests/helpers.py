from __future__ import annotations

from genericgraph import GenericGraph, empty_graph


def make_graph(nVertex: int, aPair: list[tuple[int, int]], is_directed: bool = True) -> GenericGraph:
    """Build a graph on vertices labelled 1..nVertex with edges given by label pairs."""
    graph = empty_graph(is_directed=is_directed)
    for label in range(1, nVertex + 1):
        graph.add_vertex(label)
    for lSource, lTarget in aPair:
        graph.add_edge(graph.vertices()[lSource - 1], graph.vertices()[lTarget - 1])
    return graph


def vertex(graph: GenericGraph, label):
    """Return the first vertex carrying ``label``."""
    return next(v for v in graph.vertices() if v.sLabel == label)
