"""
Consistency checks and statistics for generic graphs.

This module walks the four containers of a graph and reports any place where
they disagree, plus summary statistics about the structure.
"""

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Dict, List, Tuple

from ..core.exceptions import GraphCorruptionError
from .matrix import degree_vector

logger = logging.getLogger(__name__)


class GraphInspector:
    """
    Read-only inspector for a GenericGraph.

    This class provides methods for:
    - Validating that vertex list, edge list and incidence lists agree
    - Raising on a corrupted graph
    - Summarizing the graph structure
    """

    def __init__(self, graph: Any):
        """
        Initialize the inspector.

        Args:
            graph: GenericGraph instance to inspect
        """
        self.graph = graph

    def validate_graph_structure(self) -> Dict[str, Any]:
        """
        Validate the internal consistency of the graph structure.

        Returns:
            Dictionary with 'is_valid', 'issues' and 'statistics' entries
        """
        issues: List[str] = []
        graph = self.graph
        interface = graph.interface
        nVertex = graph.num_vertices()

        if len(graph.aIncidence_forward) != nVertex or len(graph.aIncidence_backward) != nVertex:
            issues.append(f"Incidence lists cover {len(graph.aIncidence_forward)}/{len(graph.aIncidence_backward)} "
                          f"vertices, expected {nVertex}")
            return self._finish(issues, {})

        try:
            for i, v in enumerate(graph.aVertex):
                if interface.vertex_index(v) != i + 1:
                    issues.append(f"Vertex at position {i + 1} has index {interface.vertex_index(v)}")

            for i, e in enumerate(graph.aEdge):
                if interface.edge_index(e) != i + 1:
                    issues.append(f"Edge at position {i + 1} has index {interface.edge_index(e)}")
                issues.extend(self._check_edge_slots(e))

            issues.extend(self._check_incidence_entries())
        except (AttributeError, TypeError, IndexError) as e:
            issues.append(f"Validation error: {e}")
            logger.error(f"Error during graph structure validation: {e}")

        return self._finish(issues, self.get_graph_statistics() if not issues else {})

    def assert_consistent(self):
        """
        Raise if the graph fails validation.

        Raises:
            GraphCorruptionError: Listing every issue found
        """
        validation_results = self.validate_graph_structure()
        if not validation_results['is_valid']:
            raise GraphCorruptionError("; ".join(validation_results['issues']))

    def get_graph_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about the graph structure.

        Returns:
            Dictionary containing vertex, edge and degree statistics
        """
        graph = self.graph
        interface = graph.interface
        aOut = degree_vector(graph, "out")
        aIn = degree_vector(graph, "in")

        pair_groups: DefaultDict[Tuple[int, int], int] = defaultdict(int)
        nSelf_loop = 0
        for e in graph.aEdge:
            lSource = interface.vertex_index(interface.source(e))
            lTarget = interface.vertex_index(interface.target(e))
            if lSource == lTarget:
                nSelf_loop += 1
            if not graph.is_directed and lSource > lTarget:
                lSource, lTarget = lTarget, lSource
            pair_groups[(lSource, lTarget)] += 1

        stats = {
            'vertices': {
                'total': graph.num_vertices(),
                'sources': int((aIn == 0).sum()),
                'sinks': int((aOut == 0).sum()),
                'isolated': int(((aIn == 0) & (aOut == 0)).sum()),
            },
            'edges': {
                'total': graph.num_edges(),
                'self_loops': nSelf_loop,
                'parallel_groups': len([n for n in pair_groups.values() if n > 1]),
            },
            'degree': {
                'max_out': int(aOut.max()) if len(aOut) else 0,
                'max_in': int(aIn.max()) if len(aIn) else 0,
            },
            'is_directed': graph.is_directed,
        }
        return stats

    def _check_edge_slots(self, e) -> List[str]:
        """Check that a canonical edge sits in every incidence slot it belongs to."""
        graph = self.graph
        interface = graph.interface
        issues = []
        for sRole, pVertex in (("source", interface.source(e)), ("target", interface.target(e))):
            if not graph.has_vertex(pVertex):
                issues.append(f"Edge {interface.edge_index(e)} has {sRole} {pVertex!r}, which is not in the graph")
        lSource = interface.vertex_index(interface.source(e))
        lTarget = interface.vertex_index(interface.target(e))

        expected = [(graph.aIncidence_forward, lSource, e, "forward"),
                    (graph.aIncidence_backward, lTarget, e, "backward")]
        if not graph.is_directed:
            pEdge_reverse = interface.revedge(e)
            expected.append((graph.aIncidence_forward, lTarget, pEdge_reverse, "forward"))
            expected.append((graph.aIncidence_backward, lSource, pEdge_reverse, "backward"))

        for aIncidence, lVertexIndex, pEdge, sDirection in expected:
            if not 1 <= lVertexIndex <= graph.num_vertices():
                issues.append(f"Edge {interface.edge_index(e)} references missing vertex {lVertexIndex}")
                continue
            nCount = sum(1 for x in aIncidence[lVertexIndex - 1] if x == pEdge)
            if nCount != 1:
                issues.append(f"Edge {interface.edge_index(e)} appears {nCount} times in the {sDirection} "
                              f"incidence list of vertex {lVertexIndex}")
        return issues

    def _check_incidence_entries(self) -> List[str]:
        """Check that every incidence entry resolves to a stored edge at the right vertex."""
        graph = self.graph
        interface = graph.interface
        issues = []
        for sDirection, aIncidence_all, endpoint in (("forward", graph.aIncidence_forward, interface.source),
                                                     ("backward", graph.aIncidence_backward, interface.target)):
            for i, aIncidence in enumerate(aIncidence_all):
                for x in aIncidence:
                    if graph.has_edge(x):
                        pass
                    elif not graph.is_directed and graph.has_edge(interface.revedge(x)):
                        pass
                    else:
                        issues.append(f"{sDirection.capitalize()} incidence list of vertex {i + 1} "
                                      f"references {x!r}, which is not in the edge list")
                        continue
                    if graph.aVertex[i] != endpoint(x):
                        issues.append(f"{sDirection.capitalize()} incidence list of vertex {i + 1} "
                                      f"holds {x!r}, which belongs to another vertex")
        return issues

    def _finish(self, issues: List[str], statistics: Dict[str, Any]) -> Dict[str, Any]:
        for sIssue in issues:
            logger.warning(sIssue)
        return {
            'is_valid': not issues,
            'issues': issues,
            'statistics': statistics,
        }
