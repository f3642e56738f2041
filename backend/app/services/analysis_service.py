"""
Graph analysis service.

Builds a fresh relgraph Graph per request and collects everything the
API reports about it: relation properties, roots and the four
traversal orders. Holds no graph state between calls.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Sequence

from relgraph import Graph, GraphBuilder
from relgraph.config.settings import RelgraphConfig


class RequestTooLargeError(ValueError):
    """Raised when a request exceeds the configured vertex or edge limits."""


class GraphAnalysisService:
    def __init__(
        self,
        *,
        config: Optional[RelgraphConfig] = None,
        max_vertices: int = 5000,
        max_edges: int = 50000,
    ) -> None:
        self.config = config or RelgraphConfig()
        self.max_vertices = max_vertices
        self.max_edges = max_edges

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(
        self,
        *,
        vertices: Iterable[Any],
        edges: Iterable[Sequence[Any]],
    ) -> Graph:
        vertices = list(vertices)
        edges = list(edges)

        if len(vertices) > self.max_vertices:
            raise RequestTooLargeError(
                f"too many vertices: {len(vertices)} > {self.max_vertices}"
            )
        if len(edges) > self.max_edges:
            raise RequestTooLargeError(
                f"too many edges: {len(edges)} > {self.max_edges}"
            )

        return (
            GraphBuilder()
            .add_vertices(vertices)
            .add_edges(edges)
            .build(self.config)
        )

    def analyze(
        self,
        *,
        vertices: Iterable[Any],
        edges: Iterable[Sequence[Any]],
    ) -> Dict[str, Any]:
        t0 = time.perf_counter()
        graph = self.build(vertices=vertices, edges=edges)

        result = {
            "vertices": len(graph.vertices),
            "edges": len(graph.edges),
            "relations": {
                "reflexive": graph.is_reflexive(),
                "symmetric": graph.is_symmetric(),
                "transitive": graph.is_transitive(),
                "anti_symmetric": graph.is_anti_symmetric(),
                "equivalence": graph.is_equivalence(),
            },
            "roots": sorted(graph.get_roots()),
            "traversals": {
                "iterative_bfs": graph.iterative_breadth_first_search(),
                "iterative_dfs": graph.iterative_depth_first_search(),
                "recursive_bfs": graph.recursive_breadth_first_search(),
                "recursive_dfs": graph.recursive_depth_first_search(),
            },
        }

        logging.getLogger("relgraph.analysis").info(
            "analyzed graph: vertices=%s edges=%s roots=%s in %.3fs",
            result["vertices"],
            result["edges"],
            len(result["roots"]),
            time.perf_counter() - t0,
        )

        return result

    def equivalence_class(
        self,
        *,
        vertices: Iterable[Any],
        edges: Iterable[Sequence[Any]],
        vertex: Any,
    ) -> List[Any]:
        graph = self.build(vertices=vertices, edges=edges)
        members = sorted(graph.get_equivalence_class(vertex))

        logging.getLogger("relgraph.analysis").info(
            "equivalence class of %r: size=%s",
            vertex,
            len(members),
        )

        return members
