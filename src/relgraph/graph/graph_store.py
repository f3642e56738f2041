from __future__ import annotations

import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Set

import networkx as nx

from relgraph.config.settings import RelgraphConfig
from relgraph.graph import relations
from relgraph.graph.errors import MalformedGraphError
from relgraph.graph.graph_query import TraversalEngine
from relgraph.graph.graph_schema import Edge


class Graph:
    """
    Finite directed graph over a totally-ordered vertex type.

    Vertices and edges are fixed at construction. The adjacency table
    is derived from them and held in a ``networkx.DiGraph`` keyed by
    vertex value.
    """

    def __init__(
        self,
        vertices: Iterable[Any],
        edges: Iterable[Edge],
        *,
        config: Optional[RelgraphConfig] = None,
    ) -> None:
        self.config = config or RelgraphConfig()
        self._vertices: FrozenSet[Any] = frozenset(vertices)
        self._edges: FrozenSet[Edge] = frozenset(edges)

        self._validate()

        self._graph = nx.DiGraph()
        self._graph.add_nodes_from(self._vertices)
        self._graph.add_edges_from(edge.as_tuple() for edge in self._edges)

        logging.getLogger("relgraph.graph").debug(
            "graph built: vertices=%s edges=%s",
            len(self._vertices),
            len(self._edges),
        )

    def _validate(self) -> None:
        not_edges = [e for e in self._edges if not isinstance(e, Edge)]
        if not_edges:
            raise MalformedGraphError(f"not an Edge: {not_edges[0]!r}")

        dangling = [
            e
            for e in self._edges
            if e.source not in self._vertices or e.destination not in self._vertices
        ]
        if dangling:
            raise MalformedGraphError(
                "edges reference vertices outside the vertex set: "
                + ", ".join(repr(e.as_tuple()) for e in dangling)
            )

        try:
            sorted(self._vertices)
        except TypeError as exc:
            raise MalformedGraphError(
                f"vertices do not share a total order: {exc}"
            ) from exc

    # -------------------- Accessors --------------------

    @property
    def vertices(self) -> FrozenSet[Any]:
        return self._vertices

    @property
    def edges(self) -> FrozenSet[Edge]:
        return self._edges

    @property
    def adjacency(self) -> Dict[Any, List[Any]]:
        """
        Vertex -> out-neighbours, one entry per vertex, in no particular order.
        """
        return {v: list(self._graph.successors(v)) for v in self._graph}

    def neighbors(self, vertex: Any) -> List[Any]:
        """Out-neighbours of ``vertex`` in ascending order."""
        if vertex not in self._graph:
            return []
        return sorted(self._graph.successors(vertex))

    def in_degree(self, vertex: Any) -> int:
        if vertex not in self._graph:
            return 0
        return self._graph.in_degree(vertex)

    def out_degree(self, vertex: Any) -> int:
        if vertex not in self._graph:
            return 0
        return self._graph.out_degree(vertex)

    def __contains__(self, vertex: Any) -> bool:
        return vertex in self._graph

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    # -------------------- Relations --------------------

    def is_reflexive(self) -> bool:
        return relations.is_reflexive(self._graph)

    def is_symmetric(self) -> bool:
        return relations.is_symmetric(self._graph)

    def is_transitive(self) -> bool:
        return relations.is_transitive(self._graph)

    def is_anti_symmetric(self) -> bool:
        return relations.is_anti_symmetric(self._graph)

    def is_equivalence(self) -> bool:
        return relations.is_equivalence(self._graph)

    # -------------------- Equivalence classes --------------------

    def get_equivalence_class(self, vertex: Any) -> FrozenSet[Any]:
        """
        Equivalence class containing ``vertex``, or an empty set.

        The candidate class is everything reachable from ``vertex``. It is
        rejected when a member has a predecessor outside the candidate set,
        or when the induced subgraph is not itself an equivalence relation.
        """

        if vertex not in self._graph:
            return frozenset()

        candidates = frozenset(nx.dfs_preorder_nodes(self._graph, vertex))

        for member in candidates:
            for pred in self._graph.predecessors(member):
                if pred not in candidates:
                    logging.getLogger("relgraph.graph").debug(
                        "class of %r rejected: %r -> %r enters from outside",
                        vertex,
                        pred,
                        member,
                    )
                    return frozenset()

        # Read-only view; the graph itself is never narrowed.
        if not relations.is_equivalence(self._graph.subgraph(candidates)):
            return frozenset()

        return candidates

    # -------------------- Roots --------------------

    def get_roots(self) -> FrozenSet[Any]:
        """
        Traversal start points.

        Vertices with no incoming and at least one outgoing edge. When the
        graph is an equivalence relation, the lowest member of every
        equivalence class is added as well.
        """

        roots: Set[Any] = {
            v
            for v in self._graph
            if self._graph.in_degree(v) == 0 and self._graph.out_degree(v) > 0
        }

        if not self.is_equivalence():
            return frozenset(roots)

        classified: Set[Any] = set()
        for vertex in self._vertices:
            if vertex in classified:
                continue
            equiv_class = self.get_equivalence_class(vertex)
            if equiv_class:
                classified.update(equiv_class)
                roots.add(min(equiv_class))

        return frozenset(roots)

    # -------------------- Traversal --------------------

    def _traversal(self) -> TraversalEngine:
        return TraversalEngine(self, config=self.config.traversal)

    def iterative_breadth_first_search(self) -> List[Any]:
        return self._traversal().iterative_bfs()

    def iterative_depth_first_search(self) -> List[Any]:
        return self._traversal().iterative_dfs()

    def recursive_breadth_first_search(self) -> List[Any]:
        return self._traversal().recursive_bfs()

    def recursive_depth_first_search(self) -> List[Any]:
        return self._traversal().recursive_dfs()
