from __future__ import annotations

from collections import abc
from typing import Any, Iterable, List, Optional, Sequence, Set, Union

from relgraph.config.settings import RelgraphConfig
from relgraph.graph.errors import MalformedGraphError
from relgraph.graph.graph_schema import Edge
from relgraph.graph.graph_store import Graph


class GraphBuilder:
    """
    Collects vertices and edges from raw inputs and builds a Graph.

    Vertices are never created implicitly from edges; an edge naming an
    unknown vertex fails at ``build()``.
    """

    def __init__(self) -> None:
        self._vertices: Set[Any] = set()
        self._edges: List[Edge] = []

    def add_vertex(self, vertex: Any) -> "GraphBuilder":
        self._vertices.add(vertex)
        return self

    def add_vertices(self, vertices: Iterable[Any]) -> "GraphBuilder":
        for vertex in vertices:
            self.add_vertex(vertex)
        return self

    def add_edge(self, source: Any, destination: Any) -> "GraphBuilder":
        self._edges.append(Edge(source=source, destination=destination))
        return self

    def add_edges(self, edges: Iterable[Union[Edge, Sequence[Any]]]) -> "GraphBuilder":
        for edge in edges:
            if isinstance(edge, Edge):
                self._edges.append(edge)
                continue
            if (
                not isinstance(edge, abc.Sequence)
                or isinstance(edge, (str, bytes))
                or len(edge) != 2
            ):
                raise MalformedGraphError(
                    f"edge must be a (source, destination) pair: {edge!r}"
                )
            self.add_edge(edge[0], edge[1])
        return self

    def build(self, config: Optional[RelgraphConfig] = None) -> Graph:
        return Graph(self._vertices, self._edges, config=config)
