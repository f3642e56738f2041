"""
relgraph
========

Directed graphs over totally-ordered vertices, with relation-property
checks, equivalence classes and deterministic traversal.

Core idea:
- Every search and every ordering picks the lowest vertex first.

Public API:
- Edge
- Graph
- GraphBuilder
- MalformedGraphError
"""

from relgraph.graph.graph_schema import Edge
from relgraph.graph.errors import MalformedGraphError
from relgraph.graph.graph_store import Graph
from relgraph.graph.graph_builder import GraphBuilder

__all__ = [
    "Edge",
    "Graph",
    "GraphBuilder",
    "MalformedGraphError",
]

__version__ = "0.1.0"
