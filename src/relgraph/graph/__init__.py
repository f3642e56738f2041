"""
Graph subsystem for relgraph.

Defines the directed graph model used for:
- relation-property checks (reflexive, symmetric, transitive, ...)
- equivalence-class and root extraction
- deterministic lowest-value-first traversal
"""

from relgraph.graph.graph_schema import Edge
from relgraph.graph.errors import MalformedGraphError
from relgraph.graph.graph_store import Graph
from relgraph.graph.graph_builder import GraphBuilder
from relgraph.graph.graph_query import TraversalEngine

__all__ = [
    "Edge",
    "MalformedGraphError",
    "Graph",
    "GraphBuilder",
    "TraversalEngine",
]
