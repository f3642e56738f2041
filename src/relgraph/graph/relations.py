"""
Relation-property checks over a directed graph.

Each predicate takes a ``networkx.DiGraph`` so the same checks run on a
full graph and on read-only induced subgraph views.
"""

from __future__ import annotations

import networkx as nx


def is_reflexive(graph: nx.DiGraph) -> bool:
    # A DiGraph holds at most one self-loop per vertex.
    return nx.number_of_selfloops(graph) == graph.number_of_nodes()


def is_symmetric(graph: nx.DiGraph) -> bool:
    return all(graph.has_edge(v, u) for u, v in graph.edges())


def is_transitive(graph: nx.DiGraph) -> bool:
    """
    One-hop composition check: u -> v and v -> w imply u -> w.

    Only direct successors are compared, not paths of arbitrary length.
    """

    for u in graph:
        successors = set(graph.successors(u))
        for v in successors:
            if not successors.issuperset(graph.successors(v)):
                return False
    return True


def is_anti_symmetric(graph: nx.DiGraph) -> bool:
    return all(u == v or not graph.has_edge(v, u) for u, v in graph.edges())


def is_equivalence(graph: nx.DiGraph) -> bool:
    return is_reflexive(graph) and is_symmetric(graph) and is_transitive(graph)
