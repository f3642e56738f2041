import networkx as nx
import pytest

from relgraph.graph import relations

from conftest import make_graph, full_relation


def test_chain_relation_properties(chain_graph):
    assert not chain_graph.is_reflexive()
    assert not chain_graph.is_symmetric()
    assert not chain_graph.is_transitive()
    assert chain_graph.is_anti_symmetric()
    assert not chain_graph.is_equivalence()


def test_complete_relation_is_equivalence(complete_equivalence_graph):
    graph = complete_equivalence_graph

    assert graph.is_reflexive()
    assert graph.is_symmetric()
    assert graph.is_transitive()
    assert not graph.is_anti_symmetric()
    assert graph.is_equivalence()


def test_isolated_vertices(isolated_graph):
    assert not isolated_graph.is_reflexive()
    assert isolated_graph.is_symmetric()
    assert isolated_graph.is_transitive()
    assert isolated_graph.is_anti_symmetric()
    assert not isolated_graph.is_equivalence()


def test_reflexive_needs_every_vertex_looped():
    assert make_graph({1, 2}, [(1, 1), (2, 2), (1, 2)]).is_reflexive()
    assert not make_graph({1, 2, 3}, [(1, 1), (2, 2)]).is_reflexive()


def test_symmetric_pairs_and_self_loops():
    assert make_graph({1, 2}, [(1, 2), (2, 1), (1, 1)]).is_symmetric()
    assert not make_graph({1, 2, 3}, [(1, 2), (2, 1), (2, 3)]).is_symmetric()


def test_transitive_closes_one_hop_compositions():
    assert make_graph({1, 2, 3}, [(1, 2), (2, 3), (1, 3)]).is_transitive()
    assert not make_graph({1, 2, 3}, [(1, 2), (2, 3)]).is_transitive()
    # 1 -> 2 -> 1 requires the loop 1 -> 1.
    assert not make_graph({1, 2}, [(1, 2), (2, 1)]).is_transitive()


def test_anti_symmetric_ignores_self_loops():
    assert make_graph({1, 2}, [(1, 1), (1, 2)]).is_anti_symmetric()
    assert not make_graph({1, 2}, [(1, 2), (2, 1)]).is_anti_symmetric()


@pytest.mark.parametrize(
    "vertices, pairs",
    [
        ({1, 2, 3}, [(1, 2), (2, 3)]),
        ({1, 2, 3}, full_relation([1, 2, 3])),
        ({1, 2}, []),
        ({1, 2, 3}, [(1, 1), (2, 2), (3, 3), (1, 2)]),
        ({1, 2, 3, 4}, full_relation([1, 2]) + full_relation([3, 4])),
        ({1, 2, 3}, [(1, 1), (2, 2), (3, 3), (1, 2), (2, 1), (2, 3), (3, 2)]),
    ],
)
def test_equivalence_is_conjunction(vertices, pairs):
    graph = make_graph(vertices, pairs)

    assert graph.is_equivalence() == (
        graph.is_reflexive() and graph.is_symmetric() and graph.is_transitive()
    )


def test_predicates_accept_subgraph_views():
    digraph = nx.DiGraph()
    digraph.add_edges_from(full_relation([1, 2]) + [(2, 3), (3, 3)])

    assert not relations.is_equivalence(digraph)
    assert relations.is_equivalence(digraph.subgraph({1, 2}))
    assert relations.is_equivalence(digraph.subgraph({3}))
