import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from core.graph.digraph import Digraph


class AdjacencyGraph:
    """Изменяемый граф на словаре — для проверки снимков."""

    def __init__(self, adjacency_list: dict[int, list[int]]):
        self.adj = adjacency_list

    def neighbors(self, v: int):
        return self.adj.get(v, [])

    def num_vertices(self):
        return len(self.adj)


def test_basic_construction():
    g = Digraph(4, [(0, 1), (0, 2), (2, 3)])
    assert g.num_vertices() == 4
    assert g.num_edges() == 3
    assert g.neighbors(0) == (1, 2), "соседи должны идти в порядке добавления"
    assert g.neighbors(3) == ()
    assert list(g.edges()) == [(0, 1), (0, 2), (2, 3)]


def test_degrees():
    g = Digraph(4, [(0, 1), (2, 1), (3, 1), (1, 0)])
    assert g.outdegree(1) == 1
    assert g.indegree(1) == 3
    assert g.indegree(2) == 0


def test_empty_graph():
    g = Digraph(0)
    assert g.num_vertices() == 0
    assert g.num_edges() == 0
    assert list(g.edges()) == []


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Digraph(-1)


@pytest.mark.parametrize("edge", [(0, 3), (3, 0), (-1, 0), (0, -1)])
def test_edge_out_of_range(edge):
    with pytest.raises(IndexError):
        Digraph(3, [edge])


@pytest.mark.parametrize("v", [-1, 3, 100])
def test_neighbors_out_of_range(v):
    g = Digraph(3, [(0, 1)])
    with pytest.raises(IndexError):
        g.neighbors(v)


def test_neighbors_are_immutable():
    g = Digraph(2, [(0, 1)])
    with pytest.raises(AttributeError):
        g.neighbors(0).append(0)


def test_self_loops_and_parallel_edges_kept():
    g = Digraph(2, [(0, 0), (0, 1), (0, 1)])
    assert g.neighbors(0) == (0, 1, 1)
    assert g.num_edges() == 3


def test_reverse():
    g = Digraph(3, [(0, 1), (1, 2)])
    r = g.reverse()
    assert r.neighbors(2) == (1,)
    assert r.neighbors(1) == (0,)
    assert r.neighbors(0) == ()
    assert r.reverse() == g


def test_copy_is_equal_but_distinct():
    g = Digraph(3, [(0, 1), (1, 2)])
    c = g.copy()
    assert c == g
    assert c is not g
    assert hash(c) == hash(g)


def test_from_adjacency():
    g = Digraph.from_adjacency({0: [1, 2], 1: [2], 2: []})
    assert g.num_vertices() == 3
    assert g.neighbors(0) == (1, 2)

    g2 = Digraph.from_adjacency({0: [3]}, num_vertices=5)
    assert g2.num_vertices() == 5
    assert g2.neighbors(0) == (3,)


def test_from_graph_is_snapshot():
    src = AdjacencyGraph({0: [1], 1: [2], 2: []})
    g = Digraph.from_graph(src)
    src.adj[2].append(0)
    assert g.neighbors(2) == (), "снимок не должен видеть изменений исходного графа"


def test_repr():
    assert repr(Digraph(3, [(0, 1)])) == "Digraph(V=3, E=1)"
