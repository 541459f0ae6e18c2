import pytest

from graphsearch.bfs import Graph


@pytest.fixture
def graph():
    g = Graph()
    g.add_edge("Alice", "Bob")
    g.add_edge("Alice", "Charlie")
    g.add_edge("Bob", "David")
    g.add_edge("Bob", "Eve")
    g.add_edge("Charlie", "Frank")
    g.add_edge("Charlie", "Grace")
    return g


def test_bfs_find_grace(graph):
    assert graph.bfs_find("Alice", "Grace") is True


def test_bfs_find_missing_person(graph):
    assert graph.bfs_find("Alice", "Mallory") is False


def test_bfs_find_respects_edge_direction(graph):
    assert graph.bfs_find("Grace", "Alice") is False
    assert graph.bfs_find("Bob", "Eve") is True


def test_bfs_find_start_is_target():
    assert Graph().bfs_find("Alice", "Alice") is True


def test_bfs_order(graph):
    assert graph.bfs("Alice") == "Alice Bob Charlie David Eve Frank Grace "


def test_bfs_from_subtree(graph):
    assert graph.bfs("Charlie").split() == ["Charlie", "Frank", "Grace"]


def test_bfs_from_unknown_start():
    assert Graph().bfs("Nobody") == "Nobody "


def test_bfs_visits_each_node_once():
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("B", "A")
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    order = g.bfs("A").split()
    assert order == ["A", "B", "C"]
    assert len(order) == len(set(order))