import pytest

from dsakit.tree_paths import PathSumTree

BRANCHY = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)]


def test_sample_line_tree():
    tree = PathSumTree(3, [(0, 1), (1, 2)])
    tree.update(0, 1)
    tree.update(1, 2)
    assert tree.path_sum(0, 2) == 3


def test_fresh_tree_sums_to_zero():
    tree = PathSumTree(6, BRANCHY)
    assert tree.path_sum(3, 5) == 0
    assert tree.path_sum(0, 0) == 0


def test_lca():
    tree = PathSumTree(6, BRANCHY)
    assert tree.lca(3, 4) == 1
    assert tree.lca(3, 5) == 0
    assert tree.lca(4, 1) == 1
    assert tree.lca(5, 5) == 5


def test_path_includes_only_nodes_on_it():
    tree = PathSumTree(6, BRANCHY)
    tree.update(3, 7)
    assert tree.path_sum(3, 5) == 7
    assert tree.path_sum(4, 5) == 0
    tree.update(1, 4)
    assert tree.path_sum(3, 4) == 7 + 4
    assert tree.path_sum(4, 5) == 4


def test_path_sum_is_symmetric():
    tree = PathSumTree(6, BRANCHY)
    for node, value in enumerate([3, -1, 8, 2, 5, 6]):
        tree.update(node, value)
    for u in range(6):
        for v in range(6):
            assert tree.path_sum(u, v) == tree.path_sum(v, u)


def test_update_overwrites():
    tree = PathSumTree(6, BRANCHY)
    tree.update(1, 10)
    tree.update(1, 3)
    assert tree.path_sum(1, 1) == 3


def test_single_node_tree():
    tree = PathSumTree(1, [])
    tree.update(0, 9)
    assert tree.path_sum(0, 0) == 9
    assert tree.lca(0, 0) == 0


def test_wrong_edge_count():
    with pytest.raises(ValueError):
        PathSumTree(3, [(0, 1)])


def test_disconnected_graph():
    with pytest.raises(ValueError):
        PathSumTree(4, [(0, 1), (1, 0), (2, 3)])


def test_node_out_of_range():
    tree = PathSumTree(3, [(0, 1), (1, 2)])
    with pytest.raises(IndexError):
        tree.update(3, 1)
    with pytest.raises(IndexError):
        tree.path_sum(0, -1)