import random

import pytest

from dsakit.trees import BinarySearchTree

BALANCED = [4, 2, 6, 1, 3, 5, 7]


def test_preorder_of_balanced_tree():
    assert BinarySearchTree(BALANCED).preorder() == [4, 2, 1, 3, 6, 5, 7]


def test_postorder_of_balanced_tree():
    assert BinarySearchTree(BALANCED).postorder() == [1, 3, 2, 5, 7, 6, 4]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_inorder_is_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randrange(100) for _ in range(60)]
    assert BinarySearchTree(values).inorder() == sorted(values)


@pytest.mark.parametrize("seed", [5, 6])
def test_preorder_rebuilds_the_same_tree(seed):
    rng = random.Random(seed)
    values = [rng.randrange(1000) for _ in range(80)]
    tree = BinarySearchTree(values)
    rebuilt = BinarySearchTree(tree.preorder())
    assert rebuilt.preorder() == tree.preorder()
    assert rebuilt.postorder() == tree.postorder()


def test_root_is_first_in_preorder_and_last_in_postorder():
    values = [10, 3, 17, 8, 1, 12]
    tree = BinarySearchTree(values)
    assert tree.preorder()[0] == values[0]
    assert tree.postorder()[-1] == values[0]


def test_duplicates_are_kept():
    tree = BinarySearchTree([3, 3, 3])
    assert tree.inorder() == [3, 3, 3]
    assert tree.preorder() == [3, 3, 3]


def test_sorted_input_does_not_hit_recursion_limit():
    values = list(range(5000))
    tree = BinarySearchTree(values)
    assert tree.inorder() == values
    assert tree.preorder() == values
    assert tree.postorder() == values[::-1]


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert tree.postorder() == []