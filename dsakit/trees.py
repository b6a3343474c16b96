"""A binary search tree with the three depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _TreeNode:
    value: int
    left: Optional["_TreeNode"] = None
    right: Optional["_TreeNode"] = None


class BinarySearchTree:
    """Binary search tree; values equal to a node go into its left subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree."""
        node = _TreeNode(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def inorder(self) -> list[int]:
        """Return the values in left, node, right order."""
        result: list[int] = []
        stack: list[_TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list[int]:
        """Return the values in node, left, right order."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[int]:
        """Return the values in left, right, node order."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result