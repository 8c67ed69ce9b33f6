"""A binary search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, Optional, TypeVar

from . import binary_tree
from .binary_tree import TreeNode

K = TypeVar("K")


class BinarySearchTree(Generic[K]):
    """Keys smaller than a node go left, larger go right; duplicates are ignored."""

    def __init__(self, keys: Iterable[K] = ()) -> None:
        self._root: Optional[TreeNode[K]] = None
        for key in keys:
            self.insert(key)

    @property
    def root(self) -> Optional[TreeNode[K]]:
        return self._root

    def insert(self, key: K) -> None:
        """Add ``key`` unless it is already present."""

        def insert_at(node: Optional[TreeNode[K]]) -> TreeNode[K]:
            if node is None:
                return TreeNode(key)
            if key < node.data:
                node.left = insert_at(node.left)
            elif key > node.data:
                node.right = insert_at(node.right)
            return node

        self._root = insert_at(self._root)

    @staticmethod
    def _min_node(node: TreeNode[K]) -> TreeNode[K]:
        while node.left is not None:
            node = node.left
        return node

    def delete(self, key: K) -> bool:
        """Remove ``key``; return whether it was present.

        A node with two children takes the smallest key of its right subtree.
        """
        removed = False

        def delete_at(node: Optional[TreeNode[K]], target: K) -> Optional[TreeNode[K]]:
            nonlocal removed
            if node is None:
                return None
            if target < node.data:
                node.left = delete_at(node.left, target)
            elif target > node.data:
                node.right = delete_at(node.right, target)
            else:
                removed = True
                if node.left is None:
                    return node.right
                if node.right is None:
                    return node.left
                successor = self._min_node(node.right)
                node.data = successor.data
                node.right = delete_at(node.right, successor.data)
            return node

        self._root = delete_at(self._root, key)
        return removed

    def minimum(self) -> K:
        """Return the smallest key; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("minimum() of an empty tree")
        return self._min_node(self._root).data

    def preorder(self) -> list[K]:
        return binary_tree.preorder(self._root)

    def inorder(self) -> list[K]:
        return binary_tree.inorder(self._root)

    def postorder(self) -> list[K]:
        return binary_tree.postorder(self._root)

    def node_count(self) -> int:
        return binary_tree.node_count(self._root)

    def leaf_count(self) -> int:
        return binary_tree.leaf_count(self._root)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self.node_count()