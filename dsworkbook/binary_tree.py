"""Linked binary trees and their traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class TreeNode(Generic[T]):
    """A node holding ``data`` and links to its left and right subtrees."""

    data: T
    left: Optional[TreeNode[T]] = None
    right: Optional[TreeNode[T]] = None


def preorder(root: Optional[TreeNode[T]]) -> list[T]:
    """Visit the node, then its left subtree, then its right subtree."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: Optional[TreeNode[T]]) -> list[T]:
    """Visit the left subtree, then the node, then the right subtree."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: Optional[TreeNode[T]]) -> list[T]:
    """Visit both subtrees, left first, then the node."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def iterative_inorder(root: Optional[TreeNode[T]]) -> list[T]:
    """In-order traversal driven by an explicit stack instead of recursion."""
    stack: list[TreeNode[T]] = []
    result: list[T] = []
    node = root
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        if not stack:
            break
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def level_order(root: Optional[TreeNode[T]]) -> list[T]:
    """Visit nodes level by level, left to right, using a queue."""
    if root is None:
        return []
    queue: deque[TreeNode[T]] = deque([root])
    result: list[T] = []
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def node_count(root: Optional[TreeNode[T]]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + node_count(root.left) + node_count(root.right)


def leaf_count(root: Optional[TreeNode[T]]) -> int:
    """Return the number of nodes that have no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)