"""Binary trees: ancestors, text encoding, traversal and BST checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Find the lowest node having both ``p`` and ``q`` (matched by value) below it.

    Both values are assumed present in the tree and unique.
    """
    if root is None or root.val == p.val or root.val == q.val:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def serialize(root: Optional[TreeNode]) -> str:
    """Encode a tree in pre-order, ``#`` marking empty children."""
    if root is None:
        return "# "
    return f"{root.val} " + serialize(root.left) + serialize(root.right)


def deserialize(data: str) -> Optional[TreeNode]:
    """Decode a tree produced by :func:`serialize`."""
    tokens: Iterator[str] = iter(data.split())

    def build() -> Optional[TreeNode]:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError("truncated tree encoding") from None
        if token == "#":
            return None
        node = TreeNode(int(token))
        node.left = build()
        node.right = build()
        return node

    return build()


def inorder(root: Optional[TreeNode]) -> List[int]:
    """Return the values of the tree in in-order."""
    result: List[int] = []
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a binary search tree with distinct keys."""

    def check(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if (low is not None and node.val <= low) or (high is not None and node.val >= high):
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, None, None)