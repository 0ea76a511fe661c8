"""Binary trees: building from level order, comparison, views and diameters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from values listed level by level, None marking a gap.

    Children are only listed for nodes that exist.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    parents = deque([root])
    while parents:
        parent = parents.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(parent, side, child)
                parents.append(child)
    return root


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    view: list[int] = []
    level = [root] if root is not None else []
    while level:
        view.append(level[-1].val)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return view


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node having both ``p`` and ``q`` below or at it.

    If only one of them is in the tree, that node is returned; if neither
    is, None.
    """
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    longest = 0

    def height(node: TreeNode | None) -> int:
        nonlocal longest
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        longest = max(longest, left + right)
        return 1 + max(left, right)

    height(root)
    return longest