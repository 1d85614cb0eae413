"""Binary tree nodes, traversals and structural checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = [
    "TreeNode",
    "pre_order",
    "in_order",
    "post_order",
    "height",
    "is_balanced",
    "is_symmetric",
    "max_width",
    "count_in_range",
    "bst_search",
]


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def _pre(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield node.data
    yield from _pre(node.left)
    yield from _pre(node.right)


def _in(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield from _in(node.left)
    yield node.data
    yield from _in(node.right)


def _post(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield from _post(node.left)
    yield from _post(node.right)
    yield node.data


def pre_order(root: TreeNode | None) -> list[int]:
    """Values in root, left, right order."""
    return list(_pre(root))


def in_order(root: TreeNode | None) -> list[int]:
    """Values in left, root, right order."""
    return list(_in(root))


def post_order(root: TreeNode | None) -> list[int]:
    """Values in left, right, root order."""
    return list(_post(root))


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _balanced_height(node: TreeNode | None) -> int | None:
    """Height of a balanced subtree, or None when some node is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtree heights differ by at most one."""
    return _balanced_height(root) is not None


def _is_mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return (
        a.data == b.data
        and _is_mirror(a.left, b.right)
        and _is_mirror(a.right, b.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    return _is_mirror(root, root)


def max_width(root: TreeNode | None) -> int:
    """Largest number of nodes on any one level."""
    if root is None:
        return 0
    widest = 0
    level = deque([root])
    while level:
        widest = max(widest, len(level))
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return widest


def count_in_range(root: TreeNode | None, low: int, high: int) -> int:
    """Number of nodes of a binary search tree whose value lies in [low, high]."""
    if root is None:
        return 0
    if low <= root.data <= high:
        return (
            1
            + count_in_range(root.left, low, high)
            + count_in_range(root.right, low, high)
        )
    if root.data < low:
        return count_in_range(root.right, low, high)
    return count_in_range(root.left, low, high)


def bst_search(root: TreeNode | None, key: int) -> TreeNode | None:
    """The node holding key in a binary search tree, or None."""
    node = root
    while node is not None and node.data != key:
        node = node.right if node.data < key else node.left
    return node