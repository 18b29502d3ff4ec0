"""Binary tree height and balance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["TreeNode", "max_depth", "is_balanced"]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return depth


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Report whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None