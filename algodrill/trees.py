"""Binary trees: depth-first and level-order traversals, balanced construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    previous: Optional[TreeNode] = None
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        top = stack[-1]
        if top.right is None or top.right is previous:
            stack.pop()
            result.append(top.val)
            previous = top
        else:
            node = top.right
    return result


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    """Yield the values of each level, top down, left to right."""
    current = [root] if root is not None else []
    while current:
        yield [node.val for node in current]
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, from the root down, each left to right."""
    return list(_levels(root))


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, from the deepest level up, each left to right."""
    return list(_levels(root))[::-1]


def level_order_zigzag(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, alternating left-to-right and right-to-left."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(_levels(root))
    ]


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ascending ``nums``."""

    def build(begin: int, end: int) -> Optional[TreeNode]:
        if begin >= end:
            return None
        mid = begin + (end - begin) // 2
        return TreeNode(nums[mid], build(begin, mid), build(mid + 1, end))

    return build(0, len(nums))