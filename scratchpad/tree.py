"""A small binary tree with level-order traversal and child-value swapping."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Node | None = None
    right: Node | None = None


def level_order(root: Node | None) -> list[int]:
    """Return the node values in breadth-first order."""
    values = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        values.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values


def invert_tree(root: Node | None) -> None:
    """Swap the values of sibling nodes, recursively, wherever both children exist.

    The tree's shape is left unchanged; only values move between siblings.
    """
    if root is None or root.left is None or root.right is None:
        return
    left, right = root.left, root.right
    left.data, right.data = right.data, left.data
    invert_tree(left)
    invert_tree(right)


def build_sample_tree() -> Node:
    """Return the seven-node sample tree rooted at 99."""
    return Node(
        99,
        Node(1, Node(3), Node(4)),
        Node(2, Node(5), Node(6)),
    )


def _print_level_order(root: Node) -> None:
    print("".join(f"{value} " for value in level_order(root)))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample tree in level order before and after inverting it."""
    root = build_sample_tree()
    _print_level_order(root)
    invert_tree(root)
    _print_level_order(root)
    return 0