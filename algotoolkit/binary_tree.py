"""Linked binary trees, binary search trees, traversals and a text renderer.

The traversal, height and rendering helpers work on any tree-like object
that exposes ``value``, ``left`` and ``right`` and is falsy when empty:
``None`` for :class:`BinaryTree`, an out-of-range subtree for a
complete tree stored in a list.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from algotoolkit.sequences import format_value


@dataclass
class BinaryTree:
    """A node of a binary tree owning its left and right subtrees."""

    value: Any
    left: Optional[BinaryTree] = None
    right: Optional[BinaryTree] = None


def bst_search(tree: Optional[BinaryTree], value: Any) -> Optional[BinaryTree]:
    """Return the node holding ``value`` or, failing that, the largest smaller one.

    Returns ``None`` when every value in the tree exceeds ``value``.
    """
    best: Optional[BinaryTree] = None
    node = tree
    while node is not None:
        if value == node.value:
            return node
        if value < node.value:
            node = node.left
        else:
            best = node
            node = node.right
    return best


def bst_insert(tree: Optional[BinaryTree], value: Any) -> BinaryTree:
    """Insert ``value`` into a binary search tree and return its root.

    Values equal to a node's value go into its left subtree.
    """
    new_node = BinaryTree(value)
    if tree is None:
        return new_node
    node = tree
    while True:
        if value <= node.value:
            if node.left is None:
                node.left = new_node
                return tree
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return tree
            node = node.right


def height(tree: Any) -> int:
    """Return the height of ``tree``: -1 when empty, 0 for a single node."""
    level = [tree] if tree else []
    result = -1
    while level:
        result += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return result


def df_traversal(tree: Any) -> Iterator[Any]:
    """Yield the subtrees of ``tree`` depth first, in order (left, root, right)."""
    pending: list[Any] = []
    node = tree
    while pending or node:
        while node:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node
        node = node.right


def bf_traversal(tree: Any) -> Iterator[Any]:
    """Yield the subtrees of ``tree`` breadth first, level by level."""
    queue: deque[Any] = deque([tree])
    while queue:
        current = queue.popleft()
        if current:
            yield current
            queue.append(current.left)
            queue.append(current.right)


def _render_lines(tree: Any) -> list[str]:
    if not tree:
        return []
    text = format_value(tree.value)

    left_lines = _render_lines(tree.left)
    right_lines = _render_lines(tree.right)

    left_width = len(left_lines[0]) if left_lines else 0
    right_width = len(right_lines[0]) if right_lines else 0

    rows = max(len(left_lines), len(right_lines))
    left_lines += [" " * left_width] * (rows - len(left_lines))
    right_lines += [" " * right_width] * (rows - len(right_lines))

    left_span = max(len(text) + 2, left_width)
    pad = " " * (left_span - left_width)
    fill = "-" if right_width else " "
    text = text + " " + fill * (left_span - len(text) - 1)
    if right_width:
        text += "v" + " " * (right_width - 1)

    return [text] + [a + pad + b for a, b in zip(left_lines, right_lines)]


def render_binary_tree(tree: Any) -> str:
    """Draw ``tree`` as text, one line per level, children below their parent."""
    return "\n".join(_render_lines(tree))