"""A complete binary tree view over a Python list."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Optional


class CompleteTree:
    """A complete binary tree whose nodes are the first ``size`` list items.

    The node at index ``i`` has children at ``2 * i + 1`` and ``2 * i + 2``.
    A tree whose root lies outside ``0..size-1`` is empty and falsy.
    """

    __slots__ = ("storage", "root", "size")

    def __init__(
        self, storage: MutableSequence[Any], root: int = 0, size: Optional[int] = None
    ) -> None:
        self.storage = storage
        self.root = root
        self.size = len(storage) if size is None else size

    def __repr__(self) -> str:
        return f"CompleteTree(root={self.root}, size={self.size})"

    def subtree(self, root: int) -> CompleteTree:
        """Return the subtree rooted at index ``root`` of the same storage."""
        return CompleteTree(self.storage, root, self.size)

    def parent(self) -> CompleteTree:
        """Return the parent subtree; empty when this is the root."""
        if self.root <= 0:
            return self.subtree(-1)
        return self.subtree((self.root - 1) // 2)

    @property
    def left(self) -> CompleteTree:
        """The left child subtree."""
        return self.subtree(2 * self.root + 1)

    @property
    def right(self) -> CompleteTree:
        """The right child subtree."""
        return self.subtree(2 * self.root + 2)

    @property
    def value(self) -> Any:
        """The value at the root; raises ``IndexError`` for an empty tree."""
        if not self:
            raise IndexError("empty tree has no value")
        return self.storage[self.root]

    @value.setter
    def value(self, new_value: Any) -> None:
        if not self:
            raise IndexError("empty tree has no value")
        self.storage[self.root] = new_value

    def __bool__(self) -> bool:
        return 0 <= self.root < self.size