"""A singly linked list built from nodes, with a sentinel head node."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


class Node:
    """A node of a singly linked list.

    A list is represented by a sentinel head node whose own value is not
    part of the list; the elements are the values of the nodes after it.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: Optional[Node] = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_after(self, value: Any) -> Node:
        """Insert a new node holding ``value`` right after this one and return it."""
        self.next = Node(value, self.next)
        return self.next

    def find_predecessor(self, predicate: Callable[[Any], bool]) -> Optional[Node]:
        """Return the node whose successor's value satisfies ``predicate``.

        The search starts at this node's successor; ``None`` is returned
        if no following value matches.
        """
        node: Optional[Node] = self
        while node is not None and node.next is not None:
            if predicate(node.next.value):
                return node
            node = node.next
        return None

    def to_list(self) -> list[Any]:
        """Return the values of the nodes following this one."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values of the nodes following this one."""
        node = self.next
        while node is not None:
            yield node.value
            node = node.next