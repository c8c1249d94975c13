"""Binary heaps over lists, heap sort and a priority queue.

A comparison ``compare(a, b)`` returns true when ``a`` belongs above ``b``;
the default ``operator.gt`` gives a max-heap.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

from algotoolkit.complete_tree import CompleteTree

Comparison = Callable[[Any, Any], bool]


def heap_sift_up(tree: CompleteTree, compare: Comparison = operator.gt) -> None:
    """Move the value at ``tree`` up towards the root while it beats its parent."""
    node = tree
    parent = node.parent()
    while parent:
        if compare(node.value, parent.value):
            node.value, parent.value = parent.value, node.value
        node = parent
        parent = node.parent()


def heap_sift_down(tree: CompleteTree, compare: Comparison = operator.gt) -> None:
    """Move the value at ``tree`` down while one of its children beats it."""
    node = tree
    while True:
        child = node.left
        other = node.right
        if not child or (other and compare(other.value, child.value)):
            child = other
        if not child:
            return
        if compare(child.value, node.value):
            child.value, node.value = node.value, child.value
        node = child


def build_heap(storage: MutableSequence[Any], compare: Comparison = operator.gt) -> None:
    """Rearrange ``storage`` in place so that it satisfies the heap property."""
    size = len(storage)
    for i in range(size // 2 - 1, -1, -1):
        heap_sift_down(CompleteTree(storage, i, size), compare)


def heap_sort(storage: MutableSequence[Any], compare: Comparison = operator.gt) -> None:
    """Sort ``storage`` in place; the default comparison sorts ascending."""
    build_heap(storage, compare)
    for back in range(len(storage) - 1, 0, -1):
        storage[0], storage[back] = storage[back], storage[0]
        heap_sift_down(CompleteTree(storage, 0, back), compare)


def priority_enqueue(
    storage: MutableSequence[Any], value: Any, compare: Comparison = operator.gt
) -> None:
    """Add ``value`` to the heap held in ``storage``."""
    storage.append(value)
    size = len(storage)
    heap_sift_up(CompleteTree(storage, size - 1, size), compare)


def priority_dequeue(storage: MutableSequence[Any], compare: Comparison = operator.gt) -> Any:
    """Remove and return the top of the heap held in ``storage``.

    Raises ``IndexError`` when the heap is empty.
    """
    if not storage:
        raise IndexError("dequeue from empty priority queue")
    storage[0], storage[-1] = storage[-1], storage[0]
    top = storage.pop()
    heap_sift_down(CompleteTree(storage, 0, len(storage)), compare)
    return top