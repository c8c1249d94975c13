"""Array helpers and sorting routines operating on Python lists."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def format_value(value: Any) -> str:
    """Render a single value the way the sequence printer shows it.

    Floats use up to six significant digits with trailing zeros dropped,
    booleans render as ``1``/``0`` and everything else uses ``str``.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_sequence(items: Iterable[Any], prefix: str = "") -> str:
    """Return ``prefix`` followed by the items as ``[a, b, c]``."""
    body = ", ".join(format_value(item) for item in items)
    return f"{prefix}[{body}]"


def array_insert(items: MutableSequence[Any], index: int, value: Any) -> None:
    """Insert ``value`` at ``index``, shifting later elements right.

    ``index`` may equal ``len(items)`` to append. Raises ``IndexError``
    for any index outside ``0..len(items)``.
    """
    if not 0 <= index <= len(items):
        raise IndexError(f"insert index {index} out of range for length {len(items)}")
    items.insert(index, value)


def array_delete(items: MutableSequence[Any], index: int) -> None:
    """Remove the element at ``index``, shifting later elements left.

    Raises ``IndexError`` unless ``0 <= index < len(items)``.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"delete index {index} out of range for length {len(items)}")
    del items[index]


def _insert(items: MutableSequence[Any], i: int) -> None:
    """Move ``items[i]`` left until the prefix ``items[:i + 1]`` is sorted."""
    for j in range(i, 0, -1):
        if items[j - 1] <= items[j]:
            return
        items[j - 1], items[j] = items[j], items[j - 1]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with insertion sort (stable)."""
    for i in range(1, len(items)):
        _insert(items, i)


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into a new sorted list.

    On ties the element from ``left`` comes first, keeping the merge stable.
    """
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: Sequence[Any]) -> list[Any]:
    if len(items) <= 1:
        return list(items)
    middle = len(items) // 2
    return merge(_merge_sorted(items[:middle]), _merge_sorted(items[middle:]))


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with a top-down merge sort (stable)."""
    items[:] = _merge_sorted(list(items))


def counting_sort(items: MutableSequence[int], k: int) -> None:
    """Sort non-negative integers smaller than ``k`` in place.

    Raises ``ValueError`` if any value lies outside ``0..k-1``.
    """
    counts = [0] * k
    for value in items:
        if not 0 <= value < k:
            raise ValueError(f"value {value} outside range 0..{k - 1}")
        counts[value] += 1
    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]