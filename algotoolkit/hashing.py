"""A hash table with separate chaining over singly linked lists."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Optional

from algotoolkit.linked_list import Node
from algotoolkit.sequences import format_value

NUM_CHAINS = 31


def character_sum_hash(text: str) -> int:
    """Hash a string as the sum of its character codes modulo ``NUM_CHAINS``."""
    return sum(ord(char) for char in text) % NUM_CHAINS


@dataclass
class _Entry:
    key: Any
    value: Any


class HashTable:
    """A map from keys to values stored in ``num_chains`` chains.

    Each chain is a linked list headed by a sentinel node; new keys are
    placed at the front of their chain.
    """

    def __init__(
        self, num_chains: int, hash_function: Callable[[Any], int] = hash
    ) -> None:
        if num_chains <= 0:
            raise ValueError("num_chains must be positive")
        self._hash = hash_function
        self._table = [Node() for _ in range(num_chains)]

    def _slot(self, key: Hashable) -> int:
        return self._hash(key) % len(self._table)

    def _find_predecessor(self, key: Any) -> Optional[Node]:
        chain = self._table[self._slot(key)]
        return chain.find_predecessor(lambda entry: entry.key == key)

    def insert(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any earlier value for ``key``."""
        node = self._find_predecessor(key)
        if node is None:
            self._table[self._slot(key)].insert_after(_Entry(key, value))
        else:
            node.next.value.value = value

    def get(self, key: Any) -> Any:
        """Return the value stored for ``key``, or ``None`` when it is absent."""
        node = self._find_predecessor(key)
        if node is None:
            return None
        return node.next.value.value

    def __contains__(self, key: Any) -> bool:
        return self._find_predecessor(key) is not None

    def __len__(self) -> int:
        return sum(self.slot_sizes())

    def slot_sizes(self) -> list[int]:
        """Return the number of entries held in each chain."""
        return [sum(1 for _ in chain) for chain in self._table]

    def summary(self, details: bool = False) -> str:
        """Describe the chain sizes; with ``details`` also list each chain's keys."""
        lines = []
        if details:
            for slot, chain in enumerate(self._table):
                keys = [f" '{format_value(entry.key)}'" for entry in chain]
                lines.append(f"Slot {slot} contains{''.join(keys)} ({len(keys)})")
        sizes = self.slot_sizes()
        average = sum(sizes) / len(sizes)
        lines.append(
            f"Slot sizes: min: {min(sizes)}, max: {max(sizes)}, "
            f"average: {format_value(average)}"
        )
        return "\n".join(lines)