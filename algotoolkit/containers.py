"""Fixed-capacity stack and queue containers."""

from __future__ import annotations

from collections import deque
from typing import Any


class Stack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raises ``OverflowError`` when full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raises ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        """Whether the stack holds ``capacity`` items."""
        return len(self._items) == self.capacity


class Queue:
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back; raises ``OverflowError`` when full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raises ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        """Whether the queue holds ``capacity`` items."""
        return len(self._items) == self.capacity