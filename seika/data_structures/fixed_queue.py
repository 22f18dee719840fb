"""A fixed-capacity ring-buffer queue with a sentinel for missing values."""

from __future__ import annotations

from typing import Any


class FixedQueue:
    """Queue of at most ``capacity`` items.

    Reads from an empty queue return ``invalid_value``; items offered to a
    full queue are dropped.
    """

    def __init__(self, capacity: int, invalid_value: Any = None) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.invalid_value = invalid_value
        self._size = 0
        self._front = 0
        self._rear = capacity - 1
        self._array: list[Any] = [invalid_value] * capacity

    def is_full(self) -> bool:
        return self._size == self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, item: Any) -> bool:
        """Put ``item`` at the back; return False (and drop it) when full."""
        if self.is_full():
            return False
        self._rear = (self._rear + 1) % self.capacity
        self._array[self._rear] = item
        self._size += 1
        return True

    def dequeue(self) -> Any:
        """Take the front item, or return ``invalid_value`` when empty."""
        if self.is_empty():
            return self.invalid_value
        item = self._array[self._front]
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item

    def front(self) -> Any:
        if self.is_empty():
            return self.invalid_value
        return self._array[self._front]

    def rear(self) -> Any:
        if self.is_empty():
            return self.invalid_value
        return self._array[self._rear]

    def __len__(self) -> int:
        return self._size