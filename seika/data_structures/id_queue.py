"""A ring-buffer queue of integer ids that grows when it runs dry."""

from __future__ import annotations


class IdQueue:
    """Queue pre-filled with ids ``0..capacity-1``.

    Dequeuing from an empty queue doubles its capacity and hands out the
    newly created ids.
    """

    def __init__(self, initial_capacity: int) -> None:
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        self.capacity = initial_capacity
        self._size = initial_capacity
        self._front = 0
        self._rear = initial_capacity - 1
        self._array = list(range(initial_capacity))

    def is_full(self) -> bool:
        return self._size == self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, item: int) -> bool:
        """Put ``item`` at the back; return False when the queue is full."""
        if self.is_full():
            return False
        self._rear = (self._rear + 1) % self.capacity
        self._array[self._rear] = item
        self._size += 1
        return True

    def dequeue(self) -> int:
        """Take the id at the front, growing the queue first if it is empty."""
        if self.is_empty():
            previous = self.capacity
            self.capacity *= 2
            self._array = [0] * previous + list(range(previous, self.capacity))
            self._front = previous
            self._rear = self.capacity - 1
            self._size = previous
        item = self._array[self._front]
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item

    def front(self) -> int:
        """Return the id at the front; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("id queue is empty")
        return self._array[self._front]

    def rear(self) -> int:
        """Return the id at the back; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("id queue is empty")
        return self._array[self._rear]

    def __len__(self) -> int:
        return self._size