"""A growable list that tracks its capacity the way a dynamic array does."""

from __future__ import annotations

from typing import Any, Iterator

DEFAULT_CAPACITY = 16


class ArrayList:
    """Ordered collection with explicit capacity that doubles when full."""

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if initial_capacity < 0:
            raise ValueError("initial_capacity must not be negative")
        self._items: list[Any] = []
        self._capacity = initial_capacity
        self.initial_capacity = initial_capacity

    @property
    def capacity(self) -> int:
        """Number of elements the list holds before it grows again."""
        return self._capacity

    def push_back(self, value: Any) -> None:
        """Append a value, doubling capacity when the list is full."""
        if len(self._items) >= self._capacity:
            self._capacity = max(self._capacity * 2, 1)
        self._items.append(value)

    def get(self, index: int) -> Any:
        """Return the element at ``index``; raise IndexError when out of bounds."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"Attempting to access out of bounds index '{index}'")
        return self._items[index]

    def remove(self, value: Any) -> bool:
        """Remove the first element equal to ``value``; return whether one was found."""
        try:
            self._items.remove(value)
        except ValueError:
            return False
        return True

    def remove_by_index(self, index: int) -> bool:
        """Remove the element at ``index``; return False when out of bounds."""
        if 0 <= index < len(self._items):
            del self._items[index]
            return True
        return False

    def has(self, value: Any) -> bool:
        """Return True if an element equal to ``value`` is present."""
        return value in self._items

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every element; capacity is kept."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r}, capacity={self._capacity})"