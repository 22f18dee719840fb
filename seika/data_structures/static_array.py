"""A bounded array with a fixed capacity."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from seika.data_structures.array_utils import selection_sort


class StaticArray:
    """Array holding at most ``capacity`` elements."""

    def __init__(self, capacity: int, empty_value: Any = None) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.empty_value = empty_value
        self._items: list[Any] = []

    def add(self, value: Any) -> None:
        """Append ``value``; raise OverflowError when the array is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError(f"Static array is at its capacity of {self.capacity}")
        self._items.append(value)

    def add_if_unique(self, value: Any) -> bool:
        """Append ``value`` unless an equal element exists; return whether added."""
        if value in self._items:
            return False
        self.add(value)
        return True

    def remove(self, value: Any) -> bool:
        """Remove the first element equal to ``value``."""
        return self.remove_if(value, lambda element, target: element == target)

    def remove_if(self, value: Any, predicate: Callable[[Any, Any], bool]) -> bool:
        """Remove the first element for which ``predicate(element, value)`` holds."""
        for index, element in enumerate(self._items):
            if predicate(element, value):
                del self._items[index]
                return True
        return False

    def clear(self) -> None:
        self._items.clear()

    def sort(self) -> None:
        """Sort the elements ascending in place."""
        if self._items:
            selection_sort(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"StaticArray({self._items!r}, capacity={self.capacity})"