"""A separately chained hash map keyed by strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from seika.data_structures.hash_map import djb2_hash

SHRINK_THRESHOLD = 0.25
MIN_CAPACITY = 8

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def hash_string(key: str) -> int:
    """Return the 64-bit djb2 (xor variant) hash of ``key``'s UTF-8 bytes."""
    return djb2_hash(key.encode("utf-8"))


@dataclass
class _Node:
    key: str
    value: Any


class StringHashMap:
    """Hash map with string keys.

    The bucket array doubles when full and shrinks when only a quarter of
    it is in use, never going below ``MIN_CAPACITY`` once above it.
    """

    def __init__(self, capacity: int = MIN_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._size = 0
        self._buckets: list[list[_Node]] = [[] for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    @staticmethod
    def _check_key(key: object) -> str:
        if not isinstance(key, str):
            raise TypeError(f"key must be a string, got {type(key).__name__}")
        return key

    def _bucket_for(self, key: str) -> list[_Node]:
        return self._buckets[hash_string(key) % len(self._buckets)]

    def _find(self, key: str) -> _Node | None:
        return next((node for node in self._bucket_for(key) if node.key == key), None)

    def add(self, key: str, value: Any) -> None:
        """Insert ``key`` or replace the value already stored under it."""
        self._check_key(key)
        if value is None:
            raise ValueError("value must not be None")
        self._grow_if_needed()
        node = self._find(key)
        if node is not None:
            node.value = value
            return
        self._bucket_for(key).insert(0, _Node(key, value))
        self._size += 1

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key`` or ``default`` when absent."""
        node = self._find(self._check_key(key))
        return default if node is None else node.value

    def find(self, key: str) -> Any:
        """Return the value for ``key`` or None when absent."""
        return self.get(key)

    def has(self, key: str) -> bool:
        return self._find(self._check_key(key)) is not None

    def erase(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket_for(self._check_key(key))
        for position, node in enumerate(bucket):
            if node.key == key:
                del bucket[position]
                self._size -= 1
                self._shrink_if_needed()
                return True
        return False

    def add_int(self, key: str, value: int) -> None:
        """Store a 32-bit signed integer under ``key``."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("value must be an int")
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise OverflowError(f"value {value} does not fit in 32 bits")
        self.add(key, value)

    def get_int(self, key: str) -> int:
        """Return the integer stored under ``key``; raise KeyError when absent."""
        node = self._find(self._check_key(key))
        if node is None:
            raise KeyError(key)
        return int(node.value)

    def add_string(self, key: str, value: str) -> None:
        """Store a string under ``key``."""
        if not isinstance(value, str):
            raise TypeError("value must be a string")
        self.add(key, value)

    def get_string(self, key: str) -> str | None:
        """Return the string stored under ``key`` or None when absent."""
        return self.get(key)

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs in bucket order."""
        for bucket in self._buckets:
            for node in list(bucket):
                yield node.key, node.value

    def _grow_if_needed(self) -> None:
        if self._size >= len(self._buckets):
            self._resize(max(self._size * 2, MIN_CAPACITY))

    def _shrink_if_needed(self) -> None:
        shrink_capacity = int(len(self._buckets) * SHRINK_THRESHOLD)
        if self._size == shrink_capacity:
            self._resize(shrink_capacity)

    def _resize(self, new_capacity: int) -> None:
        if new_capacity < MIN_CAPACITY:
            if len(self._buckets) > MIN_CAPACITY:
                new_capacity = MIN_CAPACITY
            else:
                return
        if new_capacity == len(self._buckets):
            return
        old_buckets = self._buckets
        self._buckets = [[] for _ in range(new_capacity)]
        for bucket in old_buckets:
            for node in bucket:
                self._bucket_for(node.key).insert(0, node)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key) is not None

    def __repr__(self) -> str:
        return f"StringHashMap({dict(self.items())!r}, capacity={self.capacity})"