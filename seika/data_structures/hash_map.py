"""A separately chained hash map over fixed-size binary keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Union

SHRINK_THRESHOLD = 0.25
MIN_CAPACITY = 8

_MASK64 = (1 << 64) - 1
_SIGN_EXTEND = 0xFFFFFFFFFFFFFF00

Key = Union[int, bytes, bytearray, memoryview]


def djb2_hash(data: bytes) -> int:
    """Return the 64-bit djb2 (xor variant) hash of ``data``.

    Bytes are treated as signed chars, so values of 0x80 and above are
    sign-extended before being mixed in.
    """
    value = 5381
    for byte in data:
        char = byte if byte < 0x80 else byte | _SIGN_EXTEND
        value = (((value << 5) + value) & _MASK64) ^ char
    return value


@dataclass
class _Node:
    raw: bytes
    key: Any
    value: Any


class HashMap:
    """Hash map whose keys are compared by their ``key_size``-byte encoding.

    Integer keys are encoded little-endian in ``key_size`` bytes; bytes-like
    keys must be exactly ``key_size`` long. The bucket array doubles when
    full and shrinks when only a quarter of it is in use.
    """

    def __init__(self, capacity: int = MIN_CAPACITY, key_size: int = 4) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if key_size < 1:
            raise ValueError("key_size must be at least 1")
        self.key_size = key_size
        self._size = 0
        self._buckets: list[list[_Node]] = [[] for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def _encode(self, key: Key) -> bytes:
        if isinstance(key, int):
            try:
                return key.to_bytes(self.key_size, "little", signed=key < 0)
            except OverflowError:
                raise ValueError(f"key {key} does not fit in {self.key_size} bytes") from None
        if isinstance(key, (bytes, bytearray, memoryview)):
            raw = bytes(key)
            if len(raw) != self.key_size:
                raise ValueError(f"key must be {self.key_size} bytes long, got {len(raw)}")
            return raw
        raise TypeError(f"unsupported key type: {type(key).__name__}")

    def _bucket_for(self, raw: bytes) -> list[_Node]:
        return self._buckets[djb2_hash(raw) % len(self._buckets)]

    def _find(self, raw: bytes) -> _Node | None:
        return next((node for node in self._bucket_for(raw) if node.raw == raw), None)

    def add(self, key: Key, value: Any) -> None:
        """Insert ``key`` or replace the value already stored under it."""
        raw = self._encode(key)
        self._grow_if_needed()
        node = self._find(raw)
        if node is not None:
            node.value = value
            return
        self._bucket_for(raw).insert(0, _Node(raw, key, value))
        self._size += 1

    def get(self, key: Key, default: Any = None) -> Any:
        """Return the value for ``key`` or ``default`` when absent."""
        node = self._find(self._encode(key))
        return default if node is None else node.value

    def has(self, key: Key) -> bool:
        return self._find(self._encode(key)) is not None

    def erase(self, key: Key) -> bool:
        """Remove ``key``; return whether it was present."""
        raw = self._encode(key)
        bucket = self._bucket_for(raw)
        for position, node in enumerate(bucket):
            if node.raw == raw:
                del bucket[position]
                self._size -= 1
                self._shrink_if_needed()
                return True
        return False

    def items(self) -> Iterator[tuple[Any, Any]]:
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
                self._bucket_for(node.raw).insert(0, node)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def __contains__(self, key: object) -> bool:
        try:
            return self.has(key)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r}, capacity={self.capacity})"