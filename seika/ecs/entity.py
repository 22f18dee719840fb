"""Allocation of entity ids from a recycling queue."""

from __future__ import annotations

from seika.data_structures.id_queue import IdQueue

INITIAL_ENTITY_CAPACITY = 1000
NULL_ENTITY = 0xFFFFFFFF


class EntityManager:
    """Hands out entity ids and takes them back for reuse."""

    def __init__(self, initial_capacity: int = INITIAL_ENTITY_CAPACITY) -> None:
        self._queue = IdQueue(initial_capacity)
        self._active = 0

    def create(self) -> int:
        """Take a fresh entity id from the queue."""
        entity = self._queue.dequeue()
        self._active += 1
        return entity

    def release(self, entity: int) -> None:
        """Return ``entity`` to the queue; raise ValueError if it cannot be taken back."""
        if not self._queue.enqueue(entity):
            raise ValueError(f"entity {entity} cannot be returned: id queue is full")
        self._active -= 1

    @property
    def active_count(self) -> int:
        """Number of entities created and not yet released."""
        return self._active