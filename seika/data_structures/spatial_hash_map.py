"""A spatial hash that buckets axis-aligned rectangles into grid cells."""

from __future__ import annotations

from dataclasses import dataclass, field

GRID_SPACE_ENTITY_LIMIT = 32
GRID_MAX_COLLISIONS = 16
NULL_ENTITY = 0xFFFFFFFF

_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Rect2:
    """An axis-aligned rectangle with no rotation."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def overlaps(self, other: Rect2) -> bool:
        """Return True if the rectangles overlap or touch."""
        return (
            self.x + self.w >= other.x
            and other.x + other.w >= self.x
            and self.y + self.h >= other.y
            and other.y + other.h >= self.y
        )

    @property
    def max_size(self) -> int:
        """The larger of width and height, truncated to an integer."""
        return int(self.h) if self.h > self.w else int(self.w)


@dataclass(eq=False)
class GridSpace:
    """The entities assigned to one cell of the grid."""

    entities: list[int] = field(default_factory=list)


@dataclass(eq=False)
class GridSpacesHandle:
    """Every grid space an entity is linked into, with its collision rectangle."""

    collision_rect: Rect2 = field(default_factory=Rect2)
    grid_spaces: list[GridSpace] = field(default_factory=list)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


class SpatialHashMap:
    """Spatial hash whose cell size tracks twice the size of the largest object."""

    def __init__(self, initial_cell_size: int) -> None:
        if initial_cell_size < 1:
            raise ValueError("initial_cell_size must be at least 1")
        self.cell_size = initial_cell_size
        self.largest_object_size = initial_cell_size
        self._grid: dict[int, GridSpace] = {}
        self._objects: dict[int, GridSpacesHandle] = {}

    def insert_or_update(self, entity: int, rect: Rect2) -> GridSpacesHandle:
        """Place ``entity`` at ``rect``, rebuilding the grid if the cell size changes."""
        handle = self._objects.get(entity)
        if handle is None:
            handle = self._objects[entity] = GridSpacesHandle()

        if self._change_cell_size_if_needed(rect):
            for other, other_handle in list(self._objects.items()):
                if other != entity:
                    self._update(other, other_handle, other_handle.collision_rect)

        self._update(entity, handle, rect)
        return handle

    def remove(self, entity: int) -> None:
        """Remove ``entity``; unknown entities are ignored."""
        handle = self._objects.get(entity)
        if handle is None:
            return
        self._unlink_all(handle, entity)
        del self._objects[entity]

        if handle.collision_rect.max_size == self.largest_object_size:
            found = -1
            for other_handle in self._objects.values():
                size = other_handle.collision_rect.max_size
                if size == self.largest_object_size:
                    found = -1
                    break
                if size > found:
                    found = size
            if found > 0:
                self.largest_object_size = found

    def get(self, entity: int) -> GridSpacesHandle | None:
        """Return the handle for ``entity`` or None when it is not present."""
        return self._objects.get(entity)

    def compute_collision(self, entity: int) -> list[int]:
        """Return the entities whose rectangles overlap ``entity``'s."""
        handle = self._objects.get(entity)
        if handle is None:
            return []
        collisions: list[int] = []
        for space in handle.grid_spaces:
            for other in space.entities:
                if other == entity or other in collisions:
                    continue
                other_handle = self._objects[other]
                if handle.collision_rect.overlaps(other_handle.collision_rect):
                    if len(collisions) >= GRID_MAX_COLLISIONS:
                        raise OverflowError(
                            f"At limit of collisions '{GRID_MAX_COLLISIONS}'"
                        )
                    collisions.append(other)
        return collisions

    def _change_cell_size_if_needed(self, rect: Rect2) -> bool:
        object_max_size = rect.max_size
        if object_max_size > self.largest_object_size:
            self.largest_object_size = object_max_size
        if (
            object_max_size > self.cell_size * 2
            or self.largest_object_size < _trunc_div(self.cell_size, 8)
        ):
            self.cell_size = max(object_max_size * 2, 1)
            return True
        return False

    def _update(self, entity: int, handle: GridSpacesHandle, rect: Rect2) -> None:
        handle.collision_rect = rect
        self._unlink_all(handle, entity)
        corners = (
            (rect.x, rect.y),
            (rect.x + rect.w, rect.y),
            (rect.x, rect.y + rect.h),
            (rect.x + rect.w, rect.y + rect.h),
        )
        linked: set[int] = set()
        for x, y in corners:
            position_hash = self._hash(x, y)
            if position_hash in linked:
                continue
            space = self._grid.setdefault(position_hash, GridSpace())
            if len(space.entities) >= GRID_SPACE_ENTITY_LIMIT:
                raise OverflowError(
                    f"Grid space is at its entity limit of {GRID_SPACE_ENTITY_LIMIT}"
                )
            space.entities.append(entity)
            handle.grid_spaces.append(space)
            linked.add(position_hash)

    def _hash(self, x: float, y: float) -> int:
        cell_x = _trunc_div(int(x), self.cell_size)
        cell_y = _trunc_div(int(y), self.cell_size)
        return ((cell_x * cell_x) ^ (cell_y * cell_y)) % _INT32_MAX

    @staticmethod
    def _unlink_all(handle: GridSpacesHandle, entity: int) -> None:
        for space in handle.grid_spaces:
            space.entities[:] = [e for e in space.entities if e != entity]
        handle.grid_spaces.clear()

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, entity: object) -> bool:
        return entity in self._objects