"""A resizable two-dimensional grid."""

from __future__ import annotations

from typing import Any


class Array2D:
    """Grid of ``rows`` by ``cols`` cells, addressed as ``(x, y)``.

    ``x`` ranges over ``rows`` (the width) and ``y`` over ``cols`` (the
    height). Fresh and reset cells hold ``default``.
    """

    def __init__(self, rows: int, cols: int, default: Any = None) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must not be negative")
        self.default = default
        self._width = rows
        self._height = cols
        self._data: list[list[Any]] = [[default] * rows for _ in range(cols)]

    @property
    def size(self) -> tuple[int, int]:
        """The grid's ``(width, height)``."""
        return self._width, self._height

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Any:
        """Return the cell at ``(x, y)``; raise IndexError when outside the grid."""
        if not self._in_bounds(x, y):
            raise IndexError(f"coordinate ({x}, {y}) is outside a grid of size {self.size}")
        return self._data[y][x]

    def set(self, x: int, y: int, value: Any) -> bool:
        """Store ``value`` at ``(x, y)``; return False when outside the grid."""
        if not self._in_bounds(x, y):
            return False
        self._data[y][x] = value
        return True

    def resize(self, new_x: int, new_y: int) -> None:
        """Change the grid size, keeping the cells that remain inside it."""
        if new_x < 0 or new_y < 0:
            raise ValueError("dimensions must not be negative")
        old_data = self._data

        def new_row(y: int) -> list[Any]:
            kept = old_data[y][:new_x] if y < len(old_data) else []
            return kept + [self.default] * (new_x - len(kept))

        self._data = [new_row(y) for y in range(new_y)]
        self._width = new_x
        self._height = new_y

    def clear(self) -> None:
        """Shrink the grid to zero by zero."""
        self.resize(0, 0)

    def reset(self) -> None:
        """Keep the size but set every cell back to ``default``."""
        self._fill(self.default)

    def reset_default(self, value: Any) -> None:
        """Keep the size but set every cell to ``value`` (``None`` means ``default``)."""
        self._fill(self.default if value is None else value)

    def _fill(self, value: Any) -> None:
        for row in self._data:
            row[:] = [value] * len(row)

    def __repr__(self) -> str:
        return f"Array2D(size={self.size}, data={self._data!r})"