"""Helpers for fixed-length arrays."""

from __future__ import annotations

from typing import Any, MutableSequence


def selection_sort(values: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort ``values`` ascending in place and return it."""
    for i in range(len(values) - 1):
        min_index = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[min_index] = values[min_index], values[i]
    return values


def remove_item(values: MutableSequence[Any], item: Any, empty_value: Any) -> bool:
    """Remove the first ``item`` from a fixed-length array.

    Later elements shift left and the freed last slot is filled with
    ``empty_value``, so the length of ``values`` does not change.
    Returns whether the item was found.
    """
    for index, value in enumerate(values):
        if value == item:
            del values[index]
            values.append(empty_value)
            return True
    return False