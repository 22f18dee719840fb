import pytest

from seika.data_structures.static_array import StaticArray


def test_add_and_iterate():
    array = StaticArray(4)
    array.add(3)
    array.add(1)
    assert len(array) == 2
    assert list(array) == [3, 1]
    assert array[0] == 3


def test_add_beyond_capacity_raises():
    array = StaticArray(1)
    array.add("only")
    with pytest.raises(OverflowError):
        array.add("extra")
    assert list(array) == ["only"]


def test_add_if_unique():
    array = StaticArray(4)
    assert array.add_if_unique(5) is True
    assert array.add_if_unique(5) is False
    assert list(array) == [5]


def test_remove_first_occurrence():
    array = StaticArray(5, empty_value=0)
    for value in (1, 2, 1, 3):
        array.add(value)
    assert array.remove(1) is True
    assert list(array) == [2, 1, 3]
    assert array.remove(9) is False
    assert len(array) == 3


def test_remove_if_with_predicate():
    array = StaticArray(4)
    for value in ("apple", "banana", "avocado"):
        array.add(value)
    removed = array.remove_if("a", lambda element, prefix: element.startswith(prefix))
    assert removed is True
    assert list(array) == ["banana", "avocado"]


def test_clear_and_sort():
    array = StaticArray(5)
    for value in (4, -2, 7, 0):
        array.add(value)
    array.sort()
    assert list(array) == sorted([4, -2, 7, 0])
    array.clear()
    assert len(array) == 0
    with pytest.raises(IndexError):
        array[0]