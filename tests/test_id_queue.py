import pytest

from seika.data_structures.id_queue import IdQueue


def test_starts_full_with_sequential_ids():
    queue = IdQueue(4)
    assert queue.is_full()
    assert len(queue) == 4
    assert [queue.dequeue() for _ in range(4)] == list(range(4))
    assert queue.is_empty()


def test_front_and_rear():
    queue = IdQueue(3)
    assert queue.front() == 0
    assert queue.rear() == 3 - 1


def test_enqueue_when_full_is_rejected():
    queue = IdQueue(2)
    assert queue.enqueue(99) is False
    assert len(queue) == 2


def test_returned_ids_come_back_in_order():
    queue = IdQueue(3)
    taken = [queue.dequeue() for _ in range(3)]
    assert queue.enqueue(taken[1]) is True
    assert queue.enqueue(taken[0]) is True
    assert queue.front() == taken[1]
    assert queue.rear() == taken[0]
    assert queue.dequeue() == taken[1]
    assert queue.dequeue() == taken[0]


def test_grows_when_exhausted():
    capacity = 3
    queue = IdQueue(capacity)
    for _ in range(capacity):
        queue.dequeue()
    new_ids = [queue.dequeue() for _ in range(capacity)]
    assert new_ids == list(range(capacity, capacity * 2))
    assert queue.capacity == capacity * 2
    assert queue.is_empty()


def test_empty_front_and_rear_raise():
    queue = IdQueue(1)
    queue.dequeue()
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.rear()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        IdQueue(0)