import pytest

from seika.data_structures.fixed_queue import FixedQueue


def test_empty_queue_returns_invalid_value():
    queue = FixedQueue(3, -1)
    assert queue.is_empty()
    assert queue.dequeue() == -1
    assert queue.front() == -1
    assert queue.rear() == -1


def test_fifo_order():
    queue = FixedQueue(3, None)
    for item in ("a", "b", "c"):
        assert queue.enqueue(item) is True
    assert queue.is_full()
    assert queue.front() == "a"
    assert queue.rear() == "c"
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert queue.is_empty()


def test_full_queue_drops_items():
    queue = FixedQueue(2, 0)
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.enqueue(30) is False
    assert len(queue) == 2
    assert [queue.dequeue(), queue.dequeue()] == [10, 20]


def test_wraps_around():
    queue = FixedQueue(2, 0)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    assert queue.enqueue(3) is True
    assert queue.front() == 2
    assert queue.rear() == 3
    assert [queue.dequeue(), queue.dequeue()] == [2, 3]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        FixedQueue(0, 0)