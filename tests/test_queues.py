import pytest

from dsakit.queues import (
    ArrayQueue,
    DynamicQueue,
    LinkedQueue,
    QueueOverflow,
    QueueUnderflow,
)


def _drain(queue):
    values = []
    while not queue.is_empty():
        values.append(queue.dequeue())
    return values


@pytest.mark.parametrize("factory", [lambda: ArrayQueue(5), DynamicQueue, LinkedQueue])
def test_fifo_order(factory):
    queue = factory()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert len(queue) == 3
    assert _drain(queue) == [1, 2, 3]
    assert len(queue) == 0


@pytest.mark.parametrize("factory", [lambda: ArrayQueue(5), DynamicQueue, LinkedQueue])
def test_dequeue_empty_raises(factory):
    queue = factory()
    assert queue.is_empty()
    with pytest.raises(QueueUnderflow):
        queue.dequeue()


@pytest.mark.parametrize("factory", [lambda: ArrayQueue(5), DynamicQueue, LinkedQueue])
def test_interleaved_operations(factory):
    queue = factory()
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert queue.dequeue() == 2
    assert queue.dequeue() == 3
    assert queue.is_empty()


def test_array_queue_holds_one_less_than_capacity():
    queue = ArrayQueue(5)
    for value in range(4):
        queue.enqueue(value)
    assert queue.is_full()
    assert len(queue) == 4
    with pytest.raises(QueueOverflow):
        queue.enqueue(99)


def test_array_queue_wraps_around():
    queue = ArrayQueue(3)
    received = []
    for value in range(10):
        queue.enqueue(value)
        if queue.is_full():
            received.append(queue.dequeue())
    received.extend(_drain(queue))
    assert received == list(range(10))


def test_array_queue_of_one_slot_is_always_full():
    queue = ArrayQueue(1)
    assert queue.is_full()
    assert queue.is_empty()
    with pytest.raises(QueueOverflow):
        queue.enqueue(1)


def test_array_queue_rejects_zero_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)


def test_dynamic_queue_capacity_grows():
    queue = DynamicQueue()
    assert queue.capacity == 1
    for value in range(3):
        queue.enqueue(value)
    assert queue.capacity == 4


@pytest.mark.parametrize("count", [1, 7, 16, 33])
def test_dynamic_queue_capacity_tracks_size(count):
    queue = DynamicQueue()
    for value in range(count):
        queue.enqueue(value)
        assert queue.capacity >= len(queue)
    out = []
    while not queue.is_empty():
        out.append(queue.dequeue())
        assert queue.capacity >= len(queue)
        assert queue.capacity >= 1
    assert out == list(range(count))
    queue.enqueue(5)
    assert queue.dequeue() == 5


def test_linked_queue_iterates_head_to_tail():
    queue = LinkedQueue()
    for value in (4, 5, 6):
        queue.enqueue(value)
    assert list(queue) == [4, 5, 6]
    queue.dequeue()
    assert list(queue) == [5, 6]


def test_linked_queue_reusable_after_emptying():
    queue = LinkedQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    queue.enqueue(2)
    queue.enqueue(3)
    assert list(queue) == [2, 3]
    assert len(queue) == 2