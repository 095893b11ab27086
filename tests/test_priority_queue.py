import pytest

from dsakit.priority_queue import HeapOverflow, HeapUnderflow, Pair, PriorityQueue


def _drain(queue):
    out = []
    while len(queue):
        out.append(queue.delete())
    return out


def test_find_returns_largest_key():
    queue = PriorityQueue(10)
    for key in [3, 9, 1, 7]:
        queue.insert(Pair(key, key * 10))
    assert queue.find() == Pair(9, 90)
    assert len(queue) == 4


def test_find_does_not_remove():
    queue = PriorityQueue(5)
    queue.insert(Pair(1, 2))
    assert queue.find() == queue.find()
    assert len(queue) == 1


def test_equal_keys_come_out_in_insertion_order():
    queue = PriorityQueue(10)
    for value in range(5):
        queue.insert(Pair(4, value))
    assert [pair.value for pair in _drain(queue)] == list(range(5))


def test_delete_order_is_by_key_then_arrival():
    queue = PriorityQueue()
    pairs = [Pair(2, 0), Pair(5, 1), Pair(2, 2), Pair(5, 3), Pair(1, 4), Pair(5, 5)]
    for pair in pairs:
        queue.insert(pair)
    drained = _drain(queue)
    assert sorted(drained, key=lambda p: p.value) == pairs
    keys = [pair.key for pair in drained]
    assert keys == sorted(keys, reverse=True)
    for earlier, later in zip(drained, drained[1:]):
        if earlier.key == later.key:
            assert earlier.value < later.value


def test_overflow():
    queue = PriorityQueue(2)
    queue.insert(Pair(1, 1))
    queue.insert(Pair(2, 2))
    with pytest.raises(HeapOverflow):
        queue.insert(Pair(3, 3))
    assert len(queue) == 2


def test_underflow_on_find_and_delete():
    queue = PriorityQueue(3)
    with pytest.raises(HeapUnderflow):
        queue.find()
    with pytest.raises(HeapUnderflow):
        queue.delete()


def test_space_is_reused_after_delete():
    queue = PriorityQueue(1)
    queue.insert(Pair(1, 1))
    assert queue.delete() == Pair(1, 1)
    queue.insert(Pair(2, 2))
    assert queue.find() == Pair(2, 2)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        PriorityQueue(-1)