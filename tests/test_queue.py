import pytest

from fero.queue import ItemTooLarge, Queue, QueueEmpty, QueueError, QueueFull


def test_init_works():
    queue = Queue(10, 20)
    assert queue.capacity == 10
    assert queue.item_size == 20
    assert len(queue) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Queue(-1, 4)


def test_count_works():
    queue = Queue(10, 20)
    assert len(queue) == 0
    data = bytes([1, 2, 3, 4])
    queue.put(data)
    assert len(queue) == 1
    queue.put(data)
    assert len(queue) == 2
    queue.get()
    assert len(queue) == 1


def test_put_works():
    queue = Queue(2, 20)
    queue.put(bytes([1, 2, 3, 4]))
    assert len(queue) == 1


def test_put_fails_when_item_too_big():
    queue = Queue(2, 10)
    with pytest.raises(ItemTooLarge):
        queue.put(bytes(15))
    assert len(queue) == 0


def test_put_accepts_item_of_exact_size():
    queue = Queue(1, 4)
    queue.put(b"abcd")
    assert queue.get() == b"abcd"


def test_put_fails_when_full():
    queue = Queue(2, 20)
    queue.put(bytes([5, 6, 7]))
    queue.put(bytes([8, 9, 10]))
    assert len(queue) == 2
    with pytest.raises(QueueFull):
        queue.put(bytes([11, 12]))
    assert len(queue) == 2


def test_errors_share_base_class():
    queue = Queue(0, 4)
    with pytest.raises(QueueError):
        queue.put(b"a")
    with pytest.raises(QueueError):
        queue.get()


def test_get_works():
    queue = Queue(3, 10)
    with pytest.raises(QueueEmpty):
        queue.get()
    data1 = bytes([1, 2, 3, 4])
    data2 = bytes([5, 6, 7])
    queue.put(data1)
    queue.put(data2)

    out = queue.get()
    assert len(out) == len(data1)
    assert out == data1
    assert len(queue) == 1

    out = queue.get()
    assert len(out) == len(data2)
    assert out == data2
    assert len(queue) == 0

    with pytest.raises(QueueEmpty):
        queue.get()


def test_get_works_with_wraparound():
    queue = Queue(2, 10)
    with pytest.raises(QueueEmpty):
        queue.get()
    queue.put(bytes([1]))
    queue.put(bytes([2, 3]))
    assert queue.get() == bytes([1])
    data3 = bytes([4, 5, 6])
    queue.put(data3)
    assert queue.get() == bytes([2, 3])
    out = queue.get()
    assert len(out) == len(data3)
    assert out == data3
    assert len(queue) == 0
    with pytest.raises(QueueEmpty):
        queue.get()


def test_peek_works():
    queue = Queue(3, 10)
    with pytest.raises(QueueEmpty):
        queue.peek()
    data1 = bytes([1, 2, 3, 4])
    data2 = bytes([5, 6, 7])
    queue.put(data1)
    queue.put(data2)

    assert queue.peek() == data1
    assert len(queue) == 2

    assert queue.peek() == data1
    assert len(queue) == 2

    queue.get()
    assert queue.peek() == data2
    assert len(queue) == 1


def test_put_stores_a_copy():
    queue = Queue(1, 4)
    data = bytearray(b"ab")
    queue.put(data)
    data[0] = ord("z")
    assert queue.get() == b"ab"


def test_iteration_is_oldest_first_and_non_destructive():
    queue = Queue(3, 2)
    for item in (b"a", b"b", b"c"):
        queue.put(item)
    assert list(queue) == [b"a", b"b", b"c"]
    assert len(queue) == 3