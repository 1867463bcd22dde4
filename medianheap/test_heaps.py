import pytest

from .heaps import Max, MaxHeap, MinHeap


def test_min_heap():
    h = MinHeap()
    assert h.peek() is None
    assert not h
    for i in [5, 1, 4, 2, 3]:
        h.push(i)
    assert len(h) == 5
    assert h.peek() == 1
    assert h.items() == [1, 2, 3, 4, 5]
    assert [h.pop() for _ in range(5)] == [1, 2, 3, 4, 5]
    with pytest.raises(IndexError):
        h.pop()


def test_max_heap():
    h = MaxHeap()
    assert h.peek() is None
    for i in [5, 1, 4, 2, 3]:
        h.push(i)
    assert h.peek() == 5
    assert h.items() == [1, 2, 3, 4, 5]
    assert [h.pop() for _ in range(5)] == [5, 4, 3, 2, 1]
    with pytest.raises(IndexError):
        h.pop()


def test_max_heap_non_numeric():
    h = MaxHeap()
    for s in ["b", "c", "a"]:
        h.push(s)
    assert h.pop() == "c"
    assert h.pop() == "b"


def test_max_wrapper():
    assert Max(2) < Max(1)
    assert not Max(1) < Max(1)
    assert Max(1) == Max(1)
    assert repr(Max("x")) == "'x'"
