import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.queues import (
    ArrayQueue,
    CircularQueue,
    LinkedQueue,
    StackQueue,
    first_non_repeating,
    interleave_halves,
    reverse_queue,
)


def _drain(queue):
    out = []
    while not queue.is_empty():
        out.append(queue.pop())
    return out


def test_first_in_first_out():
    for queue in (LinkedQueue(), ArrayQueue(), CircularQueue(10), StackQueue()):
        for value in (1, 2, 3):
            queue.push(value)
        assert queue.front() == 1
        assert len(queue) == 3
        assert list(queue) == [1, 2, 3]
        assert [queue.pop(), queue.pop(), queue.pop()] == [1, 2, 3]
        assert queue.is_empty()


def test_empty_queue_raises():
    for queue in (LinkedQueue(), ArrayQueue(), CircularQueue(10), StackQueue()):
        with pytest.raises(IndexError):
            queue.pop()
        with pytest.raises(IndexError):
            queue.front()


@pytest.mark.parametrize("cls", [LinkedQueue, StackQueue])
@given(values=st.lists(st.integers(), max_size=40))
def test_unbounded_queues_keep_order(cls, values):
    queue = cls()
    for value in values:
        queue.push(value)
    assert _drain(queue) == values


def test_linked_queue_reusable_after_emptying():
    queue = LinkedQueue()
    queue.push("a")
    assert queue.pop() == "a"
    queue.push("b")
    queue.push("c")
    assert _drain(queue) == ["b", "c"]


def test_array_queue_source_example():
    queue = ArrayQueue()
    for value in (10, 20, 30, 40):
        queue.push(value)
    assert queue.pop() == 10
    queue.push(40)
    assert list(queue) == [20, 30, 40, 40]
    assert queue.front() == 20


def test_array_queue_does_not_reuse_slots():
    queue = ArrayQueue(3)
    for value in (1, 2, 3):
        queue.push(value)
    assert queue.is_full()
    assert queue.pop() == 1
    with pytest.raises(OverflowError):
        queue.push(4)
    assert _drain(queue) == [2, 3]


def test_array_queue_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)


def test_circular_queue_source_example():
    queue = CircularQueue(5)
    for value in (1, 2, 3, 4, 5):
        queue.push(value)
    assert queue.is_full()
    assert queue.pop() == 1
    queue.push(6)
    assert queue.front() == 2
    assert _drain(queue) == [2, 3, 4, 5, 6]


def test_circular_queue_overflow():
    queue = CircularQueue(2)
    queue.push(1)
    queue.push(2)
    with pytest.raises(OverflowError):
        queue.push(3)
    assert list(queue) == [1, 2]


@given(values=st.lists(st.integers(), max_size=50))
def test_circular_queue_wraps_around(values):
    queue = CircularQueue(3)
    out = []
    for value in values:
        if queue.is_full():
            out.append(queue.pop())
        queue.push(value)
    out.extend(_drain(queue))
    assert out == values


def test_first_non_repeating_example():
    assert first_non_repeating("aabccxb") == ["a", None, "b", "b", "b", "b", "x"]


@given(st.text(alphabet="abcde", max_size=30))
def test_first_non_repeating_properties(text):
    result = first_non_repeating(text)
    assert len(result) == len(text)
    for i, found in enumerate(result):
        prefix = text[: i + 1]
        singles = [ch for ch in prefix if prefix.count(ch) == 1]
        if found is None:
            assert singles == []
        else:
            assert found == singles[0]


def test_interleave_halves_example():
    assert interleave_halves(range(1, 11)) == [1, 6, 2, 7, 3, 8, 4, 9, 5, 10]


@given(st.lists(st.integers(), max_size=30))
def test_interleave_halves_keeps_items(items):
    result = interleave_halves(items)
    assert sorted(result) == sorted(items)


@given(st.lists(st.integers(), max_size=15).map(lambda xs: xs + xs))
def test_interleave_even_length_alternates(items):
    half = len(items) // 2
    result = interleave_halves(items)
    assert result[0::2] == items[:half]
    assert result[1::2] == items[half:]


@given(st.lists(st.integers(), max_size=30))
def test_reverse_queue(items):
    assert reverse_queue(items) == items[::-1]
    assert reverse_queue(reverse_queue(items)) == items