#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
import copy
import io
import logging

import hypothesis.strategies as st
import pytest

from hypothesis import given

from arrayqueue.dynamicarray import DynamicArray
from arrayqueue.orderedqueue import OrderedQueue
from arrayqueue.utils.exceptions import EmptyContainerError
from arrayqueue.utils.ordering import is_non_increasing


def test_empty_queue():
    queue = OrderedQueue()
    assert queue.size() == 0
    assert queue.is_empty()
    assert not queue
    assert repr(queue) == "OrderedQueue()"


def test_construction_sorts(queue):
    assert list(queue) == [3, 2, 1]
    assert queue.size() == 3


def test_construction_from_array():
    source = DynamicArray.from_iterable([4, 9, 1], element_type=int)
    queue = OrderedQueue(source)
    assert list(queue) == [9, 4, 1]
    assert queue.store.element_type is int
    assert list(source) == [4, 9, 1]


def test_construction_from_range():
    source = DynamicArray.from_iterable([4, 9, 1, 7])
    queue = OrderedQueue.from_range(source.begin() + 1, source.end())
    assert list(queue) == [9, 7, 1]


def test_push_drain_order():
    queue = OrderedQueue()
    for value in (1, 2, 3):
        queue.push(value)
    drained = []
    while queue.size():
        drained.append(queue.front())
        queue.pop()
    assert drained == [3, 2, 1]


def test_drain_text():
    queue = OrderedQueue()
    for value in (1, 2, 3):
        queue.push(value)
    stream = io.StringIO()
    stream.write("".join(f"{value} " for value in queue.drain()))
    assert stream.getvalue() == "3 2 1 "
    assert queue.is_empty()


@given(values=st.lists(st.integers(), max_size=40))
def test_push_keeps_order(values):
    queue = OrderedQueue()
    for value in values:
        queue.push(value)
        assert is_non_increasing(queue)
    assert len(queue) == len(values)


@given(values=st.lists(st.integers(), min_size=1, max_size=40), pops=st.integers(0, 40))
def test_front_is_maximum_of_remaining(values, pops):
    queue = OrderedQueue()
    for value in values:
        queue.push(value)
    remaining = sorted(values, reverse=True)
    for _ in range(min(pops, len(values) - 1)):
        queue.pop()
        remaining.pop(0)
    assert queue.front() == max(remaining)
    assert queue.back() == min(remaining)


@given(values=st.lists(st.integers(), max_size=40))
def test_drain_is_non_increasing(values):
    assert list(OrderedQueue(values).drain()) == sorted(values, reverse=True)


def test_front_back(queue):
    assert queue.front() == 3
    assert queue.back() == 1


@pytest.mark.parametrize("accessor", ["front", "back"])
def test_front_back_empty(accessor):
    with pytest.raises(EmptyContainerError):
        getattr(OrderedQueue(), accessor)()


def test_pop_empty():
    queue = OrderedQueue()
    queue.pop()
    assert queue.is_empty()


def test_push_is_stable():
    queue = OrderedQueue()
    first = (1, "first")
    second = (1, "second")

    class Entry(tuple):
        __slots__ = ()

        def __lt__(self, other):
            return self[0] < other[0]

        def __gt__(self, other):
            return self[0] > other[0]

    queue.push(Entry(first))
    queue.push(Entry((2, "high")))
    queue.push(Entry(second))
    assert [entry[1] for entry in queue] == ["high", "first", "second"]


def test_swap(queue):
    other = OrderedQueue([10])
    store = queue.store
    queue.swap(other)
    assert list(queue) == [10]
    assert list(other) == [3, 2, 1]
    assert other.store is store


def test_copy_is_independent(queue):
    copied = copy.copy(queue)
    copied.push(10)
    assert list(queue) == [3, 2, 1]
    assert copied == OrderedQueue([1, 2, 3, 10])


def test_equality_ignores_push_order():
    first = OrderedQueue()
    second = OrderedQueue()
    for value in (3, 1, 2):
        first.push(value)
    for value in (1, 2, 3):
        second.push(value)
    assert first == second
    assert second == first
    assert first == first


@pytest.mark.parametrize(
    "first, second",
    [([1, 2, 3], [1, 2]), ([1, 2, 3], [1, 2, 4]), ([1, 1], [1])],
)
def test_inequality(first, second):
    assert OrderedQueue(first) != OrderedQueue(second)


def test_eq_other_type(queue):
    assert queue != [3, 2, 1]


def test_unhashable(queue):
    with pytest.raises(TypeError):
        hash(queue)


@pytest.mark.parametrize(
    "first, second, less",
    [
        ([], [], False),
        ([], [1], True),
        ([1], [], False),
        ([2, 1], [2, 1], False),
        ([2], [2, 1], True),
        ([3], [2, 1], False),
        ([2, 1], [3], True),
        ([5, 1], [5, 2], True),
    ],
)
def test_relational(first, second, less):
    lhs = OrderedQueue(first)
    rhs = OrderedQueue(second)
    assert (lhs < rhs) == less
    assert (rhs > lhs) == less
    assert (lhs >= rhs) == (not less)
    assert (rhs <= lhs) == (not less)


def test_relational_other_type(queue):
    with pytest.raises(TypeError):
        queue < [1]  # noqa: B015


def test_queues_as_sorted_elements():
    queues = [OrderedQueue([3]), OrderedQueue([1, 2]), OrderedQueue([2, 2])]
    assert [list(queue) for queue in sorted(queues)] == [[2, 1], [2, 2], [3]]


def test_read_from_resorts(queue):
    queue.read_from(io.StringIO("4 8\n6"))
    assert list(queue) == [8, 6, 4]


def test_read_from_strings():
    queue = OrderedQueue(DynamicArray(3, element_type=str))
    queue.read_from(io.StringIO("pear apple fig"))
    assert list(queue) == ["pear", "fig", "apple"]


def test_write_to(queue):
    stream = io.StringIO()
    queue.write_to(stream)
    assert stream.getvalue() == "3 2 1 "
    assert str(queue) == "3 2 1 "


def test_repr(queue):
    assert repr(queue) == "OrderedQueue([3, 2, 1])"


def test_successive_queue_reads_from_plain_stream():
    stream = io.StringIO("1 9\n5 7\n")
    first = OrderedQueue(DynamicArray(2, element_type=int))
    second = OrderedQueue(DynamicArray(2, element_type=int))
    first.read_from(stream)
    second.read_from(stream)
    assert list(first) == [9, 1]
    assert list(second) == [7, 5]


def test_unordered_elements_warn_when_debugging(caplog):
    class Inconsistent:
        def __lt__(self, other):
            return True

    with caplog.at_level(logging.DEBUG, logger="arrayqueue.orderedqueue"):
        OrderedQueue([Inconsistent(), Inconsistent()])
    assert "not totally ordered" in caplog.text


def test_ordered_elements_do_not_warn(caplog):
    with caplog.at_level(logging.DEBUG, logger="arrayqueue.orderedqueue"):
        OrderedQueue([2, 5, 1, 5])
    assert "not totally ordered" not in caplog.text
