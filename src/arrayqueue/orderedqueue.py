#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides a priority queue that keeps a dynamic array fully sorted.

The queue stores its elements in non-increasing order, so the maximum is at the front
and the minimum at the back.  Every insertion appends and then re-sorts the whole
store, which costs O(n log n) per push.  Removing the maximum shifts the store by one
slot and costs O(n).
"""

from __future__ import annotations

import logging

from typing import TYPE_CHECKING, Generic, TextIO, TypeVar

from typing_extensions import Self

from arrayqueue.dynamicarray import ArrayPosition, DynamicArray, ReversePosition
from arrayqueue.utils.ordering import is_non_increasing, lexicographical_less


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from arrayqueue.utils.textio import TokenReader

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


class OrderedQueue(Generic[T]):
    """A max-priority queue over a sorted :class:`DynamicArray`.

    The sort is stable, equal elements keep the order in which they were inserted.
    """

    def __init__(
        self,
        source: Iterable[T] | None = None,
        element_type: Callable[..., T] | None = None,
    ) -> None:
        """Creates a queue holding the elements of the source.

        Args:
            source: The initial elements, in any order
            element_type: The optional element type of the store
        """
        if element_type is None and isinstance(source, DynamicArray):
            element_type = source.element_type
        self._store: DynamicArray[T] = DynamicArray.from_iterable(
            () if source is None else source, element_type=element_type
        )
        self._restore_order()

    @classmethod
    def from_range(
        cls,
        first: ArrayPosition[T] | ReversePosition[T],
        last: ArrayPosition[T] | ReversePosition[T],
    ) -> Self:
        """Creates a queue from the elements in ``[first, last)``.

        Args:
            first: The position of the first element
            last: The position after the last element

        Returns:
            A new queue.
        """
        queue = cls()
        queue._store = DynamicArray.from_range(first, last)
        queue._restore_order()
        return queue

    @property
    def store(self) -> DynamicArray[T]:
        """Provides the underlying array, in non-increasing order.

        Returns:
            The store of this queue
        """
        return self._store

    def size(self) -> int:  # noqa: D102
        return self._store.size()

    def is_empty(self) -> bool:  # noqa: D102
        return self._store.is_empty()

    def __len__(self) -> int:
        return len(self._store)

    def push(self, value: T) -> None:
        """Inserts a value and restores the order of the store.

        Args:
            value: The value to insert
        """
        self._store.append(value)
        self._restore_order()
        _LOGGER.debug("Pushed %r, queue holds %d elements", value, len(self._store))

    def pop(self) -> None:
        """Removes the maximum element.  Does nothing on an empty queue."""
        self._store.remove_front()
        _LOGGER.debug("Popped front, queue holds %d elements", len(self._store))

    def front(self) -> T:
        """Provides the maximum element.

        Returns:
            The maximum element
        """
        return self._store.front()

    def back(self) -> T:
        """Provides the minimum element.

        Returns:
            The minimum element
        """
        return self._store.back()

    def drain(self) -> Iterator[T]:
        """Removes the elements one by one, from the maximum to the minimum.

        Yields:
            The current front element before it is popped
        """
        while not self.is_empty():
            value = self.front()
            self.pop()
            yield value

    def swap(self, other: OrderedQueue[T]) -> None:
        """Exchanges the stores of both queues without copying elements.

        Args:
            other: The queue to swap with
        """
        self._store, other._store = other._store, self._store

    def copy(self) -> Self:
        """Creates an independent copy of this queue.

        Returns:
            The copy
        """
        queue = self.__class__()
        queue._store = self._store.copy()
        return queue

    def __copy__(self) -> Self:
        return self.copy()

    def read_from(self, source: TextIO | TokenReader) -> None:
        """Replaces the elements by values read from the source, then re-sorts.

        As many values are read as the queue currently holds.

        Args:
            source: A text stream or a token reader
        """
        self._store.read_from(source)
        self._restore_order()

    def write_to(self, stream: TextIO) -> None:
        """Writes the elements from maximum to minimum, each followed by a space.

        Args:
            stream: The text stream to write to
        """
        self._store.write_to(stream)

    def __iter__(self) -> Iterator[T]:
        return iter(self._store)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedQueue):
            return NotImplemented
        return self._store == other._store

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: OrderedQueue[T]) -> bool:
        if not isinstance(other, OrderedQueue):
            return NotImplemented
        return lexicographical_less(self._store, other._store)

    def __gt__(self, other: OrderedQueue[T]) -> bool:
        if not isinstance(other, OrderedQueue):
            return NotImplemented
        return lexicographical_less(other._store, self._store)

    def __le__(self, other: OrderedQueue[T]) -> bool:
        if not isinstance(other, OrderedQueue):
            return NotImplemented
        return not lexicographical_less(other._store, self._store)

    def __ge__(self, other: OrderedQueue[T]) -> bool:
        if not isinstance(other, OrderedQueue):
            return NotImplemented
        return not lexicographical_less(self._store, other._store)

    def __str__(self) -> str:
        return str(self._store)

    def __repr__(self) -> str:
        name = self.__class__.__name__
        if not self:
            return f"{name}()"
        return f"{name}({list(self)!r})"

    def _restore_order(self) -> None:
        self._store.sort(reverse=True)
        # Elements without a consistent total order (e.g. NaN) defeat the sort.
        if _LOGGER.isEnabledFor(logging.DEBUG) and not is_non_increasing(self._store):
            _LOGGER.warning("Queue elements are not totally ordered, order does not hold")
