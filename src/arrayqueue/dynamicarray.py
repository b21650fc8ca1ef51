#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides a dynamic array that owns its buffer and manages its growth explicitly.

The array keeps a single buffer of ``capacity`` slots, of which the first ``length``
slots hold valid elements.  An empty or cleared array holds no buffer at all.  Appending
to a full array doubles its capacity (starting at one slot); capacity is never shrunk
implicitly.

Indexed access is not checked against the length of the array.  Callers have to
ensure ``0 <= index < len(array)``, reading slack slots yields stale or default values.

Positions (see :class:`ArrayPosition`) describe places in the buffer.  Any operation
that reallocates or shifts the buffer, i.e., appending past capacity, ``resize``,
``reserve``, ``remove_front``, ``clear``, ``assign``, and copy or move assignment,
invalidates all outstanding positions of that array.  Using an invalidated position
raises an :class:`~arrayqueue.utils.exceptions.InvalidatedPositionError`.
"""

from __future__ import annotations

import copy
import logging

from typing import TYPE_CHECKING, Any, Final, Generic, TextIO, TypeVar, overload

from typing_extensions import Self

from arrayqueue.utils.exceptions import (
    AllocationError,
    EmptyContainerError,
    InvalidatedPositionError,
)
from arrayqueue.utils.textio import TokenReader, read_tokens, render, write_elements


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

T = TypeVar("T")

GROWTH_FACTOR: Final[int] = 2

_LOGGER = logging.getLogger(__name__)


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Final = _Missing()


def _allocate(slots: int, fill: Any) -> list[Any]:
    try:
        return [fill] * slots
    except MemoryError as error:
        raise AllocationError(f"Could not allocate a buffer of {slots} slots.") from error


def _allocate_with(slots: int, factory: Callable[[], Any]) -> list[Any]:
    try:
        return [factory() for _ in range(slots)]
    except MemoryError as error:
        raise AllocationError(f"Could not allocate a buffer of {slots} slots.") from error


def _allocate_from(iterable: Iterable[Any]) -> list[Any]:
    try:
        return list(iterable)
    except MemoryError as error:
        raise AllocationError("Could not allocate a buffer for the source elements.") from error


class DynamicArray(Generic[T]):
    """A growable array over an exclusively owned buffer.

    The optional ``element_type`` plays the role of the element's constructor: called
    without arguments it provides the default value of fresh slots, called with a text
    token it parses that token when reading from a text stream.  ``int``, ``float``, and
    ``str`` work out of the box, as does any class accepting these call forms.
    """

    def __init__(
        self,
        size: int = 0,
        value: T | _Missing = _MISSING,
        element_type: Callable[..., T] | None = None,
    ) -> None:
        """Creates an array of ``size`` slots that all hold ``value``.

        Args:
            size: The number of elements
            value: The fill value, defaults to the default value of the element type
            element_type: The optional element type, see the class documentation

        Raises:
            ValueError: If the size is negative
        """
        if size < 0:
            raise ValueError(f"Size must not be negative, got {size}.")
        self._element_type = element_type
        self._buffer: list[T] | None = None
        self._capacity = 0
        self._length = 0
        self._generation = 0
        if size > 0:
            if isinstance(value, _Missing):
                self._buffer = _allocate_with(size, self.default_value)
            else:
                self._buffer = _allocate(size, value)
            self._capacity = self._length = size

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[T],
        element_type: Callable[..., T] | None = None,
    ) -> Self:
        """Creates an array holding exactly the elements of the iterable, in order.

        Args:
            iterable: The source elements
            element_type: The optional element type

        Returns:
            A new array whose capacity equals its length.
        """
        array = cls(element_type=element_type)
        array._adopt(_allocate_from(iterable))
        return array

    @classmethod
    def from_range(
        cls,
        first: ArrayPosition[T] | ReversePosition[T],
        last: ArrayPosition[T] | ReversePosition[T],
    ) -> Self:
        """Creates an array from the elements in ``[first, last)``.

        Reverse positions are accepted as well, the elements are then taken in
        reverse order.

        Args:
            first: The position of the first element
            last: The position after the last element

        Returns:
            A new array whose capacity equals its length.
        """
        count = last - first  # type: ignore[operator]
        array = cls(element_type=first.array.element_type)
        array._adopt(_allocate_from((first + offset).value for offset in range(count)))
        return array

    @property
    def element_type(self) -> Callable[..., T] | None:
        """Provides the element type of this array.

        Returns:
            The element type, if any
        """
        return self._element_type

    @property
    def capacity(self) -> int:
        """Provides the number of allocated slots.

        Returns:
            The number of allocated slots
        """
        return self._capacity

    def default_value(self) -> T:
        """Provides the value of a default-constructed element.

        Returns:
            The default value, ``None`` for arrays without element type
        """
        if self._element_type is None:
            return None  # type: ignore[return-value]
        return self._element_type()

    def size(self) -> int:
        """Provides the number of valid elements.

        Returns:
            The length of the array
        """
        return self._length

    def is_empty(self) -> bool:
        """Checks whether the array holds no elements.

        Returns:
            True, if the length is zero
        """
        return self._length == 0

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> T:
        """Reads the element at the given index without checking the length.

        Args:
            index: The index, callers ensure ``0 <= index < len(self)``

        Returns:
            The element stored in that slot.

        Raises:
            NotImplementedError: When given a slice.
        """
        if isinstance(index, slice):
            raise NotImplementedError("Slicing currently not supported.")
        return self._buffer[index]  # type: ignore[index]

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise NotImplementedError("Slicing currently not supported.")
        self._buffer[index] = value  # type: ignore[index]

    def front(self) -> T:
        """Provides the first element.

        Returns:
            The element at index zero

        Raises:
            EmptyContainerError: If the array is empty
        """
        if self._length == 0:
            raise EmptyContainerError("front() called on an empty array.")
        return self._buffer[0]  # type: ignore[index]

    def back(self) -> T:
        """Provides the last element.

        Returns:
            The element at index ``len(self) - 1``

        Raises:
            EmptyContainerError: If the array is empty
        """
        if self._length == 0:
            raise EmptyContainerError("back() called on an empty array.")
        return self._buffer[self._length - 1]  # type: ignore[index]

    def append(self, value: T) -> None:
        """Appends a value, doubling the capacity first if the buffer is full.

        Args:
            value: The value to append
        """
        if self._length == self._capacity:
            self._reallocate(max(1, self._capacity * GROWTH_FACTOR))
        self._buffer[self._length] = value  # type: ignore[index]
        self._length += 1

    def remove_front(self) -> None:
        """Discards the first element and shifts the others one slot to the front.

        Does nothing on an empty array.  Runs in O(n).
        """
        if self._length == 0:
            return
        buffer = self._buffer
        assert buffer is not None
        buffer[0 : self._length - 1] = buffer[1 : self._length]
        self._length -= 1
        buffer[self._length] = self.default_value()
        self._generation += 1

    def resize(self, new_length: int) -> None:
        """Reallocates the buffer to exactly ``new_length`` slots.

        The leading ``min(len(self), new_length)`` elements are kept in order, any
        further slots hold the default value.  Afterwards, length and capacity both
        equal ``new_length``.

        Args:
            new_length: The new length of the array

        Raises:
            ValueError: If the new length is negative
        """
        if new_length < 0:
            raise ValueError(f"Length must not be negative, got {new_length}.")
        self._reallocate(new_length)
        self._length = new_length

    def reserve(self, new_capacity: int) -> None:
        """Reallocates the buffer to exactly ``new_capacity`` slots.

        Other than :meth:`resize`, growing does not change the length.  Shrinking below
        the length truncates the array.

        Args:
            new_capacity: The new number of slots

        Raises:
            ValueError: If the new capacity is negative
        """
        if new_capacity < 0:
            raise ValueError(f"Capacity must not be negative, got {new_capacity}.")
        self._reallocate(new_capacity)

    def assign(self, count: int, value: T) -> None:
        """Replaces the contents by ``count`` copies of ``value``.

        Args:
            count: The new length of the array
            value: The value for every slot

        Raises:
            ValueError: If the count is negative
        """
        if count < 0:
            raise ValueError(f"Count must not be negative, got {count}.")
        self._adopt(_allocate(count, value))

    def clear(self) -> None:
        """Releases the buffer and resets the array to the empty state."""
        if self._buffer is not None:
            _LOGGER.debug("Releasing buffer of %d slots", self._capacity)
        self._release()

    def sort(self, key: Callable[[T], Any] | None = None, *, reverse: bool = False) -> None:
        """Sorts the valid elements in place.

        The sort is stable, also when sorting in reverse order.  Outstanding positions
        stay valid, they then refer to the sorted values.

        Args:
            key: An optional key function
            reverse: Whether to sort in non-increasing order
        """
        if self._length > 1:
            self.sort_range(self.begin(), self.end(), key, reverse=reverse)

    def sort_range(
        self,
        first: ArrayPosition[T],
        last: ArrayPosition[T],
        key: Callable[[T], Any] | None = None,
        *,
        reverse: bool = False,
    ) -> None:
        """Sorts the elements in ``[first, last)`` in place.

        Args:
            first: The position of the first element to sort
            last: The position after the last element to sort
            key: An optional key function
            reverse: Whether to sort in non-increasing order

        Raises:
            ValueError: If the positions do not belong to this array
        """
        if first.array is not self or last.array is not self:
            raise ValueError("Positions do not belong to this array.")
        if last - first <= 0:
            return
        buffer = self._buffer
        assert buffer is not None
        buffer[first.offset : last.offset] = sorted(
            buffer[first.offset : last.offset], key=key, reverse=reverse
        )

    def copy(self) -> Self:
        """Creates an independent copy whose capacity equals its length.

        Returns:
            The copy
        """
        return self.from_iterable(self, element_type=self._element_type)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.from_iterable(
            (copy.deepcopy(element, memo) for element in self),
            element_type=self._element_type,
        )

    def copy_from(self, other: DynamicArray[T]) -> None:
        """Replaces the contents by a copy of the other array's elements.

        The own buffer is released, the new one is sized to the other's length.

        Args:
            other: The array to copy from
        """
        if other is self:
            return
        self._adopt(_allocate_from(other))
        self._element_type = other._element_type

    def take(self) -> Self:
        """Moves the buffer into a new array and leaves this array empty.

        Returns:
            The array that now owns the buffer
        """
        moved = type(self)(element_type=self._element_type)
        moved.move_from(self)
        return moved

    def move_from(self, other: DynamicArray[T]) -> None:
        """Takes over the buffer of the other array, which is left empty.

        The own buffer is released first.  No elements are copied.

        Args:
            other: The array to move from
        """
        if other is self:
            return
        buffer, capacity, length = other._buffer, other._capacity, other._length
        other._release()
        self._release()
        self._buffer, self._capacity, self._length = buffer, capacity, length
        self._element_type = other._element_type

    def swap(self, other: DynamicArray[T]) -> None:
        """Exchanges the buffers of both arrays without copying elements.

        Args:
            other: The array to swap with
        """
        if other is self:
            return
        self._buffer, other._buffer = other._buffer, self._buffer
        self._capacity, other._capacity = other._capacity, self._capacity
        self._length, other._length = other._length, self._length
        self._element_type, other._element_type = other._element_type, self._element_type
        self._generation += 1
        other._generation += 1

    def read_from(self, source: TextIO | TokenReader) -> None:
        """Fills every existing slot with the next token parsed from the source.

        The length does not change, callers have to size the array beforehand.  Tokens
        are parsed with the element type, or kept as strings without one.  The parse
        error of the element type propagates unchanged.

        Args:
            source: A text stream or a token reader
        """
        parse: Callable[[str], Any] = self._element_type or str
        values = [parse(token) for token in read_tokens(source, self._length)]
        if values:
            self._buffer[: self._length] = values  # type: ignore[index]

    def write_to(self, stream: TextIO) -> None:
        """Writes every element followed by a single space.

        Args:
            stream: The text stream to write to
        """
        write_elements(stream, self)

    def begin(self) -> ArrayPosition[T]:
        """Provides the position of the first element.

        Returns:
            The position at offset zero
        """
        return ArrayPosition(self, 0)

    def end(self) -> ArrayPosition[T]:
        """Provides the position after the last element.

        Returns:
            The position at offset ``len(self)``
        """
        return ArrayPosition(self, self._length)

    def rbegin(self) -> ReversePosition[T]:
        """Provides the reverse position of the last element.

        Returns:
            The first position of a reverse traversal
        """
        return ReversePosition(self.end())

    def rend(self) -> ReversePosition[T]:
        """Provides the reverse position before the first element.

        Returns:
            The end of a reverse traversal
        """
        return ReversePosition(self.begin())

    def __iter__(self) -> Iterator[T]:
        generation = self._generation
        for index in range(self._length):
            self._check_generation(generation)
            yield self._buffer[index]  # type: ignore[index]

    def __reversed__(self) -> Iterator[T]:
        generation = self._generation
        for index in reversed(range(self._length)):
            self._check_generation(generation)
            yield self._buffer[index]  # type: ignore[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._length == other._length and all(
            left == right for left, right in zip(self, other, strict=True)
        )

    __hash__ = None  # type: ignore[assignment]

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        name = self.__class__.__name__
        if not self:
            return f"{name}()"
        return f"{name}({list(self)!r})"

    def _check_generation(self, generation: int) -> None:
        if generation != self._generation:
            raise InvalidatedPositionError("Array buffer was reallocated or shifted.")

    def _reallocate(self, new_capacity: int) -> None:
        _LOGGER.debug("Reallocating buffer from %d to %d slots", self._capacity, new_capacity)
        kept = min(self._length, new_capacity)
        buffer: list[T] | None = None
        if new_capacity > 0:
            buffer = _allocate_with(new_capacity - kept, self.default_value)
            if kept:
                buffer[:0] = self._buffer[:kept]  # type: ignore[index]
        self._buffer = buffer
        self._capacity = new_capacity
        self._length = kept
        self._generation += 1

    def _adopt(self, elements: list[T]) -> None:
        self._buffer = elements or None
        self._capacity = self._length = len(elements)
        self._generation += 1

    def _release(self) -> None:
        self._buffer = None
        self._capacity = 0
        self._length = 0
        self._generation += 1


class ArrayPosition(Generic[T]):
    """A random-access position in the buffer of a :class:`DynamicArray`.

    Positions are immutable values: arithmetic yields new positions, ``pos += 1``
    rebinds.  A position remembers the buffer generation it was created for, reading
    or writing through it after the array reallocated or shifted its buffer raises an
    :class:`~arrayqueue.utils.exceptions.InvalidatedPositionError`.  Offsets are not
    checked against the length of the array.
    """

    __slots__ = ("_array", "_generation", "_offset")

    def __init__(self, array: DynamicArray[T], offset: int, generation: int | None = None) -> None:
        """Creates a position.

        Args:
            array: The array the position belongs to
            offset: The index the position refers to
            generation: The buffer generation, defaults to the array's current one
        """
        self._array = array
        self._offset = offset
        self._generation = array._generation if generation is None else generation  # noqa: SLF001

    @property
    def array(self) -> DynamicArray[T]:
        """Provides the array of this position.

        Returns:
            The array
        """
        return self._array

    @property
    def offset(self) -> int:
        """Provides the index this position refers to.

        Returns:
            The index
        """
        return self._offset

    def is_valid(self) -> bool:
        """Checks whether the buffer was neither reallocated nor shifted since.

        Returns:
            True, if the position may still be used
        """
        return self._generation == self._array._generation  # noqa: SLF001

    @property
    def value(self) -> T:
        """Reads the element at this position.

        Returns:
            The element
        """
        return self[0]

    @value.setter
    def value(self, value: T) -> None:
        self[0] = value

    def __getitem__(self, offset: int) -> T:
        self._array._check_generation(self._generation)  # noqa: SLF001
        return self._array[self._offset + offset]

    def __setitem__(self, offset: int, value: T) -> None:
        self._array._check_generation(self._generation)  # noqa: SLF001
        self._array[self._offset + offset] = value

    def next(self) -> ArrayPosition[T]:  # noqa: D102
        return self + 1

    def prev(self) -> ArrayPosition[T]:  # noqa: D102
        return self - 1

    def __add__(self, offset: int) -> ArrayPosition[T]:
        return ArrayPosition(self._array, self._offset + offset, self._generation)

    __radd__ = __add__

    @overload
    def __sub__(self, other: int) -> ArrayPosition[T]:
        pass

    @overload
    def __sub__(self, other: ArrayPosition[T]) -> int:
        pass

    def __sub__(self, other):
        if isinstance(other, ArrayPosition):
            self._check_same_array(other)
            self._array._check_generation(self._generation)  # noqa: SLF001
            self._array._check_generation(other._generation)  # noqa: SLF001
            return self._offset - other._offset
        return ArrayPosition(self._array, self._offset - other, self._generation)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayPosition):
            return NotImplemented
        return self._array is other._array and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((id(self._array), self._offset))

    def __lt__(self, other: ArrayPosition[T]) -> bool:
        if not isinstance(other, ArrayPosition):
            return NotImplemented
        self._check_same_array(other)
        return self._offset < other._offset

    def __le__(self, other: ArrayPosition[T]) -> bool:
        if not isinstance(other, ArrayPosition):
            return NotImplemented
        self._check_same_array(other)
        return self._offset <= other._offset

    def __gt__(self, other: ArrayPosition[T]) -> bool:
        if not isinstance(other, ArrayPosition):
            return NotImplemented
        self._check_same_array(other)
        return self._offset > other._offset

    def __ge__(self, other: ArrayPosition[T]) -> bool:
        if not isinstance(other, ArrayPosition):
            return NotImplemented
        self._check_same_array(other)
        return self._offset >= other._offset

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(offset={self._offset})"

    def _check_same_array(self, other: ArrayPosition[T]) -> None:
        if self._array is not other._array:
            raise ValueError("Positions belong to different arrays.")


class ReversePosition(Generic[T]):
    """A position that traverses a :class:`DynamicArray` from back to front.

    It wraps a forward position ``base`` and refers to the element just before it,
    thus ``rbegin()`` refers to the last and ``rend()`` to before the first element.
    """

    __slots__ = ("_base",)

    def __init__(self, base: ArrayPosition[T]) -> None:  # noqa: D107
        self._base = base

    @property
    def base(self) -> ArrayPosition[T]:  # noqa: D102
        return self._base

    @property
    def array(self) -> DynamicArray[T]:  # noqa: D102
        return self._base.array

    def is_valid(self) -> bool:  # noqa: D102
        return self._base.is_valid()

    @property
    def value(self) -> T:  # noqa: D102
        return self[0]

    @value.setter
    def value(self, value: T) -> None:
        self[0] = value

    def __getitem__(self, offset: int) -> T:
        return self._base[-offset - 1]

    def __setitem__(self, offset: int, value: T) -> None:
        self._base[-offset - 1] = value

    def next(self) -> ReversePosition[T]:  # noqa: D102
        return self + 1

    def prev(self) -> ReversePosition[T]:  # noqa: D102
        return self - 1

    def __add__(self, offset: int) -> ReversePosition[T]:
        return ReversePosition(self._base - offset)

    __radd__ = __add__

    @overload
    def __sub__(self, other: int) -> ReversePosition[T]:
        pass

    @overload
    def __sub__(self, other: ReversePosition[T]) -> int:
        pass

    def __sub__(self, other):
        if isinstance(other, ReversePosition):
            return other._base - self._base
        return ReversePosition(self._base + other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReversePosition):
            return NotImplemented
        return self._base == other._base

    def __hash__(self) -> int:
        return hash(("reverse", self._base))

    def __lt__(self, other: ReversePosition[T]) -> bool:
        if not isinstance(other, ReversePosition):
            return NotImplemented
        return self._base > other._base

    def __le__(self, other: ReversePosition[T]) -> bool:
        if not isinstance(other, ReversePosition):
            return NotImplemented
        return self._base >= other._base

    def __gt__(self, other: ReversePosition[T]) -> bool:
        if not isinstance(other, ReversePosition):
            return NotImplemented
        return self._base < other._base

    def __ge__(self, other: ReversePosition[T]) -> bool:
        if not isinstance(other, ReversePosition):
            return NotImplemented
        return self._base <= other._base

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base={self._base!r})"
