#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Comparison helpers that only rely on the ``<`` operator of the elements."""

from __future__ import annotations

import itertools

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Iterable


def lexicographical_less(lhs: Iterable[Any], rhs: Iterable[Any]) -> bool:
    """Checks whether the first sequence is lexicographically less than the second.

    The first position at which the elements differ decides.  If one sequence is a
    prefix of the other, the shorter one is the lesser.

    Args:
        lhs: The left-hand sequence
        rhs: The right-hand sequence

    Returns:
        True, if lhs orders strictly before rhs.
    """
    left = iter(lhs)
    right = iter(rhs)
    while True:
        try:
            right_item = next(right)
        except StopIteration:
            return False
        try:
            left_item = next(left)
        except StopIteration:
            return True
        if left_item < right_item:
            return True
        if right_item < left_item:
            return False


def is_non_increasing(iterable: Iterable[Any]) -> bool:
    """Checks that no element is less than its successor.

    Args:
        iterable: The sequence to check

    Returns:
        True, if every element is greater than or equal to the following one.
    """
    first, second = itertools.tee(iterable)
    next(second, None)
    return not any(left < right for left, right in zip(first, second))
