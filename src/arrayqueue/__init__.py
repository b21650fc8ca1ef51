#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""A dynamic array with explicit buffer ownership and a sorted priority queue on top."""

import arrayqueue.dynamicarray as da
import arrayqueue.orderedqueue as oq


DynamicArray = da.DynamicArray
ArrayPosition = da.ArrayPosition
ReversePosition = da.ReversePosition
OrderedQueue = oq.OrderedQueue

__all__ = [
    "ArrayPosition",
    "DynamicArray",
    "OrderedQueue",
    "ReversePosition",
]
