#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
import pytest

import arrayqueue.configuration as config

from arrayqueue.dynamicarray import DynamicArray
from arrayqueue.orderedqueue import OrderedQueue


@pytest.fixture(autouse=True)
def reset_configuration():
    """Automatically reset the configuration singleton."""
    config.configuration = config.Configuration()


@pytest.fixture
def primes():
    return DynamicArray.from_iterable([2, 3, 5, 7], element_type=int)


@pytest.fixture
def empty_array():
    return DynamicArray(element_type=int)


@pytest.fixture
def queue():
    return OrderedQueue([3, 1, 2], element_type=int)
