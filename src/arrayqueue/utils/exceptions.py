#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides custom exception types."""


class ContainerError(Exception):
    """Base type of all errors raised by the containers."""


class AllocationError(ContainerError, MemoryError):
    """Raised if a buffer could not be allocated.

    This is fatal for the operation that tried to allocate, the container is left as it
    was before the allocating step.
    """


class EmptyContainerError(ContainerError, IndexError):
    """Raised when accessing the front or back element of an empty container."""


class InvalidatedPositionError(ContainerError, RuntimeError):
    """Raised when using a position whose buffer was reallocated or shifted."""


class TruncatedInputError(ContainerError, EOFError):
    """Raised if a text source ends before all requested elements were read."""

    def __init__(self, expected: int, received: int) -> None:
        """Create a new truncated input error.

        Args:
            expected: The number of tokens that were requested
            received: The number of tokens that were available
        """
        super().__init__(f"Expected {expected} tokens but input ended after {received}.")
        self.expected = expected
        self.received = received


class ConfigurationException(BaseException):
    """An exception type that's raised if the driver has no proper configuration."""
