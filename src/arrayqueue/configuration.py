#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides a configuration interface for the driver."""

import dataclasses
import enum

from collections.abc import Callable


class ElementType(str, enum.Enum):
    """The element types the driver can read from text."""

    INT = "INT"
    """Integral numbers."""

    FLOAT = "FLOAT"
    """Floating-point numbers."""

    STR = "STR"
    """Whitespace-free words."""

    @property
    def converter(self) -> Callable[..., object]:
        """Provides the Python type used to parse and default-construct elements.

        Returns:
            The element type
        """
        return _CONVERTERS[self]


_CONVERTERS: dict[ElementType, Callable[..., object]] = {
    ElementType.INT: int,
    ElementType.FLOAT: float,
    ElementType.STR: str,
}


class Mode(str, enum.Enum):
    """What the driver shall do."""

    DEMO = "DEMO"
    """Run the built-in scenario that exercises arrays and queues and prints the
    drained queue."""

    DRAIN = "DRAIN"
    """Read `count` values into a queue and print them from the maximum to the
    minimum."""


@dataclasses.dataclass
class Configuration:
    """General configuration for the driver."""

    mode: Mode = Mode.DEMO
    """The mode to run the driver in."""

    element_type: ElementType = ElementType.INT
    """The type of the values read in DRAIN mode."""

    count: int = 0
    """The number of values to read in DRAIN mode.  The queue is sized to this count
    before reading."""

    input_path: str = ""
    """Path to a file to read the values from.  Empty means standard input."""


# Singleton instance of the configuration.
configuration = Configuration()
