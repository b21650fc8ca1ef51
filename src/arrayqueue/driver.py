#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Drives the containers from the command line.

In DEMO mode, a fixed scenario exercises arrays over integers, characters, and strings
and finally drains a queue, printing ``3 2 1``.  In DRAIN mode, values are read from a
text source into a pre-sized queue and printed from the maximum to the minimum.
"""

from __future__ import annotations

import contextlib
import enum
import logging
import sys

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import arrayqueue.configuration as config

from arrayqueue.dynamicarray import DynamicArray
from arrayqueue.orderedqueue import OrderedQueue
from arrayqueue.utils.exceptions import ConfigurationException, TruncatedInputError
from arrayqueue.utils.textio import write_elements


if TYPE_CHECKING:
    from collections.abc import Iterator


@enum.unique
class ReturnCode(enum.IntEnum):
    """Return codes for the driver to signal result."""

    OK = 0
    """Symbolises that the execution ended as expected."""

    SETUP_FAILED = 1
    """Symbolises that the input could not be opened."""

    INPUT_FAILED = 2
    """Symbolises that the input ended early or held malformed values."""

    CHECK_FAILED = 3
    """Symbolises that a check of the demo scenario did not hold."""


_LOGGER = logging.getLogger(__name__)


def set_configuration(configuration: config.Configuration) -> None:
    """Initialises the driver with the given configuration.

    Args:
        configuration: The configuration to use.
    """
    config.configuration = configuration


def run_driver(output: TextIO | None = None) -> ReturnCode:
    """Run the driver in the configured mode.

    Args:
        output: The stream to print to, defaults to standard output

    Returns:
        See ReturnCode.

    Raises:
        ConfigurationException: In case the configuration is illegal
    """
    if output is None:
        output = sys.stdout
    try:
        _LOGGER.info("Start driver in %s mode…", config.configuration.mode.value)
        if config.configuration.mode == config.Mode.DEMO:
            return _run_demo(output)
        return _run_drain(output)
    finally:
        _LOGGER.info("Stop driver…")


def _check(condition: bool, description: str) -> bool:  # noqa: FBT001
    if not condition:
        _LOGGER.error("Check failed: %s", description)
    return condition


def _run_demo(output: TextIO) -> ReturnCode:
    checks: list[bool] = []

    numbers = DynamicArray.from_iterable([2, 3, 5, 7], element_type=int)
    numbers.append(11)
    checks.append(_check(numbers[len(numbers) - 1] == 11, "appended value is last"))
    numbers.assign(1, 1)
    checks.append(_check(numbers[0] == 1, "assigned value is first"))
    numbers.remove_front()
    checks.append(_check(numbers.is_empty(), "removing the only element empties"))

    chars = DynamicArray.from_iterable(["a", "b", "r", "a", "\0"], element_type=str)
    checks.append(_check(chars.back() == "\0", "terminator is last"))
    chars.remove_front()
    chars.append("c")
    chars.append("a")
    chars[0] = "A"
    checks.append(_check(chars.front() == "A", "written value is first"))
    _LOGGER.debug("Characters: %r", chars)

    words = DynamicArray.from_iterable(["Hello", "world"], element_type=str)
    words[0] += ","
    words.append(" ")
    words[len(words) - 1] += "!"
    checks.append(_check(list(words) == ["Hello,", "world", " !"], "edited words"))
    _LOGGER.debug("Words: %r", words)

    queue: OrderedQueue[int] = OrderedQueue(element_type=int)
    for value in (1, 2, 3):
        queue.push(value)
    write_elements(output, queue.drain())
    output.write("\n")

    if not all(checks):
        return ReturnCode.CHECK_FAILED
    return ReturnCode.OK


@contextlib.contextmanager
def _open_input() -> Iterator[TextIO]:
    if not config.configuration.input_path:
        yield sys.stdin
        return
    with Path(config.configuration.input_path).open(encoding="utf-8") as stream:
        yield stream


def _run_drain(output: TextIO) -> ReturnCode:
    count = config.configuration.count
    if count < 0:
        raise ConfigurationException(f"Count must not be negative, got {count}.")
    if config.configuration.input_path and not Path(config.configuration.input_path).is_file():
        _LOGGER.error("%s is not a valid input file", config.configuration.input_path)
        return ReturnCode.SETUP_FAILED

    element_type = config.configuration.element_type.converter
    queue = OrderedQueue(DynamicArray(count, element_type=element_type))
    try:
        with _open_input() as stream:
            queue.read_from(stream)
    except TruncatedInputError as error:
        _LOGGER.error("Not enough input values: %s", error)  # noqa: TRY400
        return ReturnCode.INPUT_FAILED
    except ValueError as error:
        _LOGGER.error(  # noqa: TRY400
            "Malformed input for element type %s: %s",
            config.configuration.element_type.value,
            error,
        )
        return ReturnCode.INPUT_FAILED

    _LOGGER.info("Read %d values", len(queue))
    write_elements(output, queue.drain())
    output.write("\n")
    return ReturnCode.OK
