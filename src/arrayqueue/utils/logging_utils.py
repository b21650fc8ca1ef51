#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
"""Logging utilities for arrayqueue.

This module centralizes logging format strings and the mapping from the command-line
verbosity to a log level.
"""

from __future__ import annotations

import logging

from typing import Final


DATE_LOG_FORMAT: Final[str] = "[%X]"
PLAIN_LOG_FORMAT: Final[str] = (
    "%(asctime)s [%(levelname)s](%(name)s:%(funcName)s:%(lineno)d): %(message)s"
)
RICH_LOG_FORMAT: Final[str] = "%(message)s"


def verbosity_to_level(verbosity: int, *, has_log_file: bool = False) -> int:
    """Maps the number of ``-v`` flags to a log level.

    Args:
        verbosity: How often the verbose flag was given
        has_log_file: Whether logging goes to a file, which raises the default to INFO

    Returns:
        The log level to configure.
    """
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1 or has_log_file:
        return logging.INFO
    return logging.WARNING
