#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the main entry location for the program execution from the command line."""

from __future__ import annotations

import logging
import sys

from pathlib import Path
from typing import TYPE_CHECKING

import simple_parsing

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

import arrayqueue.configuration as config

from arrayqueue.__version__ import __version__
from arrayqueue.driver import run_driver
from arrayqueue.driver import set_configuration
from arrayqueue.utils.logging_utils import DATE_LOG_FORMAT
from arrayqueue.utils.logging_utils import PLAIN_LOG_FORMAT
from arrayqueue.utils.logging_utils import RICH_LOG_FORMAT
from arrayqueue.utils.logging_utils import verbosity_to_level


if TYPE_CHECKING:
    import argparse


def _create_argument_parser() -> argparse.ArgumentParser:
    parser = simple_parsing.ArgumentParser(
        add_option_string_dash_variants=simple_parsing.DashVariant.UNDERSCORE_AND_DASH,
        description="Exercise a dynamic array and a sorted priority queue",
        fromfile_prefix_chars="@",
    )
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        dest="verbosity",
        default=0,
        help="verbose output (repeat for increased verbosity)",
    )
    parser.add_argument(
        "--no-rich",
        "--no_rich",
        dest="no_rich",
        action="store_true",
        default=False,
        help="Don't use rich for nicer console output.",
    )
    parser.add_argument(
        "--log-file",
        "--log_file",
        help="Path to an optional log file.",
        type=Path,
    )
    parser.add_arguments(config.Configuration, dest="config")

    return parser


def _setup_logging(
    verbosity: int,
    no_rich: bool,  # noqa: FBT001
    log_file: Path | None,
) -> Console | None:
    level = verbosity_to_level(verbosity, has_log_file=log_file is not None)

    console = None
    handler: logging.Handler
    if no_rich:
        handler = logging.StreamHandler()
    else:
        install()
        console = Console(tab_size=4, stderr=True)
        handler = RichHandler(
            rich_tracebacks=True, log_time_format=DATE_LOG_FORMAT, console=console
        )
        handler.setFormatter(logging.Formatter(RICH_LOG_FORMAT))

    if log_file is not None:
        handler = logging.FileHandler(log_file)

    logging.basicConfig(
        level=level,
        format=PLAIN_LOG_FORMAT,
        datefmt=DATE_LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
    return console


def main(argv: list[str] | None = None) -> int:
    """Entry point for the command-line interface.

    This method behaves like a standard UNIX command-line application, i.e.,
    the return value `0` signals a successful execution.  Any other return value
    signals some errors, see :class:`arrayqueue.driver.ReturnCode`.

    Args:
        argv: List of command-line arguments, including the program name

    Returns:
        An integer representing the success of the program run.
    """
    if argv is None:
        argv = sys.argv
    argument_parser = _create_argument_parser()
    parsed = argument_parser.parse_args(argv[1:])

    _setup_logging(
        verbosity=parsed.verbosity,
        no_rich=parsed.no_rich,
        log_file=parsed.log_file,
    )

    set_configuration(parsed.config)
    return run_driver().value


if __name__ == "__main__":
    sys.exit(main(sys.argv))
