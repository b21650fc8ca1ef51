#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the main entry location for ``python -m arrayqueue``."""

import sys

from arrayqueue.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv))
