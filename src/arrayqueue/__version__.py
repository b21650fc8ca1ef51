#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the version of arrayqueue."""

__version__ = "0.1.0"
