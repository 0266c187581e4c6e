#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the version of Randkit."""

__version__ = "0.1.0"
