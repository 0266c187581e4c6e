#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Randkit provides random numbers and selections for game-server plugins.

This module provides the main entry location for the program executions.
"""

import sys

from randkit.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv))
