#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the process-wide instance of Random that can be seeded."""

from __future__ import annotations

import random


class Random(random.Random):  # noqa: S311
    """A Random that remembers the seed it was initialised with.

    When no seed is given it takes `time.time_ns()`, so every generator has a seed
    that can be logged and used to replay a sequence of draws.  This is NOT
    cryptographically safe; game logic does not need more than that.
    """

    def __init__(self, x=None) -> None:  # noqa: D107
        self._current_seed: int | None = None
        super().__init__(x)

    def seed(self, a=None, version: int = 2) -> None:  # noqa: D102
        if a is None:
            import time  # noqa: PLC0415

            a = time.time_ns()

        self._current_seed = a
        super().seed(a, version)

    def get_seed(self) -> int:
        """Provides the seed used by this generator.

        Returns:
            The seed of the current sequence
        """
        assert self._current_seed is not None
        return self._current_seed


RNG: Random = Random()
