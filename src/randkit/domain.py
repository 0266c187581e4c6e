#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the world-geometry types the random facility operates on.

A host server usually brings its own chunk and location types; the facility only
relies on the small capability protocols defined here.  `BlockChunk` and `Point`
are plain value types satisfying these protocols, e.g., for tools and tests.
"""

from __future__ import annotations

import dataclasses
import enum

from typing import Protocol
from typing import runtime_checkable


class DyeColor(enum.Enum):
    """The sixteen dye colours, in their canonical order."""

    WHITE = enum.auto()
    ORANGE = enum.auto()
    MAGENTA = enum.auto()
    LIGHT_BLUE = enum.auto()
    YELLOW = enum.auto()
    LIME = enum.auto()
    PINK = enum.auto()
    GRAY = enum.auto()
    LIGHT_GRAY = enum.auto()
    CYAN = enum.auto()
    PURPLE = enum.auto()
    BLUE = enum.auto()
    BROWN = enum.auto()
    GREEN = enum.auto()
    RED = enum.auto()
    BLACK = enum.auto()

    @property
    def ordinal(self) -> int:
        """Provides the zero-based position of the colour.

        Returns:
            The position of the colour within the enumeration
        """
        return self.value - 1


@runtime_checkable
class Chunk(Protocol):
    """A fixed-size grid cell addressed by integer axis indices."""

    @property
    def x(self) -> int:  # noqa: D102
        ...

    @property
    def z(self) -> int:  # noqa: D102
        ...


@runtime_checkable
class Location(Protocol):
    """A point in world space that can be copied and offset."""

    def clone(self) -> Location:
        """Create an independent copy of this location.

        Returns:
            A copy of this location
        """

    def add(self, x: float, y: float, z: float) -> Location:
        """Offset this location in place.

        Args:
            x: The offset on the x axis
            y: The offset on the y axis
            z: The offset on the z axis

        Returns:
            This location, for chaining
        """


@dataclasses.dataclass(frozen=True)
class BlockChunk:
    """A chunk given by its axis indices."""

    x: int
    z: int

    @property
    def block_x(self) -> int:
        """The x coordinate of the chunk's first block."""
        return self.x << 4

    @property
    def block_z(self) -> int:
        """The z coordinate of the chunk's first block."""
        return self.z << 4


@dataclasses.dataclass
class Point:
    """A mutable location in a (possibly unnamed) world."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    world: str | None = None

    def clone(self) -> Point:  # noqa: D102
        return dataclasses.replace(self)

    def add(self, x: float, y: float, z: float) -> Point:  # noqa: D102
        self.x += x
        self.y += y
        self.z += z
        return self

    def distance(self, other: Point) -> float:
        """Computes the euclidean distance to another point.

        Args:
            other: The other point

        Returns:
            The distance between both points
        """
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2) ** 0.5
