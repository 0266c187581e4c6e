#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides a configuration interface for sampling random values."""

import dataclasses
import enum
import time


class Operation(str, enum.Enum):
    """The operations of the random facility that can be sampled."""

    CHANCE = "CHANCE"
    """Roll `percent` as a percentage from 0 to 100."""

    CHANCE_D = "CHANCE_D"
    """Roll `percent` as a fraction from 0.0 to 1.0."""

    NEXT_STRING = "NEXT_STRING"
    """Create a random text, `min_value` and `max_value` are the lengths."""

    NEXT_DYE_COLOR = "NEXT_DYE_COLOR"
    """Select a random dye colour."""

    NEXT_CHAT_COLOR = "NEXT_CHAT_COLOR"
    """Create a random chat colour code."""

    NEXT_BETWEEN = "NEXT_BETWEEN"
    """Select an integer from [`min_value`, `max_value`]."""

    NEXT_INT = "NEXT_INT"
    """Select an integer from [0, `max_value`)."""

    NEXT_BOOLEAN = "NEXT_BOOLEAN"
    """Flip a coin."""

    NEXT_ITEM = "NEXT_ITEM"
    """Select one of `items`."""

    NEXT_LOCATION = "NEXT_LOCATION"
    """Select a location within `radius` around the origin."""

    NEXT_CHUNK_X = "NEXT_CHUNK_X"
    """Select a block x coordinate for the chunk."""

    NEXT_CHUNK_Z = "NEXT_CHUNK_Z"
    """Select a block z coordinate for the chunk."""


@dataclasses.dataclass
class SeedingConfiguration:
    """Configuration related to seeding."""

    seed: int = time.time_ns()
    """A predefined seed value for the random number generator that is used."""


@dataclasses.dataclass
class SamplingConfiguration:
    """Configuration of the sampled operation and its arguments."""

    operation: Operation = Operation.CHANCE
    """The operation to sample."""

    samples: int = 1
    """How many values shall be sampled."""

    percent: float = 50.0
    """The chance for CHANCE (0 to 100) and CHANCE_D (0.0 to 1.0)."""

    min_value: int = 0
    """The lower bound, or the minimal length of a text."""

    max_value: int = 10
    """The upper bound, or the exclusive bound of a text's additional length."""

    items: list[str] = dataclasses.field(default_factory=list)
    """The items to select from."""

    radius: float = 10.0
    """The radius around the origin for NEXT_LOCATION."""

    is_3d: bool = False
    """Whether NEXT_LOCATION samples a sphere instead of a cylinder."""

    origin_x: float = 0.0
    """The x coordinate of the origin."""

    origin_y: float = 0.0
    """The y coordinate of the origin."""

    origin_z: float = 0.0
    """The z coordinate of the origin."""

    chunk_x: int = 0
    """The x index of the chunk."""

    chunk_z: int = 0
    """The z index of the chunk."""


@dataclasses.dataclass
class Configuration:
    """General configuration for sampling."""

    sampling: SamplingConfiguration = dataclasses.field(default_factory=SamplingConfiguration)
    """Sampling configuration."""

    seeding: SeedingConfiguration = dataclasses.field(default_factory=SeedingConfiguration)
    """Seeding configuration."""

    thread_safe: bool = True
    """Serialise draws on the shared generator."""


# Singleton instance of the configuration.
configuration = Configuration()
