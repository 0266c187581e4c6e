#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Randkit provides random numbers and selections for game-server plugins."""

import randkit.configuration as config
import randkit.domain as domain
import randkit.randomutil as randomutil
import randkit.sampler as smp
import randkit.utils.exceptions as exceptions


RandomUtil = randomutil.RandomUtil
DyeColor = domain.DyeColor
Chunk = domain.Chunk
Location = domain.Location
BlockChunk = domain.BlockChunk
Point = domain.Point
InvalidArgumentError = exceptions.InvalidArgumentError
EmptySelectionError = exceptions.EmptySelectionError
Configuration = config.Configuration
Operation = config.Operation
set_configuration = smp.set_configuration
run_sampling = smp.run_sampling

__all__ = [
    "BlockChunk",
    "Chunk",
    "Configuration",
    "DyeColor",
    "EmptySelectionError",
    "InvalidArgumentError",
    "Location",
    "Operation",
    "Point",
    "RandomUtil",
    "run_sampling",
    "set_configuration",
]
