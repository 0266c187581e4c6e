#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
import pytest

import randkit.configuration as config

from randkit.domain import BlockChunk
from randkit.domain import Point
from randkit.randomutil import RandomUtil
from randkit.utils import randomness


@pytest.fixture(autouse=True)
def reset_configuration():
    """Automatically reset the configuration singleton and the seed."""
    config.configuration = config.Configuration(
        seeding=config.SeedingConfiguration(seed=42),
    )
    randomness.RNG.seed(42)


@pytest.fixture
def random_util():
    return RandomUtil(randomness.Random(1234))


@pytest.fixture
def origin():
    return Point(10.0, 64.0, -5.0, world="world")


@pytest.fixture
def chunk():
    return BlockChunk(3, -2)
