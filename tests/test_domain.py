#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
import pytest

from randkit.domain import BlockChunk
from randkit.domain import Chunk
from randkit.domain import DyeColor
from randkit.domain import Location
from randkit.domain import Point


def test_dye_colors():
    assert len(DyeColor) == 16
    assert DyeColor.WHITE.ordinal == 0
    assert DyeColor.BLACK.ordinal == 15


def test_dye_color_ordinals_are_positions():
    assert [color.ordinal for color in DyeColor] == list(range(16))


def test_block_chunk_is_chunk(chunk):
    assert isinstance(chunk, Chunk)


@pytest.mark.parametrize("index, block", [(0, 0), (1, 16), (-1, -16), (3, 48)])
def test_block_chunk_first_block(index, block):
    chunk = BlockChunk(index, index)
    assert chunk.block_x == block
    assert chunk.block_z == block


def test_point_is_location(origin):
    assert isinstance(origin, Location)


def test_point_clone_is_independent(origin):
    clone = origin.clone()
    clone.add(1.0, 2.0, 3.0)
    assert clone == Point(11.0, 66.0, -2.0, world="world")
    assert origin == Point(10.0, 64.0, -5.0, world="world")


def test_point_add_returns_self(origin):
    assert origin.add(0.0, 1.0, 0.0) is origin
    assert origin.y == 65.0


def test_point_distance():
    assert Point(0.0, 0.0, 0.0).distance(Point(3.0, 4.0, 0.0)) == pytest.approx(5.0)
