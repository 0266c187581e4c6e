#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Samples operations of the random facility as configured.

The sampler is configured through `set_configuration`; `run_sampling` then seeds the
generator, evaluates the configured operation and prints the results.
"""

from __future__ import annotations

import enum
import logging

from typing import TYPE_CHECKING
from typing import Any

import randkit.configuration as config

from randkit.domain import BlockChunk
from randkit.domain import Point
from randkit.randomutil import RandomUtil
from randkit.utils import randomness
from randkit.utils.exceptions import InvalidArgumentError


if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console


class ReturnCode(enum.IntEnum):
    """Return codes for Randkit to signal result."""

    OK = 0
    """Symbolises that the execution ended as expected."""

    SETUP_FAILED = 1
    """Symbolises that the execution failed in the setup phase."""

    INVALID_ARGUMENT = 2
    """Symbolises that an operation rejected its arguments."""


_LOGGER = logging.getLogger(__name__)


def set_configuration(configuration: config.Configuration) -> None:
    """Initialises the sampler with the given configuration.

    Args:
        configuration: The configuration to use.
    """
    config.configuration = configuration


def _setup_random_number_generator() -> None:
    """Setup RNG."""
    _LOGGER.info("Using seed %d", config.configuration.seeding.seed)
    randomness.RNG.seed(config.configuration.seeding.seed)


def _operation(util: RandomUtil) -> Callable[[], Any]:
    sampling = config.configuration.sampling
    match sampling.operation:
        case config.Operation.CHANCE:
            if not float(sampling.percent).is_integer():
                raise InvalidArgumentError(
                    f"CHANCE takes a whole percent from 0 to 100, got {sampling.percent}"
                )
            return lambda: util.chance(int(sampling.percent))
        case config.Operation.CHANCE_D:
            return lambda: util.chance_d(sampling.percent)
        case config.Operation.NEXT_STRING:
            return lambda: util.next_string(sampling.min_value, sampling.max_value)
        case config.Operation.NEXT_DYE_COLOR:
            return lambda: util.next_dye_color().name
        case config.Operation.NEXT_CHAT_COLOR:
            return util.next_chat_color
        case config.Operation.NEXT_BETWEEN:
            return lambda: util.next_between(sampling.min_value, sampling.max_value)
        case config.Operation.NEXT_INT:
            return lambda: util.next_int(sampling.max_value)
        case config.Operation.NEXT_BOOLEAN:
            return util.next_boolean
        case config.Operation.NEXT_ITEM:
            return lambda: util.next_item(sampling.items)
        case config.Operation.NEXT_LOCATION:
            origin = Point(sampling.origin_x, sampling.origin_y, sampling.origin_z)
            return lambda: util.next_location(origin, sampling.radius, sampling.is_3d)
        case config.Operation.NEXT_CHUNK_X:
            chunk = BlockChunk(sampling.chunk_x, sampling.chunk_z)
            return lambda: util.next_chunk_x(chunk)
        case config.Operation.NEXT_CHUNK_Z:
            chunk = BlockChunk(sampling.chunk_x, sampling.chunk_z)
            return lambda: util.next_chunk_z(chunk)
    raise ValueError(f"Unknown operation {sampling.operation}")


def sample() -> list[Any]:
    """Evaluate the configured operation as often as configured.

    Returns:
        The sampled values, in the order they were drawn

    Raises:
        InvalidArgumentError: If the operation rejects the configured arguments
    """
    _setup_random_number_generator()
    util = RandomUtil(randomness.RNG, thread_safe=config.configuration.thread_safe)
    operation = _operation(util)
    _LOGGER.debug(
        "Sampling %s %d times",
        config.configuration.sampling.operation.value,
        config.configuration.sampling.samples,
    )
    return [operation() for _ in range(config.configuration.sampling.samples)]


def run_sampling(console: Console | None = None) -> ReturnCode:
    """Run the sampling and print its results.

    The result of the sampling is indicated by the resulting ReturnCode.

    Args:
        console: An optional rich console to print to, standard out otherwise

    Returns:
        See ReturnCode.
    """
    try:
        _LOGGER.info("Start sampling…")
        if config.configuration.sampling.samples <= 0:
            _LOGGER.error(
                "Number of samples must be positive, got %d",
                config.configuration.sampling.samples,
            )
            return ReturnCode.SETUP_FAILED
        try:
            values = sample()
        except InvalidArgumentError:
            _LOGGER.exception("Invalid arguments for %s", config.configuration.sampling.operation)
            return ReturnCode.INVALID_ARGUMENT

        for value in values:
            if console is not None:
                console.print(value, markup=False, highlight=False)
            else:
                print(value)  # noqa: T201
        return ReturnCode.OK
    finally:
        _LOGGER.info("Stop sampling…")
