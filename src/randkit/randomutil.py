#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides random numbers and random selections for game logic.

All helpers draw from a single generator.  `RandomUtil` takes that generator as an
argument, which allows to replay a sequence of draws by seeding it; the module-level
functions delegate to a default instance bound to `randomness.RNG`.
"""

from __future__ import annotations

import contextlib
import enum
import math
import threading
import weakref

from typing import TYPE_CHECKING
from typing import Final
from typing import TypeVar

from randkit.domain import DyeColor
from randkit.utils import randomness
from randkit.utils.exceptions import EmptySelectionError
from randkit.utils.exceptions import InvalidArgumentError


if TYPE_CHECKING:
    import random

    from collections.abc import Callable
    from collections.abc import Iterable

    from randkit.domain import Chunk
    from randkit.domain import Location


ENGLISH_LETTERS: Final[tuple[str, ...]] = (
    "a", "b", "c", "d", "e", " ",
    "f", "g", "h", "i", "j",
    "k", "l", "m", "n", "o",
    "p", "q", "r", "s", "t",
    "u", "v", "w", "y", "z",
    "!", "?", ",", ".", " ",
)  # fmt: skip
"""The alphabet used for random text."""

CHAT_COLORS: Final[tuple[str, ...]] = (
    "0", "1", "2", "3", "4",
    "5", "6", "7", "8", "9",
    "a", "b", "c", "d", "e",
    "f", "k", "l", "n", "o",
)  # fmt: skip
"""Colour and format codes that follow the `&` character."""

CHUNK_SIZE: Final[int] = 16

_T = TypeVar("_T")
_E = TypeVar("_E", bound=enum.Enum)

_GENERATOR_LOCKS: Final[weakref.WeakKeyDictionary] = weakref.WeakKeyDictionary()
_GENERATOR_LOCKS_GUARD: Final = threading.Lock()


def _generator_lock(rng: random.Random) -> threading.RLock:
    """Provides the lock guarding a generator, creating it on first use.

    Args:
        rng: The generator

    Returns:
        The re-entrant lock shared by all facilities drawing from the generator
    """
    with _GENERATOR_LOCKS_GUARD:
        lock = _GENERATOR_LOCKS.get(rng)
        if lock is None:
            lock = _GENERATOR_LOCKS[rng] = threading.RLock()
        return lock


class RandomUtil:
    """Random helpers drawing from one generator.

    Every operation holds the generator's re-entrant lock while drawing, such that
    operations consuming several values, e.g., `next_location`, take a contiguous
    slice of the generator's sequence.  The lock belongs to the generator, thus all
    thread-safe facilities drawing from the same generator share it.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        thread_safe: bool = True,
    ) -> None:
        """Create a new random facility.

        Args:
            rng: The generator to draw from, defaults to `randomness.RNG`
            thread_safe: Whether draws shall be serialised
        """
        self._rng: random.Random = randomness.RNG if rng is None else rng
        self._lock: contextlib.AbstractContextManager = (
            _generator_lock(self._rng) if thread_safe else contextlib.nullcontext()
        )

    def get_random(self) -> random.Random:
        """Provides the generator this facility draws from.

        Returns:
            The underlying generator
        """
        return self._rng

    def chance(self, percent: int) -> bool:
        """Roll a percentage chance.

        Args:
            percent: The chance in percent, from 0 to 100

        Returns:
            Whether the chance was matched
        """
        with self._lock:
            return self._rng.random() * 100 < percent

    def chance_d(self, percent: float) -> bool:
        """Roll a chance given as a fraction.

        Args:
            percent: The chance, from 0.0 to 1.0

        Returns:
            Whether the chance was matched
        """
        with self._lock:
            return self._rng.random() < percent

    def next_string(self, min_length: int, max_length: int) -> str:
        """Create a random text from `ENGLISH_LETTERS`.

        The length is `min_length` plus a random value below `max_length`, thus the
        text is never longer than `min_length + max_length - 1` characters.  A
        `max_length` of zero yields exactly `min_length` characters.

        Args:
            min_length: The minimal length of the text
            max_length: The exclusive bound of the additional length

        Returns:
            A random text

        Raises:
            InvalidArgumentError: If one of the lengths is negative
        """
        if min_length < 0 or max_length < 0:
            raise InvalidArgumentError(
                f"Lengths must not be negative, got min {min_length} and max {max_length}"
            )
        with self._lock:
            length = min_length + (self._rng.randrange(max_length) if max_length > 0 else 0)
            return "".join(self._rng.choice(ENGLISH_LETTERS) for _ in range(length))

    def next_dye_color(self, colors: type[_E] = DyeColor) -> _E:  # type: ignore[assignment]
        """Select a random dye colour.

        Args:
            colors: The colour enumeration to select from

        Returns:
            A random member of the enumeration
        """
        return self.next_item(colors)

    def next_chat_color(self) -> str:
        """Create a random chat colour code, e.g., `&e` for yellow.

        Returns:
            The `&` character followed by a random colour or format code
        """
        with self._lock:
            return "&" + self._rng.choice(CHAT_COLORS)

    def next_between(self, min_value: int, max_value: int) -> int:
        """Provide a random integer from the closed interval [min, max].

        Args:
            min_value: The lower bound, included
            max_value: The upper bound, included

        Returns:
            A random integer from the interval

        Raises:
            InvalidArgumentError: If min is greater than max
        """
        if min_value > max_value:
            raise InvalidArgumentError(f"Min {min_value} must not be greater than max {max_value}")
        return min_value + self.next_int(max_value - min_value + 1)

    def next_int(self, bound_exclusive: int) -> int:
        """Provide a random integer from [0, bound).

        Args:
            bound_exclusive: The upper bound, excluded

        Returns:
            A random integer from the interval

        Raises:
            InvalidArgumentError: If the bound is not positive
        """
        if bound_exclusive <= 0:
            raise InvalidArgumentError(f"Bound must be positive, got {bound_exclusive}")
        with self._lock:
            return self._rng.randrange(bound_exclusive)

    def next_boolean(self) -> bool:
        """Returns a random boolean.

        Returns:
            A random boolean
        """
        with self._lock:
            return self._rng.random() < 0.5

    def next_item(
        self,
        items: Iterable[_T],
        condition: Callable[[_T], bool] | None = None,
    ) -> _T:
        """Select a random item, only among those matching the condition.

        The items are materialised in their iteration order before selecting, thus
        any iterable is accepted, including sets and generators.

        Args:
            items: The items to select from
            condition: An optional predicate an item must satisfy

        Returns:
            A randomly selected item

        Raises:
            EmptySelectionError: If there is no item to select from
        """
        candidates = list(items) if condition is None else [item for item in items if condition(item)]
        if not candidates:
            raise EmptySelectionError(filtered=condition is not None)
        return candidates[self.next_int(len(candidates))]

    def next_item_of(self, *items: _T) -> _T:
        """Select one of the given arguments at random.

        Args:
            *items: The items to select from

        Returns:
            A randomly selected item
        """
        return self.next_item(items)

    def next_location(self, origin: Location, radius: float, is_3d: bool) -> Location:  # noqa: FBT001
        """Provide a random location around an origin.

        The offset is computed from a random radius and two random angles.  Note
        that the points are not uniformly distributed within the sphere or cylinder.

        Args:
            origin: The centre, which is not modified
            radius: The maximal distance from the origin
            is_3d: True to also offset the y axis (sphere), False for a cylinder

        Returns:
            A new location
        """
        with self._lock:
            random_radius = self._rng.random() * radius
            theta = math.radians(self._rng.random() * 360)
            phi = math.radians(self._rng.random() * 180 - 90)

        x = random_radius * math.cos(theta) * math.sin(phi)
        y = random_radius * math.sin(theta) * math.cos(phi) if is_3d else 0
        z = random_radius * math.cos(phi)
        return origin.clone().add(x, y, z)

    def next_chunk_x(self, chunk: Chunk) -> int:
        """Provide a random block x coordinate for a chunk.

        Args:
            chunk: The chunk

        Returns:
            A block coordinate
        """
        return self._next_chunk_coordinate(chunk.x)

    def next_chunk_z(self, chunk: Chunk) -> int:
        """Provide a random block z coordinate for a chunk.

        Args:
            chunk: The chunk

        Returns:
            A block coordinate
        """
        return self._next_chunk_coordinate(chunk.z)

    def _next_chunk_coordinate(self, index: int) -> int:
        # Offset by one chunk width towards negative infinity.
        return self.next_int(CHUNK_SIZE) + (index << 4) - CHUNK_SIZE


_DEFAULT: Final[RandomUtil] = RandomUtil()

get_random = _DEFAULT.get_random
chance = _DEFAULT.chance
chance_d = _DEFAULT.chance_d
next_string = _DEFAULT.next_string
next_dye_color = _DEFAULT.next_dye_color
next_chat_color = _DEFAULT.next_chat_color
next_between = _DEFAULT.next_between
next_int = _DEFAULT.next_int
next_boolean = _DEFAULT.next_boolean
next_item = _DEFAULT.next_item
next_item_of = _DEFAULT.next_item_of
next_location = _DEFAULT.next_location
next_chunk_x = _DEFAULT.next_chunk_x
next_chunk_z = _DEFAULT.next_chunk_z
