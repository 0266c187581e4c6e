#  This file is part of Randkit.
#
#  SPDX-FileCopyrightText: 2025 Randkit Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides custom exception types."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes arguments that violate an operation's contract."""


class EmptySelectionError(InvalidArgumentError, IndexError):
    """Raised when a random item shall be selected from an empty collection.

    The collection may have been empty from the start or have become empty after
    filtering it with a condition.
    """

    def __init__(self, filtered: bool = False) -> None:  # noqa: FBT001, FBT002
        """Create a new empty selection error.

        Args:
            filtered: Whether the collection was empty after applying a condition
        """
        reason = "no item matches the condition" if filtered else "the collection is empty"
        super().__init__(f"Cannot select a random item, {reason}.")
        self.filtered = filtered

    def __reduce__(self):  # noqa: D105
        return type(self), (self.filtered,)
