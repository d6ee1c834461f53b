"""Errors raised while computing or replaying array changes."""

from typing import Hashable


class ArrayChangesError(Exception):
    """Base class for array changes errors."""


class DuplicateIdentityError(ArrayChangesError, ValueError):
    """Two items of the same sequence share an identity."""

    def __init__(self, sequence: str, identity: Hashable, first_index: int, second_index: int):
        self.sequence = sequence
        self.identity = identity
        self.first_index = first_index
        self.second_index = second_index
        super().__init__(
            f"Duplicate identity {identity!r} in the {sequence} sequence "
            f"at indexes {first_index} and {second_index}"
        )


class ReplayError(ArrayChangesError, IndexError):
    """The changes do not fit the list they are replayed against."""
