"""
Supporting types shared by the matrix and the iterator adaptors
"""

import enum

from typing import Any, Protocol, Tuple


class IteratorCategory(enum.IntEnum):
    """The traversal capabilities of a cursor. Ordered so that a stronger
    category compares greater than a weaker one."""

    INPUT = 0
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3


class Order(enum.Enum):
    """Traversal order of a two-dimensional iterator."""

    ROW_MAJOR = 0
    """Walk each row left to right before moving down to the next row"""

    COLUMN_MAJOR = 1
    """Walk each column top to bottom before moving right to the next column"""


class Position(Protocol):
    """The operations an iterator adaptor expects from the position it wraps.

    Increment and decrement mutate in place and return the position itself.
    Everything else behaves like pointer arithmetic.
    """

    def deref(self) -> Any:
        ...

    def store(self, value: Any):
        ...

    def arrow(self) -> Any:
        ...

    def increment(self) -> "Position":
        ...

    def decrement(self) -> "Position":
        ...

    def __add__(self, step: int) -> "Position":
        ...

    def __sub__(self, other):
        ...

    def __getitem__(self, step: int) -> Any:
        ...


# (columns, rows)
Shape = Tuple[int, int]
