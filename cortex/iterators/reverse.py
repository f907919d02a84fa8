"""
Walks another iterator backwards.
"""

import copy

from typing import Any

from ..core_types import IteratorCategory
from .normal import iterator_category


class ReverseIterator:
    """Walks a bidirectional iterator backwards.

    A reverse iterator built from `base` addresses the element *before* `base`,
    so reversing ``[begin, end)`` yields ``[ReverseIterator(end),
    ReverseIterator(begin))``.
    """

    __slots__ = ["_base"]

    def __init__(self, base):
        self._base = copy.copy(base)

    def base(self):
        return self._base

    @property
    def category(self) -> IteratorCategory:
        return iterator_category(self._base)

    def __copy__(self) -> "ReverseIterator":
        return ReverseIterator(self._base)

    def _before(self):
        return copy.copy(self._base).decrement()

    def deref(self) -> Any:
        return self._before().deref()

    def store(self, value: Any):
        self._before().store(value)

    def arrow(self) -> Any:
        return self._before().arrow()

    def __getitem__(self, step: int) -> Any:
        return self._base[-step - 1]

    def __setitem__(self, step: int, value: Any):
        self._base[-step - 1] = value

    def increment(self) -> "ReverseIterator":
        self._base.decrement()
        return self

    def post_increment(self) -> "ReverseIterator":
        previous = ReverseIterator(self._base)
        self._base.decrement()
        return previous

    def decrement(self) -> "ReverseIterator":
        self._base.increment()
        return self

    def post_decrement(self) -> "ReverseIterator":
        previous = ReverseIterator(self._base)
        self._base.increment()
        return previous

    def __iadd__(self, step: int) -> "ReverseIterator":
        self._base -= step
        return self

    def __isub__(self, step: int) -> "ReverseIterator":
        self._base += step
        return self

    def __add__(self, step: int) -> "ReverseIterator":
        return ReverseIterator(self._base - step)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, ReverseIterator):
            return other._base - self._base

        return ReverseIterator(self._base + other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented

        return self._base == other._base

    def __ne__(self, other) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented

        return self._base != other._base

    def __lt__(self, other) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented

        return self._base > other._base

    def __le__(self, other) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented

        return self._base >= other._base

    def __gt__(self, other) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented

        return self._base < other._base

    def __ge__(self, other) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented

        return self._base <= other._base

    __hash__ = None

    def __repr__(self) -> str:
        return f"ReverseIterator({self._base!r})"
