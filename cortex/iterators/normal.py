"""
Adapts an arbitrary position into a full iterator object without changing the
semantics of the position's own operations.

Usage:

.. code::

    values = [1, 2, 3, 4, 5]
    it = make_normal(values)

    it.deref()            # 1
    it[2]                 # 3
    it.increment()        # prefix ++, returns it
    it.post_increment()   # postfix ++, returns the previous state
    (it + 2).deref()      # 5
"""

import copy
import functools

from typing import Any, Generic, Optional, Sequence, TypeVar

from ..core_types import IteratorCategory, Position
from .pointer import Pointer


P = TypeVar("P", bound=Position)


@functools.lru_cache(maxsize=None)
def _inferred_category(position_type: type) -> IteratorCategory:
    def supports(*names):
        return all(callable(getattr(position_type, name, None)) for name in names)

    if supports("__add__", "__sub__", "__getitem__", "decrement", "increment"):
        return IteratorCategory.RANDOM_ACCESS

    if supports("decrement", "increment"):
        return IteratorCategory.BIDIRECTIONAL

    if supports("increment"):
        return IteratorCategory.FORWARD

    return IteratorCategory.INPUT


def iterator_category(position: Any) -> IteratorCategory:
    """The strongest iterator category `position` supports. An explicit
    ``category`` attribute wins over inspecting the available operations."""
    category = getattr(position, "category", None)
    if category is not None:
        return IteratorCategory(category)

    return _inferred_category(type(position))


class NormalIterator(Generic[P]):
    """Iterator adaptor around a position of type `P`.

    Every operation forwards to the wrapped position, so a ``NormalIterator``
    behaves exactly like the pointer or cursor it adapts. No bounds are checked.
    The adaptor satisfies the same protocol it consumes and can therefore wrap
    other iterators as well.

    Passing another ``NormalIterator`` copies its position rather than nesting
    it. The position is always copied on construction, so the adaptor never
    aliases the caller's cursor.

    :param position: the position to adapt, a null :class:`Pointer` if left out
    """

    __slots__ = ["_current"]

    def __init__(self, position: Optional[P] = None):
        if position is None:
            position = Pointer()

        elif isinstance(position, NormalIterator):
            position = position.base()

        self._current = copy.copy(position)

    def base(self) -> P:
        """The wrapped position. Do not mutate it."""
        return self._current

    @property
    def category(self) -> IteratorCategory:
        return iterator_category(self._current)

    def assign(self, other) -> "NormalIterator[P]":
        """Copy-assign from another adaptor or from a raw position"""
        if isinstance(other, NormalIterator):
            other = other.base()

        self._current = copy.copy(other)
        return self

    def __copy__(self) -> "NormalIterator[P]":
        return NormalIterator(self._current)

    ################################################################################

    def deref(self) -> Any:
        return self._current.deref()

    def store(self, value: Any):
        self._current.store(value)

    def arrow(self) -> Any:
        return self._current.arrow()

    def __getitem__(self, step: int) -> Any:
        return self._current[step]

    def __setitem__(self, step: int, value: Any):
        self._current[step] = value

    ################################################################################

    def increment(self) -> "NormalIterator[P]":
        self._current.increment()
        return self

    def post_increment(self) -> "NormalIterator[P]":
        previous = NormalIterator(self._current)
        self._current.increment()
        return previous

    def decrement(self) -> "NormalIterator[P]":
        self._current.decrement()
        return self

    def post_decrement(self) -> "NormalIterator[P]":
        previous = NormalIterator(self._current)
        self._current.decrement()
        return previous

    def __iadd__(self, step: int) -> "NormalIterator[P]":
        self._current += step
        return self

    def __isub__(self, step: int) -> "NormalIterator[P]":
        self._current -= step
        return self

    def __add__(self, step: int) -> "NormalIterator[P]":
        return NormalIterator(self._current + step)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, NormalIterator):
            return self._current - other._current

        return NormalIterator(self._current - other)

    ################################################################################

    def __eq__(self, other) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented

        return self._current == other._current

    def __ne__(self, other) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented

        return self._current != other._current

    def __lt__(self, other) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented

        return self._current < other._current

    def __le__(self, other) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented

        return self._current <= other._current

    def __gt__(self, other) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented

        return self._current > other._current

    def __ge__(self, other) -> bool:
        if not isinstance(other, NormalIterator):
            return NotImplemented

        return self._current >= other._current

    __hash__ = None

    def __repr__(self) -> str:
        return f"NormalIterator({self._current!r})"


def make_normal(sequence: Sequence, offset: int = 0) -> NormalIterator[Pointer]:
    """Create an adaptor addressing `sequence[offset]`"""
    return NormalIterator(Pointer(sequence, offset))
