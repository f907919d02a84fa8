"""
Sequence algorithms over ``[first, last)`` iterator ranges.

The functions accept any of the cursors in this package and copy their
arguments before moving them, so the caller's iterators are never advanced.
"""

import copy

from typing import Any, Iterator

from ..core_types import IteratorCategory
from .normal import iterator_category


def distance(first, last) -> int:
    """The number of increments needed to get from `first` to `last`"""
    if iterator_category(first) >= IteratorCategory.RANDOM_ACCESS:
        return last - first

    count = 0
    current = copy.copy(first)
    while current != last:
        current.increment()
        count += 1

    return count


def advance(iterator, step: int):
    """Move `iterator` by `step` positions in place. Negative steps require a
    bidirectional iterator."""
    category = iterator_category(iterator)
    if category >= IteratorCategory.RANDOM_ACCESS:
        iterator += step
        return iterator

    if step < 0 and category < IteratorCategory.BIDIRECTIONAL:
        raise ValueError(f"Cannot move a {category.name.lower()} iterator backwards")

    for _ in range(abs(step)):
        if step > 0:
            iterator.increment()
        else:
            iterator.decrement()

    return iterator


def walk(first, last) -> Iterator[Any]:
    """Yield the elements in ``[first, last)``"""
    current = copy.copy(first)
    while current != last:
        yield current.deref()
        current.increment()


def equal(first1, last1, first2, last2) -> bool:
    """Whether both ranges have the same length and pairwise equal elements"""
    if distance(first1, last1) != distance(first2, last2):
        return False

    lhs, rhs = copy.copy(first1), copy.copy(first2)
    while lhs != last1:
        if not lhs.deref() == rhs.deref():
            return False

        lhs.increment()
        rhs.increment()

    return True


def lexicographical_compare(first1, last1, first2, last2) -> bool:
    """Whether the first range orders strictly before the second.

    The first mismatching element decides; a range that is a proper prefix of
    the other orders first.
    """
    lhs, rhs = copy.copy(first1), copy.copy(first2)
    while lhs != last1 and rhs != last2:
        left, right = lhs.deref(), rhs.deref()
        if left < right:
            return True

        if right < left:
            return False

        lhs.increment()
        rhs.increment()

    return lhs == last1 and rhs != last2
