"""
Iterators over flat buffers.

* :class:`Pointer` is the raw position: a buffer plus an offset.
* :class:`NormalIterator` adapts any position into a random-access iterator
  object without changing its semantics.
* :class:`ReverseIterator` walks another iterator backwards.
* :class:`TwoDimIterator` tracks (column, row) coordinates while walking a
  row-major buffer in either row- or column-major order.
"""

from .algorithms import advance, distance, equal, lexicographical_compare, walk
from .normal import NormalIterator, iterator_category, make_normal
from .pointer import Pointer
from .reverse import ReverseIterator
from .two_dim import TwoDimIterator


__all__ = [
    "Pointer",
    "NormalIterator",
    "ReverseIterator",
    "TwoDimIterator",
    "make_normal",
    "iterator_category",
    "advance",
    "distance",
    "equal",
    "lexicographical_compare",
    "walk",
]
