"""
cortex provides a dense two-dimensional array container and the iterator layer
that makes it walkable with ordinary sequence algorithms.

## High-level parts


### Matrix


A :class:`Matrix` owns a single contiguous buffer laid out in row-major order:
element ``(column, row)`` lives at ``columns * row + column``. The number of
live elements (`size`) is tracked separately from the number of allocated slots
(`capacity`), so clearing a matrix keeps its allocation and growing it with
``reserve`` re-lays the existing elements out in the wider grid rather than
copying the buffer verbatim.

### Storage

The buffer is a :class:`BufferStorage`: a numpy array split into a constructed
prefix and an allocated-but-unconstructed tail, with explicit operations for
constructing and destroying slots. The element type of the buffer is an
:class:`ElementType`, pairing a numpy dtype with the value used for
default-constructed slots.

### Iterators

Iteration goes through lightweight cursors that never check bounds. A
:class:`Pointer` addresses one slot of a buffer; a :class:`NormalIterator` adapts
any such position into a random-access iterator object without changing its
semantics; a :class:`TwoDimIterator` additionally tracks the (column, row) it
addresses and can walk the grid in row- or column-major order.

### Access checking

Only coordinate access (``at`` and ``matrix[column, row]``) is checked, against
the logical shape, and raises :class:`MatrixRangeError`. Linear indexing,
``front``/``back`` and iterators are unchecked.
"""

from .core_types import IteratorCategory, Order
from .element import ElementType
from .iterators import NormalIterator, Pointer, ReverseIterator, TwoDimIterator, make_normal
from .matrix import Matrix, MatrixRangeError, swap
from .storage import BufferStorage


__all__ = [
    "Matrix",
    "MatrixRangeError",
    "swap",
    "ElementType",
    "BufferStorage",
    "Pointer",
    "NormalIterator",
    "ReverseIterator",
    "TwoDimIterator",
    "make_normal",
    "IteratorCategory",
    "Order",
]
