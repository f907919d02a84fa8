import copy
import logging

from typing import Any, Iterator, Optional

import numpy as np

from .core_types import Order, Shape
from .element import ElementType
from .iterators import (
    NormalIterator,
    Pointer,
    ReverseIterator,
    TwoDimIterator,
    equal,
    lexicographical_compare,
    walk,
)
from .storage import BufferStorage


logger = logging.getLogger(__name__)


class MatrixRangeError(IndexError):
    """Raised by checked element access when a coordinate falls outside the
    logical shape of the matrix."""

    def __init__(self, column: int, row: int, dimensions: Shape):
        self.column = column
        self.row = row
        self.dimensions = dimensions
        super().__init__(
            f"Matrix index out of range: ({column}, {row}) is outside the "
            f"{dimensions[0]}x{dimensions[1]} matrix"
        )


class Matrix:
    """A two dimensional array stored contiguously in row-major order.

    Element ``(column, row)`` lives at linear offset ``columns * row + column``
    of the backing buffer. The buffer may be larger than the number of live
    elements: `capacity` counts allocated slots while `size` counts elements.

    Access comes in two flavours. ``m[i]``, :meth:`front`, :meth:`back` and the
    iterators do not validate anything, whereas :meth:`at` and ``m[column,
    row]`` check the coordinates against the logical shape and raise
    :class:`MatrixRangeError`.

    :param columns: number of columns
    :param rows: number of rows
    :param value: the value every element starts out as; the element default
        when left out
    :param dtype: the element type, as a numpy dtype or an :class:`ElementType`.
        Inferred from `value` when left out, ``float64`` without a value.
    """

    def __init__(
        self,
        columns: int = 0,
        rows: int = 0,
        value: Any = None,
        *,
        dtype: Any = None,
    ):
        if columns < 0 or rows < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {columns}x{rows}")

        if isinstance(dtype, ElementType):
            self._element = dtype
        elif dtype is not None:
            self._element = ElementType(dtype)
        elif value is not None:
            self._element = ElementType.infer(value)
        else:
            self._element = ElementType(np.float64)

        self._columns = columns
        self._rows = rows
        # a zero dimension still allows one-dimensional use of the other
        self._size = columns * rows if columns * rows != 0 else max(columns, rows)
        self._storage = self._allocate(self._size)

        if self._storage is not None:
            self._storage.construct(self._size, value)

    def _allocate(self, capacity: int) -> Optional[BufferStorage]:
        if capacity == 0:
            return None

        return BufferStorage(capacity, self._element)

    ################################################################################

    def copy(self) -> "Matrix":
        """Create an independent copy with the same shape, capacity and elements"""
        return Matrix(dtype=self._element).assign(self)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        other = Matrix(dtype=copy.copy(self._element))
        memo[id(self)] = other

        other._columns = self._columns
        other._rows = self._rows
        other._size = self._size
        if self._storage is not None:
            other._storage = self._storage.copy(deep=True, memo=memo)

        return other

    def assign(self, other: "Matrix") -> "Matrix":
        """Replace the contents with a copy of `other`, reallocating the buffer"""
        if other is self:
            return self

        storage = other._storage.copy() if other._storage is not None else None

        self._element = copy.copy(other._element)
        self._columns = other._columns
        self._rows = other._rows
        self._size = other._size
        self._storage = storage
        return self

    def take(self) -> "Matrix":
        """Move the contents into a new matrix, leaving this one empty.

        The buffer changes owner without copying any element.
        """
        moved = Matrix(dtype=self._element)
        moved.swap(self)
        return moved

    def swap(self, other: "Matrix"):
        """Exchange contents with `other` without copying any element"""
        self._element, other._element = other._element, self._element
        self._columns, other._columns = other._columns, self._columns
        self._rows, other._rows = other._rows, self._rows
        self._size, other._size = other._size, self._size
        self._storage, other._storage = other._storage, self._storage

    ################################################################################

    def size(self) -> int:
        return self._size

    def max_size(self) -> int:
        return self._size

    def row_size(self) -> int:
        return self._rows

    def column_size(self) -> int:
        return self._columns

    def capacity(self) -> int:
        return self._storage.capacity if self._storage is not None else 0

    def dimensions(self) -> Shape:
        """The (columns, rows) of the matrix"""
        return self._columns, self._rows

    def is_square(self) -> bool:
        return self._columns == self._rows

    def empty(self) -> bool:
        return self._size == 0

    def data(self) -> Optional[np.ndarray]:
        """The backing buffer, all `capacity` slots of it. ``None`` if nothing has
        been allocated."""
        return self._storage.buffer if self._storage is not None else None

    @property
    def element_type(self) -> ElementType:
        return self._element

    def __len__(self) -> int:
        return self._size

    ################################################################################

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return self.at(*key)

        return self.data()[key]

    def __setitem__(self, key, value: Any):
        if isinstance(key, tuple):
            column, row = key
            self._range_check(column, row)
            self._storage[self._columns * row + column] = value
            return

        self.data()[key] = value

    def at(self, column: int, row: int) -> Any:
        """The element at (`column`, `row`), checked against the logical shape.

        :raises MatrixRangeError: if either coordinate is out of range
        """
        self._range_check(column, row)
        return self._storage[self._columns * row + column]

    def front(self) -> Any:
        return self.data()[0]

    def back(self) -> Any:
        return self.data()[self._size - 1]

    def flatten(self) -> list:
        """A new list holding the live elements in row-major order"""
        if self._storage is None:
            return []

        return self._storage.buffer[: self._size].tolist()

    ################################################################################

    def clear(self):
        """Destroy all elements and reset the shape to 0x0. The capacity and the
        allocated buffer are kept for later reuse."""
        if self._storage is None:
            return

        self._storage.destroy()
        self._size = 0
        self._columns = 0
        self._rows = 0

    def reserve(self, columns: int, rows: int):
        """Grow the buffer to hold a `columns` x `rows` grid.

        Every existing element keeps its (column, row) coordinate in the wider
        layout and the new slots are default-constructed. The shape becomes
        `columns` x `rows` while `size` is left as is. Nothing happens when the
        current capacity already suffices.

        A zero dimension next to a non-zero one is laid out as a single row or
        column, so ``reserve(5, 0)`` grows a one-dimensional matrix to 5 slots.

        :raises ValueError: if the new grid is narrower or shorter than the
            current one
        """
        if columns < 0 or rows < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {columns}x{rows}")

        new_grid = _layout(columns, rows)
        capacity = new_grid[0] * new_grid[1]
        if capacity <= self.capacity():
            logger.debug(
                f"reserve({columns}, {rows}) fits in the current capacity of {self.capacity()}"
            )
            return

        if self._storage is None:
            storage = BufferStorage(capacity, self._element)
            storage.construct(capacity)

        else:
            storage = self._storage.regrid(self._grid(), new_grid)

        logger.debug(f"Grew matrix from {self.capacity()} to {capacity} slots")

        self._storage = storage
        self._columns = columns
        self._rows = rows

    def _grid(self) -> Shape:
        """The (columns, rows) the constructed slots are laid out as"""
        return _layout(self._columns, self._rows)

    def _range_check(self, column: int, row: int):
        if not (0 <= column < self._columns and 0 <= row < self._rows):
            raise MatrixRangeError(column, row, self.dimensions())

    ################################################################################

    def _pointer(self, offset: int, readonly: bool = False) -> Pointer:
        return Pointer(self.data(), offset, readonly)

    def begin(self) -> NormalIterator[Pointer]:
        return NormalIterator(self._pointer(0))

    def end(self) -> NormalIterator[Pointer]:
        return NormalIterator(self._pointer(self._size))

    def cbegin(self) -> NormalIterator[Pointer]:
        return NormalIterator(self._pointer(0, readonly=True))

    def cend(self) -> NormalIterator[Pointer]:
        return NormalIterator(self._pointer(self._size, readonly=True))

    def rbegin(self) -> ReverseIterator:
        return ReverseIterator(self.end())

    def rend(self) -> ReverseIterator:
        return ReverseIterator(self.begin())

    def crbegin(self) -> ReverseIterator:
        return ReverseIterator(self.cend())

    def crend(self) -> ReverseIterator:
        return ReverseIterator(self.cbegin())

    def row_major_begin(self) -> TwoDimIterator[Pointer]:
        return self._two_dim(0, 0, Order.ROW_MAJOR)

    def row_major_end(self) -> TwoDimIterator[Pointer]:
        return self._two_dim(0, self._grid()[1], Order.ROW_MAJOR)

    def column_major_begin(self) -> TwoDimIterator[Pointer]:
        return self._two_dim(0, 0, Order.COLUMN_MAJOR)

    def column_major_end(self) -> TwoDimIterator[Pointer]:
        return self._two_dim(0, self._grid()[1], Order.COLUMN_MAJOR)

    def _two_dim(self, column: int, row: int, order: Order) -> TwoDimIterator[Pointer]:
        columns, rows = self._grid()
        return TwoDimIterator(
            self._pointer(columns * row + column), column, row, columns, rows, order
        )

    def __iter__(self) -> Iterator[Any]:
        return walk(self.cbegin(), self.cend())

    def __reversed__(self) -> Iterator[Any]:
        return walk(self.crbegin(), self.crend())

    ################################################################################

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented

        return equal(self.cbegin(), self.cend(), other.cbegin(), other.cend())

    def __ne__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented

        return not self == other

    def __lt__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented

        return lexicographical_compare(self.cbegin(), self.cend(), other.cbegin(), other.cend())

    def __le__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented

        return not lexicographical_compare(other.cbegin(), other.cend(), self.cbegin(), self.cend())

    def __gt__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented

        return lexicographical_compare(other.cbegin(), other.cend(), self.cbegin(), self.cend())

    def __ge__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented

        return not lexicographical_compare(self.cbegin(), self.cend(), other.cbegin(), other.cend())

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Matrix(columns={self._columns}, rows={self._rows}, size={self._size}, "
            f"capacity={self.capacity()}, dtype={self._element.dtype})"
        )


def swap(lhs: Matrix, rhs: Matrix):
    """Exchange the contents of two matrices"""
    lhs.swap(rhs)


def _layout(columns: int, rows: int) -> Shape:
    # a lone zero dimension means a single row or column
    if columns * rows == 0 and (columns or rows):
        return columns or 1, rows or 1

    return columns, rows
