"""
Coordinate-aware iteration over a dense row-major buffer.

The iterator keeps a linear position into the buffer together with the
(column, row) it currently addresses, and moves both together in either row-
or column-major order. The coordinates are bookkeeping only: two iterators are
equal, or ordered, purely by their linear positions.

Both traversal orders end on the same sentinel, column 0 of the row just past
the last one, which sits at linear offset ``total_columns * total_rows``.
"""

import copy

from typing import Any, Generic, TypeVar

from ..core_types import IteratorCategory, Order, Position, Shape


P = TypeVar("P", bound=Position)


class TwoDimIterator(Generic[P]):
    """Iterator over a ``total_columns x total_rows`` row-major grid.

    :param position: the linear position of (`column`, `row`) in the buffer
    :param column: the column addressed by `position`
    :param row: the row addressed by `position`
    :param total_columns: the number of columns in the grid
    :param total_rows: the number of rows in the grid
    :param order: the traversal order used when advancing
    """

    __slots__ = ["_current", "_column", "_row", "_total_columns", "_total_rows", "_order"]

    def __init__(
        self,
        position: P,
        column: int,
        row: int,
        total_columns: int,
        total_rows: int,
        order: Order = Order.ROW_MAJOR,
    ):
        self._current = copy.copy(position)
        self._column = column
        self._row = row
        self._total_columns = total_columns
        self._total_rows = total_rows
        self._order = order

    def base(self) -> P:
        return self._current

    @property
    def category(self) -> IteratorCategory:
        return IteratorCategory.RANDOM_ACCESS

    @property
    def column(self) -> int:
        return self._column

    @property
    def row(self) -> int:
        return self._row

    @property
    def coordinates(self) -> Shape:
        """The current (column, row)"""
        return self._column, self._row

    @property
    def dimensions(self) -> Shape:
        """The (columns, rows) of the traversed grid"""
        return self._total_columns, self._total_rows

    @property
    def order(self) -> Order:
        return self._order

    def __copy__(self) -> "TwoDimIterator[P]":
        return TwoDimIterator(
            self._current,
            self._column,
            self._row,
            self._total_columns,
            self._total_rows,
            self._order,
        )

    ################################################################################

    def deref(self) -> Any:
        return self._current.deref()

    def store(self, value: Any):
        self._current.store(value)

    def arrow(self) -> Any:
        return self._current.arrow()

    def __getitem__(self, step: int) -> Any:
        return (self + step).deref()

    def __setitem__(self, step: int, value: Any):
        (self + step).store(value)

    ################################################################################

    def increment(self) -> "TwoDimIterator[P]":
        column, row = self._column, self._row

        if self._order is Order.ROW_MAJOR:
            column += 1
            if column == self._total_columns:
                column = 0
                row += 1

        else:
            row += 1
            if row == self._total_rows:
                if column + 1 == self._total_columns:
                    column = 0
                else:
                    row = 0
                    column += 1

        self._relocate(column, row)
        return self

    def decrement(self) -> "TwoDimIterator[P]":
        column, row = self._column, self._row

        if self._row >= self._total_rows:
            column, row = self._total_columns - 1, self._total_rows - 1

        elif self._order is Order.ROW_MAJOR:
            column -= 1
            if column < 0:
                column = self._total_columns - 1
                row -= 1

        else:
            row -= 1
            if row < 0:
                row = self._total_rows - 1
                column -= 1

        self._relocate(column, row)
        return self

    def post_increment(self) -> "TwoDimIterator[P]":
        previous = copy.copy(self)
        self.increment()
        return previous

    def post_decrement(self) -> "TwoDimIterator[P]":
        previous = copy.copy(self)
        self.decrement()
        return previous

    def __iadd__(self, step: int) -> "TwoDimIterator[P]":
        self._relocate(*self._coordinates_of(self._index() + step))
        return self

    def __isub__(self, step: int) -> "TwoDimIterator[P]":
        self._relocate(*self._coordinates_of(self._index() - step))
        return self

    def __add__(self, step: int) -> "TwoDimIterator[P]":
        moved = copy.copy(self)
        moved += step
        return moved

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, TwoDimIterator):
            return self._index() - other._index()

        moved = copy.copy(self)
        moved -= other
        return moved

    ################################################################################

    def __eq__(self, other) -> bool:
        if not isinstance(other, TwoDimIterator):
            return NotImplemented

        return self._current == other._current

    def __ne__(self, other) -> bool:
        if not isinstance(other, TwoDimIterator):
            return NotImplemented

        return self._current != other._current

    def __lt__(self, other) -> bool:
        if not isinstance(other, TwoDimIterator):
            return NotImplemented

        return self._current < other._current

    def __le__(self, other) -> bool:
        if not isinstance(other, TwoDimIterator):
            return NotImplemented

        return self._current <= other._current

    def __gt__(self, other) -> bool:
        if not isinstance(other, TwoDimIterator):
            return NotImplemented

        return self._current > other._current

    def __ge__(self, other) -> bool:
        if not isinstance(other, TwoDimIterator):
            return NotImplemented

        return self._current >= other._current

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"TwoDimIterator({self._current!r}, column={self._column}, row={self._row}, "
            f"dimensions={self._total_columns}x{self._total_rows}, order={self._order.name})"
        )

    ################################################################################

    def _linear(self, column: int, row: int) -> int:
        return self._total_columns * row + column

    def _index(self) -> int:
        """The number of steps from the first element to the current one"""
        if self._row >= self._total_rows:
            return self._total_columns * self._total_rows

        if self._order is Order.ROW_MAJOR:
            return self._total_columns * self._row + self._column

        return self._total_rows * self._column + self._row

    def _coordinates_of(self, index: int) -> Shape:
        cells = self._total_columns * self._total_rows
        if index == cells or cells == 0:
            return 0, self._total_rows

        if self._order is Order.ROW_MAJOR:
            return index % self._total_columns, index // self._total_columns

        return index // self._total_rows, index % self._total_rows

    def _relocate(self, column: int, row: int):
        self._current += self._linear(column, row) - self._linear(self._column, self._row)
        self._column = column
        self._row = row
