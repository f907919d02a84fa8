"""
Owned element buffers for the matrix.
"""

import copy
import logging

from typing import Any, Iterable, Optional

import numpy as np

from .core_types import Shape
from .element import ElementType


logger = logging.getLogger(__name__)


class BufferStorage:
    """A fixed-capacity numpy buffer split into a constructed prefix and an
    allocated-but-unconstructed tail.

    Slots in ``[0, constructed)`` hold live values; the remaining slots hold the
    element type's blank value and must be constructed before they are read
    through the checked accessors. The raw ``buffer`` is exposed for unchecked
    access by the owning container.
    """

    def __init__(self, capacity: int, element: ElementType):
        if capacity < 0:
            raise ValueError(f"Storage capacity must be non-negative, got {capacity}")

        self._element = element
        self._buffer = np.full(capacity, element.blank, dtype=element.dtype)
        self._constructed = 0

        logger.debug(f"Allocated {capacity} slots of {element.dtype}")

    @property
    def buffer(self) -> np.ndarray:
        return self._buffer

    @property
    def capacity(self) -> int:
        return self._buffer.shape[0]

    @property
    def constructed(self) -> int:
        return self._constructed

    @property
    def element(self) -> ElementType:
        return self._element

    def construct(self, count: int, value: Any = None):
        """Construct the next `count` slots as copies of `value`, or of the
        element default if no value is given.

        :param count: the number of slots to construct
        :param value: the value to fill the slots with
        """
        end = self._check_room(count)
        fill = self._element.default if value is None else value
        self._buffer[self._constructed : end] = _broadcastable(fill, self._element)
        self._constructed = end

    def construct_from(self, values: Iterable[Any]):
        """Construct one slot per value, in order, after the constructed prefix"""
        values = list(values)
        end = self._check_room(len(values))
        for offset, value in enumerate(values, start=self._constructed):
            self._buffer[offset] = value

        self._constructed = end

    def destroy(self):
        """Destroy every constructed slot. The allocation is kept."""
        self._buffer[: self._constructed] = self._element.blank
        self._constructed = 0

    def __getitem__(self, index: int) -> Any:
        return self._buffer[self._check_constructed(index)]

    def __setitem__(self, index: int, value: Any):
        self._buffer[self._check_constructed(index)] = value

    def copy(self, deep: bool = False, memo: Optional[dict] = None) -> "BufferStorage":
        """Create a new storage of the same capacity holding copies of the
        constructed values.

        :param deep: deep-copy each element rather than copying references
        :param memo: the memo dictionary when invoked from `copy.deepcopy`
        """
        other = BufferStorage(self.capacity, self._element)
        live = self._buffer[: self._constructed]
        if deep and self._element.dtype.kind == "O":
            other.construct_from(copy.deepcopy(value, memo) for value in live)
        else:
            other._buffer[: self._constructed] = live
            other._constructed = self._constructed

        return other

    def regrid(self, grid: Shape, new_grid: Shape) -> "BufferStorage":
        """Create a larger storage laid out row-major as `new_grid`, placing each
        constructed element at the same (column, row) it had in `grid`. Slots not
        covered by `grid` are default-constructed.

        The constructed prefix must cover the whole of `grid`.

        :param grid: the (columns, rows) layout of this storage
        :param new_grid: the (columns, rows) layout of the returned storage
        :returns: a fully constructed storage of ``columns * rows`` slots
        """
        columns, rows = grid
        new_columns, new_rows = new_grid

        if new_columns < columns or new_rows < rows:
            raise ValueError(
                f"Cannot lay out a {columns}x{rows} grid in {new_columns}x{new_rows}: "
                "shrinking would drop live elements"
            )

        if columns * rows != self._constructed:
            raise ValueError(
                f"Grid {columns}x{rows} does not match the {self._constructed} constructed slots"
            )

        other = BufferStorage(new_columns * new_rows, self._element)
        other.construct(other.capacity)

        live = self._buffer[: self._constructed].reshape(rows, columns)
        other._buffer.reshape(new_rows, new_columns)[:rows, :columns] = live

        logger.debug(
            f"Regridded {columns}x{rows} into {new_columns}x{new_rows} "
            f"({self.capacity} -> {other.capacity} slots)"
        )
        return other

    def _check_room(self, count: int) -> int:
        end = self._constructed + count
        if count < 0 or end > self.capacity:
            raise ValueError(
                f"Cannot construct {count} slots: {self._constructed} of {self.capacity} "
                "are already in use"
            )

        return end

    def _check_constructed(self, index: int) -> int:
        if not 0 <= index < self._constructed:
            raise IndexError(
                f"Slot {index} is not constructed (constructed: {self._constructed})"
            )

        return index


def _broadcastable(value: Any, element: ElementType) -> Any:
    # numpy would try to unpack sequences stored in object buffers
    if element.dtype.kind == "O":
        holder = np.empty(1, dtype=object)
        holder[0] = value
        return holder

    return value
