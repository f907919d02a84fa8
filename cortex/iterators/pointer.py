"""
A raw cursor into an indexable buffer.
"""

import numbers

from typing import Any, Optional, Sequence

from ..core_types import IteratorCategory


class Pointer:
    """Pointer-like position: a buffer plus an offset into it.

    Arithmetic only moves the offset and never checks it against the buffer.
    Two pointers are equal when they address the same offset of the same
    buffer object; ordering compares offsets alone.

    :param buffer: any object supporting ``__getitem__`` (and ``__setitem__``
        for writable pointers). ``None`` makes a null pointer.
    :param offset: the element addressed
    :param readonly: reject writes made through this pointer
    """

    __slots__ = ["_buffer", "_offset", "_readonly"]

    category = IteratorCategory.RANDOM_ACCESS

    def __init__(self, buffer: Optional[Sequence] = None, offset: int = 0, readonly: bool = False):
        self._buffer = buffer
        self._offset = offset
        self._readonly = readonly

    @property
    def buffer(self) -> Optional[Sequence]:
        return self._buffer

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def readonly(self) -> bool:
        return self._readonly

    def deref(self) -> Any:
        return self._buffer[self._offset]

    def store(self, value: Any):
        self._check_writable()
        self._buffer[self._offset] = value

    def arrow(self) -> Any:
        return self._buffer[self._offset]

    def increment(self) -> "Pointer":
        self._offset += 1
        return self

    def decrement(self) -> "Pointer":
        self._offset -= 1
        return self

    def __copy__(self) -> "Pointer":
        return Pointer(self._buffer, self._offset, self._readonly)

    def __getitem__(self, step: int) -> Any:
        return self._buffer[self._offset + step]

    def __setitem__(self, step: int, value: Any):
        self._check_writable()
        self._buffer[self._offset + step] = value

    def __add__(self, step: int) -> "Pointer":
        if not isinstance(step, numbers.Integral):
            return NotImplemented

        return Pointer(self._buffer, self._offset + step, self._readonly)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Pointer):
            return self._offset - other._offset

        if isinstance(other, numbers.Integral):
            return Pointer(self._buffer, self._offset - other, self._readonly)

        return NotImplemented

    def __iadd__(self, step: int) -> "Pointer":
        self._offset += step
        return self

    def __isub__(self, step: int) -> "Pointer":
        self._offset -= step
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented

        return self._buffer is other._buffer and self._offset == other._offset

    def __lt__(self, other) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented

        return self._offset < other._offset

    def __le__(self, other) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented

        return self._offset <= other._offset

    def __gt__(self, other) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented

        return self._offset > other._offset

    def __ge__(self, other) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented

        return self._offset >= other._offset

    __hash__ = None

    def __repr__(self) -> str:
        if self._buffer is None:
            return "Pointer(null)"

        kind = "const " if self._readonly else ""
        return f"Pointer({kind}{type(self._buffer).__name__}@{id(self._buffer):#x}+{self._offset})"

    def _check_writable(self):
        if self._readonly:
            raise TypeError("Cannot assign through a read-only pointer")
