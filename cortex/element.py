"""
Element type configuration for matrix storage.
"""

import numbers

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass
class ElementType:
    """The element type stored in a matrix."""

    dtype: np.dtype
    """The numpy dtype of the backing buffer"""

    default: Any = None
    """The value a slot holds when it is default-constructed. Derived from the
    dtype when left out."""

    def __post_init__(self):
        self.dtype = np.dtype(self.dtype)
        if self.default is None and self.dtype.kind != "O":
            self.default = self.dtype.type(0)

    @property
    def blank(self) -> Any:
        """The value written into destroyed slots"""
        if self.dtype.kind == "O":
            return None

        return self.dtype.type(0)

    @staticmethod
    def infer(value: Any) -> "ElementType":
        """Pick an element type able to hold `value`. Numbers keep their numpy
        dtype, anything else is stored as a Python object."""
        if isinstance(value, (bool, numbers.Number, np.number, np.bool_)):
            return ElementType(np.asarray(value).dtype)

        return ElementType(np.dtype(object))

    def state(self):
        dtype_name = self.dtype.name
        default = self.default
        if isinstance(default, np.generic):
            default = default.item()

        return {
            "dtype": dtype_name,
            "default": default,
        }

    def load_state(self, config):
        self.dtype = np.dtype(config["dtype"])
        self.default = config.get("default")
        self.__post_init__()
        if self.dtype.kind != "O":
            self.default = self.dtype.type(self.default)
