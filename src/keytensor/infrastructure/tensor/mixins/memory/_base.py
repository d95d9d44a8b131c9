"""
Tensor memory mixin.

This module defines `TensorMixinMemory`, a focused mixin that provides the
memory-related utilities of the concrete `Tensor`: adopting and copying NumPy
storage, converting back to NumPy / Python objects, cloning, and the in-place
scalar `fill` whose element-type-specific implementations live in
`_tensor_fill.py`.

Notes
-----
- The mixin assumes the concrete `Tensor` class provides internal fields
  `_shape`, `_dtype` and `_data`, and a constructor ``cls(shape, dtype=...)``.
- Every helper that hands storage to the caller returns a copy; tensors never
  alias caller-owned buffers.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Union

import numpy as np

from .....domain._errors import ShapeError
from .....domain.dtype._dtype import DType

Number = Union[int, float, bool]


class TensorMixinMemory(ABC):
    """
    Mixin that implements storage adoption, copying and conversion helpers.

    This mixin is intended to be inherited by a concrete `Tensor` class. It
    provides:

    - Constructors from NumPy data: `from_numpy`, `_from_array`
    - Conversions: `to_numpy`, `tolist`, `item`
    - Copies: `copy_from_numpy`, `clone`
    - In-place scalar fill: `fill` (dispatched by element-type kind)
    """

    @classmethod
    def _from_array(cls, arr: np.ndarray):
        """
        Adopt a NumPy array as the storage of a new tensor (no copy).

        Parameters
        ----------
        arr : np.ndarray
            Array whose dtype must be a supported element type.

        Returns
        -------
        Tensor
            A tensor whose storage *is* `arr`.

        Notes
        -----
        This constructor bypasses `__init__` and does not allocate memory.
        Callers must pass an array they exclusively own.
        """
        # NumPy ufuncs return scalars for 0-d inputs.
        arr = np.asarray(arr)
        out = cls.__new__(cls)
        out._shape = tuple(int(d) for d in arr.shape)
        out._dtype = DType.coerce(arr.dtype)
        out._data = arr
        return out

    @classmethod
    def from_numpy(cls, arr: Any, *, dtype: Any = None):
        """
        Create a tensor holding a copy of an array-like.

        Parameters
        ----------
        arr : Any
            NumPy array, nested sequence, or scalar.
        dtype : Any, optional
            Element type of the result. Defaults to the element type of `arr`.

        Returns
        -------
        Tensor
            A new tensor with the same shape and values.

        Raises
        ------
        ValueError
            If the resulting element type is not supported.
        """
        if dtype is None:
            data = np.array(arr, copy=True)
        else:
            data = np.array(arr, dtype=DType.coerce(dtype).name, copy=True)
        return cls._from_array(data)

    def to_numpy(self) -> np.ndarray:
        """
        Return a copy of the storage as a NumPy ndarray.

        Returns
        -------
        np.ndarray
            Array with the tensor's shape and element type.
        """
        return self._data.copy()

    def tolist(self) -> Any:
        """
        Return the elements as (nested) Python lists of Python scalars.
        """
        return self._data.tolist()

    def item(self) -> Number:
        """
        Return the single element of a one-element tensor as a Python scalar.

        Raises
        ------
        ValueError
            If the tensor does not hold exactly one element.
        """
        if self.numel() != 1:
            raise ValueError(
                f"item() requires a tensor with one element, got shape {self._shape}"
            )
        return self._data.item()

    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy data from an array-like into this tensor (in-place).

        Parameters
        ----------
        arr : Any
            Source array-like. Must have exactly this tensor's shape.

        Raises
        ------
        ShapeError
            If the source shape differs from this tensor's shape.
        """
        src = np.asarray(arr)
        if src.shape != self._shape:
            raise ShapeError(
                f"copy_from_numpy shape mismatch: tensor {self._shape} vs array {src.shape}"
            )
        np.copyto(self._data, src, casting="unsafe")

    def clone(self):
        """
        Return a deep copy of this tensor.
        """
        return self.__class__._from_array(self._data.copy())

    def fill(self, value: Number) -> None:
        """
        Fill the tensor in-place with a scalar value.

        Parameters
        ----------
        value : Number
            Scalar converted with the element type's constructor before being
            written to every element.

        Notes
        -----
        Implementations are registered per element-type kind in
        `_tensor_fill.py`.
        """
        ...
