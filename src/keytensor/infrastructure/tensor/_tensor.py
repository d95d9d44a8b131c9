"""
Concrete Tensor implementation (NumPy backend).

This module provides the concrete `Tensor` that satisfies the domain-level
`ITensor` protocol. Storage is a C-contiguous NumPy ndarray whose element
type is described by a keytensor `DType`.

The class itself only holds identity (shape, element type, storage); the
behavior is composed from focused mixins:

- `TensorMixinCreation`         : tensor generators (range, linear_space,
                                  eye, diag, zeros, random, ...)
- `TensorMixinArithmetic`       : element-wise ``+ - * / **`` dispatched by
                                  element-type kind
- `TensorMixinMemory`           : NumPy conversion, copies and `fill`
- `TensorShapeAndIndexingMixin` : shape queries, indexing and the
                                  indexed-construction primitives

Design notes
------------
- This file sits in the infrastructure layer: it imports NumPy and provides a
  concrete runtime implementation of the domain protocol.
- Broadcasting is intentionally not implemented; binary ops require exact
  shape matches.
- NumPy ufuncs are disabled on `Tensor` (``__array_ufunc__ = None``) so that
  mixed expressions such as ``np.float64(2.0) ** t`` defer to the tensor's
  reflected operators instead of producing object arrays.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._tensor import ITensor
from ...domain.dtype._dtype import DType, DTypeKind
from .._config import resolve_dtype
from ._shape_and_indexing import ShapeLike, TensorShapeAndIndexingMixin, normalize_shape
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.creation import TensorMixinCreation
from .mixins.memory import TensorMixinMemory


class Tensor(
    TensorMixinCreation,
    TensorMixinArithmetic,
    TensorMixinMemory,
    TensorShapeAndIndexingMixin,
    ITensor,
):
    """
    Concrete dense tensor backed by a NumPy ndarray.

    Parameters
    ----------
    shape : int | Sequence[int]
        Tensor shape. ``()`` creates a 0-d (scalar) tensor.
    dtype : Any, optional
        Element type: a `DType`, a name such as ``"int32"``, a builtin scalar
        type, or a NumPy dtype. Defaults to the configured default dtype
        (see `keytensor.get_default_dtype`).

    Raises
    ------
    ShapeError
        If the shape has negative or non-integer sizes.
    ValueError
        If `dtype` is not a supported element type.

    Notes
    -----
    - Newly constructed tensors are zero-initialized.
    - `_data` is always a NumPy ndarray of the element type `self._dtype`.
    """

    __array_ufunc__ = None

    def __init__(self, shape: ShapeLike, *, dtype: Any = None) -> None:
        """
        Construct a new Tensor with allocated, zeroed storage.

        Parameters
        ----------
        shape : int | Sequence[int]
            Shape of the tensor.
        dtype : Any, optional
            Element type. Defaults to the configured default dtype.
        """
        self._shape = normalize_shape(shape)
        self._dtype = resolve_dtype(dtype)
        self.__initialize_data()

    def __initialize_data(self) -> None:
        """
        Allocate and zero-initialize the underlying NumPy storage.
        """
        self._data = np.zeros(self._shape, dtype=self._dtype.name)

    def __repr__(self) -> str:
        """
        Return a human-readable string representation of the tensor.

        Returns
        -------
        str
            A string describing the tensor's shape and element type.
        """
        return f"Tensor(shape={self._shape}, dtype={self._dtype})"

    def __array__(self, dtype: Optional[Any] = None, copy: Optional[bool] = None):
        # Lets np.asarray / np.testing consume tensors directly.
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        return self._shape

    @property
    def dtype(self) -> DType:
        """
        Return the element type of this tensor.

        Returns
        -------
        DType
            The tensor's element type descriptor.
        """
        return self._dtype

    @property
    def kind(self) -> DTypeKind:
        """
        Return the element-type kind; this is the control-path dispatch key.
        """
        return self._dtype.kind

    @property
    def data(self) -> np.ndarray:
        """
        Return the underlying NumPy storage (no copy).

        Notes
        -----
        Mutating the returned array mutates the tensor. Use `to_numpy()` for
        an independent copy.
        """
        return self._data
