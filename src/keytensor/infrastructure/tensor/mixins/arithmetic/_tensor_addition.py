"""
Element-type-specific implementation of Tensor addition via control-path dispatch.

This module registers the NumPy implementation of element-wise addition for
the numeric element-type kinds (`FLOAT`, `INT`, `UINT`). The public operator
entrypoint is `TensorMixinArithmetic.__add__`; boolean tensors have no control
path and raise `DTypeNotSupportedError`.
"""

from ..._tensor_builder import tensor_control_path_manager, raise_dtype_not_supported

from .....domain.dtype._dtype import DTypeKind
from .....domain._tensor import ITensor

from ._base import TensorMixinArithmetic as TMA
from typing import Union

import numpy as np


Number = Union[int, float]
"""Scalar types accepted by Tensor arithmetic operators."""


@tensor_control_path_manager(TMA, TMA.__add__, DTypeKind.FLOAT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__add__, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__add__, DTypeKind.UINT, raise_dtype_not_supported)
def tensor_add(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Element-wise addition for numeric tensors.

    Parameters
    ----------
    other : Union[ITensor, Number]
        Same-shape tensor or scalar.

    Returns
    -------
    ITensor
        A new tensor holding ``self + other``.
    """
    return type(self)._from_array(np.add(self.data, self._operand_data(other)))
