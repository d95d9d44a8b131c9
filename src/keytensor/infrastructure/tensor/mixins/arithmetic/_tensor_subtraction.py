"""
Element-type-specific implementations of Tensor subtraction and negation.

Subtraction (`__sub__`, `__rsub__`) is registered for every numeric kind.
Negation (`__neg__`) is registered for `FLOAT` and `INT` only: negating an
unsigned integer tensor has no meaningful result and raises
`DTypeNotSupportedError`.
"""

from ..._tensor_builder import tensor_control_path_manager, raise_dtype_not_supported

from .....domain.dtype._dtype import DTypeKind
from .....domain._tensor import ITensor

from ._base import TensorMixinArithmetic as TMA
from typing import Union

import numpy as np


Number = Union[int, float]


@tensor_control_path_manager(TMA, TMA.__sub__, DTypeKind.FLOAT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__sub__, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__sub__, DTypeKind.UINT, raise_dtype_not_supported)
def tensor_sub(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Element-wise subtraction ``self - other`` for numeric tensors.
    """
    return type(self)._from_array(np.subtract(self.data, self._operand_data(other)))


@tensor_control_path_manager(TMA, TMA.__rsub__, DTypeKind.FLOAT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__rsub__, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__rsub__, DTypeKind.UINT, raise_dtype_not_supported)
def tensor_rsub(self: ITensor, other: Number) -> "ITensor":
    """
    Element-wise subtraction ``other - self`` for numeric tensors.
    """
    return type(self)._from_array(np.subtract(self._operand_data(other), self.data))


@tensor_control_path_manager(TMA, TMA.__neg__, DTypeKind.FLOAT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__neg__, DTypeKind.INT, raise_dtype_not_supported)
def tensor_neg(self: ITensor) -> "ITensor":
    """
    Element-wise negation for signed tensors.
    """
    return type(self)._from_array(np.negative(self.data))
