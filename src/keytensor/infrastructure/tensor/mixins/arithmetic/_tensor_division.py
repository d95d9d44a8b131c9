"""
Element-type-specific implementations of Tensor true division.

Both `__truediv__` and `__rtruediv__` are registered for every numeric kind
and always produce a floating point result (NumPy true division). Division by
zero follows IEEE semantics and is not trapped here.
"""

from ..._tensor_builder import tensor_control_path_manager, raise_dtype_not_supported

from .....domain.dtype._dtype import DTypeKind
from .....domain._tensor import ITensor

from ._base import TensorMixinArithmetic as TMA
from typing import Union

import numpy as np


Number = Union[int, float]


@tensor_control_path_manager(TMA, TMA.__truediv__, DTypeKind.FLOAT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__truediv__, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__truediv__, DTypeKind.UINT, raise_dtype_not_supported)
def tensor_truediv(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Element-wise true division ``self / other``.
    """
    return type(self)._from_array(
        np.true_divide(self.data, self._operand_data(other))
    )


@tensor_control_path_manager(TMA, TMA.__rtruediv__, DTypeKind.FLOAT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__rtruediv__, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__rtruediv__, DTypeKind.UINT, raise_dtype_not_supported)
def tensor_rtruediv(self: ITensor, other: Number) -> "ITensor":
    """
    Element-wise true division ``other / self``.
    """
    return type(self)._from_array(
        np.true_divide(self._operand_data(other), self.data)
    )
