"""
Element-type-specific implementation of Tensor multiplication via control-path dispatch.

This module registers the NumPy implementation of element-wise multiplication
for the numeric element-type kinds. The public operator entrypoint is
`TensorMixinArithmetic.__mul__`; `__rmul__` delegates to it.

Scaling a tensor by a scalar (``y * step``, ``samples * sign``) is how the
spacing generators turn an index range into sample values.
"""

from ..._tensor_builder import tensor_control_path_manager, raise_dtype_not_supported

from .....domain.dtype._dtype import DTypeKind
from .....domain._tensor import ITensor

from ._base import TensorMixinArithmetic as TMA
from typing import Union

import numpy as np


Number = Union[int, float]


@tensor_control_path_manager(TMA, TMA.__mul__, DTypeKind.FLOAT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__mul__, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__mul__, DTypeKind.UINT, raise_dtype_not_supported)
def tensor_mul(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Element-wise multiplication for numeric tensors.

    Parameters
    ----------
    other : Union[ITensor, Number]
        Same-shape tensor or scalar.

    Returns
    -------
    ITensor
        A new tensor holding ``self * other``.
    """
    return type(self)._from_array(np.multiply(self.data, self._operand_data(other)))
