"""
Tensor fill implementations (per element-type kind) for keytensor.

This module provides kind-specific implementations of `Tensor.fill()` and
registers them via `tensor_control_path_manager`:

- `tensor_fill_float`: floating tensors, value converted with ``float``.
- `tensor_fill_integer`: signed and unsigned integer tensors, value converted
  with ``int`` (truncation toward zero).
- `tensor_fill_bool`: boolean tensors, value converted with ``bool``.

Notes
-----
- All implementations mutate the tensor in-place and return `None`.
- Values that do not fit a narrow integer width raise `OverflowError` from
  the storage backend.
"""

from ..._tensor_builder import tensor_control_path_manager, raise_dtype_not_supported

from .....domain.dtype._dtype import DTypeKind
from .....domain._tensor import ITensor

from ._base import TensorMixinMemory as TMM
from typing import Union


Number = Union[int, float, bool]


@tensor_control_path_manager(
    TMM, TMM.fill, DTypeKind.FLOAT, raise_dtype_not_supported
)
def tensor_fill_float(self: ITensor, value: Number) -> None:
    """
    Fill a floating point tensor in-place with a scalar value.
    """
    self.data.fill(float(value))


@tensor_control_path_manager(TMM, TMM.fill, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(
    TMM, TMM.fill, DTypeKind.UINT, raise_dtype_not_supported
)
def tensor_fill_integer(self: ITensor, value: Number) -> None:
    """
    Fill an integer tensor in-place with a scalar value.

    Parameters
    ----------
    value : Number
        Scalar value; floats are truncated toward zero.

    Raises
    ------
    OverflowError
        If the value does not fit the tensor's integer width (or is an
        infinite float).
    """
    self.data.fill(int(value))


@tensor_control_path_manager(
    TMM, TMM.fill, DTypeKind.BOOL, raise_dtype_not_supported
)
def tensor_fill_bool(self: ITensor, value: Number) -> None:
    self.data.fill(bool(value))
