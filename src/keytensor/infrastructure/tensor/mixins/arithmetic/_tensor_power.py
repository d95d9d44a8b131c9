"""
Element-type-specific implementations of Tensor exponentiation.

This module registers `__pow__` (``tensor ** exponent``) and `__rpow__`
(``base ** tensor``) for the numeric element-type kinds:

- `FLOAT`: plain NumPy power. A negative base with a fractional exponent
  yields ``nan`` as in IEEE arithmetic.
- `INT` / `UINT`: NumPy power, except that an all-integer computation with a
  negative exponent is rejected with `DomainError` (the result would not be
  an integer).

`__rpow__` is what implements ``base ** linear_space(...)`` in logarithmic
spacing.
"""

from ..._tensor_builder import tensor_control_path_manager, raise_dtype_not_supported

from .....domain.dtype._dtype import DTypeKind
from .....domain._errors import DomainError
from .....domain._tensor import ITensor

from ._base import TensorMixinArithmetic as TMA
from typing import Any, Union

import numpy as np


Number = Union[int, float]


def _reject_negative_integer_exponent(base: Any, exponent: Any) -> None:
    """
    Raise `DomainError` if an integer base would be raised to a negative
    integer exponent.
    """
    base_arr = np.asarray(base)
    exp_arr = np.asarray(exponent)
    if base_arr.dtype.kind not in "iub" or exp_arr.dtype.kind not in "iu":
        return
    if exp_arr.size and (exp_arr < 0).any():
        raise DomainError("Integers to negative integer powers are not allowed")


@tensor_control_path_manager(TMA, TMA.__pow__, DTypeKind.FLOAT, raise_dtype_not_supported)
def tensor_pow_float(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Element-wise ``self ** other`` for floating point tensors.
    """
    return type(self)._from_array(np.power(self.data, self._operand_data(other)))


@tensor_control_path_manager(TMA, TMA.__pow__, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__pow__, DTypeKind.UINT, raise_dtype_not_supported)
def tensor_pow_integer(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Element-wise ``self ** other`` for integer tensors.

    Raises
    ------
    DomainError
        If `other` is integral and any exponent is negative.
    """
    exponent = self._operand_data(other)
    _reject_negative_integer_exponent(self.data, exponent)
    return type(self)._from_array(np.power(self.data, exponent))


@tensor_control_path_manager(TMA, TMA.__rpow__, DTypeKind.FLOAT, raise_dtype_not_supported)
def tensor_rpow_float(self: ITensor, other: Number) -> "ITensor":
    """
    Element-wise ``other ** self`` for floating point exponent tensors.
    """
    return type(self)._from_array(np.power(self._operand_data(other), self.data))


@tensor_control_path_manager(TMA, TMA.__rpow__, DTypeKind.INT, raise_dtype_not_supported)
@tensor_control_path_manager(TMA, TMA.__rpow__, DTypeKind.UINT, raise_dtype_not_supported)
def tensor_rpow_integer(self: ITensor, other: Number) -> "ITensor":
    """
    Element-wise ``other ** self`` for integer exponent tensors.

    Raises
    ------
    DomainError
        If `other` is integral and any exponent is negative.
    """
    base = self._operand_data(other)
    _reject_negative_integer_exponent(base, self.data)
    return type(self)._from_array(np.power(base, self.data))
