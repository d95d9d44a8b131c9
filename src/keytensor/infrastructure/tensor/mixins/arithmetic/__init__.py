"""
Arithmetic mixins and element-type-specific implementations for Tensor.

This package aggregates the arithmetic mixin and its concrete control-path
implementations:

- ``__add__`` / ``__radd__``
- ``__sub__`` / ``__rsub__`` / ``__neg__``
- ``__mul__`` / ``__rmul__``
- ``__truediv__`` / ``__rtruediv__``
- ``__pow__`` / ``__rpow__``

Each operator is dispatched on the receiver's element-type kind, exposing a
single, stable public API on the Tensor class.

Public API
----------
Only the base mixin class is exported as part of the public interface:

- ``TensorMixinArithmetic``

The concrete implementations are imported for side effects so that their
control paths are registered, but they are not intended to be used directly.
"""

from ._tensor_addition import *
from ._tensor_subtraction import *
from ._tensor_multiplication import *
from ._tensor_division import *
from ._tensor_power import *
from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
