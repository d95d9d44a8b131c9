"""
Tensor memory operation registrations for keytensor.

This package aggregates the memory-related `Tensor` helpers and registers
the element-type-specific implementations of `fill` through the tensor
control-path dispatch system.

Public API
----------
Only `TensorMixinMemory` is re-exported as part of the public interface.
The fill implementations are imported for their side effects (registration)
and are not intended to be accessed directly.
"""

from ._tensor_fill import *
from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
