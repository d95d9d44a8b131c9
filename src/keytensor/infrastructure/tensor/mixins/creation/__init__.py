"""
Tensor generator mixin.

The generators live in the sibling `_tensor_*.py` modules as plain functions
taking the tensor class first; `TensorMixinCreation` binds them as
classmethods of the concrete `Tensor`.

Public API
----------
- ``TensorMixinCreation``
"""

from ._base import TensorMixinCreation

__all__ = [
    TensorMixinCreation.__name__,
]
