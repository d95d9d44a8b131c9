"""
Tensor control-path manager for element-type dispatch.

This module defines a shared control-path manager used to register and
resolve element-type-specific implementations of Tensor methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"kind"``. As a result, method
dispatch is performed based on the runtime value of ``self.kind`` (a
`DTypeKind`) on Tensor objects.

Typical usage
-------------
Kind-specific implementations register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, DTypeKind.FLOAT,
                                 raise_dtype_not_supported)
    def op_float(self, ...): ...

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, DTypeKind.INT,
                                 raise_dtype_not_supported)
    def op_int(self, ...): ...

At runtime, calling ``Tensor.op(...)`` dispatches to the implementation whose
registered kind matches ``self.kind``; kinds without an implementation raise
`DTypeNotSupportedError`.
"""

from typing import Any, Callable, NoReturn

from ...domain.utils._control_path import create_path_builder
from ...domain._errors import DTypeNotSupportedError

# Control-path manager that dispatches Tensor methods based on `self.kind`
tensor_control_path_manager = create_path_builder("kind")


def raise_dtype_not_supported(self: Any, method: Callable, state: Any) -> NoReturn:
    """
    Trap used for missing control paths: raise a typed dtype error.

    Parameters
    ----------
    self : Any
        The tensor the operation was invoked on.
    method : Callable
        The base method that has no implementation for `state`.
    state : Any
        The element-type kind that was looked up.

    Raises
    ------
    DTypeNotSupportedError
        Always.
    """
    op = method.__name__.strip("_")
    raise DTypeNotSupportedError(op=op, dtype=str(self.dtype))
