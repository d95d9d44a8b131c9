"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the properties the construction
layer relies on from a base tensor:

- allocation for a given shape and element type,
- element access by multi-index or linear index,
- sequential forward iteration over the flat element sequence, and
- whole-tensor element-wise arithmetic producing new tensors.

Concrete backends (the NumPy-backed `Tensor` in the infrastructure layer)
satisfy this protocol without inheriting from a domain base class.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Union, runtime_checkable

from .dtype._dtype_protocol import DTypeLike

Number = Union[int, float, bool]


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` represents a dense multi-dimensional array holding elements
    of a single element type.

    Notes
    -----
    - The protocol mirrors the public API of the NumPy-backed `Tensor`
      implementation to keep typing consistent across layers.
    - Arithmetic operators return new tensors; they never mutate operands.
    """

    # ---------------------------------------------------------------------
    # Core identity
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        ...

    @property
    def dtype(self) -> DTypeLike:
        """
        Return the element type of the tensor.

        Returns
        -------
        DTypeLike
            The element type descriptor.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Return the rank (number of dimensions) of the tensor.
        """
        ...

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.

        Returns
        -------
        int
            Product of all dimensions in the tensor shape.
        """
        ...

    # ---------------------------------------------------------------------
    # Element access and iteration
    # ---------------------------------------------------------------------
    def __getitem__(self, key: Any) -> Any:
        """
        Index into the tensor.

        A full multi-index yields a Python scalar; partial indices and slices
        yield a new tensor.
        """
        ...

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Write element(s) in-place, casting through the element type.
        """
        ...

    def flat_at(self, index: int) -> Any:
        """
        Return the element at a linear (row-major) index.
        """
        ...

    def flat(self) -> Iterator[Any]:
        """
        Iterate the elements forward in row-major order.
        """
        ...

    # ---------------------------------------------------------------------
    # Host interop
    # ---------------------------------------------------------------------
    def to_numpy(self) -> Any:
        """
        Convert the tensor to a backend-native array object.

        Returns
        -------
        Any
            Backend-native array (e.g., `np.ndarray`).
        """
        ...

    def tolist(self) -> Any:
        """
        Return the elements as (nested) Python lists of scalars.
        """
        ...

    def fill(self, value: Number) -> None:
        """
        Fill the tensor with a scalar value, cast to the element type.
        """
        ...

    # ---------------------------------------------------------------------
    # Element-wise arithmetic
    # ---------------------------------------------------------------------
    def __add__(self, other: Union["ITensor", Number]) -> "ITensor": ...
    def __radd__(self, other: Number) -> "ITensor": ...
    def __sub__(self, other: Union["ITensor", Number]) -> "ITensor": ...
    def __rsub__(self, other: Number) -> "ITensor": ...
    def __mul__(self, other: Union["ITensor", Number]) -> "ITensor": ...
    def __rmul__(self, other: Number) -> "ITensor": ...
    def __truediv__(self, other: Union["ITensor", Number]) -> "ITensor": ...
    def __rtruediv__(self, other: Number) -> "ITensor": ...
    def __pow__(self, other: Union["ITensor", Number]) -> "ITensor": ...
    def __rpow__(self, other: Number) -> "ITensor": ...
    def __neg__(self) -> "ITensor": ...
