"""
Arithmetic mixin defining element-wise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, an abstract mixin that
specifies the public API and semantics for element-wise arithmetic on
tensors.

The mixin itself does not implement numerical kernels. Concrete
implementations are provided in the sibling modules and registered per
element-type kind via the control-path dispatch mechanism. Kinds with no
registered implementation (booleans) raise `DTypeNotSupportedError`.
"""

from typing import Any, Union
from abc import ABC

import numpy as np

from .....domain._errors import ShapeError
from .....domain._tensor import ITensor

Number = Union[int, float, bool]


class TensorMixinArithmetic(ABC):
    """
    Abstract mixin defining element-wise arithmetic operations for tensors.

    Notes
    -----
    - Operands are either a tensor of exactly the same shape (no
      broadcasting) or a Python/NumPy scalar.
    - Results are new tensors; operands are never mutated.
    - The result element type follows NumPy promotion of the operand
      buffers (e.g. ``int64 tensor * 0.5`` is ``float64``).
    """

    def _operand_data(self: ITensor, other: Any) -> Any:
        """
        Resolve the right-hand operand of a binary operation.

        Parameters
        ----------
        other : Any
            A tensor or a scalar.

        Returns
        -------
        Any
            The other tensor's ndarray storage, or the scalar unchanged.

        Raises
        ------
        ShapeError
            If `other` is a tensor whose shape differs from `self.shape`.
        TypeError
            If `other` is neither a tensor nor a supported scalar.
        """
        if isinstance(other, TensorMixinArithmetic):
            if other.shape != self.shape:
                raise ShapeError(f"Shape mismatch: {self.shape} vs {other.shape}")
            return other.data
        if isinstance(other, (int, float, np.number, np.bool_)):
            return other
        raise TypeError(f"Unsupported operand type: {type(other)!r}")

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Element-wise addition.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand.

        Returns
        -------
        ITensor
            Tensor containing the element-wise result of ``self + other``.
        """
        ...

    def __radd__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand addition to support ``scalar + Tensor``.

        Addition is commutative, so this delegates to :meth:`__add__`.
        """
        return self.__add__(other)

    # ----------------------------
    # Subtraction / negation
    # ----------------------------
    def __sub__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Element-wise subtraction (``self - other``).
        """
        ...

    def __rsub__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand subtraction to support ``scalar - Tensor``.
        """
        ...

    def __neg__(self: ITensor) -> "ITensor":
        """
        Element-wise negation.

        Notes
        -----
        Not available for unsigned integer tensors.
        """
        ...

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Element-wise multiplication.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand.

        Returns
        -------
        ITensor
            Tensor containing the element-wise result of ``self * other``.
        """
        ...

    def __rmul__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand multiplication to support ``scalar * Tensor``.

        Multiplication is commutative, so this delegates to :meth:`__mul__`.
        """
        return self.__mul__(other)

    # ----------------------------
    # True division
    # ----------------------------
    def __truediv__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Element-wise true division.

        Notes
        -----
        Integer operands produce a floating point result. Division by zero
        follows IEEE semantics (``inf`` / ``nan``).
        """
        ...

    def __rtruediv__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand true division to support ``scalar / Tensor``.
        """
        ...

    # ----------------------------
    # Power
    # ----------------------------
    def __pow__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Element-wise power (``self ** other``).

        Notes
        -----
        Raising integers to negative integer powers is rejected with
        `DomainError`.
        """
        ...

    def __rpow__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand power to support ``scalar ** Tensor``.

        This is the operator behind ``base ** linear_space(...)`` in
        logarithmic spacing.
        """
        ...
