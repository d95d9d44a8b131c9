"""
Validation and dispatch exceptions for keytensor.

This module defines the error taxonomy surfaced by tensor construction and
element-wise operations. All of them are raised eagerly, before any result
tensor is handed back to the caller, so a caller never observes a partially
built tensor after an error.

- `DomainError`: an invalid numeric request (e.g. a descending range with a
  positive step, a non-positive sample count, a zero step, or a geometric
  progression that would have to include zero).
- `ShapeError`: a shape that is malformed, or an input tensor whose rank or
  shape does not fit the operation (e.g. a 2-D input where a 1-D vector is
  required).
- `DTypeNotSupportedError`: an operation that has no implementation for the
  element-type kind of the tensor it was invoked on.

`DomainError` and `ShapeError` subclass `ValueError` so that callers written
against plain Python conventions keep working.
"""


class DomainError(ValueError):
    """
    Raised when a numeric request lies outside the domain of a generator.

    Examples include ``Tensor.range(5, 0, 1)`` (an ascending step that can
    never reach a smaller stop), ``Tensor.linear_space(0, 1, num=0)`` and
    ``Tensor.geometric_space(0, 10)``.
    """


class ShapeError(ValueError):
    """
    Raised when a shape is invalid or an input has the wrong rank/shape.

    This covers negative or non-integral dimension sizes, operands of a binary
    element-wise operation whose shapes differ, and inputs that must be
    one-dimensional (``diag``, ``vander``) but are not.
    """


class DTypeNotSupportedError(TypeError):
    """
    Raised when a tensor operation is requested for an element type that has
    no registered implementation.

    This error is typically raised by the control-path dispatcher when, for
    example, arithmetic is attempted on a boolean tensor.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g., "add", "pow").
    dtype : str
        Name of the element type the operation was attempted on.
    """

    def __init__(self, op: str, dtype: str) -> None:
        """
        Initialize the DTypeNotSupportedError.

        Parameters
        ----------
        op : str
            The operation name that is not supported for the given dtype.
        dtype : str
            The element type name (e.g., "bool", "uint8").
        """
        super().__init__(f"{op} is not implemented for dtype '{dtype}'.")
        self.op = op
        self.dtype = dtype
