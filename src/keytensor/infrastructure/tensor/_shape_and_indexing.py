"""
Tensor shape, indexing, and indexed-construction mixin (NumPy backend).

This module defines `TensorShapeAndIndexingMixin`, a cohesive mixin that
implements shape-related and indexing-related Tensor methods for the
NumPy-backed concrete Tensor implementation, together with the
indexed-construction primitive every tensor generator delegates to.

Design notes
------------
- This mixin is intended to be inherited by the concrete `Tensor` class.
- To avoid circular imports, the implementation does not import `Tensor`
  directly; instead it constructs new tensors via `cls` (classmethods) or
  `self.__class__` (instance methods).
- Indexing returns a *copy* (not a view) for anything that is not a single
  element; single elements are returned as Python scalars.
- Indexed construction visits indices in row-major order and writes each
  value through the element type's constructor (`DType.cast`).
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterator, Sequence, Union

import numpy as np

from ...domain._errors import ShapeError

ShapeLike = Union[int, Sequence[int]]


def normalize_shape(shape: ShapeLike) -> tuple[int, ...]:
    """
    Validate and normalize a shape argument.

    Parameters
    ----------
    shape : int | Sequence[int]
        A single dimension size or a sequence of dimension sizes. ``()``
        denotes a scalar (0-d) container.

    Returns
    -------
    tuple[int, ...]
        The shape as a tuple of non-negative Python ints.

    Raises
    ------
    ShapeError
        If any size is negative or not an integer.
    """
    if isinstance(shape, (int, np.integer)) and not isinstance(shape, bool):
        shape = (shape,)
    try:
        dims = tuple(operator.index(d) for d in shape)
    except TypeError:
        raise ShapeError(f"Invalid shape {shape!r}: sizes must be integers")
    if any(d < 0 for d in dims):
        raise ShapeError(f"Invalid shape {dims}: sizes must be non-negative")
    return dims


class TensorShapeAndIndexingMixin:
    """
    Shape, indexing and indexed-construction operations for the concrete
    Tensor implementation.

    Notes
    -----
    - Methods assume the host class provides:
        - `.shape`, `.dtype`, `.data`
        - a constructor ``cls(shape, dtype=...)`` that allocates zeroed
          storage
        - `._from_array(arr)` adopting a NumPy array as storage
    """

    # ----------------------------
    # Indexed construction
    # ----------------------------
    @classmethod
    def from_function(
        cls,
        shape: ShapeLike,
        fn: Callable[..., Any],
        *,
        dtype: Any = None,
    ):
        """
        Allocate a tensor and fill it by calling `fn` once per multi-index.

        Parameters
        ----------
        shape : int | Sequence[int]
            Output shape.
        fn : Callable[..., Any]
            Value callback invoked as ``fn(i0, i1, ..., ik)`` for every index
            of the output, in row-major order. For shape ``()`` it is called
            once with no arguments.
        dtype : Any, optional
            Element type of the result. Defaults to the configured default.

        Returns
        -------
        Tensor
            The populated tensor. Each callback result is converted with
            ``dtype.cast`` before being stored.

        Notes
        -----
        The tensor is only returned once every element has been written, so
        an exception raised by `fn` never leaks a partially built tensor.
        """
        out = cls(shape, dtype=dtype)
        cast = out.dtype.cast
        buf = out.data
        for index in np.ndindex(*out.shape):
            buf[index] = cast(fn(*index))
        return out

    @classmethod
    def from_flat_function(
        cls,
        shape: ShapeLike,
        fn: Callable[[int], Any],
        *,
        dtype: Any = None,
    ):
        """
        Allocate a tensor and fill it by calling `fn` once per linear index.

        Parameters
        ----------
        shape : int | Sequence[int]
            Output shape.
        fn : Callable[[int], Any]
            Value callback invoked as ``fn(i)`` for ``i`` in
            ``0 .. numel - 1`` (row-major linear index).
        dtype : Any, optional
            Element type of the result. Defaults to the configured default.

        Returns
        -------
        Tensor
            The populated tensor.
        """
        out = cls(shape, dtype=dtype)
        cast = out.dtype.cast
        flat = out.data.reshape(-1)
        for i in range(flat.size):
            flat[i] = cast(fn(i))
        return out

    # ----------------------------
    # Shape queries
    # ----------------------------
    @property
    def ndim(self) -> int:
        """
        Return the rank (number of dimensions) of the tensor.
        """
        return len(self.shape)

    @property
    def size(self) -> int:
        """
        Return the total number of elements (alias of `numel()`).
        """
        return self.numel()

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.

        Returns
        -------
        int
            Product of all dimensions in the tensor shape (1 for a 0-d tensor).
        """
        n = 1
        for d in self.shape:
            n *= d
        return n

    def __len__(self) -> int:
        if not self.shape:
            raise TypeError("len() of a 0-d tensor")
        return self.shape[0]

    def reshape(self, new_shape: ShapeLike):
        """
        Return a copy of this tensor with a different shape.

        Parameters
        ----------
        new_shape : int | Sequence[int]
            Requested output shape. Must have the same number of elements.

        Returns
        -------
        Tensor
            A new tensor holding the same elements in row-major order.

        Raises
        ------
        ShapeError
            If the element counts differ.
        """
        dims = normalize_shape(new_shape)
        n = 1
        for d in dims:
            n *= d
        if n != self.numel():
            raise ShapeError(
                f"Cannot reshape tensor of shape {self.shape} "
                f"({self.numel()} elements) into {dims}"
            )
        return self.__class__._from_array(self.data.reshape(dims).copy())

    # ----------------------------
    # Element access
    # ----------------------------
    def __getitem__(self, key: Any) -> Any:
        """
        Index into the tensor.

        Returns
        -------
        Any
            A Python scalar when `key` selects a single element (e.g. ``t[1]``
            on a 1-D tensor or ``t[i, j]`` on a 2-D tensor); otherwise a new
            Tensor holding a copy of the selected elements.
        """
        selected = self.data[key]
        if isinstance(selected, np.generic):
            return selected.item()
        return self.__class__._from_array(np.array(selected, copy=True))

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Write element(s) in-place.

        Scalars are converted with the tensor's element constructor; tensors
        and arrays are copied element-wise (NumPy casting rules apply).
        """
        if hasattr(value, "to_numpy"):
            self.data[key] = value.to_numpy()
        elif isinstance(value, np.ndarray):
            self.data[key] = value
        else:
            self.data[key] = self.dtype.cast(value)

    def flat_at(self, index: int) -> Any:
        """
        Return the element at a linear (row-major) index.

        Parameters
        ----------
        index : int
            Linear index. Negative values count from the end.

        Returns
        -------
        Any
            The element as a Python scalar.

        Raises
        ------
        IndexError
            If the index is out of range.
        """
        n = self.numel()
        i = operator.index(index)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(f"flat index {index} out of range for {n} elements")
        return self.data.item(i)

    def flat(self) -> Iterator[Any]:
        """
        Iterate over the elements forward in row-major order.

        Yields
        ------
        Any
            Each element as a Python scalar.
        """
        for i in range(self.numel()):
            yield self.data.item(i)

    def __iter__(self) -> Iterator[Any]:
        """
        Iterate over the first axis.

        Yields Python scalars for a 1-D tensor and sub-tensors otherwise.
        """
        if not self.shape:
            raise TypeError("iteration over a 0-d tensor")
        return (self[i] for i in range(self.shape[0]))
