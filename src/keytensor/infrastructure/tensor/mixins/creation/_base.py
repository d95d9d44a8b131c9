"""
Tensor creation mixin.

This module defines `TensorMixinCreation`, the mixin that exposes every tensor
generator of keytensor as a classmethod of the concrete `Tensor`:

- Sequences: `range`, `from_range`, `linear_space`, `logarithmic_space`,
  `geometric_space`
- Structural matrices: `eye`, `identity`, `diag`, `vander`, `tri`
- Constant fills: `zeros`, `ones`, `full`, `zeros_like`, `ones_like`,
  `full_like`
- Random sampling: `random`

Notes
-----
- The generators are implemented as plain functions taking the tensor class
  as their first argument (see the sibling `_tensor_*.py` modules); the
  classmethods here are thin delegations so that subclasses of `Tensor`
  produce instances of themselves.
- Every generator validates its arguments before allocating, so a failing
  call never leaves a partially initialized tensor behind.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Optional

import numpy as np

from . import _tensor_full, _tensor_random, _tensor_range, _tensor_spacing
from . import _tensor_structural


class TensorMixinCreation(ABC):
    """
    Mixin that provides the tensor generator classmethods.

    This mixin is intended to be inherited by a concrete `Tensor` class that
    implements the indexed-construction primitives (`from_function`,
    `from_flat_function`), whole-tensor arithmetic, `fill` and
    `copy_from_numpy`.
    """

    # ----------------------------
    # Sequences
    # ----------------------------
    @classmethod
    def range(
        cls,
        start: Any,
        stop: Optional[Any] = None,
        step: Optional[Any] = None,
        *,
        dtype: Any = None,
    ):
        """
        Create a 1-D tensor holding an arithmetic progression.

        Element ``i`` is ``start + i * step`` for ``i`` below
        ``ceil(|(stop - start) / step|)``. Called with a single argument,
        that argument is `stop` and `start` is 0; `step` defaults to 1.

        Parameters
        ----------
        start : Any
            First value (or `stop` when it is the only argument).
        stop : Any, optional
            Bound that, together with `start` and `step`, fixes the element
            count. The progression stops before `stop` whenever `step` points
            towards it.
        step : Any, optional
            Difference between consecutive elements. Defaults to 1.
        dtype : Any, optional
            Element type of the result. Defaults to the configured default
            dtype.

        Returns
        -------
        Tensor
            1-D tensor with ``ceil(|(stop - start) / step|)`` elements.

        Raises
        ------
        DomainError
            If `step` is zero, or if ``start > stop`` while ``step > 0``.

        Notes
        -----
        The element count is computed with exact integer ceiling division when
        all three parameters are integers, and in double precision otherwise.
        A negative `step` with ``start < stop`` is accepted and walks away
        from `stop`: ``range(0, 5, -1)`` is ``[0, -1, -2, -3, -4]``.
        """
        return _tensor_range.tensor_range(cls, start, stop, step, dtype=dtype)

    @classmethod
    def from_range(cls, r: range, *, dtype: Any = None):
        """
        Create a 1-D tensor holding the elements of a Python `range`.

        Parameters
        ----------
        r : range
            Source range. An empty range yields an empty tensor.
        dtype : Any, optional
            Element type of the result. Defaults to the configured default
            dtype.

        Raises
        ------
        TypeError
            If `r` is not a `range`.
        """
        return _tensor_range.tensor_from_range(cls, r, dtype=dtype)

    @classmethod
    def linear_space(
        cls, start: Any, stop: Any, num: int = 50, endpoint: bool = True
    ):
        """
        Create `num` evenly spaced float64 samples over ``[start, stop]``.

        Parameters
        ----------
        start : Any
            First sample.
        stop : Any
            End of the interval. Included as the exact last sample when
            `endpoint` is True.
        num : int, optional
            Number of samples. Defaults to 50.
        endpoint : bool, optional
            Whether `stop` is the last sample. When False the interval is
            divided into `num` steps and `stop` is excluded.

        Returns
        -------
        Tensor
            1-D float64 tensor of length `num`.

        Raises
        ------
        DomainError
            If ``num <= 0``, or if the resulting step is zero.
        TypeError
            If `num` is not an integer.

        Notes
        -----
        A single sample (``num == 1``) is ``start + (stop - start)``.
        """
        return _tensor_spacing.linear_space(
            cls, start, stop, num=num, endpoint=endpoint
        )

    @classmethod
    def logarithmic_space(
        cls,
        start: Any,
        stop: Any,
        num: int = 50,
        endpoint: bool = True,
        base: float = 10.0,
    ):
        """
        Create ``base ** linear_space(start, stop, num, endpoint)``.

        Parameters
        ----------
        start, stop : Any
            Exponents of the first and last samples.
        num : int, optional
            Number of samples. Defaults to 50.
        endpoint : bool, optional
            Whether ``base ** stop`` is the last sample.
        base : float, optional
            Base of the power. Defaults to 10.0.

        Returns
        -------
        Tensor
            1-D float64 tensor of length `num`.
        """
        return _tensor_spacing.logarithmic_space(
            cls, start, stop, num=num, endpoint=endpoint, base=base
        )

    @classmethod
    def geometric_space(
        cls, start: Any, stop: Any, num: int = 50, endpoint: bool = True
    ):
        """
        Create `num` float64 samples forming a geometric progression from
        `start` to `stop`.

        Parameters
        ----------
        start, stop : Any
            Nonzero bounds of the progression, both of the same sign.
        num : int, optional
            Number of samples. Defaults to 50.
        endpoint : bool, optional
            Whether `stop` is the last sample.

        Returns
        -------
        Tensor
            1-D float64 tensor of length `num`. Negative bounds produce a
            negated progression of their magnitudes.

        Raises
        ------
        DomainError
            If either bound is zero, NaN or infinite, or the bounds have
            different signs.
        """
        return _tensor_spacing.geometric_space(
            cls, start, stop, num=num, endpoint=endpoint
        )

    # ----------------------------
    # Structural matrices
    # ----------------------------
    @classmethod
    def eye(cls, m: int, n: Optional[int] = None, k: int = 0, *, dtype: Any = None):
        """
        Create an ``m x n`` matrix with ones on the ``k``-th diagonal.

        Parameters
        ----------
        m : int
            Number of rows.
        n : int, optional
            Number of columns. Defaults to `m`.
        k : int, optional
            Diagonal offset; positive values select an upper diagonal.
        dtype : Any, optional
            Element type. Defaults to the configured default dtype.

        Raises
        ------
        ShapeError
            If a dimension is negative or not an integer.
        """
        return _tensor_structural.eye(cls, m, n, k, dtype=dtype)

    @classmethod
    def identity(cls, n: int, *, dtype: Any = None):
        """
        Create the ``n x n`` identity matrix.
        """
        return _tensor_structural.identity(cls, n, dtype=dtype)

    @classmethod
    def diag(cls, vector: Any, k: int = 0):
        """
        Create a square matrix with `vector` along its ``k``-th diagonal.

        Parameters
        ----------
        vector : Tensor | array-like
            One-dimensional source of length ``n``. Array-likes are copied
            into a tensor first.
        k : int, optional
            Diagonal offset.

        Returns
        -------
        Tensor
            ``n x n`` matrix of the vector's element type. Diagonal cells take
            the vector's elements in order; all other cells are zero.

        Raises
        ------
        ShapeError
            If `vector` is not one-dimensional.

        Notes
        -----
        For ``k != 0`` the matrix stays ``n x n`` and only the first
        ``n - |k|`` elements of `vector` are placed.
        """
        return _tensor_structural.diag(cls, vector, k)

    @classmethod
    def vander(cls, x: Any, n: Optional[int] = None, increasing: bool = False):
        """
        Create the Vandermonde matrix of a 1-D tensor.

        Parameters
        ----------
        x : Tensor | array-like
            One-dimensional base vector.
        n : int, optional
            Number of columns. Defaults to ``len(x)``.
        increasing : bool, optional
            If True, column ``j`` holds ``x ** j``; otherwise column ``j``
            holds ``x ** (n - j - 1)``.

        Returns
        -------
        Tensor
            ``len(x) x n`` matrix of the element type of `x`.

        Raises
        ------
        ShapeError
            If `x` is not one-dimensional or `n` is negative.
        OverflowError
            If an integer power does not fit the element type of `x`. The
            error is raised during the fill and no tensor is returned.
        """
        return _tensor_structural.vander(cls, x, n, increasing)

    @classmethod
    def tri(cls, n: int, m: Optional[int] = None, k: int = 0, *, dtype: Any = None):
        """
        Create an ``n x m`` matrix with ones at and below the ``k``-th
        diagonal and zeros elsewhere.
        """
        return _tensor_structural.tri(cls, n, m, k, dtype=dtype)

    # ----------------------------
    # Constant fills
    # ----------------------------
    @classmethod
    def zeros(cls, shape: Any, *, dtype: Any = None):
        """
        Create a tensor filled with zeros.

        Parameters
        ----------
        shape : int | Sequence[int]
            Shape of the output tensor.
        dtype : Any, optional
            Element type. Defaults to the configured default dtype.
        """
        return _tensor_full.zeros(cls, shape, dtype=dtype)

    @classmethod
    def ones(cls, shape: Any, *, dtype: Any = None):
        """
        Create a tensor filled with ones.
        """
        return _tensor_full.ones(cls, shape, dtype=dtype)

    @classmethod
    def full(cls, shape: Any, value: Any, *, dtype: Any = None):
        """
        Create a tensor with every element set to `value`.

        Parameters
        ----------
        shape : int | Sequence[int]
            Shape of the output tensor.
        value : Number
            Fill value, converted with the element type's constructor.
        dtype : Any, optional
            Element type. Defaults to the configured default dtype.
        """
        return _tensor_full.full(cls, shape, value, dtype=dtype)

    @classmethod
    def zeros_like(cls, other: Any, *, dtype: Any = None):
        """
        Create a zero tensor with the shape of `other`.

        Only ``other.shape`` is read; the element type is `dtype` or the
        configured default, never the element type of `other`.
        """
        return _tensor_full.zeros_like(cls, other, dtype=dtype)

    @classmethod
    def ones_like(cls, other: Any, *, dtype: Any = None):
        return _tensor_full.ones_like(cls, other, dtype=dtype)

    @classmethod
    def full_like(cls, other: Any, value: Any, *, dtype: Any = None):
        return _tensor_full.full_like(cls, other, value, dtype=dtype)

    # ----------------------------
    # Random sampling
    # ----------------------------
    @classmethod
    def random(
        cls,
        bounds: Any,
        shape: Any,
        *,
        dtype: Any = None,
        generator: Optional[np.random.Generator] = None,
    ):
        """
        Create a tensor of independent uniform samples.

        Parameters
        ----------
        bounds : range | tuple
            A Python `range` (samples are drawn from its elements) or a
            ``(low, high)`` pair describing the half-open interval
            ``[low, high)``. Integer bounds produce integer samples.
        shape : int | Sequence[int]
            Shape of the output tensor.
        dtype : Any, optional
            Element type. Defaults to int64 for integer bounds and float64
            otherwise.
        generator : numpy.random.Generator, optional
            Source of randomness. Defaults to the process-wide generator
            (see `keytensor.manual_seed`).

        Returns
        -------
        Tensor
            Tensor of the requested shape. A zero-element shape returns an
            empty tensor without advancing the generator.

        Raises
        ------
        DomainError
            If the interval is empty, a float bound is not finite, or
            the values the interval can produce do not fit `dtype` (e.g.
            ``range(250, 260)`` with ``dtype="uint8"``).
        TypeError
            If `bounds` is neither a range nor a ``(low, high)`` pair.
        """
        return _tensor_random.tensor_random(
            cls, bounds, shape, dtype=dtype, generator=generator
        )
