"""
Structural matrix generators: eye, identity, diag, vander and tri.

Every generator here produces a 2-D tensor through `Tensor.from_function`,
which invokes the per-index map from `_index_maps` once per ``(i, j)`` pair in
row-major order.
"""

from __future__ import annotations

import operator
from typing import Any, Optional

from .....domain._errors import ShapeError
from ...._config import resolve_dtype
from ._index_maps import (
    DiagonalCursor,
    diagonal_term,
    eye_term,
    tri_term,
    vander_term,
)


def _dimension(name: str, value: Any) -> int:
    """
    Validate a matrix dimension argument.
    """
    try:
        size = operator.index(value)
    except TypeError:
        raise ShapeError(f"{name} must be an integer, got {value!r}")
    if size < 0:
        raise ShapeError(f"{name} must be non-negative, got {size}")
    return size


def _as_vector(cls, x: Any, op: str):
    """
    Coerce `x` to a tensor and require it to be one-dimensional.
    """
    if not isinstance(x, cls):
        x = cls.from_numpy(x)
    if x.ndim != 1:
        raise ShapeError(
            f"{op} requires a one-dimensional tensor, got shape {x.shape}"
        )
    return x


def eye(cls, m: int, n: Optional[int] = None, k: int = 0, *, dtype: Any = None):
    """
    Return an ``m x n`` matrix with ones on the ``k``-shifted diagonal.
    """
    rows = _dimension("m", m)
    cols = rows if n is None else _dimension("n", n)
    k = operator.index(k)
    dt = resolve_dtype(dtype)
    return cls.from_function((rows, cols), eye_term(k, dt.one(), dt.zero()), dtype=dt)


def identity(cls, n: int, *, dtype: Any = None):
    """
    Return the ``n x n`` identity matrix.
    """
    return eye(cls, n, n, 0, dtype=dtype)


def diag(cls, vector: Any, k: int = 0):
    """
    Embed a 1-D tensor along the ``k``-shifted diagonal of an ``n x n``
    matrix of the same element type.
    """
    vector = _as_vector(cls, vector, "diag")
    k = operator.index(k)
    n = vector.shape[0]
    cursor = DiagonalCursor(vector)
    return cls.from_function(
        (n, n),
        diagonal_term(cursor, k, vector.dtype.zero()),
        dtype=vector.dtype,
    )


def vander(cls, x: Any, n: Optional[int] = None, increasing: bool = False):
    """
    Return the Vandermonde matrix of a 1-D tensor.
    """
    x = _as_vector(cls, x, "vander")
    rows = x.shape[0]
    cols = rows if n is None else _dimension("n", n)
    values = list(x.flat())
    return cls.from_function(
        (rows, cols),
        vander_term(values, cols, bool(increasing)),
        dtype=x.dtype,
    )


def tri(cls, n: int, m: Optional[int] = None, k: int = 0, *, dtype: Any = None):
    """
    Return an ``n x m`` lower-triangular mask of ones shifted by ``k``.
    """
    rows = _dimension("n", n)
    cols = rows if m is None else _dimension("m", m)
    k = operator.index(k)
    dt = resolve_dtype(dtype)
    return cls.from_function((rows, cols), tri_term(k, dt.one(), dt.zero()), dtype=dt)
