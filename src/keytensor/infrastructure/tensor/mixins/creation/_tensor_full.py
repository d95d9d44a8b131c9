"""
Constant fill generators: zeros, ones, full and their ``*_like`` variants.

The ``*_like`` variants read only the ``shape`` of their argument; the element
type comes from the explicit ``dtype`` argument or the configured default.
"""

from __future__ import annotations

from typing import Any


def _shape_of(other: Any, op: str) -> tuple[int, ...]:
    shape = getattr(other, "shape", None)
    if shape is None:
        raise TypeError(f"{op} expects an object with a shape, got {type(other)!r}")
    return tuple(shape)


def zeros(cls, shape: Any, *, dtype: Any = None):
    # Storage is zero-initialized on allocation.
    return cls(shape, dtype=dtype)


def ones(cls, shape: Any, *, dtype: Any = None):
    out = cls(shape, dtype=dtype)
    out.fill(out.dtype.one())
    return out


def full(cls, shape: Any, value: Any, *, dtype: Any = None):
    out = cls(shape, dtype=dtype)
    out.fill(value)
    return out


def zeros_like(cls, other: Any, *, dtype: Any = None):
    return zeros(cls, _shape_of(other, "zeros_like"), dtype=dtype)


def ones_like(cls, other: Any, *, dtype: Any = None):
    return ones(cls, _shape_of(other, "ones_like"), dtype=dtype)


def full_like(cls, other: Any, value: Any, *, dtype: Any = None):
    return full(cls, _shape_of(other, "full_like"), value, dtype=dtype)
