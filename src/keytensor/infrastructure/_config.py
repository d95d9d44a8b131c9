"""
Process-wide configuration for keytensor.

Currently the only setting is the default element type used by tensor
constructors and factories when no explicit ``dtype`` is supplied.

The setting can be changed permanently with `set_default_dtype` or for the
duration of a ``with`` block with the `default_dtype` context manager:

    with default_dtype("float32"):
        t = Tensor.zeros((2, 2))   # float32
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from threading import RLock
from typing import Any, Iterator

from ..domain.dtype._dtype import DType

logger = logging.getLogger(__name__)

_DEFAULT_DTYPE_LOCK = RLock()
_default_dtype: DType = DType("float64")


def get_default_dtype() -> DType:
    """
    Return the element type used when a factory is called without ``dtype``.

    Returns
    -------
    DType
        The current default element type (initially ``float64``).
    """
    with _DEFAULT_DTYPE_LOCK:
        return _default_dtype


def set_default_dtype(dtype: Any) -> None:
    """
    Set the element type used when a factory is called without ``dtype``.

    Parameters
    ----------
    dtype : Any
        Anything accepted by `DType.coerce` (e.g. ``"float32"``).

    Raises
    ------
    ValueError
        If `dtype` does not name a supported element type.
    """
    global _default_dtype

    new_dtype = DType.coerce(dtype)
    with _DEFAULT_DTYPE_LOCK:
        logger.debug("default dtype changed: %s -> %s", _default_dtype, new_dtype)
        _default_dtype = new_dtype


@contextmanager
def default_dtype(dtype: Any) -> Iterator[DType]:
    """
    Temporarily override the default element type.

    The previous default is restored on exit, including when the block raises.
    An invalid `dtype` raises `ValueError` before the block runs and leaves the
    default untouched.

    Parameters
    ----------
    dtype : Any
        Anything accepted by `DType.coerce`.

    Yields
    ------
    DType
        The element type active inside the block.
    """
    new_dtype = DType.coerce(dtype)
    with _DEFAULT_DTYPE_LOCK:
        previous = get_default_dtype()
        set_default_dtype(new_dtype)
    try:
        yield new_dtype
    finally:
        set_default_dtype(previous)


def resolve_dtype(dtype: Any) -> DType:
    """
    Normalize an optional ``dtype`` argument, falling back to the default.
    """
    if dtype is None:
        return get_default_dtype()
    return DType.coerce(dtype)
