"""
Uniform random tensor generator.

`tensor_random` samples every element independently and uniformly from the
interval described by its ``bounds`` argument:

- a Python `range`   -> integers drawn from the range's elements
                        (default element type int64);
- a ``(low, high)``  -> the half-open interval ``[low, high)``; integers when
                        both bounds are integral (default int64), floats
                        otherwise (default float64).

The sampling itself is delegated to a `numpy.random.Generator`: the one passed
in, or the shared generator from `keytensor.infrastructure._random`.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Callable, Optional

import numpy as np

from .....domain._errors import DomainError
from .....domain.dtype._dtype import DType
from ...._random import get_generator

logger = logging.getLogger(__name__)

INT64 = DType("int64")
FLOAT64 = DType("float64")

Sampler = Callable[[np.random.Generator, tuple], np.ndarray]


def _is_integral(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _sampler_for(bounds: Any) -> tuple[DType, Sampler, tuple[Any, Any]]:
    """
    Resolve ``bounds`` into a default element type, a sampling function and
    the smallest and largest value a sample can take.

    Raises
    ------
    DomainError
        If the interval is empty or a float bound is not finite.
    TypeError
        If ``bounds`` is neither a range nor a ``(low, high)`` pair.
    """
    if isinstance(bounds, range):
        if len(bounds) == 0:
            raise DomainError(f"Cannot sample from empty {bounds!r}")
        count = len(bounds)

        def sample_range(rng: np.random.Generator, size: tuple) -> np.ndarray:
            return bounds.start + bounds.step * rng.integers(0, count, size=size)

        return INT64, sample_range, (min(bounds), max(bounds))

    if isinstance(bounds, tuple) and len(bounds) == 2:
        low, high = bounds
        if not low < high:
            raise DomainError(
                f"Random interval must satisfy low < high, got [{low!r}, {high!r})"
            )
        if not (math.isfinite(low) and math.isfinite(high)):
            raise DomainError(
                f"Random interval bounds must be finite, got [{low!r}, {high!r})"
            )
        if _is_integral(low) and _is_integral(high):

            def sample_integers(rng: np.random.Generator, size: tuple) -> np.ndarray:
                return rng.integers(low, high, size=size)

            return INT64, sample_integers, (low, high - 1)

        def sample_uniform(rng: np.random.Generator, size: tuple) -> np.ndarray:
            return rng.uniform(float(low), float(high), size=size)

        return FLOAT64, sample_uniform, (low, high)

    raise TypeError(
        f"random bounds must be a range or a (low, high) tuple, got {bounds!r}"
    )


def _check_support_fits(dt: DType, lowest: Any, highest: Any) -> None:
    """
    Raise `DomainError` if samples in ``[lowest, highest]`` cannot be stored
    in `dt` without wrapping around.

    Float samples stored in an integer type are truncated toward zero, so the
    truncated bounds are checked. Boolean targets accept any sample.
    """
    if dt.is_bool():
        return
    if dt.is_integer():
        info = np.iinfo(dt.name)
        lo, hi = math.trunc(lowest), math.trunc(highest)
    else:
        info = np.finfo(dt.name)
        lo, hi = lowest, highest
    if lo < info.min or hi > info.max:
        raise DomainError(
            f"Random samples in [{lowest!r}, {highest!r}] do not fit dtype '{dt}' "
            f"(range [{info.min}, {info.max}])"
        )


def tensor_random(
    cls,
    bounds: Any,
    shape: Any,
    *,
    dtype: Any = None,
    generator: Optional[np.random.Generator] = None,
):
    """
    Build a tensor of the given shape filled with uniform samples.

    See `TensorMixinCreation.random` for the full contract.
    """
    default_dtype, sampler, support = _sampler_for(bounds)
    dt = default_dtype if dtype is None else DType.coerce(dtype)
    _check_support_fits(dt, *support)

    out = cls(shape, dtype=dt)
    if out.numel() == 0:
        logger.debug("random: shape %s has no elements, skipping sampling", out.shape)
        return out

    rng = generator if generator is not None else get_generator()
    out.copy_from_numpy(sampler(rng, out.shape))
    return out
