"""
Spacing generators: linear, logarithmic and geometric sample sequences.

All three return float64 tensors and are composed from `tensor_range` and
whole-tensor arithmetic:

- `linear_space`      : ``range(num) * step + start``
- `logarithmic_space` : ``base ** linear_space(...)``
- `geometric_space`   : ``logarithmic_space(log10(start), log10(stop)) * sign``
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Any

from .....domain._errors import DomainError
from .....domain.dtype._dtype import DType
from ._tensor_range import tensor_range

logger = logging.getLogger(__name__)

FLOAT64 = DType("float64")


def linear_space(cls, start: Any, stop: Any, num: int = 50, endpoint: bool = True):
    """
    Return `num` evenly spaced float64 samples from `start` towards `stop`.

    See `TensorMixinCreation.linear_space` for the full contract.
    """
    num = operator.index(num)
    if num <= 0:
        raise DomainError("Number of samples must be positive")

    div = num - 1 if endpoint else num
    start = float(start)
    stop = float(stop)
    delta = stop - start

    if num > 1:
        step = delta / div
        if step == 0:
            raise DomainError("Cannot have a step of 0")
        y = tensor_range(cls, 0.0, float(num), 1.0, dtype=FLOAT64) * step
    else:
        # Single sample: start + (stop - start).
        y = cls.full((1,), delta, dtype=FLOAT64)

    y = y + start

    if endpoint and num > 1:
        y[num - 1] = stop
    return y


def logarithmic_space(
    cls,
    start: Any,
    stop: Any,
    num: int = 50,
    endpoint: bool = True,
    base: float = 10.0,
):
    """
    Return ``base ** linear_space(start, stop, num, endpoint)``.
    """
    y = linear_space(cls, start, stop, num=num, endpoint=endpoint)
    return base ** y


def geometric_space(
    cls, start: Any, stop: Any, num: int = 50, endpoint: bool = True
):
    """
    Return `num` float64 samples forming a geometric progression.

    See `TensorMixinCreation.geometric_space` for the full contract.
    """
    if not (math.isfinite(start) and math.isfinite(stop)):
        raise DomainError(
            f"Geometric sequence bounds must be finite, got {start!r} and {stop!r}"
        )
    if start == 0 or stop == 0:
        raise DomainError("Geometric sequence cannot include zero")

    out_sign = 1.0
    if start < 0 and stop < 0:
        start, stop = -start, -stop
        out_sign = -out_sign
        logger.debug("geometric_space: negative bounds, sampling |start|..|stop|")
    elif start < 0 or stop < 0:
        raise DomainError(
            f"Geometric sequence bounds must have the same sign, got {start!r} and {stop!r}"
        )

    log_start = math.log10(start)
    log_stop = math.log10(stop)

    samples = logarithmic_space(
        cls, log_start, log_stop, num=num, endpoint=endpoint, base=10.0
    )
    return samples * out_sign
