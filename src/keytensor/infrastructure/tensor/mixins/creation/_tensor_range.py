"""
Range generators: arithmetic progressions as 1-D tensors.

- `tensor_range`      : ``range(stop)``, ``range(start, stop)``,
                        ``range(start, stop, step)``
- `tensor_from_range` : conversion of a Python `range` object
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Optional

from .....domain._errors import DomainError
from ._index_maps import range_term

logger = logging.getLogger(__name__)


def _range_length(start: Any, stop: Any, step: Any) -> int:
    """
    Return ``ceil(|(stop - start) / step|)`` as an index count.

    The quotient is computed exactly with integer ceiling division when all
    three parameters are integral, and in double precision otherwise.
    """
    if all(isinstance(v, numbers.Integral) for v in (start, stop, step)):
        span = abs(int(stop) - int(start))
        stride = abs(int(step))
        return -(-span // stride)

    count = abs((stop - start) / step)
    if not math.isfinite(count):
        raise DomainError(
            f"Range({start!r}, {stop!r}, {step!r}) does not have a finite length"
        )
    return max(int(math.ceil(count)), 0)


def tensor_range(
    cls,
    start: Any,
    stop: Optional[Any] = None,
    step: Optional[Any] = None,
    *,
    dtype: Any = None,
):
    """
    Build the 1-D tensor ``[start, start + step, ...]`` stopping before `stop`.

    See `TensorMixinCreation.range` for the full contract.
    """
    if stop is None:
        start, stop = 0, start
    if step is None:
        step = 1

    if step == 0:
        raise DomainError("Range step must be nonzero")
    if start > stop and step > 0:
        raise DomainError("Range must return at least one value")

    num = _range_length(start, stop, step)
    if num == 0:
        logger.debug("range(%r, %r, %r) is empty", start, stop, step)

    return cls.from_flat_function((num,), range_term(start, step), dtype=dtype)


def tensor_from_range(cls, r: range, *, dtype: Any = None):
    """
    Build a 1-D tensor holding the elements of a Python `range`.

    An empty Python range yields an empty tensor.
    """
    if not isinstance(r, range):
        raise TypeError(f"from_range expects a range object, got {type(r)!r}")
    if len(r) == 0:
        return cls((0,), dtype=dtype)
    return tensor_range(cls, r.start, r.stop, r.step, dtype=dtype)
