"""
Process-wide random source for keytensor.

`Tensor.random` samples from a `numpy.random.Generator`. Unless a generator is
passed explicitly, the shared generator held here is used; `manual_seed`
replaces it with a freshly seeded one so that subsequent draws are
reproducible.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

_GENERATOR_LOCK = RLock()
_generator: np.random.Generator = np.random.default_rng()


def manual_seed(seed: Optional[int]) -> np.random.Generator:
    """
    Reseed the shared random generator.

    Parameters
    ----------
    seed : Optional[int]
        Seed forwarded to `numpy.random.default_rng`. ``None`` draws fresh
        entropy from the operating system.

    Returns
    -------
    numpy.random.Generator
        The new shared generator.
    """
    global _generator

    with _GENERATOR_LOCK:
        _generator = np.random.default_rng(seed)
        logger.debug("shared random generator reseeded (seed=%r)", seed)
        return _generator


def get_generator() -> np.random.Generator:
    """
    Return the shared random generator.
    """
    with _GENERATOR_LOCK:
        return _generator
