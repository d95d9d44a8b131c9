"""
keytensor: NumPy-backed tensors and tensor generators.

The package exposes the concrete `Tensor` class together with functional
aliases of its generator classmethods:

    import keytensor as kt

    kt.arange(2, 10, 2)             # [2, 4, 6, 8]
    kt.linspace(0.0, 1.0, num=5)    # [0.0, 0.25, 0.5, 0.75, 1.0]
    kt.eye(3, 4, k=1, dtype="int32")
    kt.random((0.0, 1.0), (2, 3))

Element types are described by `DType`; the default used when ``dtype`` is
omitted can be changed with `set_default_dtype` or the `default_dtype`
context manager, and the shared random generator is reseeded with
`manual_seed`.
"""

from .domain._errors import DomainError, DTypeNotSupportedError, ShapeError
from .domain.dtype import DType, DTypeKind
from .infrastructure._config import default_dtype, get_default_dtype, set_default_dtype
from .infrastructure._random import get_generator, manual_seed
from .infrastructure.tensor import Tensor

arange = Tensor.range
from_range = Tensor.from_range
linspace = Tensor.linear_space
logspace = Tensor.logarithmic_space
geomspace = Tensor.geometric_space

eye = Tensor.eye
identity = Tensor.identity
diag = Tensor.diag
vander = Tensor.vander
tri = Tensor.tri

zeros = Tensor.zeros
ones = Tensor.ones
full = Tensor.full
zeros_like = Tensor.zeros_like
ones_like = Tensor.ones_like
full_like = Tensor.full_like

random = Tensor.random

__all__ = [
    "Tensor",
    "DType",
    "DTypeKind",
    "DomainError",
    "ShapeError",
    "DTypeNotSupportedError",
    "get_default_dtype",
    "set_default_dtype",
    "default_dtype",
    "manual_seed",
    "get_generator",
    "arange",
    "from_range",
    "linspace",
    "logspace",
    "geomspace",
    "eye",
    "identity",
    "diag",
    "vander",
    "tri",
    "zeros",
    "ones",
    "full",
    "zeros_like",
    "ones_like",
    "full_like",
    "random",
]
