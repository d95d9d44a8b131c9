from ._dtype import DType, DTypeKind
from ._dtype_protocol import DTypeLike

__all__ = [
    DType.__name__,
    DTypeKind.__name__,
    DTypeLike.__name__,
]
