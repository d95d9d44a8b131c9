"""
Element-type abstraction utilities.

This module defines lightweight abstractions for describing the element type
of a tensor in a backend-agnostic way. It provides:

- `DTypeKind`: an enumeration of element-type categories
- `DType`: a concrete element-type descriptor that validates and normalizes
  user-facing names such as "float64" or "int32"

`DType` is the numeric capability the construction layer is generic over: it
supplies the zero and one elements and the element constructor (`cast`) used
to turn the result of a value computation into a stored element.

The design intentionally avoids backend-specific dependencies (NumPy is not
imported here) and is suitable for use across domain and infrastructure
layers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class DTypeKind(Enum):
    """
    Enumeration of element-type categories.

    The kind is what the tensor control-path dispatcher keys on, so that one
    implementation can serve every width of a category (e.g. int8..int64).

    Attributes
    ----------
    FLOAT : DTypeKind
        IEEE floating point types.
    INT : DTypeKind
        Signed integer types.
    UINT : DTypeKind
        Unsigned integer types.
    BOOL : DTypeKind
        Boolean type.
    """

    FLOAT = "float"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"


_KINDS = {
    "float16": DTypeKind.FLOAT,
    "float32": DTypeKind.FLOAT,
    "float64": DTypeKind.FLOAT,
    "int8": DTypeKind.INT,
    "int16": DTypeKind.INT,
    "int32": DTypeKind.INT,
    "int64": DTypeKind.INT,
    "uint8": DTypeKind.UINT,
    "uint16": DTypeKind.UINT,
    "uint32": DTypeKind.UINT,
    "uint64": DTypeKind.UINT,
    "bool": DTypeKind.BOOL,
}

# Python builtin scalar types and the element type they stand for.
_BUILTIN_ALIASES = {
    float: "float64",
    int: "int64",
    bool: "bool",
}


class DType:
    """
    Concrete element-type descriptor.

    This class encapsulates a normalized element-type name together with its
    `DTypeKind`, and provides the element constructor used by every tensor
    generator.

    Parameters
    ----------
    name : str
        Element type name. Must be one of ``float16``, ``float32``,
        ``float64``, ``int8``, ``int16``, ``int32``, ``int64``, ``uint8``,
        ``uint16``, ``uint32``, ``uint64`` or ``bool``.

    Raises
    ------
    ValueError
        If the provided name is not a supported element type.

    Notes
    -----
    - `__slots__` is used to prevent dynamic attribute creation.
    - Instances compare equal to each other by name, and also compare equal
      to the plain name string (``DType("float64") == "float64"``).
    """

    __slots__ = ("name", "kind")

    def __init__(self, name: str):
        """
        Initialize a DType instance from an element type name.

        Parameters
        ----------
        name : str
            Element type name (e.g. "float64", "int32").

        Raises
        ------
        ValueError
            If the name is invalid or unsupported.
        """
        kind = _KINDS.get(name)
        if kind is None:
            raise ValueError(
                f"Invalid dtype {name!r}. Expected one of: {', '.join(_KINDS)}"
            )
        self.name = name
        self.kind = kind

    @classmethod
    def coerce(cls, dtype: Any) -> "DType":
        """
        Normalize a user-supplied element type.

        Parameters
        ----------
        dtype : Any
            A `DType`, an element type name, a Python builtin scalar type
            (``float``, ``int``, ``bool``), or any object exposing a
            NumPy-style ``name`` / ``__name__`` (e.g. ``np.dtype("int32")`` or
            ``np.float32``).

        Returns
        -------
        DType
            The normalized element type.

        Raises
        ------
        ValueError
            If `dtype` does not name a supported element type.
        """
        if isinstance(dtype, DType):
            return dtype
        if isinstance(dtype, str):
            return cls(dtype)
        if isinstance(dtype, type) and dtype in _BUILTIN_ALIASES:
            return cls(_BUILTIN_ALIASES[dtype])
        name = getattr(dtype, "name", None)
        if not isinstance(name, str):
            name = getattr(dtype, "__name__", None)
        if not isinstance(name, str):
            raise ValueError(f"Cannot interpret {dtype!r} as a dtype")
        return cls(name)

    def __str__(self) -> str:
        """
        Return the canonical element type name.
        """
        return self.name

    def __repr__(self) -> str:
        return f"DType('{self.name}')"

    def __eq__(self, other: object) -> bool:
        """
        Compare with another DType or with an element type name.

        Parameters
        ----------
        other : object
            Object to compare against.

        Returns
        -------
        bool
            True if both describe the same element type.
        """
        if isinstance(other, DType):
            return self.name == other.name
        if isinstance(other, str):
            return self.name == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)

    def is_floating(self) -> bool:
        """
        Check whether this is a floating point element type.
        """
        return self.kind is DTypeKind.FLOAT

    def is_integer(self) -> bool:
        """
        Check whether this is a (signed or unsigned) integer element type.
        """
        return self.kind in (DTypeKind.INT, DTypeKind.UINT)

    def is_bool(self) -> bool:
        return self.kind is DTypeKind.BOOL

    def cast(self, value: Any) -> Any:
        """
        Element constructor: convert a Python number into this element type.

        Parameters
        ----------
        value : Any
            Result of a value computation (Python or NumPy scalar).

        Returns
        -------
        float | int | bool
            ``float(value)`` for floating types, ``int(value)`` (truncating
            toward zero) for integer types, ``bool(value)`` for ``bool``.

        Notes
        -----
        Range checks for narrow widths (e.g. storing 300 into ``int8``) are
        left to the storage backend, which raises on overflow.
        """
        if self.kind is DTypeKind.FLOAT:
            return float(value)
        if self.kind is DTypeKind.BOOL:
            return bool(value)
        return int(value)

    def zero(self) -> Any:
        """
        Return the additive identity of this element type.
        """
        return self.cast(0)

    def one(self) -> Any:
        """
        Return the multiplicative identity of this element type.
        """
        return self.cast(1)
