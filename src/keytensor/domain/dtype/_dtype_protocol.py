"""
Element-type contracts for keytensor.

This module defines a duck-typed `DTypeLike` protocol describing the
capability an element type must offer to the construction layer: a name,
a kind, the additive and multiplicative identities, and an element
constructor (`cast`) that converts an arbitrary Python number into a value
of the element type.

Generators are parameterized over this capability instead of inspecting the
runtime type of their numeric arguments.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DTypeLike(Protocol):
    """
    Duck-typed element-type contract.

    Any object that provides these members can describe the element type of a
    tensor, regardless of its concrete class identity.
    """

    name: str
    kind: object

    def zero(self) -> Any: ...
    def one(self) -> Any: ...
    def cast(self, value: Any) -> Any: ...
    def is_floating(self) -> bool: ...
    def is_integer(self) -> bool: ...
    def __str__(self) -> str: ...
