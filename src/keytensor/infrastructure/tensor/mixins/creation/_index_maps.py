"""
Index-to-value mapping functions used by the tensor generators.

Each helper returns a value callback suitable for the indexed-construction
primitives (`Tensor.from_flat_function` / `Tensor.from_function`):

- `range_term`    : linear index ``i`` -> ``start + i * step``
- `eye_term`      : ``(i, j)`` -> one on the ``k``-shifted diagonal
- `tri_term`      : ``(i, j)`` -> one on and below the ``k``-shifted diagonal
- `vander_term`   : ``(i, j)`` -> ``values[i] ** offset``
- `diagonal_term` : ``(i, j)`` -> next source element on the diagonal

`DiagonalCursor` is the explicit forward-only cursor `diagonal_term` draws
from. It makes the consumption order of the source tensor observable and
testable on its own.

None of these helpers allocate tensors or depend on NumPy.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence


def range_term(start: Any, step: Any) -> Callable[[int], Any]:
    """
    Return ``i -> start + i * step``.

    The arithmetic happens on the Python values (arbitrary precision ints or
    doubles); the caller casts the result to the element type.
    """

    def term(i: int) -> Any:
        return start + i * step

    return term


def eye_term(k: int, one: Any, zero: Any) -> Callable[[int, int], Any]:
    """
    Return the predicate map of a ``k``-shifted identity: ``one`` where
    ``i == j - k`` and ``zero`` elsewhere.

    Positive `k` shifts the diagonal right, negative `k` shifts it left.
    """

    def term(i: int, j: int) -> Any:
        return one if i == j - k else zero

    return term


def tri_term(k: int, one: Any, zero: Any) -> Callable[[int, int], Any]:
    """
    Return the lower-triangular mask map: ``one`` where ``i >= j - k``.
    """

    def term(i: int, j: int) -> Any:
        return one if i >= j - k else zero

    return term


def vander_term(
    values: Sequence[Any], n: int, increasing: bool
) -> Callable[[int, int], Any]:
    """
    Return the Vandermonde map ``(i, j) -> values[i] ** offset``.

    Parameters
    ----------
    values : Sequence[Any]
        The base vector as Python scalars.
    n : int
        Number of columns.
    increasing : bool
        If True, ``offset = j``; otherwise ``offset = n - j - 1`` (the
        classic decreasing-power layout).
    """

    def term(i: int, j: int) -> Any:
        offset = j if increasing else n - j - 1
        return values[i] ** offset

    return term


class DiagonalCursor:
    """
    Forward-only integer cursor over the flat element sequence of a tensor.

    Parameters
    ----------
    source : ITensor
        Tensor to read from. Only `numel()` and `flat_at(i)` are used.

    Notes
    -----
    Each call to `next()` returns the element at the current position and
    advances by exactly one. The cursor never rewinds.
    """

    __slots__ = ("_source", "_length", "_position")

    def __init__(self, source: Any) -> None:
        self._source = source
        self._length = source.numel()
        self._position = 0

    @property
    def position(self) -> int:
        """
        Number of elements consumed so far.
        """
        return self._position

    @property
    def remaining(self) -> int:
        """
        Number of elements not yet consumed.
        """
        return self._length - self._position

    def next(self) -> Any:
        """
        Return the next element and advance the cursor.

        Raises
        ------
        IndexError
            If every element has already been consumed.
        """
        if self._position >= self._length:
            raise IndexError(
                f"diagonal source exhausted after {self._length} elements"
            )
        value = self._source.flat_at(self._position)
        self._position += 1
        return value


def diagonal_term(
    cursor: DiagonalCursor, k: int, zero: Any
) -> Callable[[int, int], Any]:
    """
    Return the diagonal embedding map: on the ``k``-shifted diagonal
    (``i == j - k``) the next element from `cursor`, elsewhere ``zero``.

    Notes
    -----
    Correct consumption order relies on the caller visiting ``(i, j)`` in
    row-major order, which the indexed-construction primitive guarantees.
    """

    def term(i: int, j: int) -> Any:
        return cursor.next() if i == j - k else zero

    return term
