"""
Shape-, index-, and axis-related exceptions for ntensor.

This module defines the custom errors raised by tensor construction,
indexing, elementwise operators, and contraction. Every error is raised
before any output is allocated or any buffer is mutated, so a failed call
never leaves a partially written result behind.

Each error subclasses the closest builtin exception (``ValueError`` or
``IndexError``) so callers may catch either the specific type or the
builtin family.
"""

from __future__ import annotations

from typing import Optional, Sequence


class ShapeMismatchError(ValueError):
    """
    Raised when a shape disagrees with a buffer or with another operand.

    This covers three situations:

    - the product of a shape does not equal the flat buffer length
      (construction or shape replacement),
    - a shape contains a negative entry or a host array is ragged,
    - two operands of an elementwise operator or equality comparison do
      not have exactly the same shape.

    Attributes
    ----------
    expected : Optional[tuple[int, ...]]
        The shape (or ``(length,)`` for buffer checks) that was required.
    actual : Optional[tuple[int, ...]]
        The shape that was supplied.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: Optional[Sequence[int]] = None,
        actual: Optional[Sequence[int]] = None,
    ) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        message : str
            Human-readable description of the mismatch.
        expected : Optional[Sequence[int]], optional
            The required shape, if one applies.
        actual : Optional[Sequence[int]], optional
            The offending shape, if one applies.
        """
        super().__init__(message)
        self.expected = tuple(expected) if expected is not None else None
        self.actual = tuple(actual) if actual is not None else None


class RankMismatchError(IndexError):
    """
    Raised when an index sequence does not have exactly ``rank`` entries.

    Attributes
    ----------
    rank : int
        Rank of the tensor being indexed.
    received : int
        Number of index components supplied.
    """

    def __init__(self, rank: int, received: int) -> None:
        """
        Initialize the RankMismatchError.

        Parameters
        ----------
        rank : int
            Rank of the indexed tensor.
        received : int
            Length of the index sequence that was passed.
        """
        super().__init__(
            f"Expected {rank} index component(s) for a rank-{rank} tensor, got {received}."
        )
        self.rank = rank
        self.received = received


class IndexOutOfBoundsError(IndexError):
    """
    Raised when an index component falls outside ``[0, shape[axis])``.

    Attributes
    ----------
    axis : int
        Axis whose component is out of range.
    index : int
        The offending index component.
    size : int
        Extent of the tensor along ``axis``.
    """

    def __init__(self, axis: int, index: int, size: int) -> None:
        super().__init__(
            f"Index {index} is out of bounds for axis {axis} with size {size}."
        )
        self.axis = axis
        self.index = index
        self.size = size


class IncompatibleAxesError(ValueError):
    """
    Raised when two tensors cannot be contracted over the selected axes.

    Either the operands' extents along the selected axes differ, or a
    selector is still outside ``[0, rank)`` after negative-axis resolution.

    Attributes
    ----------
    axis_a, axis_b : int
        Selected axes (after resolution) of the left and right operands.
    shape_a, shape_b : tuple[int, ...]
        Shapes of the left and right operands.
    """

    def __init__(
        self,
        message: str,
        *,
        axis_a: int,
        axis_b: int,
        shape_a: Sequence[int],
        shape_b: Sequence[int],
    ) -> None:
        super().__init__(message)
        self.axis_a = axis_a
        self.axis_b = axis_b
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)
