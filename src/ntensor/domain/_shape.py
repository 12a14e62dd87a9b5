"""
Backend-agnostic shape arithmetic.

Pure functions over shapes and index sequences: element counts, row-major
flat offsets, and axis-selector resolution. Nothing here touches element
storage, so both the concrete Tensor and the contraction planner share the
same validation rules and error types.
"""

from __future__ import annotations

import operator
from typing import Iterable, Sequence

from ._errors import (
    IndexOutOfBoundsError,
    RankMismatchError,
    ShapeMismatchError,
)


def numel(shape: Sequence[int]) -> int:
    """
    Return the number of elements described by ``shape``.

    The empty shape describes a scalar and therefore holds one element.
    """
    n = 1
    for d in shape:
        n *= d
    return n


def normalize_shape(shape_like: Iterable[int]) -> tuple[int, ...]:
    """
    Convert any iterable of ints into a validated shape tuple.

    Parameters
    ----------
    shape_like : Iterable[int]
        List, tuple, generator, or other iterable of dimension sizes.

    Returns
    -------
    tuple[int, ...]
        The shape as a tuple of Python ints.

    Raises
    ------
    ShapeMismatchError
        If any dimension is negative.
    TypeError
        If an entry is not an integer (floats and strings are not coerced).
    """
    shape = tuple(operator.index(d) for d in shape_like)
    for axis, d in enumerate(shape):
        if d < 0:
            raise ShapeMismatchError(
                f"Shape {shape} has negative size {d} at axis {axis}.",
                actual=shape,
            )
    return shape


def check_shape_matches_length(shape: Sequence[int], length: int) -> None:
    """
    Ensure that ``shape`` describes exactly ``length`` elements.

    Raises
    ------
    ShapeMismatchError
        If ``numel(shape) != length``.
    """
    n = numel(shape)
    if n != length:
        raise ShapeMismatchError(
            f"Shape {tuple(shape)} describes {n} element(s) but the buffer holds {length}.",
            expected=(length,),
            actual=shape,
        )


def check_same_shape(shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
    """
    Require two shapes to be equal element-for-element.

    Raises
    ------
    ShapeMismatchError
        If the shapes differ in rank or in any dimension.
    """
    if tuple(shape_a) != tuple(shape_b):
        raise ShapeMismatchError(
            f"Shape mismatch: {tuple(shape_a)} vs {tuple(shape_b)}",
            expected=shape_a,
            actual=shape_b,
        )


def flat_offset(shape: Sequence[int], indices: Sequence[int]) -> int:
    """
    Translate a multi-index into a row-major flat offset.

    Uses the running accumulator ``offset = offset * shape[i] + indices[i]``,
    so no stride array is built.

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape.
    indices : Sequence[int]
        One index per axis.

    Returns
    -------
    int
        Position of the addressed element in the flat buffer.

    Raises
    ------
    RankMismatchError
        If ``len(indices) != len(shape)``.
    IndexOutOfBoundsError
        If any component is negative or ``>= shape[i]``.
    """
    if len(indices) != len(shape):
        raise RankMismatchError(len(shape), len(indices))

    offset = 0
    for axis, (i, size) in enumerate(zip(indices, shape)):
        if i >= size or i < 0:
            raise IndexOutOfBoundsError(axis, i, size)
        offset *= size
        offset += i
    return offset


def resolve_axis(axis: int, rank: int) -> int:
    """
    Resolve a possibly negative axis selector against ``rank``.

    A negative selector counts from the end (``-1`` is the last axis). The
    result is not range-checked; callers decide which error to raise.
    """
    return axis + rank if axis < 0 else axis


def remove_axis(shape: Sequence[int], axis: int) -> tuple[int, ...]:
    """Return ``shape`` without the entry at ``axis``."""
    return tuple(shape[:axis]) + tuple(shape[axis + 1 :])
