"""
Shape-level planning for generalized tensor contraction.

A contraction multiplies two tensors by summing over one selected axis of
each operand. All remaining axes survive in their original relative order:
first the left operand's, then the right operand's.

This module only reasons about shapes. It resolves and validates the axis
selectors, derives the output shape, and describes which operand axis each
output axis comes from. The element loop lives in the infrastructure layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ._errors import IncompatibleAxesError
from ._shape import remove_axis, resolve_axis

LEFT = 0
"""Operand tag for the left tensor in :meth:`ContractionPlan.source_axis`."""

RIGHT = 1
"""Operand tag for the right tensor in :meth:`ContractionPlan.source_axis`."""


@dataclass(frozen=True)
class ContractionPlan:
    """
    Validated description of a contraction between two shapes.

    Attributes
    ----------
    shape_a, shape_b : tuple[int, ...]
        Operand shapes.
    axis_a, axis_b : int
        Contracted axes, already resolved to ``[0, rank)``.

    Notes
    -----
    Build instances with :func:`plan_contraction`; the constructor does not
    validate.
    """

    shape_a: tuple[int, ...]
    shape_b: tuple[int, ...]
    axis_a: int
    axis_b: int

    @property
    def out_shape(self) -> tuple[int, ...]:
        """Output shape: left shape without `axis_a`, then right shape without `axis_b`."""
        return remove_axis(self.shape_a, self.axis_a) + remove_axis(
            self.shape_b, self.axis_b
        )

    @property
    def rank(self) -> int:
        """Output rank, ``rank_a + rank_b - 2``."""
        return len(self.shape_a) + len(self.shape_b) - 2

    @property
    def size(self) -> int:
        """Extent of the contracted dimension (shared by both operands)."""
        return self.shape_a[self.axis_a]

    def source_axis(self, depth: int) -> tuple[int, int]:
        """
        Map an output axis to the operand axis it enumerates.

        The first ``rank_a - 1`` output axes belong to the left operand, the
        rest to the right operand. Positions at or after the contracted axis
        are shifted by one to skip it.

        Parameters
        ----------
        depth : int
            Output axis in ``[0, rank)``.

        Returns
        -------
        tuple[int, int]
            ``(LEFT, axis)`` or ``(RIGHT, axis)``.
        """
        if not 0 <= depth < self.rank:
            raise IndexError(f"output axis {depth} out of range for rank {self.rank}")

        kept_a = len(self.shape_a) - 1
        if depth < kept_a:
            axis = depth + (1 if depth >= self.axis_a else 0)
            return LEFT, axis

        pos = depth - kept_a
        axis = pos + (1 if pos >= self.axis_b else 0)
        return RIGHT, axis


def plan_contraction(
    shape_a: Sequence[int],
    shape_b: Sequence[int],
    axis_a: int = -1,
    axis_b: int = 0,
) -> ContractionPlan:
    """
    Resolve axis selectors and validate a contraction.

    Parameters
    ----------
    shape_a, shape_b : Sequence[int]
        Operand shapes.
    axis_a : int, optional
        Contracted axis of the left operand. Negative values count from the
        end. Defaults to -1 (last axis).
    axis_b : int, optional
        Contracted axis of the right operand. Negative values count from the
        end. Defaults to 0 (first axis).

    Returns
    -------
    ContractionPlan
        Plan with both axes resolved.

    Raises
    ------
    IncompatibleAxesError
        If a resolved axis is out of range for its operand, or the operands'
        extents along the contracted axes differ.
    """
    shape_a = tuple(shape_a)
    shape_b = tuple(shape_b)
    ra = resolve_axis(axis_a, len(shape_a))
    rb = resolve_axis(axis_b, len(shape_b))

    if not 0 <= ra < len(shape_a) or not 0 <= rb < len(shape_b):
        raise IncompatibleAxesError(
            f"Axes ({axis_a}, {axis_b}) are out of range for shapes "
            f"{shape_a} and {shape_b}.",
            axis_a=ra,
            axis_b=rb,
            shape_a=shape_a,
            shape_b=shape_b,
        )

    if shape_a[ra] != shape_b[rb]:
        raise IncompatibleAxesError(
            f"Cannot contract axis {ra} (size {shape_a[ra]}) of {shape_a} with "
            f"axis {rb} (size {shape_b[rb]}) of {shape_b}.",
            axis_a=ra,
            axis_b=rb,
            shape_a=shape_a,
            shape_b=shape_b,
        )

    return ContractionPlan(shape_a=shape_a, shape_b=shape_b, axis_a=ra, axis_b=rb)
