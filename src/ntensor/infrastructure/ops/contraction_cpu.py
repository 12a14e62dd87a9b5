"""
CPU implementation of generalized tensor contraction.

`contract_cpu(a, b, axis_a, axis_b)` sums products over one axis of each
operand and keeps every other axis, left operand first. For 2-D operands with
the default axes this is ordinary matrix multiplication.

Algorithm
---------
Output cells are enumerated depth-first over the output axes, in row-major
order, so each finished sum is written to the next position of the output
buffer. Two index buffers (one per operand, sized to that operand's rank)
are updated in place while descending; each output axis drives exactly one
position of one buffer. At a leaf, the contracted position is walked by the
innermost accumulation loop.

Scratch memory is O(rank_a + rank_b) regardless of output size.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ...domain._contraction import LEFT, ContractionPlan, plan_contraction
from ...domain._shape import flat_offset, numel
from ...domain._tensor import ITensor
from ._scalar import additive_identity


class _ContractionRunner:
    """
    Depth-first enumerator that fills a flat output buffer for one plan.

    Not reusable across calls; create one per contraction.
    """

    __slots__ = (
        "_plan",
        "_data_a",
        "_data_b",
        "_out",
        "_cursor",
        "_zero",
        "_index_a",
        "_index_b",
        "_sources",
        "_stride_a",
        "_stride_b",
    )

    def __init__(
        self, plan: ContractionPlan, data_a: np.ndarray, data_b: np.ndarray, out: np.ndarray
    ) -> None:
        self._plan = plan
        self._data_a = data_a
        self._data_b = data_b
        self._out = out
        self._cursor = 0
        self._zero = additive_identity(out.dtype)

        self._index_a: List[int] = [0] * len(plan.shape_a)
        self._index_b: List[int] = [0] * len(plan.shape_b)

        # (index buffer, axis, extent) for every output axis
        self._sources: List[Tuple[List[int], int, int]] = []
        for depth in range(plan.rank):
            operand, axis = plan.source_axis(depth)
            if operand == LEFT:
                self._sources.append((self._index_a, axis, plan.shape_a[axis]))
            else:
                self._sources.append((self._index_b, axis, plan.shape_b[axis]))

        # distance in the flat buffer between k and k + 1 on the contracted axis
        self._stride_a = numel(plan.shape_a[plan.axis_a + 1 :])
        self._stride_b = numel(plan.shape_b[plan.axis_b + 1 :])

    def run(self) -> None:
        self._visit(0)

    def _visit(self, depth: int) -> None:
        if depth == len(self._sources):
            self._accumulate()
            return

        index, axis, extent = self._sources[depth]
        for i in range(extent):
            index[axis] = i
            self._visit(depth + 1)

    def _accumulate(self) -> None:
        plan = self._plan
        total = self._zero

        if plan.size > 0:
            self._index_a[plan.axis_a] = 0
            self._index_b[plan.axis_b] = 0
            off_a = flat_offset(plan.shape_a, self._index_a)
            off_b = flat_offset(plan.shape_b, self._index_b)

            data_a, data_b = self._data_a, self._data_b
            for _ in range(plan.size):
                total = total + data_a[off_a] * data_b[off_b]
                off_a += self._stride_a
                off_b += self._stride_b

        self._out[self._cursor] = total
        self._cursor += 1


def contract_cpu(a: ITensor, b: ITensor, axis_a: int = -1, axis_b: int = 0) -> ITensor:
    """
    Contract two tensors over one axis each.

    Parameters
    ----------
    a : ITensor
        Left operand. Must expose its flat buffer as ``.data``.
    b : ITensor
        Right operand. Must expose its flat buffer as ``.data``.
    axis_a : int, optional
        Contracted axis of `a`; negative values count from the end.
        Defaults to -1.
    axis_b : int, optional
        Contracted axis of `b`; negative values count from the end.
        Defaults to 0.

    Returns
    -------
    Tensor
        New tensor (same class as `a`) of shape
        ``a.shape without axis_a + b.shape without axis_b``, dtype
        ``np.result_type(a.dtype, b.dtype)``.

    Raises
    ------
    IncompatibleAxesError
        If an axis is out of range or the contracted extents differ.

    Notes
    -----
    - Contracting two rank-1 tensors yields a rank-0 tensor holding the dot
      product.
    - A contracted extent of 0 yields the additive identity in every output
      cell; the output shape is unaffected.
    """
    plan = plan_contraction(a.shape, b.shape, axis_a, axis_b)

    out_dtype = np.result_type(a.dtype, b.dtype)
    out = np.empty(numel(plan.out_shape), dtype=out_dtype)

    _ContractionRunner(plan, a.data, b.data, out).run()

    return type(a)(out, plan.out_shape)
