"""
Comparison mixin defining whole-tensor equality.

This module declares :class:`TensorMixinComparison`. Unlike NumPy, equality
between tensors is *not* elementwise: ``a == b`` yields a single ``bool``
that is true iff every pair of corresponding elements compares equal under
the element type's own ``==`` (so ``nan != nan``).

Equality is partial across shapes: comparing tensors of different shapes
raises `ShapeMismatchError` for both ``==`` and ``!=`` instead of returning
``False``.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .....domain._shape import check_same_shape


class TensorMixinComparison:
    """
    Whole-tensor equality comparisons.

    Notes
    -----
    - Tensors are mutable and compare by value, so they are unhashable.
    - Comparing against a non-tensor via ``==``/``!=`` returns
      ``NotImplemented`` (Python then falls back to identity).
    """

    __hash__ = None

    def equals(self, other: "TensorMixinComparison") -> bool:
        """
        Return True iff every element equals its counterpart in `other`.

        Parameters
        ----------
        other : Tensor
            Tensor with exactly the same shape.

        Returns
        -------
        bool
            True when all paired elements compare equal. Tensors with zero
            elements are always equal.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        TypeError
            If `other` is not a tensor.
        """
        if not isinstance(other, TensorMixinComparison):
            raise TypeError(
                f"equals expects a Tensor operand, got {type(other).__name__}"
            )
        check_same_shape(self._shape, other._shape)
        return bool(np.all(self._data == other._data))

    def not_equals(self, other: "TensorMixinComparison") -> bool:
        """
        Return True iff at least one element differs from its counterpart.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        return not self.equals(other)

    def __eq__(self, other: Any) -> Any:
        if not isinstance(other, TensorMixinComparison):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> Any:
        if not isinstance(other, TensorMixinComparison):
            return NotImplemented
        return self.not_equals(other)
