"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, which implements
elementwise addition, subtraction, multiplication, and true division between
two tensors of identical shape.

Every operator validates shapes first, then allocates a fresh result tensor
whose flat buffer holds ``op(a.data[i], b.data[i])`` for each position. The
operands are never modified and the result never aliases them.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .....domain._shape import check_same_shape


class TensorMixinArithmetic:
    """
    Elementwise arithmetic for tensors.

    Notes
    -----
    - Broadcasting is not supported; shapes must be equal element-for-element,
      otherwise `ShapeMismatchError` is raised.
    - Scalars are not lifted to tensors. Named methods raise `TypeError` for
      non-tensor operands; the operator forms return ``NotImplemented`` so
      Python raises the usual `TypeError`.
    - Result dtypes follow NumPy promotion of the two buffer dtypes.
    """

    def _binary_operand(self, other: Any, op: str) -> "TensorMixinArithmetic":
        if not isinstance(other, TensorMixinArithmetic):
            raise TypeError(
                f"{op} expects a Tensor operand, got {type(other).__name__}"
            )
        check_same_shape(self._shape, other._shape)
        return other

    def _new_like(self, flat: np.ndarray) -> "TensorMixinArithmetic":
        return self.__class__(flat, self._shape)

    # ----------------------------
    # Addition
    # ----------------------------
    def add(self, other: "TensorMixinArithmetic") -> "TensorMixinArithmetic":
        """
        Elementwise addition.

        Parameters
        ----------
        other : Tensor
            Right-hand operand with exactly the same shape.

        Returns
        -------
        Tensor
            New tensor containing ``self + other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        other = self._binary_operand(other, "add")
        return self._new_like(self._data + other._data)

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, TensorMixinArithmetic):
            return NotImplemented
        return self.add(other)

    # ----------------------------
    # Subtraction
    # ----------------------------
    def subtract(self, other: "TensorMixinArithmetic") -> "TensorMixinArithmetic":
        """
        Elementwise subtraction.

        Returns
        -------
        Tensor
            New tensor containing ``self - other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        other = self._binary_operand(other, "subtract")
        return self._new_like(self._data - other._data)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, TensorMixinArithmetic):
            return NotImplemented
        return self.subtract(other)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def multiply(self, other: "TensorMixinArithmetic") -> "TensorMixinArithmetic":
        """
        Elementwise (Hadamard) multiplication.

        This is not the contraction product; see `contract` / ``@`` for that.

        Returns
        -------
        Tensor
            New tensor containing ``self * other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        other = self._binary_operand(other, "multiply")
        return self._new_like(self._data * other._data)

    def __mul__(self, other: Any) -> Any:
        if not isinstance(other, TensorMixinArithmetic):
            return NotImplemented
        return self.multiply(other)

    # ----------------------------
    # True division
    # ----------------------------
    def divide(self, other: "TensorMixinArithmetic") -> "TensorMixinArithmetic":
        """
        Elementwise true division.

        Returns
        -------
        Tensor
            New tensor containing ``self / other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.

        Notes
        -----
        - Division by zero is left to the element type: float buffers produce
          ``inf``/``nan`` (NumPy's floating-point warnings are silenced),
          object buffers raise whatever their elements raise (e.g.
          ``ZeroDivisionError`` for ``Fraction``).
        - Integer buffers use true division and yield a float buffer.
        """
        other = self._binary_operand(other, "divide")
        with np.errstate(divide="ignore", invalid="ignore"):
            flat = np.true_divide(self._data, other._data)
        return self._new_like(flat)

    def __truediv__(self, other: Any) -> Any:
        if not isinstance(other, TensorMixinArithmetic):
            return NotImplemented
        return self.divide(other)
