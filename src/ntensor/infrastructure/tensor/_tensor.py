"""
Concrete Tensor implementation (NumPy CPU backend).

This module provides the concrete `Tensor`, a dense N-dimensional array that
satisfies the domain-level `ITensor` protocol. Elements live in a flat,
one-dimensional NumPy array (the *buffer*) addressed in row-major order; the
shape is kept separately as a tuple of ints.

Design notes
------------
- Behavior is split across mixins: shape/indexing, memory (host interop),
  arithmetic, and comparison. This file holds construction, factories, and
  the contraction entry points.
- A contiguous 1-D ndarray passed to the constructor is adopted without
  copying; ownership transfers to the tensor. Strided views are copied.
- Every operation that produces a tensor allocates a new buffer; inputs are
  never aliased by results.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple, Union

import numpy as np

from ...domain._errors import ShapeMismatchError
from ...domain._shape import check_shape_matches_length, normalize_shape, numel
from ...domain._tensor import ITensor
from ..ops._scalar import check_element_dtype
from ..ops.contraction_cpu import contract_cpu
from ._shape_and_indexing import TensorShapeAndIndexingMixin
from .mixins import TensorMixinArithmetic, TensorMixinComparison, TensorMixinMemory

DEFAULT_DTYPE = np.float32
"""Element dtype used by the factories when none is given."""


class Tensor(
    TensorShapeAndIndexingMixin,
    TensorMixinMemory,
    TensorMixinArithmetic,
    TensorMixinComparison,
    ITensor,
):
    """
    Dense N-dimensional tensor backed by a flat NumPy buffer.

    Parameters
    ----------
    data : array_like
        Flat buffer. A contiguous one-dimensional ``np.ndarray`` is adopted
        as-is (no copy); strided views and other flat sequences are copied
        into a contiguous array.
    shape : Iterable[int]
        Shape whose product must equal ``len(data)``. The empty shape
        describes a scalar holding one element.

    Raises
    ------
    ShapeMismatchError
        If ``product(shape) != len(data)``, a dimension is negative, or
        `data` is not one-dimensional.
    TypeError
        If the buffer dtype is not numeric (bool, str, ...).

    Notes
    -----
    - Use :meth:`from_numpy` to build a tensor from a nested host array.
    - `shape` may be replaced later (``t.shape = ...``), always re-validated
      against the buffer length.
    """

    def __init__(self, data: Any, shape: Iterable[int]) -> None:
        buf = data if isinstance(data, np.ndarray) else np.asarray(data)
        if buf.ndim != 1:
            raise ShapeMismatchError(
                f"Tensor buffer must be one-dimensional, got an array of shape {buf.shape}; "
                f"use Tensor.from_numpy for nested arrays.",
                actual=buf.shape,
            )
        # strided views are copied; contiguous buffers are adopted
        buf = np.ascontiguousarray(buf)
        check_element_dtype(buf.dtype)

        resolved = normalize_shape(shape)
        check_shape_matches_length(resolved, buf.shape[0])

        self._data: np.ndarray = buf
        self._shape: Tuple[int, ...] = resolved

    def __repr__(self) -> str:
        """
        Return a human-readable string representation of the tensor.

        Returns
        -------
        str
            A string describing the tensor's shape and dtype.
        """
        return f"Tensor(shape={list(self._shape)}, dtype={self._data.dtype})"

    # ----------------------------
    # Factories
    # ----------------------------
    @staticmethod
    def _shape_from_args(shape: Tuple[Any, ...]) -> Tuple[int, ...]:
        # rand(2, 3) and rand((2, 3)) are both accepted
        if len(shape) == 1 and not isinstance(shape[0], (int, np.integer)):
            return normalize_shape(shape[0])
        return normalize_shape(shape)

    @classmethod
    def rand(
        cls,
        *shape: Union[int, Iterable[int]],
        seed: Optional[int] = None,
        dtype: Any = DEFAULT_DTYPE,
    ) -> "Tensor":
        """
        Create a tensor filled with uniform random values in [0, 1).

        Parameters
        ----------
        *shape : int or Iterable[int]
            Dimension sizes, either as varargs (``rand(4, 100, 8)``) or as a
            single iterable (``rand((4, 100, 8))``).
        seed : Optional[int], optional
            Seed for ``np.random.default_rng``; fresh entropy when omitted.
        dtype : optional
            Floating dtype of the result. Defaults to float32.

        Returns
        -------
        Tensor
            Tensor of ``product(shape)`` independent draws.

        Raises
        ------
        TypeError
            If `dtype` is not a floating dtype.
        """
        resolved = cls._shape_from_args(shape)
        dt = check_element_dtype(dtype)
        if dt.kind != "f":
            raise TypeError(f"rand requires a floating dtype, got {dt}")
        rng = np.random.default_rng(seed)

        n = numel(resolved)
        if dt in (np.dtype(np.float32), np.dtype(np.float64)):
            flat = rng.random(n, dtype=dt)
        else:
            # narrowing can round values just below 1.0 up to 1.0
            below_one = np.nextafter(dt.type(1), dt.type(0))
            flat = np.minimum(rng.random(n).astype(dt), below_one)
        return cls(flat, resolved)

    @classmethod
    def zeros(cls, shape: Iterable[int], dtype: Any = DEFAULT_DTYPE) -> "Tensor":
        """
        Create a tensor filled with the additive identity of `dtype`.
        """
        resolved = normalize_shape(shape)
        dt = check_element_dtype(dtype)
        return cls(np.zeros(numel(resolved), dtype=dt), resolved)

    @classmethod
    def full(
        cls, shape: Iterable[int], value: Any, dtype: Any = DEFAULT_DTYPE
    ) -> "Tensor":
        """
        Create a tensor with every element set to `value`.
        """
        resolved = normalize_shape(shape)
        dt = check_element_dtype(dtype)
        return cls(np.full(numel(resolved), value, dtype=dt), resolved)

    # ----------------------------
    # Contraction
    # ----------------------------
    def contract(
        self, other: "Tensor", axes: Optional[Tuple[int, int]] = None
    ) -> "Tensor":
        """
        Contract this tensor with `other` over one axis of each.

        Parameters
        ----------
        other : Tensor
            Right-hand operand.
        axes : Optional[tuple[int, int]], optional
            ``(axis_self, axis_other)``; negative values count from the end.
            Defaults to ``(-1, 0)``: last axis of `self`, first of `other`.

        Returns
        -------
        Tensor
            Tensor of shape ``self.shape`` without ``axis_self`` followed by
            ``other.shape`` without ``axis_other``.

        Raises
        ------
        IncompatibleAxesError
            If an axis is out of range or the contracted sizes differ.

        Examples
        --------
        >>> a = Tensor.rand(4, 100, 8)
        >>> b = Tensor.rand(8, 64, 4)
        >>> a.contract(b).shape
        (4, 100, 64, 4)
        >>> a.contract(b, axes=(0, 2)).shape
        (100, 8, 8, 64)
        """
        axis_a, axis_b = (-1, 0) if axes is None else axes
        if not isinstance(other, Tensor):
            raise TypeError(
                f"contract expects a Tensor operand, got {type(other).__name__}"
            )
        return contract_cpu(self, other, axis_a, axis_b)

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.contract(other)


def contract(a: Tensor, b: Tensor, axis_a: int = -1, axis_b: int = 0) -> Tensor:
    """
    Contract `a` and `b` over ``a``'s `axis_a` and ``b``'s `axis_b`.

    Functional form of :meth:`Tensor.contract`; see there for details.
    """
    return a.contract(b, axes=(axis_a, axis_b))
