"""
Memory mixin: buffer access and host-array conversion.

This module declares :class:`TensorMixinMemory`, which moves data between a
Tensor's flat row-major buffer and host-native representations (NumPy
``ndarray`` and nested Python lists).

Conversion rules
----------------
- Host -> Tensor always copies into a new, C-ordered buffer owned by the
  tensor; the tensor's shape is the host array's per-axis extents.
- Tensor -> host always allocates a new array. When the requested dtype is
  the buffer dtype the buffer is bulk-copied; otherwise every element is
  converted and a lossy conversion warns with ``RuntimeWarning``.
"""

from __future__ import annotations

import warnings
from typing import Any, Optional

import numpy as np

from .....domain._errors import ShapeMismatchError


class TensorMixinMemory:
    """
    Buffer access and host interop for the concrete Tensor.

    Notes
    -----
    The host class must provide `_data` (1-D ndarray) and `_shape`, and be
    constructible as ``cls(flat_buffer, shape)``.
    """

    @property
    def data(self) -> np.ndarray:
        """
        Return the owned flat buffer.

        Returns
        -------
        np.ndarray
            One-dimensional array of `length` elements in row-major order.
            Writes through this array mutate the tensor.
        """
        return self._data

    @property
    def dtype(self) -> np.dtype:
        """
        Return the element dtype of this tensor.

        Returns
        -------
        np.dtype
            NumPy dtype of the flat buffer.
        """
        return self._data.dtype

    @classmethod
    def from_numpy(cls, array: Any, dtype: Any = None) -> "TensorMixinMemory":
        """
        Build a tensor from a host array.

        Parameters
        ----------
        array : array_like
            ``np.ndarray``, NumPy scalar, or rectangular nested list/tuple of
            numbers.
        dtype : optional
            Element dtype. Inferred by NumPy when omitted.

        Returns
        -------
        Tensor
            New tensor whose shape is ``array``'s shape and whose buffer is a
            row-major copy of its elements.

        Raises
        ------
        ShapeMismatchError
            If ``array`` is ragged.
        TypeError
            If the resulting dtype is not numeric.
        """
        try:
            arr = np.array(array, dtype=dtype, order="C")
        except ValueError as e:
            raise ShapeMismatchError(
                "Host array is not rectangular (inhomogeneous nested lengths)."
            ) from e

        if arr.dtype.kind == "O" and any(
            isinstance(x, (list, tuple, np.ndarray)) for x in arr.flat
        ):
            raise ShapeMismatchError(
                "Host array is not rectangular (inhomogeneous nested lengths)."
            )

        return cls(arr.reshape(-1), arr.shape)

    def to_numpy(self, dtype: Optional[Any] = None) -> np.ndarray:
        """
        Convert the tensor to a new NumPy ndarray of the same shape.

        Parameters
        ----------
        dtype : optional
            Target element dtype. Defaults to the buffer dtype.

        Returns
        -------
        np.ndarray
            A newly allocated array; it never shares memory with the tensor.
            Rank-0 tensors produce a 0-d array.

        Warns
        -----
        RuntimeWarning
            If converting to ``dtype`` may lose information (NumPy "safe"
            casting rules).
        """
        src = self._data.dtype
        target = src if dtype is None else np.dtype(dtype)

        if target == src:
            return np.array(self._data, copy=True).reshape(self._shape)

        if not np.can_cast(src, target, casting="safe"):
            warnings.warn(
                f"to_numpy: converting {src} to {target} may lose information",
                RuntimeWarning,
                stacklevel=2,
            )
        return self._data.astype(target).reshape(self._shape)

    def tolist(self) -> Any:
        """
        Convert the tensor to nested Python lists.

        Returns
        -------
        Any
            Nested lists of Python scalars; a plain scalar for rank-0 tensors.
        """
        return self.to_numpy().tolist()

    def __array__(self, dtype: Any = None, copy: Optional[bool] = None) -> np.ndarray:
        """
        Support ``np.asarray(tensor)``; always returns a fresh array.

        Raises
        ------
        ValueError
            If ``copy=False`` is requested, since the result never shares
            memory with the tensor.
        """
        if copy is False:
            raise ValueError(
                "Tensor cannot be converted to an ndarray without a copy."
            )
        return self.to_numpy(dtype)

    # NumPy operators and ufuncs defer to Tensor instead of converting it.
    __array_ufunc__ = None
