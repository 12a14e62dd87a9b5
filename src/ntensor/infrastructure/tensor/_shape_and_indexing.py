"""
Tensor shape and element-indexing mixin (NumPy CPU backend).

This module defines `TensorShapeAndIndexingMixin`, which implements shape
metadata, shape replacement, and single-element access for the concrete
`Tensor`.

Design notes
------------
- The mixin is inherited by the concrete `Tensor` class and assumes the host
  provides `_data` (1-D ndarray) and `_shape` (tuple of ints).
- New tensors are built through `self.__class__` to avoid importing `Tensor`.
- Multi-indices are linearized row-major with the running accumulator in
  `domain._shape.flat_offset`; no strides are stored on the tensor.
"""

from __future__ import annotations

import operator
from typing import Any, Iterable, Sequence

from ...domain._shape import (
    check_shape_matches_length,
    flat_offset,
    normalize_shape,
)


class TensorShapeAndIndexingMixin:
    """
    Shape metadata, shape replacement, and element access.

    Notes
    -----
    - `get`/`set` take the full multi-index; partial indexing and slicing are
      not supported.
    - Indices must be non-negative; only axis selectors of `contract` accept
      negative values.
    """

    # ----------------------------
    # Shape metadata
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        return self._shape

    @shape.setter
    def shape(self, new_shape: Iterable[int]) -> None:
        """
        Replace the shape in place, keeping the buffer.

        Raises
        ------
        ShapeMismatchError
            If the new shape does not describe exactly `length` elements or
            has a negative entry.
        """
        resolved = normalize_shape(new_shape)
        check_shape_matches_length(resolved, self._data.shape[0])
        self._shape = resolved

    @property
    def rank(self) -> int:
        """Number of axes."""
        return len(self._shape)

    @property
    def length(self) -> int:
        """Number of stored elements."""
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self.length

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.

        Returns
        -------
        int
            Product of all dimensions in the tensor shape.
        """
        return self.length

    def reshape(self, new_shape: Iterable[int]) -> "TensorShapeAndIndexingMixin":
        """
        Return a copy of this tensor with a different shape.

        Parameters
        ----------
        new_shape : Iterable[int]
            Target shape. Must describe exactly `length` elements; ``-1``
            inference is not supported.

        Returns
        -------
        Tensor
            New tensor owning a copy of the buffer.

        Raises
        ------
        ShapeMismatchError
            If the element counts differ or a dimension is negative.
        """
        resolved = normalize_shape(new_shape)
        check_shape_matches_length(resolved, self.length)
        return self.__class__(self._data.copy(), resolved)

    # ----------------------------
    # Element access
    # ----------------------------
    def _flat_offset(self, indices: Sequence[int]) -> int:
        return flat_offset(self._shape, indices)

    def get(self, indices: Sequence[int]) -> Any:
        """
        Read the element at a full multi-index.

        Parameters
        ----------
        indices : Sequence[int]
            Exactly `rank` non-negative ints. Use ``()`` for rank-0 tensors.

        Returns
        -------
        Any
            The element (a NumPy scalar, or the stored object for object
            buffers).

        Raises
        ------
        RankMismatchError
            If ``len(indices) != rank``.
        IndexOutOfBoundsError
            If some ``indices[i]`` is negative or ``>= shape[i]``.
        """
        return self._data[self._flat_offset(indices)]

    def set(self, indices: Sequence[int], value: Any) -> Any:
        """
        Overwrite the element at a full multi-index.

        Parameters
        ----------
        indices : Sequence[int]
            Exactly `rank` non-negative ints.
        value : Any
            New element; converted to the buffer dtype by NumPy.

        Returns
        -------
        Any
            The value as stored (after dtype conversion).

        Raises
        ------
        RankMismatchError
            If ``len(indices) != rank``.
        IndexOutOfBoundsError
            If some ``indices[i]`` is negative or ``>= shape[i]``.
        """
        offset = self._flat_offset(indices)
        self._data[offset] = value
        return self._data[offset]

    @staticmethod
    def _normalize_key(key: Any) -> tuple[int, ...]:
        if not isinstance(key, tuple):
            key = (key,)
        # operator.index rejects slices, floats and None with a TypeError
        return tuple(operator.index(k) for k in key)

    def __getitem__(self, key: Any) -> Any:
        """
        ``t[i, j, k]`` sugar for :meth:`get`.

        A bare int addresses a rank-1 tensor; ``t[()]`` addresses a scalar.
        """
        return self.get(self._normalize_key(key))

    def __setitem__(self, key: Any, value: Any) -> None:
        """``t[i, j, k] = v`` sugar for :meth:`set`."""
        self.set(self._normalize_key(key), value)

    # Integer __getitem__ would otherwise enable the legacy iteration protocol.
    __iter__ = None
