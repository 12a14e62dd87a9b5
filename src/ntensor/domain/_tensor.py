"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the backend-agnostic surface the
contraction engine and the benchmark helpers rely on: shape metadata,
element access by multi-index, and host materialization.

Notes
-----
The concrete NumPy-backed `Tensor` in the infrastructure layer exposes a
larger API (factories, operators, reshape). Domain code types against this
protocol so that it does not import NumPy.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is a dense N-dimensional array stored as a flat row-major
    buffer together with an ordered shape.

    Notes
    -----
    - `length == product(shape)` holds for every conforming object.
    - Rank-0 tensors (empty shape) are scalars holding exactly one element.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            Per-axis sizes, outermost axis first.
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of axes.

        Returns
        -------
        int
            ``len(shape)``.
        """
        ...

    @property
    def length(self) -> int:
        """
        Return the number of stored elements.

        Returns
        -------
        int
            Length of the flat buffer.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Return the backend dtype descriptor of the elements.
        """
        ...

    @property
    def data(self) -> Any:
        """
        Return the owned flat buffer in row-major order.

        Returns
        -------
        Any
            One-dimensional backend array of `length` elements.
        """
        ...

    def get(self, indices: Sequence[int]) -> Any:
        """
        Read one element addressed by a full multi-index.

        Parameters
        ----------
        indices : Sequence[int]
            Exactly ``rank`` non-negative ints.

        Returns
        -------
        Any
            The stored element.

        Raises
        ------
        RankMismatchError
            If ``len(indices) != rank``.
        IndexOutOfBoundsError
            If a component is outside its axis.
        """
        ...

    def set(self, indices: Sequence[int], value: Any) -> Any:
        """
        Overwrite one element addressed by a full multi-index.

        Returns
        -------
        Any
            The value as stored in the buffer.
        """
        ...

    def numel(self) -> int:
        """
        Return the total number of elements (same as `length`).
        """
        ...

    def to_numpy(self, dtype: Any = None) -> Any:
        """
        Materialize the tensor as a host-native multi-dimensional array.

        Returns
        -------
        Any
            Backend-native array (an `np.ndarray` for the NumPy backend).
        """
        ...
