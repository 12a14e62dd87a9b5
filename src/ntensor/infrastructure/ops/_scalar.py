"""
Element-type helpers for CPU kernels.
"""

from __future__ import annotations

from typing import Any

import numpy as np

_NUMERIC_KINDS = frozenset("iufcO")
"""dtype kinds accepted as tensor elements: ints, uints, floats, complex, object."""


def check_element_dtype(dtype: Any) -> np.dtype:
    """
    Validate that ``dtype`` can hold tensor elements.

    Parameters
    ----------
    dtype : Any
        Anything ``np.dtype`` accepts.

    Returns
    -------
    np.dtype
        The normalized dtype.

    Raises
    ------
    TypeError
        For bool, string, datetime, void, and other non-arithmetic dtypes.
    """
    dt = np.dtype(dtype)
    if dt.kind not in _NUMERIC_KINDS:
        raise TypeError(f"Unsupported tensor element dtype: {dt}")
    return dt


def additive_identity(dtype: Any) -> Any:
    """
    Return the zero of ``dtype``, used as the starting accumulator of sums.

    Object buffers (e.g. ``fractions.Fraction`` elements) use the Python int
    ``0``, which every numeric type absorbs under ``+``.
    """
    dt = np.dtype(dtype)
    if dt.kind == "O":
        return 0
    return dt.type(0)
