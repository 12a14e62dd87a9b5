"""
ntensor: dense N-dimensional tensors with generalized axis contraction.

Typical usage::

    from ntensor import Tensor, contract

    a = Tensor.rand(4, 100, 8)
    b = Tensor.rand(8, 64, 4)
    c = contract(a, b, axis_a=0, axis_b=2)   # shape (100, 8, 8, 64)
"""

from .domain import (
    ContractionPlan,
    IncompatibleAxesError,
    IndexOutOfBoundsError,
    ITensor,
    RankMismatchError,
    ShapeMismatchError,
    plan_contraction,
)
from .infrastructure.tensor import DEFAULT_DTYPE, Tensor, contract

__version__ = "0.1.0"

__all__ = [
    Tensor.__name__,
    contract.__name__,
    ContractionPlan.__name__,
    plan_contraction.__name__,
    ITensor.__name__,
    ShapeMismatchError.__name__,
    RankMismatchError.__name__,
    IndexOutOfBoundsError.__name__,
    IncompatibleAxesError.__name__,
    "DEFAULT_DTYPE",
]
