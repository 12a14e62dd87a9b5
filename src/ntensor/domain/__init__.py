"""
Domain layer: backend-agnostic errors, shape arithmetic, contraction
planning, and the tensor protocol.
"""

from ._contraction import ContractionPlan, plan_contraction
from ._errors import (
    IncompatibleAxesError,
    IndexOutOfBoundsError,
    RankMismatchError,
    ShapeMismatchError,
)
from ._tensor import ITensor

__all__ = [
    ITensor.__name__,
    ContractionPlan.__name__,
    plan_contraction.__name__,
    ShapeMismatchError.__name__,
    RankMismatchError.__name__,
    IndexOutOfBoundsError.__name__,
    IncompatibleAxesError.__name__,
]
