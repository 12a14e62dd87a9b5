"""
Comparison mixin for Tensor operations.

Provides whole-tensor equality (``equals`` / ``not_equals`` and the ``==`` /
``!=`` operators). Results are single booleans, not elementwise masks.

Public API
----------
- ``TensorMixinComparison``
"""

from ._base import TensorMixinComparison

__all__ = [
    TensorMixinComparison.__name__,
]
