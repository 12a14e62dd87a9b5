"""
Arithmetic mixin for Tensor operations.

Provides elementwise addition, subtraction, multiplication, and true
division, both as named methods (``add``, ``subtract``, ``multiply``,
``divide``) and as the ``+``, ``-``, ``*``, ``/`` operators.

Public API
----------
- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
