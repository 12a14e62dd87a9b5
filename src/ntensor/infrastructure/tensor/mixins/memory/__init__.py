"""
Memory mixin for Tensor buffer access and host conversion.

Public API
----------
- ``TensorMixinMemory``
"""

from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
