"""
CPU kernels operating on flat tensor buffers.
"""

from .contraction_cpu import contract_cpu
from ._scalar import additive_identity, check_element_dtype

__all__ = [
    contract_cpu.__name__,
    additive_identity.__name__,
    check_element_dtype.__name__,
]
