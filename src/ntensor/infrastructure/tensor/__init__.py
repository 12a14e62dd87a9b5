from ._shape_and_indexing import TensorShapeAndIndexingMixin
from ._tensor import DEFAULT_DTYPE, Tensor, contract

__all__ = [
    Tensor.__name__,
    TensorShapeAndIndexingMixin.__name__,
    contract.__name__,
    "DEFAULT_DTYPE",
]
