from .arithmetic import TensorMixinArithmetic
from .comparison import TensorMixinComparison
from .memory import TensorMixinMemory

__all__ = [
    TensorMixinArithmetic.__name__,
    TensorMixinComparison.__name__,
    TensorMixinMemory.__name__,
]
