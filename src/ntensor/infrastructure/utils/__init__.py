from ._benchmark import (
    OpResult,
    build_default_ops,
    format_result,
    median,
    p95,
    summarize,
    time_op,
)

__all__ = [
    OpResult.__name__,
    build_default_ops.__name__,
    format_result.__name__,
    median.__name__,
    p95.__name__,
    summarize.__name__,
    time_op.__name__,
]
