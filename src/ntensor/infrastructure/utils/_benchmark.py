"""
Micro-benchmark helpers for tensor operations.

These helpers back the scripts under ``scripts/``: they time zero-argument
callables with a warmup phase, then summarize repeated measurements by
median and 95th percentile.

Notes
-----
- Timings include Python-level overhead (argument checks, result
  allocation), which dominates for small tensors.
- Operands are built once by the caller and reused; every timed call
  allocates a new result tensor.
"""

from __future__ import annotations

import math
import statistics
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from ..tensor import Tensor


@dataclass
class OpResult:
    name: str
    median: float
    p95: float
    repeats: int


def median(xs: Sequence[float]) -> float:
    return statistics.median(xs) if xs else float("nan")


def p95(xs: Sequence[float]) -> float:
    if not xs:
        return float("nan")
    ys = sorted(xs)
    k = int(math.ceil(0.95 * len(ys))) - 1
    k = max(0, min(k, len(ys) - 1))
    return ys[k]


def time_op(fn: Callable[[], object], *, warmup: int, repeats: int) -> List[float]:
    """
    Time `fn` `repeats` times after `warmup` untimed calls.

    Returns
    -------
    List[float]
        Wall-clock seconds per measured call (``time.perf_counter``).
    """
    if warmup < 0 or repeats < 1:
        raise ValueError(
            f"warmup must be >= 0 and repeats >= 1, got warmup={warmup}, repeats={repeats}"
        )

    for _ in range(warmup):
        fn()

    times: List[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def summarize(name: str, times: Sequence[float]) -> OpResult:
    return OpResult(name=name, median=median(times), p95=p95(times), repeats=len(times))


def fmt_ms(sec: float) -> str:
    return f"{sec * 1e3:10.3f} ms"


def format_result(r: OpResult) -> str:
    return f"{r.name:<12} median={fmt_ms(r.median)}  p95={fmt_ms(r.p95)}  (n={r.repeats})"


def build_default_ops(
    a: Tensor, b: Tensor, c: Tensor
) -> Dict[str, Callable[[], object]]:
    """
    Build the standard benchmark suite.

    Parameters
    ----------
    a : Tensor
        Left operand of every op.
    b : Tensor
        Contraction partner of `a`: ``a.shape[-1] == b.shape[0]`` and
        ``a.shape[0] == b.shape[2]``.
    c : Tensor
        Same shape as `a`, for the elementwise ops.

    Returns
    -------
    Dict[str, Callable[[], object]]
        ``add``, ``mul``, ``matmul`` (default axes), ``matmul_axes``
        (axes ``(0, 2)``).
    """
    return {
        "add": lambda: a + c,
        "mul": lambda: a * c,
        "matmul": lambda: a.contract(b),
        "matmul_axes": lambda: a.contract(b, axes=(0, 2)),
    }
