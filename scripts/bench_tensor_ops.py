# scripts/bench_tensor_ops.py
"""
Microbench: Tensor elementwise ops and contraction (CPU).

What it measures
----------------
- Per-op latency of elementwise add, elementwise multiply, default-axis
  contraction, and explicit-axis contraction ``(0, 2)``.
- Uses warmup iterations (not recorded), then repeats with median/p95.

Notes
-----
- Contraction runs a pure-Python depth-first loop, so keep --repeats small
  for the default shapes.

Example
-------
python scripts/bench_tensor_ops.py --ops add mul matmul --warmup 1 --repeats 5
"""

from __future__ import annotations

import argparse
from typing import Callable, Dict, List, Optional, Sequence

import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from ntensor import Tensor  # noqa: E402
from ntensor.infrastructure.utils import (  # noqa: E402
    OpResult,
    build_default_ops,
    format_result,
    summarize,
    time_op,
)

SHAPE_A = (4, 100, 8)
SHAPE_B = (8, 64, 4)


def make_operands(seed: Optional[int]) -> tuple[Tensor, Tensor, Tensor]:
    a = Tensor.rand(*SHAPE_A, seed=seed)
    b = Tensor.rand(*SHAPE_B, seed=None if seed is None else seed + 1)
    c = Tensor.rand(*SHAPE_A, seed=None if seed is None else seed + 2)
    return a, b, c


def run_bench(
    ops: Dict[str, Callable[[], object]],
    names: Sequence[str],
    *,
    warmup: int,
    repeats: int,
) -> List[OpResult]:
    results: List[OpResult] = []
    for name in names:
        if name not in ops:
            raise SystemExit(f"unknown op {name!r}; choose from {sorted(ops)}")
        times = time_op(ops[name], warmup=warmup, repeats=repeats)
        r = summarize(name, times)
        print(format_result(r))
        results.append(r)
    return results


def add_bench_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument(
        "--ops",
        nargs="*",
        default=["add", "mul", "matmul", "matmul_axes"],
    )
    ap.add_argument("--warmup", type=int, default=1)
    ap.add_argument("--repeats", type=int, default=5)
    ap.add_argument("--seed", type=int, default=None)


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    add_bench_args(ap)
    args = ap.parse_args(argv)

    a, b, c = make_operands(args.seed)
    print(f"shapes: a={list(a.shape)} b={list(b.shape)} c={list(c.shape)}")
    run_bench(
        build_default_ops(a, b, c),
        args.ops,
        warmup=args.warmup,
        repeats=args.repeats,
    )


if __name__ == "__main__":
    main()
