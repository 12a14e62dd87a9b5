# scripts/demo_contraction.py
"""
Demo: contract two random tensors, print the result, then benchmark.

Builds tensors of shapes [4, 100, 8] and [8, 64, 4], contracts axis 0 of the
first with axis 2 of the second (result shape [100, 8, 8, 64]), prints the
shape and the element at [3, 2, 1, 3], and then runs the benchmark suite
from ``bench_tensor_ops.py`` unless ``--no-bench`` is given.

Example
-------
python scripts/demo_contraction.py --seed 0 --repeats 3
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
if THIS_DIR not in sys.path:
    sys.path.insert(0, THIS_DIR)

from bench_tensor_ops import (  # noqa: E402
    add_bench_args,
    make_operands,
    run_bench,
)
from ntensor import contract  # noqa: E402
from ntensor.infrastructure.utils import build_default_ops  # noqa: E402


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Contraction demo + benchmark")
    ap.add_argument("--no-bench", action="store_true", help="skip the benchmark")
    add_bench_args(ap)
    args = ap.parse_args(argv)

    a, b, c = make_operands(args.seed)

    t = contract(a, b, axis_a=0, axis_b=2)
    print("Shape: [" + ", ".join(str(d) for d in t.shape) + "]")
    print(t[3, 2, 1, 3])

    if args.no_bench:
        return

    run_bench(
        build_default_ops(a, b, c),
        args.ops,
        warmup=args.warmup,
        repeats=args.repeats,
    )


if __name__ == "__main__":
    main()
