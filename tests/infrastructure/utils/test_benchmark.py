import math
import unittest

from ntensor import Tensor
from ntensor.infrastructure.utils import (
    OpResult,
    build_default_ops,
    format_result,
    median,
    p95,
    summarize,
    time_op,
)


class TestBenchmarkStats(unittest.TestCase):
    def test_median(self):
        self.assertEqual(median([3.0, 1.0, 2.0]), 2.0)
        self.assertEqual(median([4.0, 1.0, 2.0, 3.0]), 2.5)
        self.assertTrue(math.isnan(median([])))

    def test_p95_nearest_rank(self):
        xs = [float(i) for i in range(1, 101)]
        self.assertEqual(p95(xs), 95.0)
        self.assertEqual(p95([5.0]), 5.0)
        self.assertEqual(p95([2.0, 1.0]), 2.0)
        self.assertTrue(math.isnan(p95([])))

    def test_summarize(self):
        r = summarize("add", [0.003, 0.001, 0.002])
        self.assertIsInstance(r, OpResult)
        self.assertEqual(r.name, "add")
        self.assertEqual(r.median, 0.002)
        self.assertEqual(r.p95, 0.003)
        self.assertEqual(r.repeats, 3)

    def test_format_result_reports_milliseconds(self):
        line = format_result(OpResult(name="matmul", median=0.0015, p95=0.002, repeats=4))
        self.assertTrue(line.startswith("matmul"))
        self.assertIn("1.500 ms", line)
        self.assertIn("2.000 ms", line)
        self.assertIn("(n=4)", line)


class TestTimeOp(unittest.TestCase):
    def test_counts_warmup_and_repeats(self):
        calls = []
        times = time_op(lambda: calls.append(1), warmup=2, repeats=3)
        self.assertEqual(len(calls), 5)
        self.assertEqual(len(times), 3)
        self.assertTrue(all(t >= 0.0 for t in times))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            time_op(lambda: None, warmup=-1, repeats=1)
        with self.assertRaises(ValueError):
            time_op(lambda: None, warmup=0, repeats=0)


class TestBuildDefaultOps(unittest.TestCase):
    def test_ops_produce_expected_shapes(self):
        a = Tensor.rand(2, 3, 4, seed=0)
        b = Tensor.rand(4, 5, 2, seed=1)
        c = Tensor.rand(2, 3, 4, seed=2)
        ops = build_default_ops(a, b, c)
        self.assertEqual(set(ops), {"add", "mul", "matmul", "matmul_axes"})

        self.assertEqual(ops["add"]().shape, (2, 3, 4))
        self.assertEqual(ops["mul"]().shape, (2, 3, 4))
        self.assertEqual(ops["matmul"]().shape, (2, 3, 5, 2))
        self.assertEqual(ops["matmul_axes"]().shape, (3, 4, 4, 5))

    def test_ops_do_not_modify_operands(self):
        a = Tensor.rand(2, 3, 4, seed=3)
        b = Tensor.rand(4, 5, 2, seed=4)
        c = Tensor.rand(2, 3, 4, seed=5)
        before = (a.to_numpy(), b.to_numpy(), c.to_numpy())
        for fn in build_default_ops(a, b, c).values():
            fn()
        for t, ref in zip((a, b, c), before):
            self.assertTrue(t == Tensor.from_numpy(ref))


if __name__ == "__main__":
    unittest.main()
