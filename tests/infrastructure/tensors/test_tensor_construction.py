import unittest
from fractions import Fraction

import numpy as np

from ntensor import ShapeMismatchError, Tensor


class TestTensorFromBuffer(unittest.TestCase):
    def test_shape_rank_length(self):
        t = Tensor(np.arange(24, dtype=np.float32), (2, 3, 4))
        self.assertEqual(t.shape, (2, 3, 4))
        self.assertEqual(t.rank, 3)
        self.assertEqual(t.length, 24)
        self.assertEqual(t.numel(), 24)
        self.assertEqual(len(t), 24)
        self.assertEqual(t.dtype, np.float32)

    def test_buffer_is_adopted_without_copy(self):
        buf = np.zeros(6, dtype=np.float64)
        t = Tensor(buf, [2, 3])
        self.assertIs(t.data, buf)
        buf[4] = 7.0
        self.assertEqual(t.get((1, 1)), 7.0)

    def test_strided_view_is_copied_contiguous(self):
        base = np.arange(10, dtype=np.float64)
        t = Tensor(base[::2], (5,))
        self.assertTrue(t.data.flags.c_contiguous)
        np.testing.assert_array_equal(t.data, [0.0, 2.0, 4.0, 6.0, 8.0])
        base[0] = 99.0
        self.assertEqual(t[0], 0.0)

    def test_non_integer_shape_raises(self):
        with self.assertRaises(TypeError):
            Tensor(np.zeros(2), [2.7])
        with self.assertRaises(TypeError):
            Tensor(np.zeros(6), ["2", "3"])

    def test_shape_accepts_any_iterable(self):
        t = Tensor([1.0, 2.0, 3.0, 4.0], (d for d in (2, 2)))
        self.assertEqual(t.shape, (2, 2))

    def test_length_mismatch_raises(self):
        with self.assertRaises(ShapeMismatchError) as cm:
            Tensor(np.zeros(5), (2, 3))
        self.assertEqual(cm.exception.expected, (5,))
        self.assertEqual(cm.exception.actual, (2, 3))

    def test_negative_dimension_raises(self):
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.zeros(2), (-1, -2))

    def test_nested_buffer_raises(self):
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.zeros((2, 3)), (2, 3))

    def test_non_numeric_dtype_raises(self):
        with self.assertRaises(TypeError):
            Tensor(np.array([True, False]), (2,))
        with self.assertRaises(TypeError):
            Tensor(np.array(["a", "b"]), (2,))

    def test_scalar_tensor(self):
        t = Tensor(np.array([3.5]), ())
        self.assertEqual(t.rank, 0)
        self.assertEqual(t.length, 1)
        self.assertEqual(t.get(()), 3.5)

    def test_scalar_shape_rejects_empty_buffer(self):
        with self.assertRaises(ShapeMismatchError):
            Tensor(np.array([], dtype=np.float32), ())

    def test_zero_sized_axis(self):
        t = Tensor(np.array([], dtype=np.float32), (3, 0))
        self.assertEqual(t.length, 0)
        self.assertEqual(t.shape, (3, 0))

    def test_object_buffer_for_exact_types(self):
        t = Tensor([Fraction(1, 3), Fraction(2, 3)], (2,))
        self.assertEqual(t.dtype, np.dtype(object))
        self.assertEqual(t[1], Fraction(2, 3))

    def test_repr_mentions_shape_and_dtype(self):
        t = Tensor(np.zeros(6, dtype=np.float32), (2, 3))
        self.assertEqual(repr(t), "Tensor(shape=[2, 3], dtype=float32)")


class TestTensorShapeReplacement(unittest.TestCase):
    def test_setter_keeps_buffer(self):
        t = Tensor(np.arange(6, dtype=np.float32), (2, 3))
        buf = t.data
        t.shape = (3, 2)
        self.assertEqual(t.shape, (3, 2))
        self.assertIs(t.data, buf)
        self.assertEqual(t[2, 1], 5.0)

    def test_setter_validates(self):
        t = Tensor(np.arange(6, dtype=np.float32), (2, 3))
        with self.assertRaises(ShapeMismatchError):
            t.shape = (4, 2)
        self.assertEqual(t.shape, (2, 3))

    def test_reshape_returns_copy(self):
        t = Tensor(np.arange(6, dtype=np.float32), (2, 3))
        r = t.reshape([6])
        self.assertEqual(r.shape, (6,))
        self.assertIsNot(r.data, t.data)
        r[0] = 100.0
        self.assertEqual(t[0, 0], 0.0)

    def test_reshape_validates(self):
        t = Tensor(np.arange(6, dtype=np.float32), (2, 3))
        with self.assertRaises(ShapeMismatchError):
            t.reshape((7,))


class TestTensorFactories(unittest.TestCase):
    def test_rand_varargs_and_tuple(self):
        a = Tensor.rand(4, 100, 8, seed=0)
        b = Tensor.rand((4, 100, 8), seed=0)
        self.assertEqual(a.shape, (4, 100, 8))
        self.assertEqual(a.length, 3200)
        self.assertEqual(a.dtype, np.float32)
        self.assertTrue(a == b)

    def test_rand_range(self):
        t = Tensor.rand(1000, seed=1)
        arr = t.to_numpy()
        self.assertTrue(np.all(arr >= 0.0))
        self.assertTrue(np.all(arr < 1.0))

    def test_rand_float64_and_half(self):
        self.assertEqual(Tensor.rand(3, dtype=np.float64).dtype, np.float64)
        half = Tensor.rand(500, seed=2, dtype=np.float16).to_numpy()
        self.assertTrue(np.all(half < 1.0))

    def test_rand_rejects_integer_dtype(self):
        with self.assertRaises(TypeError):
            Tensor.rand(3, dtype=np.int32)

    def test_rand_scalar(self):
        t = Tensor.rand()
        self.assertEqual(t.shape, ())
        self.assertEqual(t.length, 1)

    def test_zeros_and_full(self):
        z = Tensor.zeros((2, 3))
        self.assertEqual(z.shape, (2, 3))
        np.testing.assert_array_equal(z.to_numpy(), np.zeros((2, 3), np.float32))

        f = Tensor.full((2, 2), 1.5, dtype=np.float64)
        np.testing.assert_array_equal(f.to_numpy(), np.full((2, 2), 1.5))


if __name__ == "__main__":
    unittest.main()
