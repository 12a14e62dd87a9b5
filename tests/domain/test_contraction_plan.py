import unittest

from ntensor.domain._contraction import LEFT, RIGHT, plan_contraction
from ntensor.domain._errors import IncompatibleAxesError


class TestPlanContraction(unittest.TestCase):
    def test_default_axes_output_shape(self):
        plan = plan_contraction((4, 100, 8), (8, 64, 4))
        self.assertEqual(plan.axis_a, 2)
        self.assertEqual(plan.axis_b, 0)
        self.assertEqual(plan.out_shape, (4, 100, 64, 4))
        self.assertEqual(plan.rank, 4)
        self.assertEqual(plan.size, 8)

    def test_explicit_axes_output_shape(self):
        plan = plan_contraction((4, 100, 8), (8, 64, 4), axis_a=0, axis_b=2)
        self.assertEqual(plan.out_shape, (100, 8, 8, 64))
        self.assertEqual(plan.size, 4)

    def test_negative_axes_resolve_once(self):
        p_neg = plan_contraction((4, 100, 8), (8, 64, 4), axis_a=-1, axis_b=0)
        p_pos = plan_contraction((4, 100, 8), (8, 64, 4), axis_a=2, axis_b=0)
        self.assertEqual(p_neg, p_pos)

        p = plan_contraction((4, 100, 8), (8, 64, 4), axis_a=-3, axis_b=-1)
        self.assertEqual((p.axis_a, p.axis_b), (0, 2))

    def test_vector_dot_has_scalar_output(self):
        plan = plan_contraction((5,), (5,), 0, 0)
        self.assertEqual(plan.out_shape, ())
        self.assertEqual(plan.rank, 0)

    def test_mismatched_sizes(self):
        with self.assertRaises(IncompatibleAxesError) as cm:
            plan_contraction((3, 4), (5, 2))
        err = cm.exception
        self.assertEqual((err.axis_a, err.axis_b), (1, 0))
        self.assertEqual(err.shape_a, (3, 4))
        self.assertEqual(err.shape_b, (5, 2))

    def test_out_of_range_axis(self):
        with self.assertRaises(IncompatibleAxesError):
            plan_contraction((3, 4), (4, 2), axis_a=2)
        with self.assertRaises(IncompatibleAxesError):
            plan_contraction((3, 4), (4, 2), axis_b=-3)

    def test_scalar_operand_has_no_axis(self):
        with self.assertRaises(IncompatibleAxesError):
            plan_contraction((), (4,))

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            plan_contraction((2,), (3,))


class TestSourceAxis(unittest.TestCase):
    def test_skips_contracted_axes(self):
        plan = plan_contraction((2, 3, 4), (5, 3, 6), axis_a=1, axis_b=1)
        self.assertEqual(plan.out_shape, (2, 4, 5, 6))
        self.assertEqual(
            [plan.source_axis(d) for d in range(plan.rank)],
            [(LEFT, 0), (LEFT, 2), (RIGHT, 0), (RIGHT, 2)],
        )

    def test_source_extents_rebuild_output_shape(self):
        shape_a, shape_b = (4, 100, 8), (8, 64, 4)
        plan = plan_contraction(shape_a, shape_b, 0, 2)
        extents = []
        for d in range(plan.rank):
            operand, axis = plan.source_axis(d)
            extents.append((shape_a if operand == LEFT else shape_b)[axis])
        self.assertEqual(tuple(extents), plan.out_shape)

    def test_depth_out_of_range(self):
        plan = plan_contraction((2, 3), (3, 4))
        with self.assertRaises(IndexError):
            plan.source_axis(2)


if __name__ == "__main__":
    unittest.main()
