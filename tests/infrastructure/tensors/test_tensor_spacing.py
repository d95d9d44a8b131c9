import math
import unittest

import numpy as np

from keytensor import DType, DomainError, Tensor, default_dtype


class TestLinearSpace(unittest.TestCase):
    def test_endpoint_included(self):
        t = Tensor.linear_space(0, 1, num=5)
        self.assertEqual(t.dtype, DType("float64"))
        np.testing.assert_allclose(t.to_numpy(), [0.0, 0.25, 0.5, 0.75, 1.0])
        self.assertEqual(t[4], 1.0)

    def test_last_sample_is_exactly_stop(self):
        t = Tensor.linear_space(0.1, 0.7, num=7)
        self.assertEqual(t[6], 0.7)

    def test_endpoint_excluded(self):
        t = Tensor.linear_space(0, 1, num=4, endpoint=False)
        np.testing.assert_allclose(t.to_numpy(), [0.0, 0.25, 0.5, 0.75])

    def test_matches_numpy(self):
        t = Tensor.linear_space(-3.0, 9.0, num=13)
        np.testing.assert_allclose(t.to_numpy(), np.linspace(-3.0, 9.0, 13))

    def test_repeated_calls_are_identical(self):
        a = Tensor.linear_space(-1.5, 2.25, num=11)
        b = Tensor.linear_space(-1.5, 2.25, num=11)
        self.assertEqual(a.tolist(), b.tolist())

    def test_default_num(self):
        self.assertEqual(Tensor.linear_space(0, 1).shape, (50,))

    def test_single_sample_is_start_plus_delta(self):
        t = Tensor.linear_space(0, 10, num=1)
        self.assertEqual(t.tolist(), [10.0])

    def test_result_is_float64_regardless_of_default(self):
        with default_dtype("int32"):
            t = Tensor.linear_space(0, 1, num=3)
        self.assertEqual(t.dtype, DType("float64"))

    def test_non_positive_num_raises(self):
        with self.assertRaises(DomainError):
            Tensor.linear_space(0, 1, num=0)
        with self.assertRaises(DomainError):
            Tensor.linear_space(0, 1, num=-2)

    def test_non_integer_num_raises(self):
        with self.assertRaises(TypeError):
            Tensor.linear_space(0, 1, num=2.5)

    def test_equal_bounds_raise(self):
        with self.assertRaises(DomainError):
            Tensor.linear_space(2, 2, num=3)


class TestLogarithmicSpace(unittest.TestCase):
    def test_powers_of_ten(self):
        t = Tensor.logarithmic_space(0, 2, num=3)
        self.assertEqual(t.dtype, DType("float64"))
        np.testing.assert_allclose(t.to_numpy(), [1.0, 10.0, 100.0])

    def test_custom_base(self):
        t = Tensor.logarithmic_space(0, 3, num=4, base=2.0)
        np.testing.assert_allclose(t.to_numpy(), [1.0, 2.0, 4.0, 8.0])

    def test_numpy_scalar_base(self):
        t = Tensor.logarithmic_space(0, 2, num=3, base=np.float64(10.0))
        np.testing.assert_allclose(t.to_numpy(), [1.0, 10.0, 100.0])

    def test_matches_numpy(self):
        t = Tensor.logarithmic_space(-1.0, 1.0, num=9, endpoint=False)
        np.testing.assert_allclose(
            t.to_numpy(), np.logspace(-1.0, 1.0, 9, endpoint=False)
        )


class TestGeometricSpace(unittest.TestCase):
    def test_positive_progression(self):
        t = Tensor.geometric_space(1, 1000, num=4)
        self.assertEqual(t.dtype, DType("float64"))
        np.testing.assert_allclose(t.to_numpy(), [1.0, 10.0, 100.0, 1000.0])

    def test_negative_progression(self):
        t = Tensor.geometric_space(-1, -1000, num=4)
        np.testing.assert_allclose(t.to_numpy(), [-1.0, -10.0, -100.0, -1000.0])

    def test_descending_progression(self):
        t = Tensor.geometric_space(8, 1, num=4)
        np.testing.assert_allclose(t.to_numpy(), [8.0, 4.0, 2.0, 1.0])

    def test_constant_ratio(self):
        t = Tensor.geometric_space(2, 2 * 3**5, num=6)
        arr = t.to_numpy()
        np.testing.assert_allclose(arr[1:] / arr[:-1], np.full(5, 3.0))

    def test_matches_numpy(self):
        t = Tensor.geometric_space(1, 256, num=9)
        np.testing.assert_allclose(t.to_numpy(), np.geomspace(1, 256, 9))

    def test_zero_bound_raises(self):
        with self.assertRaises(DomainError):
            Tensor.geometric_space(0, 5, num=3)
        with self.assertRaises(DomainError):
            Tensor.geometric_space(5, 0, num=3)

    def test_non_finite_bounds_raise(self):
        with self.assertRaises(DomainError):
            Tensor.geometric_space(float("nan"), 10, num=3)
        with self.assertRaises(DomainError):
            Tensor.geometric_space(1, float("inf"), num=3)
        with self.assertRaises(DomainError):
            Tensor.geometric_space(float("-inf"), -1, num=3)

    def test_mixed_signs_raise(self):
        with self.assertRaises(DomainError):
            Tensor.geometric_space(-1, 100, num=3)

    def test_single_sample(self):
        t = Tensor.geometric_space(1, 100, num=1)
        self.assertEqual(t.shape, (1,))
        self.assertTrue(math.isclose(t[0], 100.0))


if __name__ == "__main__":
    unittest.main()
