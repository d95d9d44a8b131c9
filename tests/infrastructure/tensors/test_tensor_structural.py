import unittest

import numpy as np

from keytensor import DType, ShapeError, Tensor


class TestEyeIdentityTri(unittest.TestCase):
    def test_identity(self):
        t = Tensor.identity(3)
        self.assertEqual(t.shape, (3, 3))
        self.assertEqual(t.dtype, DType("float64"))
        np.testing.assert_array_equal(t.to_numpy(), np.identity(3))

    def test_eye_rectangular_with_offset(self):
        t = Tensor.eye(3, 4, k=1, dtype="int32")
        self.assertEqual(t.dtype, DType("int32"))
        np.testing.assert_array_equal(t.to_numpy(), np.eye(3, 4, k=1, dtype=np.int32))

    def test_eye_negative_offset(self):
        t = Tensor.eye(4, k=-2)
        np.testing.assert_array_equal(t.to_numpy(), np.eye(4, k=-2))

    def test_eye_offset_beyond_matrix_is_all_zero(self):
        t = Tensor.eye(2, 3, k=5)
        np.testing.assert_array_equal(t.to_numpy(), np.zeros((2, 3)))

    def test_eye_bool(self):
        t = Tensor.eye(2, dtype="bool")
        self.assertEqual(t.tolist(), [[True, False], [False, True]])

    def test_tri(self):
        t = Tensor.tri(3)
        np.testing.assert_array_equal(t.to_numpy(), np.tri(3))

    def test_tri_rectangular_with_offset(self):
        for k in (-1, 0, 2):
            t = Tensor.tri(3, 5, k=k, dtype="uint8")
            np.testing.assert_array_equal(
                t.to_numpy(), np.tri(3, 5, k=k, dtype=np.uint8)
            )

    def test_zero_sized(self):
        self.assertEqual(Tensor.eye(0).shape, (0, 0))
        self.assertEqual(Tensor.tri(2, 0).shape, (2, 0))

    def test_negative_dimension_raises(self):
        with self.assertRaises(ShapeError):
            Tensor.eye(-1)
        with self.assertRaises(ShapeError):
            Tensor.tri(2, -3)
        with self.assertRaises(ShapeError):
            Tensor.identity(-2)


class TestDiag(unittest.TestCase):
    def test_diag_from_tensor(self):
        v = Tensor.range(1, 4, dtype="int64")
        t = Tensor.diag(v)
        self.assertEqual(t.dtype, DType("int64"))
        np.testing.assert_array_equal(t.to_numpy(), np.diag([1, 2, 3]))

    def test_diag_from_list(self):
        t = Tensor.diag([1.5, 2.5, 3.5])
        self.assertEqual(t.dtype, DType("float64"))
        np.testing.assert_array_equal(t.to_numpy(), np.diag([1.5, 2.5, 3.5]))

    def test_diag_positive_offset_keeps_square_shape(self):
        t = Tensor.diag([1, 2, 3], k=1)
        self.assertEqual(t.shape, (3, 3))
        np.testing.assert_array_equal(
            t.to_numpy(), [[0, 1, 0], [0, 0, 2], [0, 0, 0]]
        )

    def test_diag_negative_offset(self):
        t = Tensor.diag([7, 8, 9], k=-2)
        np.testing.assert_array_equal(
            t.to_numpy(), [[0, 0, 0], [0, 0, 0], [7, 0, 0]]
        )

    def test_diag_rank_two_raises(self):
        with self.assertRaises(ShapeError):
            Tensor.diag(Tensor.identity(2))

    def test_diag_scalar_raises(self):
        with self.assertRaises(ShapeError):
            Tensor.diag(5)

    def test_diag_empty_vector(self):
        self.assertEqual(Tensor.diag(Tensor.zeros((0,))).shape, (0, 0))


class TestVander(unittest.TestCase):
    def test_decreasing_powers(self):
        t = Tensor.vander([1, 2, 3])
        np.testing.assert_array_equal(t.to_numpy(), np.vander([1, 2, 3]))
        self.assertEqual(t.tolist(), [[1, 1, 1], [4, 2, 1], [9, 3, 1]])

    def test_increasing_powers(self):
        t = Tensor.vander([1, 2, 3], increasing=True)
        self.assertEqual(t.tolist(), [[1, 1, 1], [1, 2, 4], [1, 3, 9]])

    def test_explicit_column_count(self):
        x = Tensor.from_numpy(np.array([2.0, 0.5]))
        t = Tensor.vander(x, n=4)
        self.assertEqual(t.shape, (2, 4))
        np.testing.assert_allclose(t.to_numpy(), np.vander([2.0, 0.5], 4))

    def test_keeps_element_type(self):
        x = Tensor.from_numpy(np.array([1, 2], dtype=np.int16))
        self.assertEqual(Tensor.vander(x).dtype, DType("int16"))

    def test_integer_power_overflow_raises(self):
        x = Tensor.from_numpy(np.array([10**10, 2], dtype=np.int64))
        with self.assertRaises(OverflowError):
            Tensor.vander(x, n=3)

    def test_rank_two_raises(self):
        with self.assertRaises(ShapeError):
            Tensor.vander(Tensor.zeros((2, 2)))

    def test_negative_columns_raise(self):
        with self.assertRaises(ShapeError):
            Tensor.vander([1, 2], n=-1)


if __name__ == "__main__":
    unittest.main()
