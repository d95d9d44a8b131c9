import unittest

import numpy as np

from keytensor.domain.dtype import DType, DTypeKind


class TestDType(unittest.TestCase):
    def test_valid_names_map_to_kinds(self):
        self.assertIs(DType("float32").kind, DTypeKind.FLOAT)
        self.assertIs(DType("int16").kind, DTypeKind.INT)
        self.assertIs(DType("uint8").kind, DTypeKind.UINT)
        self.assertIs(DType("bool").kind, DTypeKind.BOOL)

    def test_invalid_name_raises_value_error(self):
        with self.assertRaises(ValueError):
            DType("complex128")

    def test_equality_and_hash(self):
        self.assertEqual(DType("float64"), DType("float64"))
        self.assertEqual(DType("float64"), "float64")
        self.assertNotEqual(DType("float64"), DType("float32"))
        self.assertEqual(len({DType("int32"), DType("int32")}), 1)

    def test_str_and_repr(self):
        self.assertEqual(str(DType("int8")), "int8")
        self.assertEqual(repr(DType("int8")), "DType('int8')")

    def test_coerce_accepts_common_forms(self):
        self.assertEqual(DType.coerce("int32"), DType("int32"))
        self.assertEqual(DType.coerce(DType("uint16")), DType("uint16"))
        self.assertEqual(DType.coerce(float), DType("float64"))
        self.assertEqual(DType.coerce(int), DType("int64"))
        self.assertEqual(DType.coerce(bool), DType("bool"))
        self.assertEqual(DType.coerce(np.dtype("float32")), DType("float32"))
        self.assertEqual(DType.coerce(np.int16), DType("int16"))

    def test_coerce_rejects_unknown_objects(self):
        with self.assertRaises(ValueError):
            DType.coerce(object())
        with self.assertRaises(ValueError):
            DType.coerce(np.dtype("complex64"))

    def test_predicates(self):
        self.assertTrue(DType("float16").is_floating())
        self.assertTrue(DType("int64").is_integer())
        self.assertTrue(DType("uint64").is_integer())
        self.assertTrue(DType("bool").is_bool())
        self.assertFalse(DType("bool").is_integer())

    def test_cast_uses_the_element_constructor(self):
        self.assertEqual(DType("float32").cast(3), 3.0)
        self.assertIsInstance(DType("float32").cast(3), float)
        self.assertEqual(DType("int32").cast(2.9), 2)
        self.assertEqual(DType("int32").cast(-2.9), -2)
        self.assertIs(DType("bool").cast(5), True)

    def test_zero_and_one(self):
        self.assertEqual(DType("float64").zero(), 0.0)
        self.assertEqual(DType("float64").one(), 1.0)
        self.assertIsInstance(DType("int8").one(), int)
        self.assertIs(DType("bool").zero(), False)
        self.assertIs(DType("bool").one(), True)


if __name__ == "__main__":
    unittest.main()
