import unittest

import numpy as np

from keytensor import (
    DType,
    Tensor,
    default_dtype,
    get_default_dtype,
    get_generator,
    manual_seed,
    set_default_dtype,
)


class TestDefaultDType(unittest.TestCase):
    def setUp(self):
        self._saved = get_default_dtype()

    def tearDown(self):
        set_default_dtype(self._saved)

    def test_initial_default_is_float64(self):
        self.assertEqual(self._saved, DType("float64"))

    def test_set_default_dtype_changes_factory_output(self):
        set_default_dtype("int32")
        self.assertEqual(get_default_dtype(), DType("int32"))
        self.assertEqual(Tensor.zeros((2,)).dtype, DType("int32"))

    def test_set_default_dtype_rejects_unknown_names(self):
        with self.assertRaises(ValueError):
            set_default_dtype("float128x")
        self.assertEqual(get_default_dtype(), self._saved)

    def test_context_manager_restores_previous_default(self):
        with default_dtype("float32") as active:
            self.assertEqual(active, DType("float32"))
            self.assertEqual(Tensor.ones((3,)).dtype, DType("float32"))
        self.assertEqual(get_default_dtype(), self._saved)

    def test_context_manager_restores_on_exception(self):
        with self.assertRaises(RuntimeError):
            with default_dtype("int8"):
                raise RuntimeError("boom")
        self.assertEqual(get_default_dtype(), self._saved)

    def test_context_managers_nest(self):
        with default_dtype("int16"):
            with default_dtype("uint8"):
                self.assertEqual(get_default_dtype(), DType("uint8"))
            self.assertEqual(get_default_dtype(), DType("int16"))
        self.assertEqual(get_default_dtype(), self._saved)

    def test_explicit_dtype_overrides_default(self):
        with default_dtype("int32"):
            self.assertEqual(Tensor.zeros((1,), dtype="float32").dtype, "float32")


class TestManualSeed(unittest.TestCase):
    def test_manual_seed_returns_shared_generator(self):
        rng = manual_seed(123)
        self.assertIsInstance(rng, np.random.Generator)
        self.assertIs(get_generator(), rng)

    def test_same_seed_same_stream(self):
        manual_seed(7)
        a = get_generator().random(4)
        manual_seed(7)
        b = get_generator().random(4)
        np.testing.assert_array_equal(a, b)


if __name__ == "__main__":
    unittest.main()
