import pickle
import unittest

import numpy as np

from gradstep.domain._errors import DimensionMismatchError, InvalidStatusError
from gradstep.infrastructure.updaters import (
    AdaGradSGDUpdater,
    AdaGradStatus,
    AdamSGDUpdater,
    AdamStatus,
    EmptyStatus,
)

STATUS_LOGGER = "gradstep.infrastructure.updaters._status"


class TestEmptyStatus(unittest.TestCase):
    def test_instances_compare_equal(self):
        self.assertEqual(EmptyStatus(), EmptyStatus())
        self.assertTrue(EmptyStatus().is_initialized)


class TestAdaGradStatus(unittest.TestCase):
    def test_update_returns_new_status(self):
        s0 = AdaGradStatus()
        s1 = s0.update(np.array([1.0, 2.0]))
        s2 = s1.update(np.array([1.0, 2.0]))

        self.assertIsNone(s0.accum_squared_gradient)
        np.testing.assert_array_equal(s1.accum_squared_gradient, [1.0, 4.0])
        np.testing.assert_array_equal(s2.accum_squared_gradient, [2.0, 8.0])

    def test_stored_arrays_are_private_and_read_only(self):
        src = np.array([1.0, 1.0])
        status = AdaGradStatus(src)
        src[0] = 42.0

        self.assertEqual(status.accum_squared_gradient[0], 1.0)
        self.assertFalse(status.accum_squared_gradient.flags.writeable)

    def test_is_frozen(self):
        status = AdaGradStatus()
        with self.assertRaises(AttributeError):
            status.accum_squared_gradient = np.zeros(1)

    def test_dimension_mismatch(self):
        status = AdaGradStatus(np.zeros(2))
        with self.assertRaises(DimensionMismatchError):
            status.update(np.ones(3))

    def test_pickle_round_trip(self):
        status = AdaGradStatus(np.array([0.5, 1.5]))
        restored = pickle.loads(pickle.dumps(status))
        self.assertIsInstance(restored, AdaGradStatus)
        np.testing.assert_array_equal(
            restored.accum_squared_gradient, status.accum_squared_gradient
        )


class TestAdamStatus(unittest.TestCase):
    def test_first_update(self):
        g = np.array([2.0, -4.0])
        status = AdamStatus().update(g, 0.5, 0.75)
        np.testing.assert_array_equal(status.v, [1.0, -2.0])
        np.testing.assert_array_equal(status.r, [1.0, 4.0])
        self.assertTrue(status.is_initialized)

    def test_subsequent_update(self):
        s1 = AdamStatus(v=np.array([1.0]), r=np.array([2.0]))
        s2 = s1.update(np.array([3.0]), 0.5, 0.5)
        np.testing.assert_array_equal(s2.v, [0.5 * 1.0 + 0.5 * 3.0])
        np.testing.assert_array_equal(s2.r, [0.5 * 2.0 + 0.5 * 9.0])
        np.testing.assert_array_equal(s1.v, [1.0])

    def test_consistency_flag(self):
        self.assertTrue(AdamStatus().is_consistent)
        self.assertTrue(AdamStatus(np.zeros(1), np.zeros(1)).is_consistent)
        self.assertFalse(AdamStatus(v=np.zeros(1)).is_consistent)
        self.assertFalse(AdamStatus(r=np.zeros(1)).is_initialized)

    def test_pickle_round_trip(self):
        status = AdamStatus(np.array([0.1]), np.array([0.2]))
        restored = pickle.loads(pickle.dumps(status))
        np.testing.assert_array_equal(restored.v, [0.1])
        np.testing.assert_array_equal(restored.r, [0.2])


class TestMalformedStatusVectors(unittest.TestCase):
    def test_adagrad_rejects_non_vector_accumulator(self):
        for bad in (np.float64(1.0), np.zeros((2, 1)), np.zeros((1, 2))):
            with self.subTest(shape=np.shape(bad)):
                with self.assertRaises(InvalidStatusError) as ctx:
                    AdaGradStatus(bad)
                self.assertIn("accum_squared_gradient", str(ctx.exception))

    def test_adam_rejects_non_vector_moments(self):
        cases = [
            (np.float64(0.1), np.float64(0.1)),
            (np.zeros((2, 1)), np.zeros(2)),
            (np.zeros(2), np.zeros((2, 1))),
        ]
        for v, r in cases:
            with self.subTest(v=np.shape(v), r=np.shape(r)):
                with self.assertRaises(InvalidStatusError):
                    AdamStatus(v, r)

    def test_wrong_length_vector_is_dimension_mismatch(self):
        updater = AdaGradSGDUpdater()
        with self.assertRaises(DimensionMismatchError) as ctx:
            updater.compute(
                np.zeros(2), np.ones(2), 0.1, 2, 0.0, AdaGradStatus(np.ones(3))
            )
        self.assertEqual(ctx.exception.expected, 2)
        self.assertEqual(ctx.exception.actual, 3)


class TestStatusLogging(unittest.TestCase):
    def test_adagrad_initialization_is_logged(self):
        updater = AdaGradSGDUpdater()
        with self.assertLogs(STATUS_LOGGER, "DEBUG") as logs:
            updater.compute(np.zeros(3), np.ones(3), 0.1, 1, 0.0, updater.init_status())
        self.assertTrue(any("AdaGrad accumulator (d=3)" in m for m in logs.output))

    def test_adam_initialization_is_logged(self):
        updater = AdamSGDUpdater()
        with self.assertLogs(STATUS_LOGGER, "DEBUG") as logs:
            updater.compute(np.zeros(2), np.ones(2), 0.1, 1, 0.0, updater.init_status())
        self.assertTrue(any("Adam moments (d=2)" in m for m in logs.output))


if __name__ == "__main__":
    unittest.main()
