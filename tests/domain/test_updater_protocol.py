import unittest

import numpy as np

from gradstep.domain._updater import IUpdater, UpdateResult, UpdaterStatus
from gradstep.infrastructure.updaters import (
    AdaGradSGDUpdater,
    AdamSGDUpdater,
    L1SGDUpdater,
    SimpleSGDUpdater,
    SquaredL2SGDUpdater,
)


class TestUpdaterProtocol(unittest.TestCase):
    def test_builtin_updaters_conform_to_iupdater(self):
        for cls in (
            SimpleSGDUpdater,
            L1SGDUpdater,
            SquaredL2SGDUpdater,
            AdaGradSGDUpdater,
            AdamSGDUpdater,
        ):
            with self.subTest(updater=cls.__name__):
                self.assertIsInstance(cls(), IUpdater)

    def test_init_status_is_updater_status(self):
        for updater in (SimpleSGDUpdater(), AdaGradSGDUpdater(), AdamSGDUpdater()):
            with self.subTest(updater=type(updater).__name__):
                self.assertIsInstance(updater.init_status(), UpdaterStatus)

    def test_update_result_unpacks_as_triple(self):
        updater = SimpleSGDUpdater()
        result = updater.compute(
            np.array([1.0]), np.array([1.0]), 1.0, 1, 0.0, updater.init_status()
        )
        self.assertIsInstance(result, UpdateResult)

        weights, reg_value, status = result
        self.assertIs(weights, result.weights)
        self.assertEqual(reg_value, result.reg_value)
        self.assertIs(status, result.status)

    def test_object_without_compute_is_not_an_updater(self):
        class NotAnUpdater:
            def init_status(self):
                return None

        self.assertNotIsInstance(NotAnUpdater(), IUpdater)


if __name__ == "__main__":
    unittest.main()
