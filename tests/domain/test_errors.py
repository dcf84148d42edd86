import unittest

from gradstep.domain._errors import (
    DimensionMismatchError,
    InvalidIterationError,
    InvalidParameterError,
    InvalidStatusError,
    UpdaterError,
)


class TestErrors(unittest.TestCase):
    def test_all_errors_share_base(self):
        errors = [
            DimensionMismatchError("gradient", 3, 2),
            InvalidIterationError(0),
            InvalidParameterError("step_size", 0.0, "> 0"),
            InvalidStatusError("AdamSGDUpdater", "bad status"),
        ]
        for err in errors:
            with self.subTest(error=type(err).__name__):
                self.assertIsInstance(err, UpdaterError)
                self.assertIsInstance(err, ValueError)

    def test_dimension_mismatch_attributes(self):
        err = DimensionMismatchError("gradient", 3, 2)
        self.assertEqual(err.name, "gradient")
        self.assertEqual(err.expected, 3)
        self.assertEqual(err.actual, 2)
        self.assertIn("expected 3, got 2", str(err))

    def test_invalid_parameter_message(self):
        err = InvalidParameterError("reg_param", -1.0, ">= 0")
        self.assertEqual(err.name, "reg_param")
        self.assertEqual(err.value, -1.0)
        self.assertEqual(str(err), "reg_param must be >= 0, got -1.0")

    def test_invalid_iteration_keeps_value(self):
        err = InvalidIterationError(0)
        self.assertEqual(err.iteration, 0)
        self.assertIn("iter must be an integer >= 1", str(err))

    def test_invalid_status_is_type_error(self):
        err = InvalidStatusError("AdaGradSGDUpdater", "expected AdaGradStatus")
        self.assertIsInstance(err, TypeError)
        self.assertEqual(err.updater, "AdaGradSGDUpdater")


if __name__ == "__main__":
    unittest.main()
