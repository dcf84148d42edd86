"""
Caller-input exceptions for gradstep updaters.

Every error an updater can raise stems from invalid input supplied by the
training driver: vectors of inconsistent dimension, an iteration index that
would break the ``1 / sqrt(iter)`` schedule, hyperparameters outside their
valid range, or a status object produced by a different updater.

Updaters perform no I/O, so none of these conditions are transient and none
are retried. They are raised eagerly, before any arithmetic, so that invalid
input never silently turns into NaN or Inf weights.
"""

from __future__ import annotations

from typing import Any, Tuple, Union


class UpdaterError(ValueError):
    """
    Base class for all errors raised by gradstep updaters.
    """


class DimensionMismatchError(UpdaterError):
    """
    Raised when vectors participating in one update have different lengths.

    This covers weights vs. gradient as well as gradient vs. any vector
    stored in an updater status (e.g., the AdaGrad accumulator). Vectors are
    never truncated or padded to make them fit.

    Attributes
    ----------
    name : str
        Name of the offending operand (e.g., "gradient").
    expected : int or tuple of int
        Expected length (full shape when the operand is not 1-D).
    actual : int or tuple of int
        Actual length (full shape when the operand is not 1-D).
    """

    def __init__(
        self,
        name: str,
        expected: Union[int, Tuple[int, ...]],
        actual: Union[int, Tuple[int, ...]],
    ) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        name : str
            Name of the operand whose dimension is wrong.
        expected : int or tuple of int
            Dimension required by the other operands.
        actual : int or tuple of int
            Dimension that was supplied.
        """
        super().__init__(
            f"Dimension mismatch for {name}: expected {expected}, got {actual}."
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class InvalidIterationError(UpdaterError):
    """
    Raised when the iteration index is not a positive integer.

    The effective step size is ``step_size / sqrt(iter)``, so ``iter = 0``
    would divide by zero and negative indices have no meaning.
    """

    def __init__(self, iteration: Any) -> None:
        super().__init__(f"iter must be an integer >= 1, got {iteration!r}.")
        self.iteration = iteration


class InvalidParameterError(UpdaterError):
    """
    Raised when a scalar hyperparameter is outside its valid range.

    Attributes
    ----------
    name : str
        Parameter name (e.g., "step_size", "beta").
    value : Any
        Value that was supplied.
    """

    def __init__(self, name: str, value: Any, requirement: str) -> None:
        """
        Initialize the InvalidParameterError.

        Parameters
        ----------
        name : str
            Parameter name.
        value : Any
            Offending value.
        requirement : str
            Human-readable constraint, e.g. "> 0" or "in [0, 1)".
        """
        super().__init__(f"{name} must be {requirement}, got {value!r}")
        self.name = name
        self.value = value
        self.requirement = requirement


class InvalidStatusError(UpdaterError, TypeError):
    """
    Raised when an updater receives a status it could not have produced.

    Each updater only accepts the status type returned by its own
    ``init_status()``/``compute()``. Passing an AdaGrad status into an Adam
    updater, or a hand-built status in an inconsistent state, is rejected.
    """

    def __init__(self, updater: str, message: str) -> None:
        super().__init__(f"{updater}: {message}")
        self.updater = updater
