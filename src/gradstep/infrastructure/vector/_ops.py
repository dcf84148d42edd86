"""
NumPy-backed vector helpers used by the updaters.

This module is the only place where raw caller input is turned into NumPy
arrays. It provides:

- `as_vector`: coerce an array-like into a fresh 1-D ``float64`` array
- `check_same_dimension`: dimension validation across operands
- `effective_step_size`: the ``step_size / sqrt(iter)`` schedule
- `l1_norm` / `l2_norm`: penalty helpers returning Python floats
- `frozen_copy`: read-only private copies for status storage

All helpers return new arrays; caller-owned buffers are never written to.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, Tuple, Union

import numpy as np

from ...domain._errors import (
    DimensionMismatchError,
    InvalidIterationError,
    InvalidParameterError,
)


def as_vector(value: Any, *, name: str = "vector") -> np.ndarray:
    """
    Coerce `value` into a new, writable 1-D ``float64`` array.

    Parameters
    ----------
    value : Any
        Array-like input (ndarray, list, tuple, ...).
    name : str, optional
        Operand name used in error messages.

    Returns
    -------
    np.ndarray
        A copy of the input; mutating it never affects `value`.

    Raises
    ------
    DimensionMismatchError
        If the input is not 1-D or is empty.
    InvalidParameterError
        If any entry is NaN or infinite.
    """
    arr = np.array(value, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise DimensionMismatchError(f"{name} (ndim)", 1, arr.ndim)
    if arr.shape[0] == 0:
        raise DimensionMismatchError(name, 1, 0)
    bad = np.flatnonzero(~np.isfinite(arr))
    if bad.size:
        i = int(bad[0])
        raise InvalidParameterError(f"{name}[{i}]", float(arr[i]), "finite")
    return arr


def _extent(vec: np.ndarray) -> Union[int, Tuple[int, ...]]:
    return vec.shape[0] if vec.ndim == 1 else vec.shape


def check_same_dimension(name: str, reference: np.ndarray, other: np.ndarray) -> None:
    """
    Raise `DimensionMismatchError` unless both arrays have the same shape.

    Lengths are reported for 1-D arrays, full shapes otherwise.
    """
    if other.shape != reference.shape:
        raise DimensionMismatchError(name, _extent(reference), _extent(other))


def check_iteration(iteration: Any) -> int:
    """
    Validate an iteration index and return it as a plain ``int``.

    Booleans are rejected even though they are integers in Python.
    """
    if isinstance(iteration, bool) or not isinstance(iteration, Integral):
        raise InvalidIterationError(iteration)
    if iteration < 1:
        raise InvalidIterationError(iteration)
    return int(iteration)


def check_scalar(name: str, value: Any, *, positive: bool) -> float:
    """
    Validate a finite real scalar.

    Parameters
    ----------
    name : str
        Parameter name for error messages.
    value : Any
        Supplied value.
    positive : bool
        If True require ``value > 0``, otherwise ``value >= 0``.

    Returns
    -------
    float
        The value as a Python float.
    """
    requirement = "> 0" if positive else ">= 0"
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, f"a real number {requirement}")
    out = float(value)
    if not math.isfinite(out):
        raise InvalidParameterError(name, value, f"finite and {requirement}")
    if (positive and out <= 0.0) or (not positive and out < 0.0):
        raise InvalidParameterError(name, value, requirement)
    return out


def effective_step_size(step_size: float, iteration: int) -> float:
    """
    Per-iteration learning rate ``step_size / sqrt(iteration)``.

    Strictly decreasing in `iteration` for a fixed positive `step_size`.
    """
    return step_size / math.sqrt(iteration)


def l1_norm(vec: np.ndarray) -> float:
    return float(np.linalg.norm(vec, ord=1))


def l2_norm(vec: np.ndarray) -> float:
    return float(np.linalg.norm(vec, ord=2))


def frozen_copy(vec: np.ndarray) -> np.ndarray:
    """Return a read-only copy of `vec` suitable for storing in a status."""
    out = np.array(vec, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out
