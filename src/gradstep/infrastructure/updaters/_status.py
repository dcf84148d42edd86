"""
Concrete updater statuses.

Three status types cover the built-in updaters:

- `EmptyStatus` for the stateless rules (simple, L1, L2)
- `AdaGradStatus` holding the running sum of squared gradients
- `AdamStatus` holding the first and second moment estimates

Design notes
------------
- Statuses are frozen dataclasses. Stored arrays are private, read-only
  copies, so a status can be kept as a checkpoint snapshot while training
  continues.
- "No gradient seen yet" is modelled as ``None`` rather than a zero vector,
  since the dimension is unknown until the first gradient arrives.
- Stored arrays must be 1-D; anything else is rejected with
  `InvalidStatusError` at construction.
- `update` never mutates `self`; it returns the next status.
- Statuses are picklable so that a driver can checkpoint them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from ...domain._errors import InvalidStatusError
from ...domain._updater import UpdaterStatus
from ..vector._ops import check_same_dimension, frozen_copy

logger = logging.getLogger(__name__)


def _stored_vector(owner: str, field: str, value: Any) -> np.ndarray:
    """Read-only 1-D copy of `value`, or `InvalidStatusError`."""
    vec = frozen_copy(value)
    if vec.ndim != 1:
        raise InvalidStatusError(
            owner, f"{field} must be a 1-D vector, got shape {vec.shape}"
        )
    return vec


@dataclass(frozen=True)
class EmptyStatus(UpdaterStatus):
    """
    Status of a stateless updater.

    All instances compare equal; stateless updaters return the status they
    were given unchanged.
    """


@dataclass(frozen=True, eq=False)
class AdaGradStatus(UpdaterStatus):
    """
    AdaGrad accumulator state.

    Attributes
    ----------
    accum_squared_gradient : Optional[np.ndarray]
        Elementwise sum of all squared gradients seen so far, or ``None``
        before the first update. The sum is never decayed.
    """

    accum_squared_gradient: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        if self.accum_squared_gradient is not None:
            object.__setattr__(
                self,
                "accum_squared_gradient",
                _stored_vector(
                    "AdaGradStatus",
                    "accum_squared_gradient",
                    self.accum_squared_gradient,
                ),
            )

    @property
    def is_initialized(self) -> bool:
        return self.accum_squared_gradient is not None

    def update(self, gradient: np.ndarray) -> "AdaGradStatus":
        """
        Fold ``gradient * gradient`` into the accumulator.

        Parameters
        ----------
        gradient : np.ndarray
            Current gradient, shape ``(d,)``.

        Returns
        -------
        AdaGradStatus
            A new status; `self` is left untouched.

        Raises
        ------
        DimensionMismatchError
            If the existing accumulator has a different dimension.
        """
        squared = gradient * gradient
        if self.accum_squared_gradient is None:
            logger.debug("Initializing AdaGrad accumulator (d=%d)", gradient.shape[0])
            return AdaGradStatus(squared)

        check_same_dimension(
            "accum_squared_gradient", gradient, self.accum_squared_gradient
        )
        return AdaGradStatus(self.accum_squared_gradient + squared)


@dataclass(frozen=True, eq=False)
class AdamStatus(UpdaterStatus):
    """
    Adam moment estimates.

    Attributes
    ----------
    v : Optional[np.ndarray]
        Exponential moving average of gradients (first moment).
    r : Optional[np.ndarray]
        Exponential moving average of squared gradients (second moment).

    Notes
    -----
    Both fields are ``None`` before the first update and both are set
    afterwards; a status with only one of them set is malformed.
    """

    v: Optional[np.ndarray] = None
    r: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        if self.v is not None:
            object.__setattr__(self, "v", _stored_vector("AdamStatus", "v", self.v))
        if self.r is not None:
            object.__setattr__(self, "r", _stored_vector("AdamStatus", "r", self.r))

    @property
    def is_initialized(self) -> bool:
        return self.v is not None and self.r is not None

    @property
    def is_consistent(self) -> bool:
        """True when `v` and `r` are either both absent or both present."""
        return (self.v is None) == (self.r is None)

    def update(self, gradient: np.ndarray, beta: float, gamma: float) -> "AdamStatus":
        """
        Advance both moment estimates by one gradient.

            v' = beta * v + (1 - beta) * g
            r' = gamma * r + (1 - gamma) * g * g

        On the first update the prior terms are dropped, i.e.
        ``v' = (1 - beta) * g`` and ``r' = (1 - gamma) * g * g``.

        Returns
        -------
        AdamStatus
            A new status; `self` is left untouched.
        """
        squared = gradient * gradient
        if self.v is None and self.r is None:
            logger.debug("Initializing Adam moments (d=%d)", gradient.shape[0])
            return AdamStatus((1.0 - beta) * gradient, (1.0 - gamma) * squared)

        check_same_dimension("v", gradient, self.v)
        check_same_dimension("r", gradient, self.r)
        return AdamStatus(
            beta * self.v + (1.0 - beta) * gradient,
            gamma * self.r + (1.0 - gamma) * squared,
        )
