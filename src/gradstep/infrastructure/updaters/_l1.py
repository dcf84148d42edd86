"""
L1-regularized updater using the proximal (soft-thresholding) step.

For the regularizer ``R(w) = ||w||_1`` the proximal operator is applied after
the plain gradient step, instead of taking a subgradient of the regularizer.
This yields exact zeros for small weights, i.e. sparse intermediate
solutions.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..vector._ops import l1_norm
from ._base import SGDUpdater
from ._status import EmptyStatus


def soft_threshold(weights: np.ndarray, shrinkage: float) -> np.ndarray:
    """
    Elementwise soft-thresholding ``sign(w) * max(0, |w| - shrinkage)``.

    - ``w >  shrinkage`` becomes ``w - shrinkage``
    - ``w < -shrinkage`` becomes ``w + shrinkage``
    - otherwise the coordinate becomes exactly 0.0

    Coordinates are treated independently. Returns a new array.
    """
    return np.sign(weights) * np.maximum(0.0, np.abs(weights) - shrinkage)


@SGDUpdater.register_updater("l1")
class L1SGDUpdater(SGDUpdater):
    """
    Updater for L1-regularized problems, ``R(w) = ||w||_1``.

    Update rule
    -----------
        eta = step_size / sqrt(iter)
        w~  = w - eta * g
        s   = reg_param * eta
        w'  = sign(w~) * max(0, |w~| - s)

    `reg_value` is ``reg_param * ||w'||_1``, computed after thresholding.
    """

    def _update(
        self,
        weights: np.ndarray,
        gradient: np.ndarray,
        eta: float,
        iteration: int,
        reg_param: float,
        status: EmptyStatus,
    ) -> Tuple[np.ndarray, float, EmptyStatus]:
        # Take gradient step
        weights -= eta * gradient
        # Apply proximal operator
        shrunk = soft_threshold(weights, reg_param * eta)
        return shrunk, reg_param * l1_norm(shrunk), status
