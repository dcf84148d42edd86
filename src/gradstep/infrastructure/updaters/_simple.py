"""
Plain gradient-descent updater without regularization.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ._base import SGDUpdater
from ._status import EmptyStatus


@SGDUpdater.register_updater("simple")
class SimpleSGDUpdater(SGDUpdater):
    """
    Gradient descent step *without* any regularization.

    Update rule
    -----------
        eta = step_size / sqrt(iter)
        w'  = w - eta * g

    `reg_value` is always 0.0 and the status is returned unchanged.
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
        weights -= eta * gradient
        return weights, 0.0, status
