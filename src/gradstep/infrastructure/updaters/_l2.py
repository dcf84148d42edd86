"""
Squared-L2 (ridge) regularized updater.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..vector._ops import l2_norm
from ._base import SGDUpdater
from ._status import EmptyStatus


@SGDUpdater.register_updater("l2")
class SquaredL2SGDUpdater(SGDUpdater):
    """
    Updater for L2-regularized problems, ``R(w) = 1/2 ||w||^2``.

    Both the loss gradient and the regularizer gradient (``reg_param * w``)
    are applied in one closed-form step:

        w' = w - eta * (g + reg_param * w)
           = (1 - eta * reg_param) * w - eta * g

    `reg_value` is ``0.5 * reg_param * ||w'||_2^2`` on the updated weights.
    No proximal step is needed since the penalty is smooth.
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
        weights *= 1.0 - eta * reg_param
        weights -= eta * gradient
        norm = l2_norm(weights)
        return weights, 0.5 * reg_param * norm * norm, status
