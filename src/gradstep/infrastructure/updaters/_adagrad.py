"""
AdaGrad updater.

AdaGrad scales each coordinate of the gradient by the inverse square root of
the sum of all squared gradients seen so far for that coordinate. Since the
sum is never decayed, per-coordinate step sizes shrink monotonically:
frequently updated coordinates get smaller steps, rarely updated ones keep
larger steps.

Design notes
------------
- The accumulator lives in an `AdaGradStatus` owned by the driver; the
  updater itself holds no state and can be shared.
- The stability offset is a fixed ``+1.0`` inside the square root rather than
  a tunable epsilon.
- No explicit regularizer is applied; `reg_value` is always 0.0 and
  `reg_param` is validated but otherwise unused.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ._base import SGDUpdater
from ._status import AdaGradStatus

ACCUMULATOR_OFFSET = 1.0


@SGDUpdater.register_updater("adagrad")
class AdaGradSGDUpdater(SGDUpdater):
    """
    AdaGrad updater.

    Update rule
    -----------
        r'  = r + g * g                    (r' = g * g on the first call)
        g~  = g / sqrt(r' + 1.0)
        eta = step_size / sqrt(iter)
        w'  = w - eta * g~

    The returned status holds ``r'``.

    Notes
    -----
    https://en.wikipedia.org/wiki/Stochastic_gradient_descent#AdaGrad
    """

    status_type = AdaGradStatus

    def init_status(self) -> AdaGradStatus:
        return AdaGradStatus()

    def _update(
        self,
        weights: np.ndarray,
        gradient: np.ndarray,
        eta: float,
        iteration: int,
        reg_param: float,
        status: AdaGradStatus,
    ) -> Tuple[np.ndarray, float, AdaGradStatus]:
        updated_status = status.update(gradient)
        accum = updated_status.accum_squared_gradient
        adapted = gradient / np.sqrt(accum + ACCUMULATOR_OFFSET)

        weights -= eta * adapted
        return weights, 0.0, updated_status
