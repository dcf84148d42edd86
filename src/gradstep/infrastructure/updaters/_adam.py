"""
Adam updater.

This module provides an Adam-style updater that maintains exponentially
decaying averages of past gradients (first moment) and past squared
gradients (second moment) in an `AdamStatus` owned by the driver.

Design notes
------------
- Decay rates and epsilon are fixed at construction time, not per call.
- The effective step size ``step_size / sqrt(iter)`` is further divided by
  the first-moment bias correction ``1 - beta**iter``.
- The second moment is bias-corrected as ``sqrt(1 - r**iter) + eps``, i.e.
  the moment vector itself is raised to the power ``iter``. This differs
  from textbook Adam, which divides ``r`` by ``1 - gamma**iter``. The
  formula is kept as is so that numerical results stay reproducible.
- Coordinates where ``r**iter > 1`` (large gradients, small ``iter``) have
  no real square root and become NaN. A `RuntimeWarning` names the affected
  coordinates instead of NumPy's generic floating-point warning.
"""

from __future__ import annotations

import math
import warnings
from numbers import Real
from typing import Any, Dict, Tuple

import numpy as np

from ...domain._errors import InvalidParameterError, InvalidStatusError
from ._base import SGDUpdater
from ._status import AdamStatus


def _check_decay(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, "a real number in [0, 1)")
    out = float(value)
    if not (0.0 <= out < 1.0):
        raise InvalidParameterError(name, value, "in [0, 1)")
    return out


@SGDUpdater.register_updater("adam")
class AdamSGDUpdater(SGDUpdater):
    """
    Adam updater.

    Update rule
    -----------
    Let ``g`` be the gradient and ``t = iter``:

        v'  = beta * v + (1 - beta) * g          (v' = (1 - beta) * g first)
        r'  = gamma * r + (1 - gamma) * g * g    (r' = (1 - gamma) * g * g first)

        fix = sqrt(1 - r' ** t) + eps            (elementwise)
        g~  = v' / fix
        lr  = (step_size / sqrt(t)) / (1 - beta ** t)
        w'  = w - lr * g~

    Parameters
    ----------
    beta : float, optional
        First-moment decay rate, in [0, 1). Defaults to 0.9.
    gamma : float, optional
        Second-moment decay rate, in [0, 1). Defaults to 0.999.
    eps : float, optional
        Numerical floor added to the bias-correction term. Must be > 0.
        Defaults to 1e-8.

    Notes
    -----
    - `reg_value` is always 0.0; `reg_param` is validated but unused.
    - Both corrections use the `iter` passed to the current call.
    """

    status_type = AdamStatus

    def __init__(
        self,
        *,
        beta: float = 0.9,
        gamma: float = 0.999,
        eps: float = 1e-8,
    ) -> None:
        """
        Construct an Adam updater.

        Raises
        ------
        InvalidParameterError
            If `beta` or `gamma` is outside [0, 1) or `eps <= 0`.
        """
        self.beta = _check_decay("beta", beta)
        self.gamma = _check_decay("gamma", gamma)

        if isinstance(eps, bool) or not isinstance(eps, Real):
            raise InvalidParameterError("eps", eps, "a real number > 0")
        self.eps = float(eps)
        if not math.isfinite(self.eps) or self.eps <= 0.0:
            raise InvalidParameterError("eps", eps, "> 0")

    def init_status(self) -> AdamStatus:
        return AdamStatus()

    def get_config(self) -> Dict[str, Any]:
        return {"beta": self.beta, "gamma": self.gamma, "eps": self.eps}

    def _check_status(self, status: Any) -> None:
        super()._check_status(status)
        if not status.is_consistent:
            raise InvalidStatusError(
                type(self).__name__,
                "AdamStatus must have both v and r set, or neither",
            )

    def _update(
        self,
        weights: np.ndarray,
        gradient: np.ndarray,
        eta: float,
        iteration: int,
        reg_param: float,
        status: AdamStatus,
    ) -> Tuple[np.ndarray, float, AdamStatus]:
        updated_status = status.update(gradient, self.beta, self.gamma)
        v, r = updated_status.v, updated_status.r

        radicand = 1.0 - np.power(r, float(iteration))
        negative = np.flatnonzero(radicand < 0.0)
        if negative.size:
            warnings.warn(
                f"Adam second-moment correction is undefined at iter={iteration} "
                f"for coordinates {negative.tolist()} (r**iter > 1); "
                "the corresponding weights become NaN.",
                RuntimeWarning,
                stacklevel=3,
            )
        with np.errstate(invalid="ignore"):
            bias_fix = np.sqrt(radicand) + self.eps

        learning_rate = eta / (1.0 - self.beta**iteration)
        adapted = v / bias_fix

        weights -= learning_rate * adapted
        return weights, 0.0, updated_status
