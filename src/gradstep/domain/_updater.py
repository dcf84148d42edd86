"""
Domain-level updater contracts for gradstep.

This module defines the `IUpdater` protocol, which specifies the per-iteration
weight-update contract shared by every update rule (plain SGD, L1-proximal,
L2, AdaGrad, Adam), together with the `UpdaterStatus` base class and the
`UpdateResult` value returned by `compute`.

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy or
  infrastructure implementations.
- Updaters are pure transformations: they never mutate the weights, gradient
  or status passed in. Any state carried between iterations lives in a status
  object owned by the training driver.
- Gradient computation, convergence checks and persistence are outside the
  scope of these contracts.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Protocol, runtime_checkable

from .types._vector import VectorLike


class UpdaterStatus:
    """
    Base class for state carried by an updater between iterations.

    Stateless updaters use an empty status; adaptive updaters store their
    per-coordinate accumulators. Statuses are opaque to the driver, which
    only stores them and passes them back into the next `compute` call.

    Notes
    -----
    Concrete statuses are immutable values: advancing the state always
    returns a new object, so a driver may keep references to earlier
    snapshots without aliasing hazards.
    """

    __slots__ = ()

    @property
    def is_initialized(self) -> bool:
        """
        Whether any gradient has been folded into this status.

        Stateless statuses are always considered initialized.
        """
        return True


class UpdateResult(NamedTuple):
    """
    Outcome of one `compute` call.

    Unpacks as ``weights, reg_value, status``.

    Attributes
    ----------
    weights : VectorLike
        Updated weight vector (a new object, never the caller's input).
    reg_value : float
        Regularization penalty ``reg_param * R(w)`` evaluated on the
        *updated* weights.
    status : UpdaterStatus
        Updater status to pass into the next iteration.
    """

    weights: Any
    reg_value: float
    status: Any


@runtime_checkable
class IUpdater(Protocol):
    """
    Updater interface contract.

    An updater turns ``(weights, gradient, step_size, iter, reg_param, status)``
    into ``(new_weights, reg_value, new_status)``. It is invoked once per
    optimization iteration by an external driver that supplies gradients and
    monotonically increasing iteration indices starting at 1.

    Required methods
    ----------------
    - `init_status()` returns the status to use before the first iteration.
    - `compute(...)` applies one update step.
    """

    def init_status(self) -> UpdaterStatus:
        """
        Return the initial status (no gradients seen yet).
        """
        ...

    def compute(
        self,
        weights_old: VectorLike,
        gradient: VectorLike,
        step_size: float,
        iter: int,
        reg_param: float,
        status: UpdaterStatus,
    ) -> UpdateResult:
        """
        Compute updated weights for one iteration.

        Parameters
        ----------
        weights_old : VectorLike
            Current weights, shape ``(d,)``.
        gradient : VectorLike
            Gradient of the loss at ``weights_old``, shape ``(d,)``.
        step_size : float
            Base step size; must be > 0. Decayed as ``step_size / sqrt(iter)``.
        iter : int
            Iteration index, starting at 1.
        reg_param : float
            Regularization strength; must be >= 0.
        status : UpdaterStatus
            Status returned by the previous call (or `init_status()`).

        Returns
        -------
        UpdateResult
            New weights, regularization value on the new weights, new status.
        """
        ...
