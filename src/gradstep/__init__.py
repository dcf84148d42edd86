"""
gradstep - per-iteration weight updaters for gradient-based optimization.

An updater turns ``(weights, gradient, step_size, iter, reg_param, status)``
into ``(new_weights, reg_value, new_status)``. The training driver owns the
loop, the gradients and the ``(weights, status)`` pair; updaters are pure.

Typical use::

    from gradstep import SGDUpdater

    updater = SGDUpdater.create("adam")
    status = updater.init_status()
    for it in range(1, n_iter + 1):
        weights, reg_value, status = updater.compute(
            weights, grad_fn(weights), 0.1, it, 0.0, status
        )
"""

from .domain._errors import (
    DimensionMismatchError,
    InvalidIterationError,
    InvalidParameterError,
    InvalidStatusError,
    UpdaterError,
)
from .domain._updater import IUpdater, UpdateResult, UpdaterStatus
from .infrastructure.vector._ops import effective_step_size
from .infrastructure.updaters import (
    AdaGradSGDUpdater,
    AdaGradStatus,
    AdamSGDUpdater,
    AdamStatus,
    EmptyStatus,
    L1SGDUpdater,
    SGDUpdater,
    SimpleSGDUpdater,
    SquaredL2SGDUpdater,
)

__all__ = [
    "IUpdater",
    "UpdateResult",
    "UpdaterStatus",
    "SGDUpdater",
    "SimpleSGDUpdater",
    "L1SGDUpdater",
    "SquaredL2SGDUpdater",
    "AdaGradSGDUpdater",
    "AdamSGDUpdater",
    "EmptyStatus",
    "AdaGradStatus",
    "AdamStatus",
    "UpdaterError",
    "DimensionMismatchError",
    "InvalidIterationError",
    "InvalidParameterError",
    "InvalidStatusError",
    "effective_step_size",
]
