"""
Updater base class and name registry.

`SGDUpdater` is the concrete base shared by every built-in update rule. It
implements the `IUpdater` contract as a template:

1. validate all caller input (fail fast, before any arithmetic),
2. coerce weights and gradient into fresh NumPy vectors,
3. delegate the rule-specific math to `_update`,
4. wrap the outcome into an `UpdateResult`.

Subclasses only implement `_update` and, when stateful, `init_status` and
`status_type`.

Registry
--------
Updaters are registered by string name via a decorator, mirroring the way
weight initializers are looked up:

    @SGDUpdater.register_updater("adam")
    class AdamSGDUpdater(SGDUpdater): ...

    updater = SGDUpdater.create("adam", beta=0.8)

Notes
-----
- Registration keys must be unique unless explicitly overwritten.
- Hyperparameters are constructor keyword arguments; `get_config()` returns
  them so that ``SGDUpdater.create(u.name, **u.get_config())`` rebuilds an
  equivalent updater.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, Tuple, Type, TypeVar

import numpy as np

from ...domain._errors import InvalidStatusError
from ...domain._updater import UpdateResult, UpdaterStatus
from ..vector._ops import (
    as_vector,
    check_iteration,
    check_same_dimension,
    check_scalar,
    effective_step_size,
)
from ._status import EmptyStatus

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=Type["SGDUpdater"])


class SGDUpdater(ABC):
    """
    Base class for weight updaters used by gradient-descent style drivers.

    For regularized problems of the form ``min L(w) + reg_param * R(w)``,
    `compute` performs one step given a (possibly stochastic) gradient of the
    loss ``L`` and also applies the update coming from the regularizer ``R``.

    Class attributes
    ----------------
    name : str
        Registry name, set by `register_updater`.
    status_type : type
        Status class accepted and returned by this updater.
    UPDATERS : dict
        Class-level registry mapping names to updater classes.
    """

    UPDATERS: ClassVar[Dict[str, Type["SGDUpdater"]]] = {}

    name: ClassVar[str] = ""
    status_type: ClassVar[Type[UpdaterStatus]] = EmptyStatus

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    @classmethod
    def register_updater(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[U], U]:
        """
        Decorator to register an updater class under `name`.

        Parameters
        ----------
        name:
            Registry key used to retrieve the updater later.
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Updater name must be a non-empty string")

        def decorator(updater_cls: U) -> U:
            if not overwrite and name in cls.UPDATERS:
                raise ValueError(f"Updater already registered: {name!r}")
            updater_cls.name = name
            cls.UPDATERS[name] = updater_cls
            logger.debug("Registered updater %r -> %s", name, updater_cls.__name__)
            return updater_cls

        return decorator

    @classmethod
    def available(cls) -> Tuple[str, ...]:
        """Return registered updater names (sorted)."""
        return tuple(sorted(cls.UPDATERS))

    @classmethod
    def get(cls, name: str) -> Type["SGDUpdater"]:
        """
        Get a registered updater class by name.

        Raises
        ------
        ValueError
            If `name` is not registered.
        """
        try:
            return cls.UPDATERS[name]
        except KeyError as e:
            available = ", ".join(sorted(cls.UPDATERS)) or "<none>"
            raise ValueError(
                f"Unsupported updater name: {name!r}. Available: {available}"
            ) from e

    @classmethod
    def create(cls, name: str, **config: Any) -> "SGDUpdater":
        """Instantiate the updater registered under `name` with `config`."""
        return cls.get(name)(**config)

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def init_status(self) -> UpdaterStatus:
        """Return the status to use before the first iteration."""
        return EmptyStatus()

    def get_config(self) -> Dict[str, Any]:
        """Return constructor keyword arguments (empty for stateless rules)."""
        return {}

    def compute(
        self,
        weights_old: Any,
        gradient: Any,
        step_size: float,
        iter: int,
        reg_param: float,
        status: UpdaterStatus,
    ) -> UpdateResult:
        """
        Compute updated weights for one iteration.

        Parameters
        ----------
        weights_old : array-like
            Current weights, shape ``(d,)``. Never modified.
        gradient : array-like
            Gradient direction for the loss, shape ``(d,)``. Never modified.
        step_size : float
            Base step size, > 0. The effective rate is ``step_size / sqrt(iter)``.
        iter : int
            Iteration index, >= 1.
        reg_param : float
            Regularization parameter, >= 0.
        status : UpdaterStatus
            Status from `init_status()` or from the previous call.

        Returns
        -------
        UpdateResult
            ``(weights, reg_value, status)`` where `reg_value` is computed on
            the updated weights.

        Raises
        ------
        DimensionMismatchError
            If the vectors differ in length, are empty or are not 1-D.
        InvalidIterationError
            If `iter` is not an integer >= 1.
        InvalidParameterError
            If `step_size <= 0` or `reg_param < 0` (or either is not finite).
        InvalidStatusError
            If `status` was not produced by this kind of updater.
        """
        t = check_iteration(iter)
        step_size = check_scalar("step_size", step_size, positive=True)
        reg_param = check_scalar("reg_param", reg_param, positive=False)
        self._check_status(status)

        weights = as_vector(weights_old, name="weights_old")
        grad = as_vector(gradient, name="gradient")
        check_same_dimension("gradient", weights, grad)

        eta = effective_step_size(step_size, t)
        new_weights, reg_value, new_status = self._update(
            weights, grad, eta, t, reg_param, status
        )
        return UpdateResult(new_weights, float(reg_value), new_status)

    def _check_status(self, status: Any) -> None:
        if not isinstance(status, self.status_type):
            raise InvalidStatusError(
                type(self).__name__,
                f"expected {self.status_type.__name__}, "
                f"got {type(status).__name__}",
            )

    @abstractmethod
    def _update(
        self,
        weights: np.ndarray,
        gradient: np.ndarray,
        eta: float,
        iteration: int,
        reg_param: float,
        status: Any,
    ) -> Tuple[np.ndarray, float, UpdaterStatus]:
        """
        Rule-specific update on validated input.

        `weights` and `gradient` are private ``float64`` copies of equal
        length, so implementations may update `weights` in place.
        `eta` is the effective step size ``step_size / sqrt(iteration)``.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.get_config().items())
        return f"{type(self).__name__}({args})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.get_config() == other.get_config()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(self.get_config().items()))))
