"""
Updater public API.

This module aggregates the built-in update rules and registers them into the
`SGDUpdater` registry via import side effects:

- "simple":  `SimpleSGDUpdater`
- "l1":      `L1SGDUpdater`
- "l2":      `SquaredL2SGDUpdater`
- "adagrad": `AdaGradSGDUpdater`
- "adam":    `AdamSGDUpdater`

Importing this module ensures that all built-in updaters are available for
lookup through `SGDUpdater.get` / `SGDUpdater.create`.
"""

from ._base import SGDUpdater
from ._status import AdaGradStatus, AdamStatus, EmptyStatus
from ._simple import SimpleSGDUpdater
from ._l1 import L1SGDUpdater, soft_threshold
from ._l2 import SquaredL2SGDUpdater
from ._adagrad import AdaGradSGDUpdater
from ._adam import AdamSGDUpdater

__all__ = [
    SGDUpdater.__name__,
    EmptyStatus.__name__,
    AdaGradStatus.__name__,
    AdamStatus.__name__,
    SimpleSGDUpdater.__name__,
    L1SGDUpdater.__name__,
    SquaredL2SGDUpdater.__name__,
    AdaGradSGDUpdater.__name__,
    AdamSGDUpdater.__name__,
    soft_threshold.__name__,
]
