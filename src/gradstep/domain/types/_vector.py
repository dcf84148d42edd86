"""
Domain-level structural typing for dense real vectors.

:class:`VectorLike` describes the minimal surface the domain contracts need
from a weight or gradient vector, without importing NumPy into the domain
layer. ``numpy.ndarray`` satisfies it, as do array wrappers from other
backends that follow ndarray semantics.

This protocol is for typing and documentation; infrastructure code coerces
every incoming vector to a concrete ``numpy.ndarray`` before doing arithmetic.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class VectorLike(Protocol):
    """
    A 1-D, array-like container of real numbers.

    Notes
    -----
    - Only the attributes used for validation are modelled here.
    - Plain Python sequences are also accepted at runtime by the
      infrastructure layer; this protocol documents the preferred type.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape of the vector; ``(d,)`` for a valid weight vector."""
        ...

    @property
    def ndim(self) -> int:
        """Number of dimensions; must be 1."""
        ...

    @property
    def dtype(self) -> Any:
        """Backend-defined element type."""
        ...

    def __len__(self) -> int: ...

    def __getitem__(self, key: Any) -> Any: ...
