"""Feature projections and the projector contract.

A ``Projector`` maps a raw state onto a fixed-size feature space.  Its
output is one of two projection kinds:

- ``SparseProjection``: indices of the active features, each with an
  implicit activation of 1.0 (tile coding, uniform grids).
- ``DenseProjection``: an explicit activation vector (Fourier and other
  continuous bases).

Projections from the same projector can be combined; anything involving
arithmetic falls back to a dense vector::

    delta = phi_s - gamma * phi_ns       # DenseProjection
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple

import numpy as np

from tdrl.errors import ConfigurationError
from tdrl.types import State


class SparseProjection(NamedTuple):
    """Active feature indices out of ``size`` possible features."""

    indices: np.ndarray
    size: int

    @classmethod
    def of(cls, indices, size: int) -> SparseProjection:
        return cls(np.atleast_1d(np.asarray(indices, dtype=np.int64)), int(size))

    @property
    def activation(self) -> int:
        return len(self.indices)

    @property
    def z(self) -> float:
        """Squared L2 norm of the implied feature vector."""
        return float(len(self.indices))

    def expanded(self) -> np.ndarray:
        phi = np.zeros(self.size, dtype=np.float64)
        phi[self.indices] = 1.0
        return phi

    def __sub__(self, other: Projection) -> DenseProjection:
        return _combine(self, other, lambda a, b: a - b)

    def __add__(self, other: Projection) -> DenseProjection:
        return _combine(self, other, lambda a, b: a + b)

    def __mul__(self, scale: float) -> DenseProjection:
        return DenseProjection(self.expanded() * float(scale))

    __rmul__ = __mul__


class DenseProjection(NamedTuple):
    """Explicit feature activation vector."""

    values: np.ndarray

    @classmethod
    def of(cls, values) -> DenseProjection:
        return cls(np.asarray(values, dtype=np.float64).ravel())

    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def activation(self) -> int:
        return int(np.count_nonzero(self.values))

    @property
    def z(self) -> float:
        return float(np.dot(self.values, self.values))

    def expanded(self) -> np.ndarray:
        return self.values

    def __sub__(self, other: Projection) -> DenseProjection:
        return _combine(self, other, lambda a, b: a - b)

    def __add__(self, other: Projection) -> DenseProjection:
        return _combine(self, other, lambda a, b: a + b)

    def __mul__(self, scale: float) -> DenseProjection:
        return DenseProjection(self.values * float(scale))

    __rmul__ = __mul__


Projection = SparseProjection | DenseProjection


def _combine(a: Projection, b: Projection, op) -> DenseProjection:
    if a.size != b.size:
        raise ConfigurationError(
            f"Cannot combine projections of size {a.size} and {b.size}"
        )
    return DenseProjection(op(a.expanded(), b.expanded()))


class Projector(ABC):
    """Maps raw states onto a fixed feature space.

    Subclasses implement ``project``, ``dim``, ``size`` and ``activation``.
    The feature-space size is fixed for the lifetime of the instance.
    """

    @abstractmethod
    def project(self, state: State) -> Projection:
        """Project *state* into feature space."""
        ...

    @abstractmethod
    def dim(self) -> int:
        """Dimensionality of the input space."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Number of features."""
        ...

    @abstractmethod
    def activation(self) -> int:
        """Expected number of simultaneously active features."""
        ...

    def equivalent(self, other: Projector) -> bool:
        """True if *other* produces projections of the same geometry."""
        return (
            type(self) is type(other)
            and self.dim() == other.dim()
            and self.size() == other.size()
        )

    def project_expanded(self, state: State) -> np.ndarray:
        return self.project(state).expanded()

    def __call__(self, state: State) -> Projection:
        return self.project(state)
