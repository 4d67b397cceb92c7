"""Eligibility traces for multi-step credit assignment.

A trace has the same shape as the weight matrix it assists.  Each step it
decays geometrically (by ``lambda * gamma``) and the features active in the
current projection are bumped, so that a single TD residual can be
applied to every recently visited feature at once::

    trace.decay(lambda_ * gamma)
    trace.visit(phi, column=action)
    trace.update(q_func, residual, alpha)

Traces only live for one episode: agents call ``reset()`` at every
episode boundary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from tdrl.errors import FeatureIndexError
from tdrl.fa.linear import LFA
from tdrl.fa.projection import Projection, SparseProjection


class Trace(ABC):
    """Per-weight eligibility values."""

    def __init__(self, values: np.ndarray) -> None:
        values = np.array(values, dtype=np.float64)
        if values.ndim == 1:
            values = values[:, None]
        self._values = values

    @classmethod
    def zeros(cls, shape: int | tuple[int, ...]) -> Trace:
        if isinstance(shape, int):
            shape = (shape, 1)
        return cls(np.zeros(shape, dtype=np.float64))

    @property
    def values(self) -> np.ndarray:
        view = self._values.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> tuple[int, ...]:
        return self._values.shape

    def decay(self, rate: float) -> None:
        self._values *= rate

    def visit(self, phi: Projection, column: int = 0) -> None:
        """Mark the features of *phi* as eligible in output *column*."""
        if isinstance(phi, SparseProjection):
            if phi.indices.size and (
                phi.indices.min() < 0 or phi.indices.max() >= self._values.shape[0]
            ):
                raise FeatureIndexError(
                    f"Feature indices {phi.indices.tolist()} outside [0, {self._values.shape[0]})"
                )
            self._visit_sparse(phi.indices, column)
        else:
            if phi.size != self._values.shape[0]:
                raise FeatureIndexError(
                    f"Dense projection of size {phi.size} does not match trace "
                    f"of {self._values.shape[0]} features"
                )
            self._visit_dense(phi.values, column)

    @abstractmethod
    def _visit_sparse(self, indices: np.ndarray, column: int) -> None: ...

    @abstractmethod
    def _visit_dense(self, values: np.ndarray, column: int) -> None: ...

    def update(self, fa: LFA, error: float, learning_rate: float) -> None:
        """Add ``error * learning_rate * trace`` to *fa*'s weights."""
        fa.update_weights(self._values * (error * learning_rate))

    def reset(self) -> None:
        self._values.fill(0.0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape})"


class Accumulating(Trace):
    """Active features accumulate their activation on every visit."""

    def _visit_sparse(self, indices: np.ndarray, column: int) -> None:
        np.add.at(self._values[:, column], indices, 1.0)

    def _visit_dense(self, values: np.ndarray, column: int) -> None:
        self._values[:, column] += values


class Replacing(Trace):
    """Active features are reset to their activation instead of accumulating.

    Singh, S. P., Sutton, R. S. (1996). Reinforcement learning with
    replacing eligibility traces. Machine Learning 22:123-158.
    """

    def _visit_sparse(self, indices: np.ndarray, column: int) -> None:
        self._values[indices, column] = 1.0

    def _visit_dense(self, values: np.ndarray, column: int) -> None:
        active = values != 0.0
        self._values[active, column] = values[active]
