"""Linear function approximator over a projector.

Storage follows the hybrid design used for replay buffers: the weight
matrix is a pre-allocated numpy array mutated in place, so every holder of
the same ``LFA`` instance (a controller and the ``Greedy`` policy reading
its action-values, say) observes each update immediately.  No copies are
made on read; ``weights`` hands out a read-only view.

Usage::

    q_func = LFA.vector(UniformGrid(space), n_outputs=3)
    phi = q_func.embed(state)
    q_func.evaluate(phi)                # array of 3 action-values
    q_func.update_index(phi, 1, 0.5)    # Q(s, 1) moves by exactly 0.5

Updates are normalised by the squared norm of the projection, so that
``evaluate`` after ``update(phi, e)`` has moved by exactly ``e`` on the
touched output.  Nothing guards against divergence: large or
non-decaying step sizes can drive the weights to inf/NaN.
"""

from __future__ import annotations

import logging

import numpy as np

from tdrl.errors import ActionIndexError, ConfigurationError, FeatureIndexError
from tdrl.fa.projection import DenseProjection, Projection, Projector, SparseProjection
from tdrl.types import State

logger = logging.getLogger(__name__)


class LFA:
    """Weights ``(n_features, n_outputs)`` applied to a projector's features."""

    def __init__(
        self,
        projector: Projector,
        n_outputs: int = 1,
        weights: np.ndarray | None = None,
    ) -> None:
        if n_outputs < 1:
            raise ConfigurationError(f"n_outputs must be >= 1, got {n_outputs}")
        n_features = projector.size()
        if weights is None:
            weights = np.zeros((n_features, n_outputs), dtype=np.float64)
        else:
            weights = np.array(weights, dtype=np.float64)
            if weights.ndim == 1:
                weights = weights[:, None]
            if weights.shape != (n_features, n_outputs):
                raise ConfigurationError(
                    f"Weights of shape {weights.shape} do not match projector "
                    f"size {n_features} x {n_outputs} outputs"
                )
        self.projector = projector
        self._weights = weights
        logger.debug("Created LFA with %d features x %d outputs", n_features, n_outputs)

    @classmethod
    def scalar(cls, projector: Projector) -> LFA:
        """Single-output approximator (state-value functions)."""
        return cls(projector, n_outputs=1)

    @classmethod
    def vector(cls, projector: Projector, n_outputs: int) -> LFA:
        """Multi-output approximator (one column per action)."""
        return cls(projector, n_outputs=n_outputs)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def n_features(self) -> int:
        return self._weights.shape[0]

    @property
    def n_outputs(self) -> int:
        return self._weights.shape[1]

    @property
    def weights_dim(self) -> tuple[int, int]:
        return self._weights.shape

    @property
    def weights(self) -> np.ndarray:
        view = self._weights.view()
        view.flags.writeable = False
        return view

    def embed(self, state: State) -> Projection:
        return self.projector.project(state)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, phi: Projection) -> np.ndarray:
        """All outputs for projection *phi*."""
        if isinstance(phi, SparseProjection):
            self._check_features(phi)
            return self._weights[phi.indices].sum(axis=0)
        return self._dense(phi) @ self._weights

    def evaluate_index(self, phi: Projection, index: int) -> float:
        """Output column *index* for projection *phi*."""
        self._check_index(index)
        if isinstance(phi, SparseProjection):
            self._check_features(phi)
            return float(self._weights[phi.indices, index].sum())
        return float(self._dense(phi) @ self._weights[:, index])

    def predict(self, state: State) -> np.ndarray:
        return self.evaluate(self.embed(state))

    def predict_index(self, state: State, index: int) -> float:
        return self.evaluate_index(self.embed(state), index)

    # ------------------------------------------------------------------
    # Updates (the only weight mutations)
    # ------------------------------------------------------------------

    def update(self, phi: Projection, errors) -> None:
        """Move every output for *phi* by the matching entry of *errors*."""
        errors = np.broadcast_to(np.asarray(errors, dtype=np.float64), (self.n_outputs,))
        if isinstance(phi, SparseProjection):
            self._check_features(phi)
            if phi.z == 0.0:
                return
            np.add.at(self._weights, phi.indices, errors / phi.z)
            return
        values = self._dense(phi)
        z = phi.z
        if z == 0.0:
            return
        self._weights += np.outer(values / z, errors)

    def update_index(self, phi: Projection, index: int, error: float) -> None:
        """Move output column *index* for *phi* by *error*."""
        self._check_index(index)
        if isinstance(phi, SparseProjection):
            self._check_features(phi)
            if phi.z == 0.0:
                return
            np.add.at(self._weights[:, index], phi.indices, error / phi.z)
            return
        values = self._dense(phi)
        z = phi.z
        if z == 0.0:
            return
        self._weights[:, index] += values * (error / z)

    def update_weights(self, delta: np.ndarray) -> None:
        """Add a full weight-shaped matrix in one pass."""
        delta = np.asarray(delta, dtype=np.float64)
        if delta.ndim == 1:
            delta = delta[:, None]
        if delta.shape != self._weights.shape:
            raise ConfigurationError(
                f"Delta of shape {delta.shape} does not match weights {self._weights.shape}"
            )
        self._weights += delta

    # ------------------------------------------------------------------
    # Bounds checks, performed before touching any weight
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.n_outputs:
            raise ActionIndexError(
                f"Output index {index} outside [0, {self.n_outputs})"
            )

    def _check_features(self, phi: SparseProjection) -> None:
        if phi.indices.size and (phi.indices.min() < 0 or phi.indices.max() >= self.n_features):
            raise FeatureIndexError(
                f"Feature indices {phi.indices.tolist()} outside [0, {self.n_features})"
            )

    def _dense(self, phi: DenseProjection) -> np.ndarray:
        if phi.size != self.n_features:
            raise FeatureIndexError(
                f"Dense projection of size {phi.size} does not match {self.n_features} features"
            )
        return phi.values

    def __repr__(self) -> str:
        return f"LFA({self.projector!r}, n_features={self.n_features}, n_outputs={self.n_outputs})"
