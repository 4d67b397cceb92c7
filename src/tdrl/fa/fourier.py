"""Fourier cosine basis projector.

Konidaris, G., Osentoski, S. and Thomas, P. (2011). Value function
approximation in reinforcement learning using the Fourier basis. AAAI.
"""

from __future__ import annotations

import itertools
from collections.abc import Sequence

import jax
import jax.numpy as jnp
import numpy as np

from tdrl.errors import ConfigurationError
from tdrl.fa.projection import DenseProjection, Projector
from tdrl.spaces import RegularSpace
from tdrl.types import State, as_state


@jax.jit
def _cosine_features(coefficients: jax.Array, x: jax.Array) -> jax.Array:
    return jnp.cos(jnp.pi * (coefficients @ x))


class Fourier(Projector):
    """Dense cosine features over inputs rescaled to the unit hypercube.

    Uses every coefficient vector in ``{0, ..., order}^dim`` except the
    all-zero one, giving ``(order + 1)**dim - 1`` features.
    ``with_constant()`` appends a constant bias feature.
    """

    def __init__(
        self,
        order: int,
        limits: Sequence[tuple[float, float]],
        constant: bool = False,
    ) -> None:
        if order < 1:
            raise ConfigurationError(f"Fourier order must be >= 1, got {order}")
        if not limits:
            raise ConfigurationError("Fourier basis needs at least one input dimension")
        self.order = order
        self.limits = tuple((float(lo), float(hi)) for lo, hi in limits)
        self.constant = constant

        self._low = np.array([lo for lo, _ in self.limits])
        self._span = np.array([hi - lo for lo, hi in self.limits])
        if np.any(self._span <= 0.0):
            raise ConfigurationError(f"Degenerate limits {self.limits}")

        coefficients = [
            c for c in itertools.product(range(order + 1), repeat=len(self.limits))
            if any(c)
        ]
        self._coefficients = jnp.asarray(coefficients, dtype=jnp.float32)

    @classmethod
    def from_space(cls, order: int, space: RegularSpace) -> Fourier:
        return cls(order, list(zip(space.low, space.high)))

    def with_constant(self) -> Fourier:
        return Fourier(self.order, self.limits, constant=True)

    def project(self, state: State) -> DenseProjection:
        x = as_state(state)
        if len(x) != self.dim():
            raise ConfigurationError(f"Expected a {self.dim()}-d input, got {len(x)}-d")
        scaled = jnp.asarray((x - self._low) / self._span, dtype=jnp.float32)
        phi = np.asarray(_cosine_features(self._coefficients, scaled), dtype=np.float64)
        if self.constant:
            phi = np.append(phi, 1.0)
        return DenseProjection(phi)

    def dim(self) -> int:
        return len(self.limits)

    def size(self) -> int:
        return self._coefficients.shape[0] + int(self.constant)

    def activation(self) -> int:
        return self.size()

    def equivalent(self, other: Projector) -> bool:
        return super().equivalent(other) and self.limits == other.limits

    def __repr__(self) -> str:
        return f"Fourier(order={self.order}, dim={self.dim()}, constant={self.constant})"
