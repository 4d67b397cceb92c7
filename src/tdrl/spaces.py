"""State and action spaces.

All spaces are immutable ``equinox`` modules with static fields, so they
are hashable and safe to share between environments, projectors and
approximators.  They describe the domain of a quantity (discrete
cardinality or continuous range) and never carry mutable state.

A ``RegularSpace`` is a product of one-dimensional spaces and is what
environments report for their state space::

    space = RegularSpace((Continuous(-1.2, 0.6), Continuous(-0.07, 0.07)))
    grid = space.partitioned(10)     # RegularSpace of Partitioned dims
    grid.card                        # 100
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

import equinox as eqx
import jax
import jax.numpy as jnp
import numpy as np

from tdrl.errors import ConfigurationError, OutOfBoundsError


class Discrete(eqx.Module):
    """Space of integers {0, 1, ..., n-1}."""

    n: int = eqx.field(static=True)

    def __check_init__(self) -> None:
        if self.n < 1:
            raise ConfigurationError(f"Discrete space needs n >= 1, got {self.n}")

    @property
    def card(self) -> int:
        return self.n

    @property
    def low(self) -> float:
        return 0.0

    @property
    def high(self) -> float:
        return float(self.n - 1)

    def sample(self, key: jax.Array) -> jax.Array:
        return jax.random.randint(key, shape=(), minval=0, maxval=self.n)

    def contains(self, x: int | float) -> bool:
        return 0 <= x < self.n and float(x) == math.floor(x)


class Continuous(eqx.Module):
    """Bounded interval ``[low, high]`` of the real line."""

    low: float = eqx.field(static=True)
    high: float = eqx.field(static=True)

    def __check_init__(self) -> None:
        if not self.low < self.high:
            raise ConfigurationError(
                f"Continuous bounds must satisfy low < high, got [{self.low}, {self.high}]"
            )

    @property
    def card(self) -> None:
        return None

    @property
    def span(self) -> float:
        return self.high - self.low

    def partitioned(self, density: int) -> Partitioned:
        """Split the interval into *density* equal-width bins."""
        return Partitioned(self.low, self.high, density)

    def sample(self, key: jax.Array) -> jax.Array:
        return jax.random.uniform(key, shape=(), minval=self.low, maxval=self.high)

    def contains(self, x: float) -> bool:
        return self.low <= x <= self.high


class Partitioned(eqx.Module):
    """Interval ``[low, high]`` split into ``density`` equal-width bins.

    Bins are half-open ``[b_i, b_{i+1})`` except for the last, which also
    holds ``high`` itself.
    """

    low: float = eqx.field(static=True)
    high: float = eqx.field(static=True)
    density: int = eqx.field(static=True)

    def __check_init__(self) -> None:
        if not self.low < self.high:
            raise ConfigurationError(
                f"Partitioned bounds must satisfy low < high, got [{self.low}, {self.high}]"
            )
        if self.density < 1:
            raise ConfigurationError(f"Partition density must be >= 1, got {self.density}")

    @property
    def card(self) -> int:
        return self.density

    @property
    def span(self) -> float:
        return self.high - self.low

    @property
    def width(self) -> float:
        return self.span / self.density

    def to_partition(self, x: float) -> int:
        """Map *x* to its bin index in ``[0, density)``.

        Raises ``OutOfBoundsError`` for values outside ``[low, high]``
        (including NaN) instead of clamping them into an edge bin.
        """
        x = float(x)
        if not self.low <= x <= self.high:
            raise OutOfBoundsError(f"{x} is outside [{self.low}, {self.high}]")
        i = int(math.floor(self.density * (x - self.low) / self.span))
        return min(i, self.density - 1)

    def centres(self) -> np.ndarray:
        return self.low + self.width * (np.arange(self.density) + 0.5)

    def sample(self, key: jax.Array) -> jax.Array:
        return jax.random.uniform(key, shape=(), minval=self.low, maxval=self.high)

    def contains(self, x: float) -> bool:
        return self.low <= x <= self.high


Dimension = Discrete | Continuous | Partitioned


class RegularSpace(eqx.Module):
    """Cartesian product of one-dimensional spaces."""

    dimensions: tuple[Dimension, ...] = eqx.field(static=True)

    def __init__(self, dimensions: Sequence[Dimension]) -> None:
        self.dimensions = tuple(dimensions)

    def __check_init__(self) -> None:
        if not self.dimensions:
            raise ConfigurationError("RegularSpace needs at least one dimension")

    @classmethod
    def box(cls, low: Sequence[float], high: Sequence[float]) -> RegularSpace:
        """Build a continuous space from per-dimension bounds."""
        if len(low) != len(high):
            raise ConfigurationError(
                f"low and high must have the same length, got {len(low)} and {len(high)}"
            )
        return cls(tuple(Continuous(float(lo), float(hi)) for lo, hi in zip(low, high)))

    @property
    def dim(self) -> int:
        return len(self.dimensions)

    @property
    def card(self) -> int | None:
        """Number of distinct elements, or ``None`` if any dimension is continuous."""
        total = 1
        for d in self.dimensions:
            if d.card is None:
                return None
            total *= d.card
        return total

    @property
    def low(self) -> np.ndarray:
        return np.array([d.low for d in self.dimensions], dtype=np.float64)

    @property
    def high(self) -> np.ndarray:
        return np.array([d.high for d in self.dimensions], dtype=np.float64)

    @property
    def shape(self) -> tuple[int, ...]:
        return (self.dim,)

    def partitioned(self, density: int) -> RegularSpace:
        """Partition every continuous dimension into *density* bins."""
        dims = []
        for d in self.dimensions:
            if isinstance(d, Continuous):
                dims.append(d.partitioned(density))
            elif isinstance(d, Partitioned):
                dims.append(d)
            else:
                raise ConfigurationError(f"Cannot partition dimension {d!r}")
        return RegularSpace(tuple(dims))

    def sample(self, key: jax.Array) -> jax.Array:
        keys = jax.random.split(key, self.dim)
        return jnp.stack([d.sample(k).astype(jnp.float32) for d, k in zip(self.dimensions, keys)])

    def contains(self, x: Sequence[float]) -> bool:
        if len(x) != self.dim:
            return False
        return all(d.contains(v) for d, v in zip(self.dimensions, x))

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator[Dimension]:
        return iter(self.dimensions)

    def __getitem__(self, i: int) -> Dimension:
        return self.dimensions[i]
