"""Uniform grid (single-tiling tile coding) projector."""

from __future__ import annotations

import numpy as np

from tdrl.errors import ConfigurationError
from tdrl.fa.projection import Projector, SparseProjection
from tdrl.spaces import Partitioned, RegularSpace
from tdrl.types import State, as_state


class UniformGrid(Projector):
    """Partitions the input space into a regular grid of one-hot features.

    Exactly one feature is active per input.  The feature index of a point
    whose per-dimension bins are ``(i0, i1, ..., ik)`` is::

        i0 + d0 * (i1 + d1 * (i2 + ... ))

    i.e. the first dimension varies fastest.  The mapping is a bijection
    between grid cells and ``[0, size())``.

    Example::

        space = RegularSpace((Partitioned(0.0, 10.0, 10),))
        grid = UniformGrid(space)
        grid.project([1.5])   # SparseProjection(indices=[1], size=10)
    """

    def __init__(self, input_space: RegularSpace) -> None:
        for d in input_space:
            if not isinstance(d, Partitioned):
                raise ConfigurationError(
                    f"UniformGrid needs partitioned dimensions, got {d!r}"
                )
        self.input_space = input_space
        self._densities = tuple(d.density for d in input_space)
        self._n_features = int(np.prod(self._densities))

    @classmethod
    def from_space(cls, space: RegularSpace, density: int) -> UniformGrid:
        """Partition every continuous dimension of *space* into *density* bins."""
        return cls(space.partitioned(density))

    def hash(self, state: State) -> int:
        x = as_state(state)
        if len(x) != self.input_space.dim:
            raise ConfigurationError(
                f"Expected a {self.input_space.dim}-d input, got {len(x)}-d"
            )
        index = 0
        for d, v in zip(reversed(self.input_space.dimensions), reversed(x)):
            index = d.to_partition(v) + d.density * index
        return index

    def project(self, state: State) -> SparseProjection:
        return SparseProjection.of([self.hash(state)], self._n_features)

    def dim(self) -> int:
        return self.input_space.dim

    def size(self) -> int:
        return self._n_features

    def activation(self) -> int:
        return 1

    def __repr__(self) -> str:
        return f"UniformGrid(densities={self._densities})"
