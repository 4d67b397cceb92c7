"""Shared fixtures: small grids, approximators and a deterministic chain."""

from __future__ import annotations

import numpy as np
import pytest

from tdrl.env.base import Environment
from tdrl.fa import LFA, UniformGrid
from tdrl.seeding import make_rng
from tdrl.spaces import Discrete, Partitioned, RegularSpace


class Chain(Environment):
    """Positions 0..length-1; state is ``[pos + 0.5]``.

    Action 0 moves left (bounded), 1 moves right.  Reaching the last
    position terminates with reward 1, every other step yields 0.
    """

    def __init__(self, length: int = 5) -> None:
        self.length = length
        self.pos = 0

    def state_space(self) -> RegularSpace:
        return RegularSpace((Partitioned(0.0, float(self.length), self.length),))

    def action_space(self) -> Discrete:
        return Discrete(2)

    def current_state(self) -> np.ndarray:
        return np.array([self.pos + 0.5])

    def is_terminal(self) -> bool:
        return self.pos == self.length - 1

    def _update(self, action: int) -> float:
        self.pos = max(0, self.pos - 1) if action == 0 else self.pos + 1
        return 1.0 if self.is_terminal() else 0.0


@pytest.fixture
def key():
    return make_rng(0)


@pytest.fixture
def grid_1d() -> UniformGrid:
    """10 equal bins over [0, 10)."""
    return UniformGrid(RegularSpace((Partitioned(0.0, 10.0, 10),)))


@pytest.fixture
def q_func(grid_1d) -> LFA:
    return LFA.vector(grid_1d, n_outputs=2)


@pytest.fixture
def chain_builder():
    return Chain
