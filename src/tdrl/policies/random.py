"""Uniform random policy."""

from __future__ import annotations

import chex
import numpy as np

from tdrl.errors import ConfigurationError
from tdrl.seeding import randint
from tdrl.types import Action, State


class Random:
    """Uniform over ``n_actions`` regardless of state."""

    def __init__(self, n_actions: int) -> None:
        if n_actions < 1:
            raise ConfigurationError(f"n_actions must be >= 1, got {n_actions}")
        self._n_actions = n_actions

    @property
    def n_actions(self) -> int:
        return self._n_actions

    def sample(self, key: chex.PRNGKey, state: State) -> Action:
        return randint(key, self._n_actions)

    def probability(self, state: State, action: Action) -> float:
        return 1.0 / self._n_actions

    def probabilities(self, state: State) -> np.ndarray:
        return np.full(self._n_actions, 1.0 / self._n_actions)

    def handle_terminal(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"Random(n_actions={self._n_actions})"
