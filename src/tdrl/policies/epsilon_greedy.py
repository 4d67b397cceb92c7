"""Epsilon-greedy mixture of two finite policies."""

from __future__ import annotations

import chex
import numpy as np

from tdrl.errors import ConfigurationError
from tdrl.parameter import Parameter
from tdrl.policies.base import FinitePolicy
from tdrl.seeding import split_key, uniform
from tdrl.types import Action, State


class EpsilonGreedy:
    """With probability ``epsilon`` defer to ``explorer``, else to ``greedy``.

    Both sub-policies are held, not inherited from; typically
    ``EpsilonGreedy(Greedy(q_func), Random(n_actions), 0.1)``.
    ``epsilon`` may be a decaying ``Parameter``; it advances once per
    episode through ``handle_terminal``.
    """

    def __init__(
        self,
        greedy: FinitePolicy,
        explorer: FinitePolicy,
        epsilon: float | Parameter,
    ) -> None:
        if greedy.n_actions != explorer.n_actions:
            raise ConfigurationError(
                f"Sub-policies disagree on n_actions: {greedy.n_actions} vs {explorer.n_actions}"
            )
        self.greedy = greedy
        self.explorer = explorer
        self.epsilon = Parameter.coerce(epsilon)

    @property
    def n_actions(self) -> int:
        return self.greedy.n_actions

    def sample(self, key: chex.PRNGKey, state: State) -> Action:
        key, explore_key = split_key(key)
        if uniform(explore_key) < self.epsilon.value:
            return self.explorer.sample(key, state)
        return self.greedy.sample(key, state)

    def probability(self, state: State, action: Action) -> float:
        eps = self.epsilon.value
        return eps * self.explorer.probability(state, action) + (
            1.0 - eps
        ) * self.greedy.probability(state, action)

    def probabilities(self, state: State) -> np.ndarray:
        eps = self.epsilon.value
        return eps * self.explorer.probabilities(state) + (
            1.0 - eps
        ) * self.greedy.probabilities(state)

    def handle_terminal(self) -> None:
        self.epsilon = self.epsilon.step()
        self.greedy.handle_terminal()
        self.explorer.handle_terminal()

    def __repr__(self) -> str:
        return f"EpsilonGreedy({self.greedy!r}, {self.explorer!r}, epsilon={self.epsilon.value:.4g})"
