"""Boltzmann (softmax) policy over action-values."""

from __future__ import annotations

import chex
import numpy as np

from tdrl.fa.linear import LFA
from tdrl.parameter import Parameter
from tdrl.seeding import categorical
from tdrl.types import Action, State


class Softmax:
    """``pi(a|s) ∝ exp(Q(s, a) / tau)``.

    ``tau`` is a temperature ``Parameter``: high values approach uniform,
    low values approach greedy.
    """

    def __init__(self, q_func: LFA, tau: float | Parameter = 1.0) -> None:
        self.q_func = q_func
        self.tau = Parameter.coerce(tau)

    @property
    def n_actions(self) -> int:
        return self.q_func.n_outputs

    def probabilities(self, state: State) -> np.ndarray:
        logits = self.q_func.predict(state) / self.tau.value
        logits -= logits.max()
        weights = np.exp(logits)
        return weights / weights.sum()

    def probability(self, state: State, action: Action) -> float:
        return float(self.probabilities(state)[action])

    def sample(self, key: chex.PRNGKey, state: State) -> Action:
        return categorical(key, self.probabilities(state))

    def handle_terminal(self) -> None:
        self.tau = self.tau.step()

    def __repr__(self) -> str:
        return f"Softmax({self.q_func!r}, tau={self.tau.value:.4g})"
