"""Greedy policy over a shared action-value approximator."""

from __future__ import annotations

import chex
import numpy as np

from tdrl.fa.linear import LFA
from tdrl.types import Action, State


def argmax(values: np.ndarray) -> int:
    """Index of the largest value; ties go to the lowest index."""
    return int(np.argmax(values))


class Greedy:
    """Always picks the arg-max action of ``q_func``.

    ``q_func`` is shared, not copied: when the owning agent updates it,
    the next ``sample`` already sees the new values.  Ties are broken
    deterministically in favour of the lowest action index, and
    ``probabilities`` is one-hot on that action.
    """

    def __init__(self, q_func: LFA) -> None:
        self.q_func = q_func

    @property
    def n_actions(self) -> int:
        return self.q_func.n_outputs

    def sample(self, key: chex.PRNGKey, state: State) -> Action:
        return self.greedy_action(state)

    def greedy_action(self, state: State) -> Action:
        return argmax(self.q_func.predict(state))

    def probability(self, state: State, action: Action) -> float:
        return 1.0 if action == self.greedy_action(state) else 0.0

    def probabilities(self, state: State) -> np.ndarray:
        probs = np.zeros(self.n_actions)
        probs[self.greedy_action(state)] = 1.0
        return probs

    def handle_terminal(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"Greedy({self.q_func!r})"
