"""Watkins' Q-learning.

Watkins, C. J. C. H. (1989). Learning from Delayed Rewards. Ph.D. thesis,
Cambridge University.
"""

from __future__ import annotations

import chex

from tdrl.algorithms.control.base import TDController
from tdrl.policies.greedy import argmax
from tdrl.types import Action, State, Transition


class QLearning(TDController):
    """Off-policy TD control bootstrapping from ``max_a' Q(s', a')``.

    The behaviour policy only decides which actions are taken; the learned
    (target) policy is greedy with respect to ``q_func``.
    """

    def handle_transition(self, t: Transition) -> None:
        phi_s = self.q_func.embed(t.state)
        qsa = self.q_func.evaluate_index(phi_s, t.action)

        if t.terminated:
            residual = t.reward - qsa
        else:
            nqs = self.q_func.predict(t.next_state)
            residual = t.reward + self.gamma * nqs.max() - qsa

        self.q_func.update_index(phi_s, t.action, self.alpha * residual)

    def sample_target(self, key: chex.PRNGKey, state: State) -> Action:
        return argmax(self.predict_q(state))

    def predict_v(self, state: State) -> float:
        return float(self.predict_q(state).max())
