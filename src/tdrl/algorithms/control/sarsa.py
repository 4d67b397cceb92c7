"""SARSA, the on-policy variant of Q-learning (aka "modified Q-learning").

Rummery, G. A. (1995). Problem Solving with Reinforcement Learning. Ph.D.
thesis, Cambridge University.
"""

from __future__ import annotations

from tdrl.algorithms.control.base import TDController
from tdrl.types import Transition


class SARSA(TDController):
    """On-policy TD control bootstrapping from ``Q(s', a')``.

    ``a'`` is drawn afresh from the behaviour policy using the agent's own
    PRNG key.
    """

    def handle_transition(self, t: Transition) -> None:
        phi_s = self.q_func.embed(t.state)
        qsa = self.q_func.evaluate_index(phi_s, t.action)

        if t.terminated:
            residual = t.reward - qsa
        else:
            na = self.policy.sample(self._next_key(), t.next_state)
            nqsna = self.q_func.predict_index(t.next_state, na)
            residual = t.reward + self.gamma * nqsna - qsa

        self.q_func.update_index(phi_s, t.action, self.alpha * residual)
