"""Expected SARSA.

van Seijen, H., van Hasselt, H., Whiteson, S., Wiering, M. (2009). A
theoretical and empirical analysis of Expected Sarsa. ADPRL.
"""

from __future__ import annotations

from tdrl.algorithms.control.base import TDController
from tdrl.types import Transition


class ExpectedSARSA(TDController):
    """Bootstraps from the policy-weighted expectation ``E_pi[Q(s', .)]``.

    Removes the sampling variance of SARSA's ``a'`` at the cost of one
    ``probabilities`` call per step.
    """

    def handle_transition(self, t: Transition) -> None:
        phi_s = self.q_func.embed(t.state)
        qsa = self.q_func.evaluate_index(phi_s, t.action)

        if t.terminated:
            residual = t.reward - qsa
        else:
            residual = t.reward + self.gamma * self.predict_v(t.next_state) - qsa

        self.q_func.update_index(phi_s, t.action, self.alpha * residual)
