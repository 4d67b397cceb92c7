"""SARSA(lambda) with eligibility traces.

Singh, S. P., Sutton, R. S. (1996). Reinforcement learning with replacing
eligibility traces. Machine Learning 22:123-158.
"""

from __future__ import annotations

import chex

from tdrl.algorithms.control.base import TDController
from tdrl.errors import ConfigurationError
from tdrl.fa.linear import LFA
from tdrl.parameter import Parameter
from tdrl.policies.base import FinitePolicy
from tdrl.traces import Trace
from tdrl.types import Transition


class SARSALambda(TDController):
    """SARSA whose residual is spread over every eligible feature.

    Each step the trace decays by ``lambda * gamma``, the current
    ``(features, action)`` pair is marked eligible, and
    ``alpha * residual * trace`` is added to the weights.  The trace is
    cleared at every episode boundary, so credit never crosses episodes.

    Unlike the single-feature updates of ``SARSA``, the trace update is not
    normalised by the projection norm.
    """

    def __init__(
        self,
        q_func: LFA,
        policy: FinitePolicy,
        trace: Trace,
        alpha: float | Parameter,
        gamma: float | Parameter,
        lambda_: float | Parameter,
        *,
        rng: chex.PRNGKey | None = None,
    ) -> None:
        """
        Args:
            trace: Eligibility trace shaped like ``q_func.weights_dim``.
            alpha: Step size on ``residual * trace``.  It is not divided by
                the squared norm of the projection, so with dense features
                (``Fourier``) the same value does not give the same step as in
                ``SARSA``, whose updates are normalised.
            lambda_: Trace decay, applied together with ``gamma``.
        """
        if trace.shape != q_func.weights_dim:
            raise ConfigurationError(
                f"Trace shape {trace.shape} does not match weights {q_func.weights_dim}"
            )
        self.trace = trace
        self.lambda_ = Parameter.coerce(lambda_)
        super().__init__(q_func, policy, alpha, gamma, rng=rng)

    def handle_transition(self, t: Transition) -> None:
        phi_s = self.q_func.embed(t.state)
        qsa = self.q_func.evaluate_index(phi_s, t.action)

        if t.terminated:
            residual = t.reward - qsa
        else:
            na = self.policy.sample(self._next_key(), t.next_state)
            nqsna = self.q_func.predict_index(t.next_state, na)
            residual = t.reward + self.gamma * nqsna - qsa

        self.trace.decay(self.lambda_ * self.gamma.value)
        self.trace.visit(phi_s, column=t.action)
        self.trace.update(self.q_func, residual, self.alpha.value)

        if t.terminated:
            self.trace.reset()

    def handle_terminal(self) -> None:
        super().handle_terminal()
        self.lambda_ = self.lambda_.step()
        self.trace.reset()
