"""Shared plumbing for action-value TD controllers."""

from __future__ import annotations

import logging

import chex
import numpy as np

from tdrl.errors import ConfigurationError
from tdrl.fa.linear import LFA
from tdrl.parameter import Parameter
from tdrl.policies.base import FinitePolicy
from tdrl.seeding import make_rng, split_key
from tdrl.types import Action, State

logger = logging.getLogger(__name__)


class TDController:
    """Q-function + behaviour policy + step size and discount.

    The policy usually wraps the very same ``q_func`` (``Greedy(q_func)``
    inside an ``EpsilonGreedy``), so updates made here are visible to the
    policy without any copying.

    Subclasses implement ``handle_transition``.
    """

    def __init__(
        self,
        q_func: LFA,
        policy: FinitePolicy,
        alpha: float | Parameter,
        gamma: float | Parameter,
        *,
        rng: chex.PRNGKey | None = None,
    ) -> None:
        n_actions = getattr(policy, "n_actions", q_func.n_outputs)
        if n_actions != q_func.n_outputs:
            raise ConfigurationError(
                f"Policy has {n_actions} actions but q_func has {q_func.n_outputs} outputs"
            )
        self.q_func = q_func
        self.policy = policy
        self.alpha = Parameter.coerce(alpha)
        self.gamma = Parameter.coerce(gamma)
        self.rng = rng if rng is not None else make_rng(0)
        logger.debug("Created %r", self)

    def _next_key(self) -> chex.PRNGKey:
        self.rng, key = split_key(self.rng)
        return key

    def handle_terminal(self) -> None:
        self.alpha = self.alpha.step()
        self.gamma = self.gamma.step()
        self.policy.handle_terminal()

    # -- Controller --------------------------------------------------------

    def sample_behaviour(self, key: chex.PRNGKey, state: State) -> Action:
        return self.policy.sample(key, state)

    def sample_target(self, key: chex.PRNGKey, state: State) -> Action:
        return self.policy.sample(key, state)

    # -- Predictors ----------------------------------------------------------

    def predict_q(self, state: State) -> np.ndarray:
        return self.q_func.predict(state)

    def predict_qsa(self, state: State, action: Action) -> float:
        return self.q_func.predict_index(state, action)

    def predict_v(self, state: State) -> float:
        """Expected action-value under the policy's distribution."""
        return float(np.dot(self.predict_q(state), self.policy.probabilities(state)))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(q_func={self.q_func!r}, policy={self.policy!r}, "
            f"alpha={self.alpha.value:.4g}, gamma={self.gamma.value:.4g})"
        )
