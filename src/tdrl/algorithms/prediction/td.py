"""TD(0) state-value prediction.

Sutton, R. S. (1988). Learning to predict by the methods of temporal
differences. Machine Learning 3:9-44.
"""

from __future__ import annotations

import logging

from tdrl.errors import ConfigurationError
from tdrl.fa.linear import LFA
from tdrl.parameter import Parameter
from tdrl.types import State, Transition

logger = logging.getLogger(__name__)


class TD:
    """Evaluates whatever policy generated the transitions it is fed."""

    def __init__(
        self,
        v_func: LFA,
        alpha: float | Parameter,
        gamma: float | Parameter,
    ) -> None:
        if v_func.n_outputs != 1:
            raise ConfigurationError(
                f"TD needs a single-output approximator, got {v_func.n_outputs} outputs"
            )
        self.v_func = v_func
        self.alpha = Parameter.coerce(alpha)
        self.gamma = Parameter.coerce(gamma)
        logger.debug("Created TD over %r", v_func)

    def handle_transition(self, t: Transition) -> None:
        phi_s = self.v_func.embed(t.state)
        v = self.v_func.evaluate_index(phi_s, 0)

        if t.terminated:
            residual = t.reward - v
        else:
            residual = t.reward + self.gamma * self.v_func.predict_index(t.next_state, 0) - v

        self.v_func.update_index(phi_s, 0, self.alpha * residual)

    def handle_terminal(self) -> None:
        self.alpha = self.alpha.step()
        self.gamma = self.gamma.step()

    def predict_v(self, state: State) -> float:
        return self.v_func.predict_index(state, 0)
