"""GTD2 gradient-TD prediction.

Sutton, R. S., Maei, H. R., Precup, D., Bhatnagar, S., Silver, D.,
Szepesvari, Cs., Wiewiora, E. (2009). Fast gradient-descent methods for
temporal-difference learning with linear function approximation. ICML.
"""

from __future__ import annotations

import logging

import numpy as np

from tdrl.errors import ConfigurationError
from tdrl.fa.linear import LFA
from tdrl.fa.projection import DenseProjection
from tdrl.parameter import Parameter
from tdrl.types import State, Transition

logger = logging.getLogger(__name__)


class GTD2:
    """Off-policy-stable linear TD with two coupled weight vectors.

    ``fa_theta`` holds the value estimate and ``fa_w`` an estimate of the
    expected TD error given the features.  Per transition::

        delta = r + gamma * theta.phi(s') - theta.phi(s)
        est   = w.phi(s)
        w     <- w     + beta  * (delta - est)   along phi(s)
        theta <- theta + alpha * est             along phi(s) - gamma * phi(s')

    ``phi(s')`` is taken as zero on terminal transitions.  Both steps are
    raw gradient steps, not divided by the squared norm of their direction
    as ``LFA.update`` is.

    ``alpha``, ``beta`` and ``gamma`` each advance along their own schedule
    at episode boundaries.
    """

    def __init__(
        self,
        fa_theta: LFA,
        fa_w: LFA,
        alpha: float | Parameter,
        beta: float | Parameter,
        gamma: float | Parameter,
    ) -> None:
        if not fa_theta.projector.equivalent(fa_w.projector):
            raise ConfigurationError(
                "fa_theta and fa_w must be equivalent function approximators: "
                f"{fa_theta.projector!r} vs {fa_w.projector!r}"
            )
        if fa_theta.n_outputs != 1 or fa_w.n_outputs != 1:
            raise ConfigurationError("GTD2 needs single-output approximators")
        self.fa_theta = fa_theta
        self.fa_w = fa_w
        self.alpha = Parameter.coerce(alpha)
        self.beta = Parameter.coerce(beta)
        self.gamma = Parameter.coerce(gamma)
        logger.debug("Created GTD2 over %r", fa_theta.projector)

    def handle_transition(self, t: Transition) -> None:
        projector = self.fa_theta.projector
        phi_s = projector.project(t.state)
        if t.terminated:
            phi_ns = DenseProjection(np.zeros(projector.size()))
        else:
            phi_ns = projector.project(t.next_state)

        td_error = (
            t.reward
            + self.gamma * self.fa_theta.evaluate_index(phi_ns, 0)
            - self.fa_theta.evaluate_index(phi_s, 0)
        )
        td_estimate = self.fa_w.evaluate_index(phi_s, 0)
        direction = phi_s - self.gamma.value * phi_ns

        self.fa_w.update_weights(self.beta * (td_error - td_estimate) * phi_s.expanded())
        self.fa_theta.update_weights(self.alpha * td_estimate * direction.expanded())

    def handle_terminal(self) -> None:
        self.alpha = self.alpha.step()
        self.beta = self.beta.step()
        self.gamma = self.gamma.step()

    def predict_v(self, state: State) -> float:
        return self.fa_theta.predict_index(state, 0)

    @property
    def weights(self) -> np.ndarray:
        return self.fa_theta.weights
