"""Classic mountain car.

Moore, A. W. (1990). Efficient Memory-based Learning for Robot Control.
Ph.D. thesis, University of Cambridge.
"""

from __future__ import annotations

import math

import numpy as np

from tdrl.env.base import Environment
from tdrl.spaces import Discrete, RegularSpace

X_MIN, X_MAX = -1.2, 0.6
V_MIN, V_MAX = -0.07, 0.07
GOAL = 0.5

FORCE_G = -0.0025
FORCE_CAR = 0.001

REWARD_STEP = -1.0
REWARD_GOAL = 0.0


class MountainCar(Environment):
    """Drive an under-powered car up a hill by building momentum.

    State: ``[position, velocity]``.
    Actions: ``0`` = full reverse, ``1`` = coast, ``2`` = full forward.
    Reward: ``-1`` per step, ``0`` on the step that reaches ``x >= 0.5``.
    The dynamics are deterministic.
    """

    def __init__(self, x: float = -0.5, v: float = 0.0) -> None:
        self.x = x
        self.v = v

    def state_space(self) -> RegularSpace:
        return RegularSpace.box([X_MIN, V_MIN], [X_MAX, V_MAX])

    def action_space(self) -> Discrete:
        return Discrete(3)

    def current_state(self) -> np.ndarray:
        return np.array([self.x, self.v])

    def is_terminal(self) -> bool:
        return self.x >= GOAL

    def _update(self, action: int) -> float:
        direction = int(action) - 1
        self.v = min(max(self.v + FORCE_CAR * direction + FORCE_G * math.cos(3.0 * self.x), V_MIN), V_MAX)
        self.x = min(max(self.x + self.v, X_MIN), X_MAX)
        if self.x <= X_MIN and self.v < 0.0:
            self.v = 0.0
        return REWARD_GOAL if self.is_terminal() else REWARD_STEP
