"""Simple NxN grid world."""

from __future__ import annotations

import numpy as np

from tdrl.env.base import Environment
from tdrl.spaces import Discrete, RegularSpace


class GridWorld(Environment):
    """Navigate from ``(0, 0)`` to ``(size-1, size-1)``.

    State: ``[row / (size-1), col / (size-1)]`` normalised to [0, 1].
    Actions: ``0``=up, ``1``=right, ``2``=down, ``3``=left; moves off the
    grid leave the agent in place.
    Reward: ``+1`` on reaching the goal (terminal), ``-0.01`` per step
    otherwise.
    """

    ACTIONS = {0: (-1, 0), 1: (0, 1), 2: (1, 0), 3: (0, -1)}

    def __init__(self, size: int = 5) -> None:
        if size < 2:
            raise ValueError(f"GridWorld needs size >= 2, got {size}")
        self.size = size
        self._pos = (0, 0)
        self._goal = (size - 1, size - 1)

    def state_space(self) -> RegularSpace:
        return RegularSpace.box([0.0, 0.0], [1.0, 1.0])

    def action_space(self) -> Discrete:
        return Discrete(4)

    def current_state(self) -> np.ndarray:
        denom = self.size - 1
        return np.array([self._pos[0] / denom, self._pos[1] / denom])

    def is_terminal(self) -> bool:
        return self._pos == self._goal

    def _update(self, action: int) -> float:
        dr, dc = self.ACTIONS[int(action)]
        r = max(0, min(self.size - 1, self._pos[0] + dr))
        c = max(0, min(self.size - 1, self._pos[1] + dc))
        self._pos = (r, c)
        return 1.0 if self.is_terminal() else -0.01
