"""Core type definitions for tdrl.

Experience containers are NamedTuples: immutable, cheap, and unpackable.
States are whatever the environment emits (typically a 1-D float array);
actions of finite-action controllers are plain ``int`` indices.
"""

from __future__ import annotations

from typing import Any, NamedTuple, TypeAlias

import numpy as np

State: TypeAlias = Any
Action: TypeAlias = int


class Transition(NamedTuple):
    """A single (s, a, r, s', terminated) experience tuple.

    Produced once per environment step and consumed exactly once by the
    agent's ``handle_transition``.

    Fields:
        state:       State the action was taken in.
        action:      Action taken.
        reward:      Scalar reward received.
        next_state:  State reached.
        terminated:  True if ``next_state`` is terminal (no bootstrap).
    """

    state: State
    action: Action
    reward: float
    next_state: State
    terminated: bool


def as_state(x: Any) -> np.ndarray:
    """Coerce a raw state (scalar, list, jax array) into a flat float64 array."""
    return np.atleast_1d(np.asarray(x, dtype=np.float64))
