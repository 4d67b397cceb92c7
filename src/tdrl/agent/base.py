"""Agent capability protocols.

An agent is a mutable object that owns (or shares) its approximators and
exposes some of the capabilities below.  Everything is structural typing:
no base class to inherit, just methods with compatible signatures.

- ``Algorithm``: ``handle_terminal()`` at every episode boundary:
  advances parameter schedules and clears per-episode state (traces).
- ``OnlineLearner``: ``handle_transition(t)``: one TD update per step.
- ``Controller``: samples actions for the behaviour policy (what the
  agent does while learning) and the target policy (what it has learned).
- ``ValuePredictor`` / ``ActionValuePredictor``: read-only estimates.

The experiment runner needs ``Controller`` for both phases plus
``OnlineLearner`` and ``Algorithm`` for training.

Example::

    agent = SARSA(q_func, policy, alpha=0.1, gamma=0.99)
    key, subkey = split_key(key)
    a = agent.sample_behaviour(subkey, s)
    t = env.step(a)
    agent.handle_transition(t)
    if t.terminated:
        agent.handle_terminal()
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import chex
import numpy as np

from tdrl.types import Action, State, Transition


@runtime_checkable
class Algorithm(Protocol):
    def handle_terminal(self) -> None:
        """Step parameter schedules and reset per-episode state."""
        ...


@runtime_checkable
class OnlineLearner(Algorithm, Protocol):
    def handle_transition(self, transition: Transition) -> None:
        """Apply one TD update for *transition*.

        Raises ``UpdateError`` (an ``IndexError``) if the transition
        addresses features or actions outside the approximator; no
        weight has been modified when that happens.
        """
        ...


@runtime_checkable
class Controller(Protocol):
    def sample_behaviour(self, key: chex.PRNGKey, state: State) -> Action:
        """Action to take while learning."""
        ...

    def sample_target(self, key: chex.PRNGKey, state: State) -> Action:
        """Action of the policy being learned (used for evaluation)."""
        ...


@runtime_checkable
class ValuePredictor(Protocol):
    def predict_v(self, state: State) -> float: ...


@runtime_checkable
class ActionValuePredictor(Protocol):
    def predict_q(self, state: State) -> np.ndarray: ...

    def predict_qsa(self, state: State, action: Action) -> float: ...
