"""Policy capability protocols.

Policies are duck-typed: any object with the right methods satisfies the
protocol, no inheritance required.  Composite policies (``EpsilonGreedy``)
hold other policies rather than extending them.

- ``Policy``: can sample an action and report its probability.
- ``FinitePolicy``: additionally enumerates the full distribution over a
  finite action set; required by agents that take expectations over the
  policy (SARSA's state-value prediction, Expected SARSA's target).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import chex
import numpy as np

from tdrl.types import Action, State


@runtime_checkable
class Policy(Protocol):
    """Maps a state to a distribution over actions."""

    def sample(self, key: chex.PRNGKey, state: State) -> Action:
        """Draw an action using PRNG *key*."""
        ...

    def probability(self, state: State, action: Action) -> float:
        """Probability of taking *action* in *state*."""
        ...

    def handle_terminal(self) -> None:
        """Advance any per-episode parameter schedules."""
        ...


@runtime_checkable
class FinitePolicy(Policy, Protocol):
    """A policy over the actions ``{0, ..., n_actions - 1}``."""

    @property
    def n_actions(self) -> int: ...

    def probabilities(self, state: State) -> np.ndarray:
        """Per-action probabilities, summing to 1."""
        ...
