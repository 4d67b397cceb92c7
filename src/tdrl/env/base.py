"""Environment interface consumed by the experiment runner.

Environments are stateful simulators built fresh for every episode from
a zero-argument builder, so builders must be side-effect free and
repeatable::

    env = GridWorld(size=5)
    s = env.current_state()
    while not env.is_terminal():
        t = env.step(action)        # Transition(state, action, reward, next_state, terminated)

Stepping a terminated environment raises ``RuntimeError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tdrl.spaces import Discrete, RegularSpace
from tdrl.types import Action, State, Transition


class Environment(ABC):
    """Abstract base for episodic environments with a finite action set."""

    @abstractmethod
    def state_space(self) -> RegularSpace:
        """Domain of the states emitted by ``current_state``."""
        ...

    @abstractmethod
    def action_space(self) -> Discrete:
        """Finite action set."""
        ...

    @abstractmethod
    def current_state(self) -> State:
        ...

    @abstractmethod
    def is_terminal(self) -> bool:
        ...

    @abstractmethod
    def _update(self, action: Action) -> float:
        """Advance the internal state by one step and return the reward."""
        ...

    def step(self, action: Action) -> Transition:
        """Apply *action* and return the resulting transition."""
        if self.is_terminal():
            raise RuntimeError(f"{self.name} has terminated; build a new instance")
        if not self.action_space().contains(action):
            raise ValueError(f"Invalid action {action!r} for {self.action_space()}")
        state = self.current_state()
        reward = self._update(action)
        return Transition(
            state=state,
            action=action,
            reward=reward,
            next_state=self.current_state(),
            terminated=self.is_terminal(),
        )

    @property
    def name(self) -> str:
        return self.__class__.__name__
