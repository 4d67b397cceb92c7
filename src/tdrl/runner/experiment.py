"""Serial episodic experiments.

An experiment is a lazy, non-restartable stream of ``Episode`` records:
each ``next()`` builds a fresh environment, plays one episode to
termination or the step limit, and returns its outcome.  Nothing runs
until a record is pulled, and the caller decides how many to pull::

    experiment = SerialExperiment(agent, GridWorld, step_limit=200)
    first = next(experiment)              # one episode of learning
    history = run(experiment, 500)        # 500 more, logged

During training every transition is passed to ``agent.handle_transition``
and ``agent.handle_terminal`` is called once at every episode boundary
(terminal state *or* step limit).
"""

from __future__ import annotations

import itertools
import logging
from abc import abstractmethod
from collections.abc import Callable, Iterator
from typing import Any, NamedTuple

import chex

from tdrl.env.base import Environment
from tdrl.errors import UpdateError
from tdrl.metrics import MetricsSink, log_episode_progress
from tdrl.seeding import make_rng, split_key

logger = logging.getLogger(__name__)

EnvBuilder = Callable[[], Environment]

TERMINATED = "terminated"
STEP_LIMIT = "step_limit"


class Episode(NamedTuple):
    """Outcome of one episode.

    Fields:
        episode:         Zero-based index within its experiment.
        total_reward:    Undiscounted sum of rewards.
        steps:           Number of environment steps taken.
        terminal_reason: ``"terminated"`` or ``"step_limit"``.
    """

    episode: int
    total_reward: float
    steps: int
    terminal_reason: str

    def to_record(self) -> dict[str, Any]:
        return self._asdict()


class _EpisodeStream(Iterator[Episode]):
    """Shared driving loop for training and evaluation.

    Subclasses implement ``_sample``; the other hooks default to no-ops.
    """

    def __init__(
        self,
        agent: Any,
        env_builder: EnvBuilder,
        step_limit: int,
        *,
        rng: chex.PRNGKey | None = None,
    ) -> None:
        if step_limit < 1:
            raise ValueError(f"step_limit must be >= 1, got {step_limit}")
        self.agent = agent
        self.env_builder = env_builder
        self.step_limit = step_limit
        self.rng = rng if rng is not None else make_rng(0)
        self._episode = 0

    @abstractmethod
    def _sample(self, key: chex.PRNGKey, state: Any) -> int:
        """Pick the action for *state*."""
        ...

    def _learn(self, transition: Any) -> None:
        pass

    def _end_episode(self) -> None:
        pass

    def __iter__(self) -> _EpisodeStream:
        return self

    def __next__(self) -> Episode:
        env = self.env_builder()
        state = env.current_state()
        total_reward = 0.0
        steps = 0
        reason = STEP_LIMIT

        while steps < self.step_limit:
            self.rng, key = split_key(self.rng)
            action = self._sample(key, state)
            t = env.step(action)
            steps += 1
            total_reward += t.reward

            self._learn(t)

            state = t.next_state
            if t.terminated:
                reason = TERMINATED
                break

        self._end_episode()

        episode = Episode(
            episode=self._episode,
            total_reward=float(total_reward),
            steps=steps,
            terminal_reason=reason,
        )
        self._episode += 1
        return episode


class SerialExperiment(_EpisodeStream):
    """Training stream: behaviour policy, one TD update per step.

    Per-step ``UpdateError``s (an update addressed outside the
    approximator) are logged and the episode carries on, unless
    ``raise_on_update_error`` is set.
    """

    def __init__(
        self,
        agent: Any,
        env_builder: EnvBuilder,
        step_limit: int,
        *,
        rng: chex.PRNGKey | None = None,
        raise_on_update_error: bool = False,
    ) -> None:
        super().__init__(agent, env_builder, step_limit, rng=rng)
        self.raise_on_update_error = raise_on_update_error
        self.n_update_errors = 0

    def _sample(self, key: chex.PRNGKey, state: Any) -> int:
        return self.agent.sample_behaviour(key, state)

    def _learn(self, transition: Any) -> None:
        try:
            self.agent.handle_transition(transition)
        except UpdateError as e:
            if self.raise_on_update_error:
                raise
            self.n_update_errors += 1
            logger.warning("Skipped update in episode %d: %s", self._episode, e)

    def _end_episode(self) -> None:
        self.agent.handle_terminal()


def run(
    experiment: Iterator[Episode],
    n_episodes: int,
    logger: MetricsSink | None = None,
    *,
    log_interval: int = 1,
) -> list[Episode]:
    """Pull *n_episodes* records from *experiment*.

    Every record is written to the optional sink *logger*; every
    *log_interval*-th is also logged at INFO level.
    """
    episodes = []
    for episode in itertools.islice(experiment, n_episodes):
        record = episode.to_record()
        if logger is not None:
            logger.write(record)
        if log_interval and (episode.episode + 1) % log_interval == 0:
            log_episode_progress(record, n_episodes, logger_name=__name__)
        episodes.append(episode)
    return episodes
