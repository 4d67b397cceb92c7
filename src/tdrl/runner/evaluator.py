"""Evaluation: episodes played with the learned policy and no learning.

Usage::

    result = next(Evaluation(agent, MountainCar, step_limit=1000))
    result.total_reward, result.steps
"""

from __future__ import annotations

from typing import Any, NamedTuple

import chex
import numpy as np

from tdrl.runner.experiment import Episode, _EpisodeStream


class Evaluation(_EpisodeStream):
    """Stream of episodes acting with ``agent.sample_target``.

    The agent is never updated and ``handle_terminal`` is never called,
    so weights and parameter schedules are left untouched.
    """

    def _sample(self, key: chex.PRNGKey, state: Any) -> int:
        return self.agent.sample_target(key, state)


class EvalMetrics(NamedTuple):
    """Aggregated evaluation results."""

    mean_return: float
    std_return: float
    mean_length: float


def summarize(episodes: list[Episode]) -> EvalMetrics:
    """Mean/std return and mean length over *episodes*."""
    if not episodes:
        raise ValueError("Cannot summarize an empty list of episodes")
    returns = np.array([e.total_reward for e in episodes])
    lengths = np.array([e.steps for e in episodes], dtype=np.float64)
    return EvalMetrics(
        mean_return=float(returns.mean()),
        std_return=float(returns.std()),
        mean_length=float(lengths.mean()),
    )
