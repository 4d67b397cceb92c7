"""Runner configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RunnerConfig:
    """Outer-loop settings for ``train_and_evaluate``.

    Algorithm hyper-parameters are given to the agent's constructor, not
    here.
    """

    # Episode budget
    train_episodes: int = 1_000
    eval_episodes: int = 1
    step_limit: int = 1_000  # per episode

    # Logging
    log_interval: int = 10  # episodes

    # Seeding
    seed: int = 0
