"""Train-then-evaluate driver.

Usage::

    from tdrl.runner import RunnerConfig, train_and_evaluate

    result = train_and_evaluate(agent, MountainCar, RunnerConfig(train_episodes=500))
    result.eval_metrics.mean_return
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from tdrl.metrics import MetricsSink
from tdrl.runner.config import RunnerConfig
from tdrl.runner.evaluator import EvalMetrics, Evaluation, summarize
from tdrl.runner.experiment import EnvBuilder, Episode, SerialExperiment, run
from tdrl.seeding import make_rng, split_key

logger = logging.getLogger(__name__)


class TrainResult(NamedTuple):
    """Return value from ``train_and_evaluate``."""

    train_episodes: list[Episode]
    eval_episodes: list[Episode]
    eval_metrics: EvalMetrics | None


def train_and_evaluate(
    agent: Any,
    env_builder: EnvBuilder,
    config: RunnerConfig,
    metrics: MetricsSink | None = None,
) -> TrainResult:
    """Run ``config.train_episodes`` of learning, then evaluate.

    Args:
        agent: Controller with ``handle_transition``/``handle_terminal``.
        env_builder: Zero-argument environment constructor.
        config: Episode budgets, step limit, logging interval and seed.
        metrics: Optional sink receiving one record per training episode.

    Returns:
        ``TrainResult`` with the training and evaluation episodes.
    """
    rng = make_rng(config.seed)
    train_key, eval_key = split_key(rng)

    logger.info(
        "Training %s for %d episodes (step limit %d)",
        type(agent).__name__, config.train_episodes, config.step_limit,
    )
    experiment = SerialExperiment(agent, env_builder, config.step_limit, rng=train_key)
    train_episodes = run(
        experiment, config.train_episodes, metrics, log_interval=config.log_interval,
    )
    if experiment.n_update_errors:
        logger.warning("%d updates skipped during training", experiment.n_update_errors)

    evaluation = Evaluation(agent, env_builder, config.step_limit, rng=eval_key)
    eval_episodes = run(evaluation, config.eval_episodes, log_interval=0)
    eval_metrics = summarize(eval_episodes) if eval_episodes else None
    if eval_metrics is not None:
        logger.info(
            "Evaluation over %d episodes: mean_return=%.4g std=%.4g mean_length=%.1f",
            len(eval_episodes), eval_metrics.mean_return,
            eval_metrics.std_return, eval_metrics.mean_length,
        )

    return TrainResult(
        train_episodes=train_episodes,
        eval_episodes=eval_episodes,
        eval_metrics=eval_metrics,
    )
