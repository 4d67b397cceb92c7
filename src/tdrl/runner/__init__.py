"""Experiment runners.

- ``SerialExperiment``: lazy stream of training episodes.
- ``Evaluation``: lazy stream of evaluation episodes (no learning).
- ``run``: pull a bounded number of episodes, logging each.
- ``train_and_evaluate``: both phases driven by a ``RunnerConfig``.
"""

from tdrl.runner.config import RunnerConfig
from tdrl.runner.evaluator import EvalMetrics, Evaluation, summarize
from tdrl.runner.experiment import STEP_LIMIT, TERMINATED, Episode, SerialExperiment, run
from tdrl.runner.train import TrainResult, train_and_evaluate

__all__ = [
    "STEP_LIMIT",
    "TERMINATED",
    "EvalMetrics",
    "Episode",
    "Evaluation",
    "RunnerConfig",
    "SerialExperiment",
    "TrainResult",
    "run",
    "summarize",
    "train_and_evaluate",
]
