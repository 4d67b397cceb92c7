"""tdrl: online temporal-difference learning with linear function approximation."""

from tdrl.algorithms import GTD2, SARSA, TD, ExpectedSARSA, QLearning, SARSALambda
from tdrl.errors import (
    ActionIndexError,
    ConfigurationError,
    FeatureIndexError,
    OutOfBoundsError,
    TDRLError,
    UpdateError,
)
from tdrl.fa import LFA, Fourier, UniformGrid
from tdrl.metrics import MetricsLogger, setup_logging
from tdrl.parameter import Parameter
from tdrl.policies import EpsilonGreedy, Greedy, Random, Softmax
from tdrl.runner import Episode, Evaluation, RunnerConfig, SerialExperiment, run, train_and_evaluate
from tdrl.seeding import make_rng, split_key
from tdrl.traces import Accumulating, Replacing
from tdrl.types import Transition

__all__ = [
    "LFA",
    "Accumulating",
    "ActionIndexError",
    "ConfigurationError",
    "Episode",
    "EpsilonGreedy",
    "Evaluation",
    "ExpectedSARSA",
    "FeatureIndexError",
    "Fourier",
    "GTD2",
    "Greedy",
    "MetricsLogger",
    "OutOfBoundsError",
    "Parameter",
    "QLearning",
    "Random",
    "Replacing",
    "RunnerConfig",
    "SARSA",
    "SARSALambda",
    "SerialExperiment",
    "Softmax",
    "TD",
    "TDRLError",
    "Transition",
    "UniformGrid",
    "UpdateError",
    "make_rng",
    "run",
    "setup_logging",
    "split_key",
    "train_and_evaluate",
]
