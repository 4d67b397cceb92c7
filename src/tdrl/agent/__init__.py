from tdrl.agent.base import (
    ActionValuePredictor,
    Algorithm,
    Controller,
    OnlineLearner,
    ValuePredictor,
)

__all__ = [
    "ActionValuePredictor",
    "Algorithm",
    "Controller",
    "OnlineLearner",
    "ValuePredictor",
]
