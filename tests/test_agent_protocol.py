"""Tests for the agent protocols and the Transition record."""

import numpy as np
import pytest

from tdrl.agent import ActionValuePredictor, Algorithm, Controller, OnlineLearner, ValuePredictor
from tdrl.algorithms import GTD2, SARSA, TD, ExpectedSARSA, QLearning, SARSALambda
from tdrl.fa import LFA
from tdrl.policies import Random
from tdrl.traces import Replacing
from tdrl.types import Transition, as_state


class TestTransition:
    def test_fields(self):
        t = Transition([0.5], 1, -1.0, [1.5], False)
        state, action, reward, next_state, terminated = t
        assert action == 1
        assert reward == -1.0
        assert t.next_state == [1.5]
        assert not terminated

    def test_immutable(self):
        t = Transition([0.5], 1, -1.0, [1.5], False)
        with pytest.raises(AttributeError):
            t.reward = 0.0

    def test_as_state(self):
        np.testing.assert_array_equal(as_state(0.5), [0.5])
        assert as_state([1, 2]).dtype == np.float64


class TestProtocols:
    @pytest.mark.parametrize("cls", [QLearning, SARSA, ExpectedSARSA])
    def test_controllers(self, q_func, cls):
        agent = cls(q_func, Random(2), 0.1, 0.9)
        assert isinstance(agent, OnlineLearner)
        assert isinstance(agent, Controller)
        assert isinstance(agent, ValuePredictor)
        assert isinstance(agent, ActionValuePredictor)

    def test_sarsa_lambda(self, q_func):
        agent = SARSALambda(q_func, Random(2), Replacing.zeros(q_func.weights_dim), 0.1, 0.9, 0.5)
        assert isinstance(agent, OnlineLearner)
        assert isinstance(agent, Controller)

    def test_predictors(self, grid_1d):
        td = TD(LFA.scalar(grid_1d), 0.1, 0.9)
        gtd2 = GTD2(LFA.scalar(grid_1d), LFA.scalar(grid_1d), 0.1, 0.1, 0.9)
        for agent in (td, gtd2):
            assert isinstance(agent, Algorithm)
            assert isinstance(agent, OnlineLearner)
            assert isinstance(agent, ValuePredictor)
            assert not isinstance(agent, Controller)
