"""Tests for TD(0) and GTD2 state-value prediction."""

import numpy as np
import pytest

from tdrl.algorithms import GTD2, TD
from tdrl.errors import ConfigurationError
from tdrl.fa import LFA, Fourier, UniformGrid
from tdrl.parameter import Parameter
from tdrl.spaces import Partitioned, RegularSpace
from tdrl.types import Transition

STEP = Transition([0.5], 0, 1.0, [1.5], False)
TERMINAL_STEP = Transition([0.5], 0, 1.0, [1.5], True)


class TestTD:
    def test_update(self, grid_1d):
        v = LFA.scalar(grid_1d)
        agent = TD(v, 0.5, 0.9)
        v.update_index(grid_1d.project([1.5]), 0, 2.0)
        agent.handle_transition(STEP)
        # residual = 1 + 0.9 * 2 - 0
        assert agent.predict_v([0.5]) == pytest.approx(1.4)

    def test_terminal_ignores_next_state(self, grid_1d):
        v = LFA.scalar(grid_1d)
        v.update_index(grid_1d.project([1.5]), 0, 100.0)
        agent = TD(v, 0.5, 0.9)
        agent.handle_transition(TERMINAL_STEP)
        assert agent.predict_v([0.5]) == 0.5

    def test_rejects_multi_output(self, q_func):
        with pytest.raises(ConfigurationError):
            TD(q_func, 0.1, 0.9)


def _gtd2(grid, theta=None):
    fa_theta = LFA(grid, 1, weights=theta)
    fa_w = LFA.scalar(grid)
    return GTD2(fa_theta, fa_w, 0.5, 0.5, 0.9), fa_theta, fa_w


class TestGTD2:
    def test_first_transition_only_moves_w(self, grid_1d):
        agent, fa_theta, fa_w = _gtd2(grid_1d)
        agent.handle_transition(STEP)
        assert fa_w.weights[0, 0] == 0.5
        assert np.all(fa_theta.weights == 0.0)

    def test_second_transition_moves_theta(self, grid_1d):
        agent, fa_theta, fa_w = _gtd2(grid_1d)
        agent.handle_transition(STEP)
        agent.handle_transition(STEP)
        # theta moves by alpha * est = 0.25 along phi(s) - 0.9 phi(s')
        assert fa_w.weights[0, 0] == pytest.approx(0.75)
        assert fa_theta.weights[0, 0] == pytest.approx(0.25)
        assert fa_theta.weights[1, 0] == pytest.approx(-0.225)
        assert agent.predict_v([0.5]) == pytest.approx(0.25)

    def test_terminal_transition_ignores_next_features(self, grid_1d):
        theta = np.zeros(10)
        theta[1] = 10.0
        agent, fa_theta, fa_w = _gtd2(grid_1d, theta)
        agent.handle_transition(TERMINAL_STEP)
        agent.handle_transition(TERMINAL_STEP)
        assert fa_w.weights[0, 0] == pytest.approx(0.75)
        assert fa_theta.weights[0, 0] == pytest.approx(0.25)
        assert fa_theta.weights[1, 0] == 10.0

    def test_self_loop_step_not_normalised(self):
        grid = UniformGrid(RegularSpace((Partitioned(0.0, 1.0, 1),)))
        fa_theta, fa_w = LFA.scalar(grid), LFA.scalar(grid)
        agent = GTD2(fa_theta, fa_w, 0.1, 1.0, 0.99)
        loop = Transition([0.5], 0, 1.0, [0.5], False)
        agent.handle_transition(loop)
        assert fa_w.weights[0, 0] == pytest.approx(1.0)
        agent.handle_transition(loop)
        # alpha * est * (1 - gamma)
        assert fa_theta.weights[0, 0] == pytest.approx(0.001)

    def test_dense_features_take_raw_gradient_steps(self):
        fourier = Fourier(2, [(0.0, 1.0)])
        fa_theta, fa_w = LFA.scalar(fourier), LFA.scalar(fourier)
        agent = GTD2(fa_theta, fa_w, 0.5, 0.5, 0.9)
        agent.handle_transition(Transition([0.2], 0, 1.0, [0.7], True))
        np.testing.assert_allclose(fa_w.weights[:, 0], 0.5 * fourier.project([0.2]).values)

    def test_weights_are_theta(self, grid_1d):
        agent, fa_theta, _ = _gtd2(grid_1d)
        np.testing.assert_array_equal(agent.weights, fa_theta.weights)

    def test_rejects_different_density(self, grid_1d):
        other = UniformGrid(RegularSpace((Partitioned(0.0, 10.0, 5),)))
        with pytest.raises(ConfigurationError):
            GTD2(LFA.scalar(grid_1d), LFA.scalar(other), 0.1, 0.1, 0.9)

    def test_rejects_different_projector_type(self, grid_1d):
        fourier = Fourier(10, [(0.0, 10.0)])
        assert fourier.size() == grid_1d.size()
        with pytest.raises(ConfigurationError):
            GTD2(LFA.scalar(grid_1d), LFA.scalar(fourier), 0.1, 0.1, 0.9)

    def test_rejects_multi_output(self, grid_1d, q_func):
        with pytest.raises(ConfigurationError):
            GTD2(q_func, LFA.scalar(grid_1d), 0.1, 0.1, 0.9)

    def test_step_sizes_follow_own_schedules(self, grid_1d):
        agent = GTD2(
            LFA.scalar(grid_1d),
            LFA.scalar(grid_1d),
            Parameter.linear(1.0, 0.0, 10),
            Parameter.linear(0.5, 0.0, 5),
            0.9,
        )
        agent.handle_terminal()
        agent.handle_terminal()
        assert agent.alpha.value == pytest.approx(0.8)
        assert agent.beta.value == pytest.approx(0.3)
        assert agent.gamma.value == pytest.approx(0.9)
