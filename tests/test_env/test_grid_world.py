"""Tests for the GridWorld environment."""

import numpy as np
import pytest

from tdrl.env import GridWorld


@pytest.fixture
def env():
    return GridWorld()


class TestGridWorldBasic:
    def test_starts_at_origin(self, env):
        np.testing.assert_array_equal(env.current_state(), [0.0, 0.0])
        assert not env.is_terminal()

    def test_step_right(self, env):
        t = env.step(1)
        np.testing.assert_array_equal(t.state, [0.0, 0.0])
        np.testing.assert_array_equal(t.next_state, [0.0, 0.25])
        assert t.reward == -0.01
        assert not t.terminated

    def test_step_down(self, env):
        t = env.step(2)
        np.testing.assert_array_equal(t.next_state, [0.25, 0.0])

    def test_wall_clipping(self, env):
        t = env.step(0)
        np.testing.assert_array_equal(t.next_state, [0.0, 0.0])

    def test_goal_reward(self, env):
        for _ in range(4):
            env.step(1)
        for _ in range(3):
            env.step(2)
        t = env.step(2)
        assert t.reward == 1.0
        assert t.terminated
        assert env.is_terminal()

    def test_states_in_space(self, env):
        space = env.state_space()
        for a in (1, 2, 1, 2):
            assert space.contains(env.step(a).next_state)

    def test_too_small(self):
        with pytest.raises(ValueError):
            GridWorld(size=1)
