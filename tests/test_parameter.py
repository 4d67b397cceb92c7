"""Tests for tdrl.parameter."""

from __future__ import annotations

import jax
import jax.numpy as jnp
import pytest

from tdrl.parameter import (
    Parameter,
    constant_schedule,
    exponential_schedule,
    linear_schedule,
    polynomial_schedule,
)


class TestSchedules:
    def test_constant(self):
        sched = constant_schedule(0.1)
        assert sched(0) == 0.1
        assert sched(1000) == 0.1

    def test_linear_endpoints(self):
        sched = linear_schedule(start=1.0, end=0.0, steps=100)
        assert float(sched(0)) == 1.0
        assert float(sched(100)) == 0.0
        assert abs(float(sched(50)) - 0.5) < 1e-5

    def test_linear_clamps_beyond_steps(self):
        sched = linear_schedule(start=1.0, end=0.1, steps=100)
        assert float(sched(200)) == float(sched(100))

    def test_exponential_floor(self):
        sched = exponential_schedule(start=1.0, decay=0.5, floor=0.2)
        assert float(sched(1)) == pytest.approx(0.5)
        assert float(sched(2)) == pytest.approx(0.25)
        assert float(sched(3)) == pytest.approx(0.2)

    def test_polynomial(self):
        sched = polynomial_schedule(start=1.0, exponent=1.0)
        assert float(sched(0)) == pytest.approx(1.0)
        assert float(sched(3)) == pytest.approx(0.25)

    def test_jit_compatible(self):
        sched = linear_schedule(start=1.0, end=0.0, steps=100)
        assert abs(float(jax.jit(sched)(jnp.int32(50))) - 0.5) < 1e-5


class TestParameter:
    def test_fixed_is_exact(self):
        p = Parameter.fixed(0.1)
        assert p.value == 0.1
        assert p.step().step().value == 0.1

    def test_step_returns_new_parameter(self):
        p = Parameter.linear(1.0, 0.0, 10)
        q = p.step()
        assert p.episode == 0
        assert q.episode == 1
        assert p.value == pytest.approx(1.0)
        assert q.value == pytest.approx(0.9)

    def test_exponential(self):
        p = Parameter.exponential(0.1, decay=0.5)
        assert p.step().step().value == pytest.approx(0.025)

    def test_polynomial(self):
        p = Parameter.polynomial(1.0, exponent=0.5)
        assert p.step().step().step().value == pytest.approx(0.5)

    def test_coerce(self):
        p = Parameter.fixed(0.3)
        assert Parameter.coerce(p) is p
        assert Parameter.coerce(0.7).value == 0.7

    def test_arithmetic(self):
        p = Parameter.fixed(0.5)
        assert p * 4.0 == 2.0
        assert 4.0 * p == 2.0
        assert float(p) == 0.5

    def test_immutable(self):
        p = Parameter.fixed(0.5)
        with pytest.raises(AttributeError):
            p.episode = 3  # type: ignore[misc]
