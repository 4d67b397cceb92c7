"""Scalar hyper-parameters with per-episode schedules.

A ``Schedule`` is a pure function ``episode -> value`` built from the
constructors below; the jnp-based ones are safe inside ``jax.jit``::

    sched = linear_schedule(start=1.0, end=0.01, steps=100)
    eps = sched(10)

A ``Parameter`` pairs a schedule with an episode counter.  It never
mutates: ``step()`` returns the parameter one episode further along, so
every point where a learning rate or discount changes is an explicit
rebinding in ``handle_terminal``::

    alpha = Parameter.exponential(0.1, decay=0.99, floor=1e-3)
    alpha.value          # 0.1
    alpha = alpha.step()
    alpha.value          # 0.099
"""

from __future__ import annotations

from collections.abc import Callable

import equinox as eqx
import jax.numpy as jnp

Schedule = Callable[[int], "float | jnp.ndarray"]


def constant_schedule(value: float) -> Schedule:
    """Return a schedule that always yields *value* (as an exact Python float)."""
    _value = float(value)

    def _schedule(step: int) -> float:
        return _value

    return _schedule


def linear_schedule(
    start: float,
    end: float,
    steps: int,
) -> Schedule:
    """Return a pure function that linearly interpolates from *start* to *end*.

    Parameters
    ----------
    start:
        Value at step 0.
    end:
        Value at step *steps* (and beyond).
    steps:
        Number of steps over which to interpolate.
    """
    _start = jnp.float32(start)
    _end = jnp.float32(end)
    _steps = jnp.float32(max(steps, 1))

    def _schedule(step: int | jnp.ndarray) -> jnp.ndarray:
        frac = jnp.clip(jnp.float32(step) / _steps, 0.0, 1.0)
        return _start + frac * (_end - _start)

    return _schedule


def exponential_schedule(
    start: float,
    decay: float,
    floor: float = 0.0,
) -> Schedule:
    """``max(floor, start * decay**step)``."""
    _start = jnp.float32(start)
    _decay = jnp.float32(decay)
    _floor = jnp.float32(floor)

    def _schedule(step: int | jnp.ndarray) -> jnp.ndarray:
        return jnp.maximum(_floor, _start * _decay ** jnp.float32(step))

    return _schedule


def polynomial_schedule(
    start: float,
    exponent: float,
    floor: float = 0.0,
) -> Schedule:
    """``max(floor, start / (step + 1)**exponent)``.

    With ``0.5 < exponent <= 1`` this satisfies the Robbins-Monro step-size
    conditions.
    """
    _start = jnp.float32(start)
    _exponent = jnp.float32(exponent)
    _floor = jnp.float32(floor)

    def _schedule(step: int | jnp.ndarray) -> jnp.ndarray:
        return jnp.maximum(_floor, _start / (jnp.float32(step) + 1.0) ** _exponent)

    return _schedule


class Parameter(eqx.Module):
    """An immutable scheduled scalar.

    Behaves like a float in arithmetic (``alpha * residual``) and in
    ``float(alpha)``.  Values are not clamped: a schedule that produces a
    divergent step size will diverge.
    """

    schedule: Schedule = eqx.field(static=True)
    episode: int = eqx.field(static=True, default=0)

    @classmethod
    def fixed(cls, value: float) -> Parameter:
        return cls(constant_schedule(value))

    @classmethod
    def linear(cls, start: float, end: float, steps: int) -> Parameter:
        return cls(linear_schedule(start, end, steps))

    @classmethod
    def exponential(cls, start: float, decay: float, floor: float = 0.0) -> Parameter:
        return cls(exponential_schedule(start, decay, floor))

    @classmethod
    def polynomial(cls, start: float, exponent: float, floor: float = 0.0) -> Parameter:
        return cls(polynomial_schedule(start, exponent, floor))

    @classmethod
    def coerce(cls, value: float | Parameter) -> Parameter:
        """Accept either a ready-made ``Parameter`` or a plain number."""
        if isinstance(value, Parameter):
            return value
        return cls.fixed(value)

    @property
    def value(self) -> float:
        return float(self.schedule(self.episode))

    def step(self) -> Parameter:
        """The same parameter one episode later."""
        return Parameter(self.schedule, self.episode + 1)

    def __float__(self) -> float:
        return self.value

    def __mul__(self, other: float) -> float:
        return self.value * other

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Parameter(value={self.value:.6g}, episode={self.episode})"
