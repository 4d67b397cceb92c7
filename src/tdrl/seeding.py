"""JAX PRNG key helpers.

All randomness in tdrl flows through explicit ``jax.random`` keys: agents
and experiments carry a key and split it before every draw.  The sampling
helpers are jitted once and return plain Python scalars, since every
consumer lives in an ordinary Python step loop.

Usage::

    from tdrl.seeding import make_rng, split_key

    rng = make_rng(42)
    rng, key = split_key(rng)
    action = policy.sample(key, state)
"""

from __future__ import annotations

from functools import partial

import chex
import jax
import jax.numpy as jnp
import numpy as np


def make_rng(seed: int) -> chex.PRNGKey:
    """Create a PRNG key from an integer seed."""
    return jax.random.PRNGKey(seed)


def split_key(rng: chex.PRNGKey) -> tuple[chex.PRNGKey, chex.PRNGKey]:
    """Split *rng* into ``(new_rng, subkey)``."""
    return tuple(jax.random.split(rng))  # type: ignore[return-value]


@jax.jit
def _uniform(key: chex.PRNGKey) -> jax.Array:
    return jax.random.uniform(key)


@partial(jax.jit, static_argnames=("n",))
def _randint(key: chex.PRNGKey, n: int) -> jax.Array:
    return jax.random.randint(key, shape=(), minval=0, maxval=n)


@jax.jit
def _categorical(key: chex.PRNGKey, probs: jax.Array) -> jax.Array:
    return jax.random.choice(key, probs.shape[0], p=probs)


def uniform(key: chex.PRNGKey) -> float:
    """Draw a float uniformly from ``[0, 1)``."""
    return float(_uniform(key))


def randint(key: chex.PRNGKey, n: int) -> int:
    """Draw an integer uniformly from ``{0, ..., n - 1}``."""
    return int(_randint(key, n))


def categorical(key: chex.PRNGKey, probs: np.ndarray) -> int:
    """Draw an index with probability proportional to *probs*."""
    return int(_categorical(key, jnp.asarray(probs, dtype=jnp.float32)))
