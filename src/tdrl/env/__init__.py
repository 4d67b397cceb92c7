"""Environments.

Quick start::

    from tdrl.env import make

    env = make("MountainCar-v0")
    t = env.step(2)
"""

from tdrl.env.base import Environment
from tdrl.env.grid_world import GridWorld
from tdrl.env.mountain_car import MountainCar

# ---- Registry ----

_REGISTRY: dict[str, type[Environment]] = {
    "GridWorld-v0": GridWorld,
    "MountainCar-v0": MountainCar,
}


def register(name: str, cls: type[Environment]) -> None:
    """Register a custom environment class under *name*."""
    _REGISTRY[name] = cls


def make(name: str, **kwargs: object) -> Environment:
    """Create an environment by registered name."""
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY))
        raise KeyError(f"Unknown environment {name!r}. Available: {available}")
    return _REGISTRY[name](**kwargs)


__all__ = [
    "Environment",
    "GridWorld",
    "MountainCar",
    "make",
    "register",
]
