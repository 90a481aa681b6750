"""
Random draws for the tick pipeline.

All randomness in a tick goes through a single Sampler, so that a run is
reproducible from one seed and tests can substitute scripted draws.

Draw order within a tick:
1. Dispersal: for every emitting parent (row-major), one block of
   `num_seeds` (dx, dy) offsets.
2. Seed resolution: for every cell holding two or more seeds and no
   occupant (row-major), one index pick.
3. Mutation: for every seed occupant (row-major), the `from` trait index
   then the `to` trait index.
"""

from typing import Protocol

from functools import partial

import jax
import jax.random as jr
import numpy as np
from jax import Array


@partial(jax.jit, static_argnames=("shape",))
def _randint(key: Array, shape: tuple[int, ...], minval: int, maxval: int) -> Array:
    """Compiled once per shape; bounds are traced."""
    return jr.randint(key, shape, minval=minval, maxval=maxval)


class Sampler(Protocol):
    """Source of the integer draws used by dispersal, resolution and mutation."""

    def offsets(self, count: int, radius: int) -> list[tuple[int, int]]:
        """Draw `count` (dx, dy) pairs, each uniform in [-radius, radius]."""
        ...

    def index(self, n: int) -> int:
        """Draw one integer uniform in [0, n)."""
        ...


class KeySampler:
    """
    Sampler backed by a JAX PRNG key.

    The key is split once per draw, so the sequence of draws is fully
    determined by the initial key.
    """

    def __init__(self, key: Array) -> None:
        self.key = key

    @classmethod
    def from_seed(cls, seed: int) -> "KeySampler":
        return cls(jr.PRNGKey(seed))

    def _next_key(self) -> Array:
        self.key, subkey = jr.split(self.key)
        return subkey

    def offsets(self, count: int, radius: int) -> list[tuple[int, int]]:
        if count <= 0:
            return []
        draws = _randint(self._next_key(), (count, 2), -radius, radius + 1)
        return [(int(dx), int(dy)) for dx, dy in np.asarray(draws)]

    def index(self, n: int) -> int:
        if n < 1:
            raise ValueError("Cannot draw an index from an empty range")
        return int(_randint(self._next_key(), (), 0, n))
