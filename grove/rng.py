"""
Random sources for the simulation.

The engine draws through the `RandomSource` protocol so runs are
seedable and replayable:

    JaxRandom: splits a jax.random key once per draw
    ScriptedRandom: replays fixed draws (deterministic tests, replays)
"""

from collections import deque
from collections.abc import Iterable
from typing import Protocol

import jax.random as jr
from jax import Array


class RandomSource(Protocol):
    def uniform(self) -> float:
        """Uniform draw in [0, 1)."""
        ...

    def int_range(self, lo: int, hi: int) -> int:
        """Integer draw in [lo, hi) (upper bound exclusive)."""
        ...


class JaxRandom:
    """Seedable random source backed by jax.random."""

    def __init__(self, seed: int = 0) -> None:
        self._key = jr.PRNGKey(seed)

    def _next_key(self) -> Array:
        self._key, subkey = jr.split(self._key)
        return subkey

    def uniform(self) -> float:
        return float(jr.uniform(self._next_key()))

    def int_range(self, lo: int, hi: int) -> int:
        if hi <= lo:
            raise ValueError(f"Empty range [{lo}, {hi})")
        return int(jr.randint(self._next_key(), (), lo, hi))


class ScriptedRandom:
    """
    Random source that replays fixed draws.

    Uniform and integer draws come from separate queues. Running out of
    either is an error, so a test fails loudly if the engine draws more
    than expected.
    """

    def __init__(
        self, uniforms: Iterable[float] = (), ints: Iterable[int] = ()
    ) -> None:
        self._uniforms = deque(uniforms)
        self._ints = deque(ints)
        self.uniform_calls = 0
        self.int_calls = 0

    def uniform(self) -> float:
        if not self._uniforms:
            raise RuntimeError("ScriptedRandom ran out of uniform draws")
        self.uniform_calls += 1
        return self._uniforms.popleft()

    def int_range(self, lo: int, hi: int) -> int:
        if not self._ints:
            raise RuntimeError("ScriptedRandom ran out of integer draws")
        self.int_calls += 1
        value = self._ints.popleft()
        if not lo <= value < hi:
            raise ValueError(f"Scripted draw {value} outside [{lo}, {hi})")
        return value

    @property
    def exhausted(self) -> bool:
        return not self._uniforms and not self._ints
