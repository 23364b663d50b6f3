"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words the
    engine still considers possible).
  - If the candidate set is empty, fall back to the whole dictionary.

Deterministic across runs with the same seed (via BaseSolver.rng). A baseline
for the harness; it makes no attempt to gather information.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.1.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates if candidates else self.dictionary

        if not pool:
            return "a" * self.N  # degenerate; the harness scores it and moves on

        return pool[self.rng.randrange(len(pool))]
