"""
Distinct-Letters solver.

Strategy:
  - Order the current candidates by how many DIFFERENT letters they contain,
    most first, keeping dictionary order among equals (stable sort).
  - Play the first one.

A word with five distinct letters tests five letters at once, so it is the
cheapest way to collect feedback. No RNG involved; the same candidates always
give the same guess.
"""

from __future__ import annotations

from typing import Iterable, List
from .base import BaseSolver, register


def rank_by_distinct_letters(words: Iterable[str]) -> List[str]:
    """Stable sort: most distinct letters first."""
    return sorted(words, key=lambda w: len(set(w)), reverse=True)


@register
class DistinctLettersSolver(BaseSolver):
    id = "distinct_letters"
    name = "Most Distinct Letters"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool = candidates or self.dictionary
        if not pool:
            return "a" * self.N
        return rank_by_distinct_letters(pool)[0]
