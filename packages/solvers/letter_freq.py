"""
Letter-Frequency solver (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT candidates. Score each
    candidate as the sum of its DISTINCT letters' frequencies and play the
    best one; ties are broken with the seeded RNG.

Unlike `distinct_letters`, this prefers common letters, not just many of
them. Only candidates are scored, so every guess could be the answer.
"""

from __future__ import annotations
from collections import Counter
from typing import List
from .base import BaseSolver, register


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.1.0"

    def _score_word(self, w: str, counts: Counter) -> int:
        # each letter counts once per word ('slate' beats 'sleet')
        return sum(counts[ch] for ch in set(w))

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates or self.dictionary
        if not pool:
            return "a" * self.N

        counts = Counter("".join(pool))

        best_score = None
        best_words: List[str] = []
        for w in pool:
            s = self._score_word(w, counts)
            if best_score is None or s > best_score:
                best_score = s
                best_words = [w]
            elif s == best_score:
                best_words.append(w)

        return best_words[self.rng.randrange(len(best_words))]
