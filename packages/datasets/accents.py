"""
Accent folding for boards without accented keys.

Some boards only offer plain vowels, so guesses (and the engine's dictionary)
have to be folded: á -> a, é -> e, í -> i, ó -> o, ú -> u. DualDictionary keeps
each original word next to its folded form so a folded solution can be
reported with its accents back.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

_FOLD = str.maketrans("áéíóú", "aeiou")


def normalize_accents(word: str) -> str:
    return word.translate(_FOLD)


class DualDictionary:

    def __init__(self, words: Iterable[str]):
        self.pairs: List[Tuple[str, str]] = [(w, normalize_accents(w)) for w in words]

    def __len__(self) -> int:
        return len(self.pairs)

    @property
    def originals(self) -> List[str]:
        return [w for w, _ in self.pairs]

    @property
    def folded(self) -> List[str]:
        return [f for _, f in self.pairs]

    def words_for(self, use_accents: bool) -> List[str]:
        """The list to hand to the engine for a board with/without accent keys."""
        return self.originals if use_accents else self.folded

    def original_of(self, folded_word: str) -> Optional[str]:
        """First original whose folded form is `folded_word` (None if absent)."""
        return next((w for w, f in self.pairs if f == folded_word), None)
