"""
Candidate filtering given accumulated feedback.

Given:
  - a dictionary of words, all of the same length N
  - an EngineState (confirmed letters, misplaced rounds, absent letters)

Return:
  - the words that are consistent with ALL feedback seen so far, in
    dictionary order.

The work is split in four passes, each consuming the previous one's output:
  1) settled letters must sit at their index
  2) absent letters must not appear outside the confirmed slots, unless some
     round also reported the letter as misplaced (repeated-letter case)
  3) no unsettled index may hold a letter a round reported misplaced there
  4) for every misplaced round, each reported letter must appear in the word
     at some other index

Precondition: every dictionary word has length N. This is not checked here.
"""

from __future__ import annotations

from typing import Iterable, List

from .feedback import UNKNOWN, Slots
from .state import CONTRADICTION, DerivedIndexes, EngineState, derive_indexes


def filter_settled(words: Iterable[str], state: EngineState,
                   indexes: DerivedIndexes) -> List[str]:
    """Pass 1: word[i] == confirmed[i] for every settled i."""
    if state.poisoned:
        return []
    confirmed = state.confirmed
    return [w for w in words if all(w[i] == confirmed[i] for i in indexes.settled)]


def _unconfirmed_rest(word: str, confirmed) -> str:
    """Letters of `word` that are not already pinned by a confirmed slot."""
    return "".join(ch for ch, known in zip(word, confirmed) if ch != known)


def filter_absent(words: Iterable[str], state: EngineState) -> List[str]:
    """Pass 2: drop words using an absent letter outside the confirmed slots."""
    if state.poisoned:
        return []
    # Letters both absent and misplaced are repeated letters; skip them.
    excluded = [ch for ch in state.absent if ch not in state.misplaced_letters()]
    if not excluded:
        return list(words)

    out: List[str] = []
    for w in words:
        rest = _unconfirmed_rest(w, state.confirmed)
        if not any(ch in rest for ch in excluded):
            out.append(w)
    return out


def filter_misplaced_indexes(words: Iterable[str], state: EngineState,
                             indexes: DerivedIndexes) -> List[str]:
    """Pass 3: an unsettled index cannot hold a letter reported misplaced there."""
    if state.poisoned:
        return []
    banned = [(i, rec[i]) for rec in state.misplaced for i in indexes.unsettled
              if rec[i] is not UNKNOWN]
    return [w for w in words if not any(w[i] == ch for i, ch in banned)]


def _fits_record(word: str, record: Slots) -> bool:
    for j, ch in enumerate(record):
        if ch is UNKNOWN:
            continue
        if word[j] == ch:
            return False
        # Present, just somewhere else.
        if not any(other == ch for i, other in enumerate(word) if i != j):
            return False
    return True


def filter_misplaced_presence(words: Iterable[str], state: EngineState) -> List[str]:
    """Pass 4: narrow by each misplaced round in turn."""
    if state.poisoned:
        return []
    remaining = list(words)
    for record in state.misplaced:
        remaining = [w for w in remaining if _fits_record(w, record)]
    return remaining


def filter_candidates(words: Iterable[str], state: EngineState, N: int) -> List[str]:
    """
    Run the four passes over `words` and return the survivors.

    Args:
      words : dictionary (every word of length N)
      state : accumulated feedback
      N     : word length

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    if state.confirmed is CONTRADICTION:
        return []

    indexes = derive_indexes(state.confirmed, N)
    out = filter_settled(words, state, indexes)
    out = filter_absent(out, state)
    out = filter_misplaced_indexes(out, state, indexes)
    out = filter_misplaced_presence(out, state)
    return out
