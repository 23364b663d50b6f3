"""
Accumulated feedback state and how new rounds are merged into it.

EngineState is immutable: `ingest(state, params, N)` returns a new state and
never touches the old one, so a caller can hold on to any earlier state for
undo or snapshots.

Merge rules:
  - confirmed : per index, keep whichever side knows the letter. Two different
                letters at one index cannot both be right; the whole
                confirmation becomes CONTRADICTION and stays that way until a
                fresh state is started. Filtering against CONTRADICTION yields
                no candidates.
  - misplaced : each round is kept as its own record, in first-seen order.
                A record identical to an earlier one is dropped.
  - absent    : letters are appended and deduplicated (first-seen order).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .feedback import UNKNOWN, SolveParams, Slots, letters_of, to_slots


class _Contradiction:
    """Tag for confirmed letters that disagree with each other."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CONTRADICTION"

    def __reduce__(self):
        return (_Contradiction, ())


CONTRADICTION = _Contradiction()

Confirmed = Union[Slots, _Contradiction]


@dataclass(frozen=True)
class EngineState:
    confirmed: Confirmed = ()
    misplaced: Tuple[Slots, ...] = ()
    absent: str = ""

    @classmethod
    def empty(cls, N: int) -> "EngineState":
        return cls(confirmed=(UNKNOWN,) * N)

    @property
    def poisoned(self) -> bool:
        return self.confirmed is CONTRADICTION

    def misplaced_letters(self) -> frozenset:
        """Every letter reported as misplaced in any round."""
        return frozenset(ch for rec in self.misplaced for ch in rec if ch is not UNKNOWN)


@dataclass(frozen=True)
class DerivedIndexes:
    settled: Tuple[int, ...] = field(default_factory=tuple)
    unsettled: Tuple[int, ...] = field(default_factory=tuple)


def merge_confirmed(current: Confirmed, incoming: Slots) -> Confirmed:
    """Combine two positional confirmations of equal length."""
    if current is CONTRADICTION:
        return CONTRADICTION

    merged: List = []
    for have, new in zip(current, incoming):
        if have is not UNKNOWN and new is not UNKNOWN and have != new:
            return CONTRADICTION
        merged.append(have if have is not UNKNOWN else new)
    return tuple(merged)


def merge_misplaced(rounds: Tuple[Slots, ...], record: Slots) -> Tuple[Slots, ...]:
    # A record without letters carries no constraint.
    if all(ch is UNKNOWN for ch in record):
        return rounds
    if record in rounds:
        return rounds
    return rounds + (record,)


def merge_absent(current: str, incoming: str) -> str:
    return "".join(dict.fromkeys(current + incoming))


def ingest(state: EngineState, params: SolveParams, N: int) -> EngineState:
    """
    Merge one round of feedback into `state` and return the new state.

    Args:
      state  : accumulated state so far
      params : this round's feedback (any marker style, any case)
      N      : word length; longer feedback strings are cut to N

    Returns:
      a new EngineState (the input is left as-is)
    """
    confirmed = merge_confirmed(state.confirmed, to_slots(params.confirmed, N))
    misplaced = merge_misplaced(state.misplaced, to_slots(params.misplaced, N))
    absent = merge_absent(state.absent, letters_of(params.absent))
    return EngineState(confirmed=confirmed, misplaced=misplaced, absent=absent)


def derive_indexes(confirmed: Confirmed, N: int) -> DerivedIndexes:
    """Split [0, N) into settled (letter known) and unsettled indexes."""
    if confirmed is CONTRADICTION:
        # Every index is pinned to a letter no word can have.
        return DerivedIndexes(settled=tuple(range(N)), unsettled=())
    settled = tuple(i for i, ch in enumerate(confirmed) if ch is not UNKNOWN)
    unsettled = tuple(i for i, ch in enumerate(confirmed) if ch is UNKNOWN)
    return DerivedIndexes(settled=settled, unsettled=unsettled)
