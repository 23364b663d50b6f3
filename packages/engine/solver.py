"""
ConstraintEngine: feedback in, remaining dictionary words out.

Usage:
    engine = ConstraintEngine(["crane", "crate", "trace", "cabin"])
    engine.solve(SolveParams(confirmed="cra__", absent="b"))   # ['crane', 'crate']

    snap = engine.export_state()
    other = ConstraintEngine(same_words)
    other.restore_from(snap)                                  # same candidates

Every `solve` merges the new round into the accumulated state and then
filters the FULL dictionary again (not the previous result). The engine
never raises on odd feedback: conflicting confirmed letters leave it with no
candidates until `reset`, and over-long strings are cut to the word length.

Not thread-safe; use one engine per caller.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from packages.logging_utils import get_logger

from .constraints import filter_candidates
from .feedback import SolveParams, slots_to_str
from .state import CONTRADICTION, EngineState, ingest

# Rendered in place of every confirmed letter once they contradict.
POISON_CHAR = "?"

SNAPSHOT_KEYS = ("confirmedLetters", "misplacedRounds", "absentLetters")

log = get_logger("engine")


class ConstraintEngine:

    def __init__(self, words: Iterable[str]):
        self._words: tuple = ()
        self.N: int = 0
        self.state = EngineState()
        self._possible: List[str] = []
        self.reset(words)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def possible_words(self) -> List[str]:
        """Candidates from the last `solve` (the whole dictionary after reset)."""
        return list(self._possible)

    def reset(self, words: Optional[Iterable[str]] = None) -> None:
        """Forget all feedback; optionally switch to a new dictionary."""
        if words is not None:
            cleaned = tuple(w.strip().lower() for w in words)
            if not cleaned:
                raise ValueError("dictionary must contain at least one word")
            self._words = cleaned
            # Word length is taken from the first entry.
            self.N = len(cleaned[0])

        self.state = EngineState.empty(self.N)
        self._possible = list(self._words)

    def solve(self, params: SolveParams | Dict[str, str]) -> List[str]:
        """
        Merge one round of feedback and return the words still possible.
        """
        if isinstance(params, dict):
            params = SolveParams.from_dict(params)

        was_poisoned = self.state.poisoned
        self.state = ingest(self.state, params, self.N)
        if self.state.poisoned and not was_poisoned:
            log.warning("conflicting confirmed letters %r; no candidates until reset",
                        params.confirmed)

        self._possible = filter_candidates(self._words, self.state, self.N)
        log.debug("solve -> %d candidate(s)", len(self._possible))
        return list(self._possible)

    def export_state(self) -> Dict:
        """Snapshot of the accumulated feedback as plain JSON-friendly data."""
        st = self.state
        if st.confirmed is CONTRADICTION:
            confirmed = POISON_CHAR * self.N
        else:
            confirmed = slots_to_str(st.confirmed)
        return {
            "confirmedLetters": confirmed,
            "misplacedRounds": [slots_to_str(rec) for rec in st.misplaced],
            "absentLetters": st.absent,
        }

    def restore_from(self, snapshot: Dict) -> List[str]:
        """
        Rebuild state from `export_state()` output and return the candidates.

        Confirmed and absent letters go in first (one cheap narrowing), then
        each misplaced round is replayed on its own.
        """
        try:
            confirmed = snapshot["confirmedLetters"] or ""
            rounds = list(snapshot["misplacedRounds"] or [])
            absent = snapshot["absentLetters"] or ""
        except (KeyError, TypeError) as e:
            raise ValueError(f"snapshot must have keys {list(SNAPSHOT_KEYS)}") from e

        self.reset()
        if confirmed and set(confirmed) == {POISON_CHAR}:
            self.state = EngineState(confirmed=CONTRADICTION)
            log.warning("restored a contradicted snapshot; no candidates until reset")

        self.solve(SolveParams(confirmed=confirmed, absent=absent))
        for record in rounds:
            self.solve(SolveParams(misplaced=record))
        return list(self._possible)
