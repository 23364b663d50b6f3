# apps/cli/solve.py
"""
Apply rounds of feedback to a dictionary and list what is still possible.

Feedback can be given two ways (both repeatable, applied in order):
  --round CONFIRMED,MISPLACED,ABSENT   e.g. --round "cra__,,b"  --round "___n_,e____,ti"
  --guess WORD=PATTERN                 e.g. --guess "raise=YY--G" (G/Y/- per letter)

State can be carried between invocations with --state-in / --state-out
(the JSON snapshot of ConstraintEngine.export_state()).

Usage:
    python -m apps.cli.solve --dictionary data/words_5.txt --guess raise=YY--G --top 10
"""

from __future__ import annotations

import argparse
from typing import List

from packages.datasets import load_dictionary, DualDictionary, normalize_accents
from packages.engine import ConstraintEngine, SolveParams, feedback_from_pattern
from packages.harness.io import read_snapshot, write_snapshot
from packages.logging_utils import set_level
from packages.solvers import rank_by_distinct_letters


def parse_round(text: str) -> SolveParams:
    """'confirmed,misplaced,absent' -> SolveParams (missing parts are empty)."""
    parts = text.split(",")
    if len(parts) > 3:
        raise ValueError(f"expected at most 3 comma-separated fields, got {len(parts)}: {text!r}")
    parts += [""] * (3 - len(parts))
    return SolveParams(confirmed=parts[0], misplaced=parts[1], absent=parts[2])


def parse_guess(text: str) -> SolveParams:
    """'word=PATTERN' -> SolveParams."""
    word, sep, pattern = text.partition("=")
    if not sep or not word or not pattern:
        raise ValueError(f"expected WORD=PATTERN, got {text!r}")
    if set(pattern.upper()) - set("GY-"):
        raise ValueError(f"pattern may only contain G, Y and '-': {pattern!r}")
    return feedback_from_pattern(word, pattern)


def fold_feedback(params: SolveParams) -> SolveParams:
    """Accent-fold every field so feedback matches a folded dictionary."""
    return SolveParams(confirmed=normalize_accents(params.confirmed.lower()),
                       misplaced=normalize_accents(params.misplaced.lower()),
                       absent=normalize_accents(params.absent.lower()))


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(description="Narrow a dictionary with round feedback")
    ap.add_argument("--dictionary", required=True, help="word list, one word per line")
    ap.add_argument("--round", dest="rounds", action="append", default=[],
                    help="CONFIRMED,MISPLACED,ABSENT (use _ - or space for unknown slots)")
    ap.add_argument("--guess", dest="guesses", action="append", default=[],
                    help="WORD=PATTERN with G/Y/- per letter")
    ap.add_argument("--fold-accents", action="store_true",
                    help="solve on accent-free words, report the accented originals")
    ap.add_argument("--state-in", help="snapshot JSON to start from")
    ap.add_argument("--state-out", help="write the resulting snapshot JSON here")
    ap.add_argument("--top", type=int, default=20, help="how many candidates to print")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    set_level(args.log_level.upper())

    try:
        feedback = [parse_round(r) for r in args.rounds] + [parse_guess(g) for g in args.guesses]
    except ValueError as e:
        raise SystemExit(str(e)) from e
    if args.fold_accents:
        feedback = [fold_feedback(p) for p in feedback]

    dual = DualDictionary(load_dictionary(args.dictionary))
    engine = ConstraintEngine(dual.words_for(use_accents=not args.fold_accents))

    if args.state_in:
        try:
            engine.restore_from(read_snapshot(args.state_in))
        except ValueError as e:
            raise SystemExit(str(e)) from e

    for params in feedback:
        engine.solve(params)

    candidates = rank_by_distinct_letters(engine.possible_words)
    if args.fold_accents:
        candidates = [dual.original_of(w) or w for w in candidates]

    if not candidates:
        print("No candidates left.")
    elif len(candidates) == 1:
        print(f"Solved: {candidates[0]}")
    else:
        print(f"{len(candidates)} candidates:")
        for w in candidates[: args.top]:
            print(f"  {w}")

    if args.state_out:
        print(f"Wrote: {write_snapshot(engine.export_state(), args.state_out)}")
    return candidates


if __name__ == "__main__":
    main()
